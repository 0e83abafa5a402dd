"""Categories API schemas."""

from pydantic import AliasChoices, BaseModel, Field, field_validator, model_validator

from eonet_client.decoding import decode_record, stringify_id
from eonet_client.events.schemas import EventSchema


class CategorySchema(BaseModel):
    """Event category. ``events`` is filled by callers, never by the API."""

    id: str
    name: str = Field(validation_alias=AliasChoices("name", "title"))
    description: str = ""
    events: list[EventSchema] = Field(default_factory=list, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def _ignore_wire_events(cls, data):
        if isinstance(data, dict) and "events" in data:
            return {key: value for key, value in data.items() if key != "events"}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value):
        return stringify_id(value)

    @field_validator("description", mode="before")
    @classmethod
    def _description(cls, value):
        return "" if value is None else value


def decode_category(raw: object) -> CategorySchema | None:
    """Decode one raw category, None if it is malformed."""
    return decode_record(CategorySchema, raw)
