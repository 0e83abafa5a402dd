"""Events API schemas."""

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from eonet_client.decoding import decode_record, parse_date, stringify_id


class EventStatus(StrEnum):
    """Event status filter for the events endpoint."""

    OPEN = "open"
    CLOSED = "closed"


class EventSchema(BaseModel):
    """Natural event (wildfire, storm, volcano...)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    title: str
    description: str | None = None
    close_date: datetime | None = Field(alias="closed", default=None)
    category_ids: frozenset[str] = Field(alias="categories", default_factory=frozenset)
    date: datetime

    @model_validator(mode="before")
    @classmethod
    def _date_from_geometry(cls, data):
        # v2.1 events carry their date on the geometries, not at the top level
        if isinstance(data, dict) and "date" not in data:
            geometries = data.get("geometries")
            if isinstance(geometries, list) and geometries and isinstance(geometries[0], dict):
                return {**data, "date": geometries[0].get("date")}
        return data

    @field_validator("id", mode="before")
    @classmethod
    def _id(cls, value):
        return stringify_id(value)

    @field_validator("category_ids", mode="before")
    @classmethod
    def _category_refs(cls, value):
        if not isinstance(value, list):
            return value
        return [stringify_id(item.get("id") if isinstance(item, dict) else item) for item in value]

    @field_validator("date", "close_date", mode="before")
    @classmethod
    def _dates(cls, value):
        return None if value is None else parse_date(value)


def decode_event(raw: object) -> EventSchema | None:
    """Decode one raw event, None if it is malformed."""
    return decode_record(EventSchema, raw)
