"""Lossy record decoding - malformed records are dropped, never raised."""

from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

# yyyy-MM-dd'T'HH:mm:ssZZZZ, e.g. 2017-05-03T13:00:00+0000 or 2017-05-03T13:00:00Z
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

M = TypeVar("M", bound=BaseModel)


def parse_date(value: object) -> datetime:
    """Parse an API timestamp with the fixed ISO-8601-with-offset format."""
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError(f"expected date string, got {type(value).__name__}")
    return datetime.strptime(value, DATE_FORMAT)


def stringify_id(value: object) -> object:
    """Numeric ids on the wire are used as strings."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def decode_record(model: type[M], raw: object) -> M | None:
    """Validate one raw JSON record, None if it is malformed."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        logger.debug(
            "Dropping malformed {}: {} at {}",
            model.__name__,
            first["msg"],
            ".".join(str(p) for p in first["loc"]) or "<root>",
        )
        return None


def decode_batch(raw_items: Iterable[object], decoder: Callable[[object], M | None]) -> list[M]:
    """Decode a batch, skipping records the decoder rejects."""
    records = []
    dropped = 0
    for raw in raw_items:
        record = decoder(raw)
        if record is None:
            dropped += 1
        else:
            records.append(record)
    if dropped:
        logger.info("Decoded {} records, dropped {} malformed", len(records), dropped)
    return records
