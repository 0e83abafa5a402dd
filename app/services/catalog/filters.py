"""Event/category join."""

from collections.abc import Iterable

from eonet_client.categories import CategorySchema
from eonet_client.events import EventSchema


def filtered_events(events: Iterable[EventSchema], category: CategorySchema) -> list[EventSchema]:
    """Events tagged with ``category`` that it has not recorded yet, oldest first.

    Pure: neither ``events`` nor ``category.events`` is modified.
    """
    known = {event.id for event in category.events}
    matching = [e for e in events if category.id in e.category_ids and e.id not in known]
    return sorted(matching, key=lambda e: e.date)
