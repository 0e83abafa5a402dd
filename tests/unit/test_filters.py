"""Tests for the event/category join."""

from datetime import datetime, timezone

from app.services.catalog import filtered_events
from eonet_client import CategorySchema, EventSchema


def make_event(id: str, categories: set[str], day: int = 1) -> EventSchema:
    return EventSchema(
        id=id,
        title=f"Event {id}",
        category_ids=categories,
        date=datetime(2017, 5, day, tzinfo=timezone.utc),
    )


class TestFilteredEvents:
    def test_keeps_category_events(self):
        events = [make_event("1", {"A"}), make_event("2", {"B"})]
        category = CategorySchema(id="A", name="Wildfires")
        assert [e.id for e in filtered_events(events, category)] == ["1"]

    def test_excludes_recorded_events(self):
        events = [make_event("1", {"A"}), make_event("2", {"B"})]
        category = CategorySchema(id="A", name="Wildfires")

        category.events.extend(filtered_events(events, category))
        assert filtered_events(events, category) == []

    def test_recorded_matched_by_id(self):
        category = CategorySchema(id="A", name="Wildfires")
        category.events.append(make_event("1", {"A"}, day=9))
        assert filtered_events([make_event("1", {"A"}, day=1)], category) == []

    def test_sorted_by_date(self):
        events = [make_event("late", {"A"}, day=20), make_event("early", {"A"}, day=2), make_event("mid", {"A"}, day=10)]
        category = CategorySchema(id="A", name="Wildfires")
        assert [e.id for e in filtered_events(events, category)] == ["early", "mid", "late"]

    def test_equal_dates_keep_input_order(self):
        events = [make_event("b", {"A"}, day=3), make_event("a", {"A"}, day=3), make_event("c", {"A"}, day=1)]
        category = CategorySchema(id="A", name="Wildfires")
        assert [e.id for e in filtered_events(events, category)] == ["c", "b", "a"]

    def test_multi_category_event(self):
        shared = make_event("1", {"A", "B"})
        assert filtered_events([shared], CategorySchema(id="B", name="Floods")) == [shared]

    def test_does_not_mutate_inputs(self):
        events = [make_event("2", {"A"}, day=5), make_event("1", {"A"}, day=1)]
        category = CategorySchema(id="A", name="Wildfires")
        filtered_events(events, category)
        assert [e.id for e in events] == ["2", "1"]
        assert category.events == []

    def test_accepts_any_iterable(self):
        category = CategorySchema(id="A", name="Wildfires")
        assert [e.id for e in filtered_events(iter([make_event("1", {"A"})]), category)] == ["1"]
