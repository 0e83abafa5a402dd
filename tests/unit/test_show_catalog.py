"""Tests for the console catalog listing and logging setup."""

from datetime import datetime, timezone

import pytest
from loguru import logger

import show_catalog
from eonet_client import CategorySchema, EventSchema
from settings.logging import setup_logging


@pytest.fixture
def drop_log_sinks():
    yield
    logger.remove()


def make_event(id: str, day: int, closed: bool = False) -> EventSchema:
    return EventSchema(
        id=id,
        title=f"Fire {id}",
        category_ids={"8"},
        date=datetime(2017, 5, day, tzinfo=timezone.utc),
        close_date=datetime(2017, 6, 1, tzinfo=timezone.utc) if closed else None,
    )


class TestPrintCatalog:
    def test_newest_events_first(self, capsys):
        wildfires = CategorySchema(id="8", name="Wildfires", description="Fires and smoke")
        wildfires.events.extend(make_event(str(day), day) for day in range(1, 6))

        show_catalog.print_catalog([wildfires], days=30)
        out = capsys.readouterr().out

        assert "last 30 days" in out
        assert "Wildfires (5)" in out
        assert "Fires and smoke" in out
        assert out.index("Fire 5") < out.index("Fire 4") < out.index("Fire 3")
        assert "Fire 2" not in out

    def test_show_all_and_status(self, capsys):
        wildfires = CategorySchema(id="8", name="Wildfires")
        wildfires.events.extend([make_event("1", 1, closed=True), make_event("2", 2)])
        wildfires.events.extend(make_event(str(day), day) for day in range(3, 6))

        show_catalog.print_catalog([wildfires], days=30, show_all=True)
        out = capsys.readouterr().out

        assert "2017-05-01 [closed] Fire 1" in out
        assert "2017-05-02 [open] Fire 2" in out

    def test_no_categories(self, capsys):
        show_catalog.print_catalog([], days=360)
        assert "No categories available" in capsys.readouterr().out


class TestSetupLogging:
    def test_console_only(self, drop_log_sinks, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert setup_logging(level="DEBUG", to_file=False) is logger
        assert not (tmp_path / "logs").exists()

    def test_file_sink(self, drop_log_sinks, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        setup_logging(level="INFO", to_file=True)
        logger.info("hello")
        assert (tmp_path / "logs").is_dir()
