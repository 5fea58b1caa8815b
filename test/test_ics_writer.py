# test/test_ics_writer.py

from datetime import date

import pytest

from calendar_integration.ics_writer import (
    CalendarExportError,
    booking_to_event,
    export_bookings,
    load_calendar,
)


def test_export_writes_one_event_per_booking(tmp_path, make_booking):
    path = tmp_path / "cal" / "bookings.ics"
    bookings = [make_booking("2025-07-01", "2025-07-04", id="BK00000001"), make_booking("2025-07-10", "2025-07-11", id="BK00000002")]
    export_bookings(bookings, path)
    calendar = load_calendar(path)
    names = sorted(e.name for e in calendar.events)
    assert len(names) == 2
    assert "BK00000001" in names[0]
    assert "BK00000002" in names[1]


def test_event_spans_the_stay(make_booking):
    event = booking_to_event(make_booking("2025-07-01", "2025-07-04", id="BK00000001"))
    assert event.all_day
    assert event.begin.date() == date(2025, 7, 1)
    assert event.end.date() == date(2025, 7, 4)
    assert event.uid == "BK00000001@rental-manager"


def test_corrupt_calendar_loads_empty(tmp_path):
    path = tmp_path / "bad.ics"
    path.write_text("invalid calendar content", encoding="utf-8")
    assert len(load_calendar(path).events) == 0


def test_export_failure_raises_after_retries(tmp_path, make_booking):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(CalendarExportError):
        export_bookings([make_booking()], blocker / "bookings.ics", max_retries=1, backoff_seconds=0)
