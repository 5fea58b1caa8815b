# test/test_structured_logger.py

from booking.repository import BookingRepository
from utils import structured_logger
from utils.persistence import MemoryBookingStore
from utils.structured_logger import log_event, read_events, redact_phone


def test_events_are_appended_and_filtered():
    log_event("unit-test", "first", input_data={"a": 1})
    log_event("unit-test", "second", outcome="error", extra={"why": "because"})
    log_event("other-source", "ignored")
    events = read_events(source="unit-test")
    steps = [e["step"] for e in events]
    assert steps[-2:] == ["first", "second"]
    assert events[-1]["outcome"] == "error"
    assert events[-1]["extra"] == {"why": "because"}


def test_read_events_limit():
    for i in range(5):
        log_event("limit-test", f"step-{i}")
    events = read_events(source="limit-test", limit=2)
    assert [e["step"] for e in events] == ["step-3", "step-4"]


def test_redact_phone():
    assert redact_phone("9876543210") == "******3210"
    assert redact_phone("123") == "123"


def unwritable_log(monkeypatch, tmp_path):
    # log directory would live under a regular file
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    monkeypatch.setattr(structured_logger, "LOG_DIR", blocker / "logs")
    monkeypatch.setattr(structured_logger, "LOG_FILE", blocker / "logs" / "events.ndjson")


def test_log_failure_does_not_raise(monkeypatch, tmp_path):
    unwritable_log(monkeypatch, tmp_path)
    log_event("unit-test", "lost")


def test_store_survives_unwritable_log(monkeypatch, tmp_path, make_booking):
    unwritable_log(monkeypatch, tmp_path)
    assert MemoryBookingStore("{not json").load() == []
    store = MemoryBookingStore()
    assert store.save([make_booking()]) is True
    store.clear()
    assert BookingRepository(MemoryBookingStore("[{]")).bookings == []
