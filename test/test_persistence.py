# test/test_persistence.py

import json

from utils.persistence import JsonBookingStore, MemoryBookingStore, serialize_bookings
from utils.structured_logger import read_events


def test_missing_slot_loads_empty(tmp_path):
    store = JsonBookingStore(tmp_path / "bookings.json")
    assert store.load() == []


def test_save_then_load_keeps_order_and_fields(tmp_path, make_booking):
    store = JsonBookingStore(tmp_path / "nested" / "bookings.json")
    bookings = [make_booking("2025-07-01", "2025-07-04"), make_booking("2025-06-01", "2025-06-02")]
    assert store.save(bookings) is True
    assert store.load() == bookings


def test_slot_uses_camel_case_json_array(tmp_path, make_booking):
    path = tmp_path / "bookings.json"
    JsonBookingStore(path).save([make_booking("2025-07-01", "2025-07-04")])
    records = json.loads(path.read_text(encoding="utf-8"))
    assert isinstance(records, list)
    assert records[0]["checkIn"] == "2025-07-01"
    assert records[0]["customerPhone"] == "9876543210"
    assert records[0]["balanceAmount"] == 6000


def test_reads_slot_written_by_original_web_app(tmp_path):
    path = tmp_path / "bookings.json"
    path.write_text(json.dumps([{
        "id": "BK12345607",
        "customerName": "Ravi",
        "customerPhone": "0123456789",
        "checkIn": "2025-07-01",
        "checkOut": "2025-07-03",
        "guestCount": 6,
        "bookingType": "bachelors",
        "totalAmount": 12000,
        "advanceAmount": 2000,
        "balanceAmount": 10000,
        "createdAt": "2025-06-20T08:15:00.000Z",
    }]), encoding="utf-8")
    [booking] = JsonBookingStore(path).load()
    assert booking.customer_phone == "0123456789"
    assert booking.nights == 2


def test_corrupt_json_loads_empty_and_logs(tmp_path):
    path = tmp_path / "bookings.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonBookingStore(path).load() == []
    failures = [e for e in read_events(source="store") if e["step"] == "load_failed"]
    assert failures, "Expected load failure to be logged"


def test_invalid_records_load_empty():
    store = MemoryBookingStore(json.dumps([{"id": "BK1", "checkIn": "garbage"}]))
    assert store.load() == []
    assert MemoryBookingStore(json.dumps({"not": "a list"})).load() == []


def test_save_failure_is_swallowed(tmp_path, make_booking):
    # parent "directory" is a file, so the write must fail
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    store = JsonBookingStore(blocker / "bookings.json")
    assert store.save([make_booking()]) is False


def test_clear_removes_slot(tmp_path, make_booking):
    path = tmp_path / "bookings.json"
    store = JsonBookingStore(path)
    store.save([make_booking()])
    store.clear()
    assert not path.exists()
    store.clear()  # clearing twice is fine
    assert store.load() == []


def test_memory_store_holds_serialized_text(make_booking):
    bookings = [make_booking()]
    store = MemoryBookingStore()
    store.save(bookings)
    assert store.data == serialize_bookings(bookings)
    assert store.load() == bookings
