# utils/persistence.py

import json
from abc import ABC, abstractmethod
from pathlib import Path
import threading

from pydantic import TypeAdapter, ValidationError

from booking.models import Booking
from core.paths import BOOKINGS_JSON_PATH, BOOKINGS_SLOT_KEY
from utils.structured_logger import log_event

_lock = threading.Lock()
_bookings_adapter = TypeAdapter(list[Booking])


def _atomic_write(path: Path, data: str):
    tmp = path.with_suffix(path.suffix + ".tmp")
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "w", encoding="utf-8") as f:
        f.write(data)
        f.flush()
    tmp.replace(path)


def serialize_bookings(bookings) -> str:
    return json.dumps([b.to_record() for b in bookings], ensure_ascii=False, indent=2)


def deserialize_bookings(text: str) -> list[Booking]:
    """
    Parses a whole slot. Raises ValueError (JSON or validation) if any
    record is unreadable.
    """
    return _bookings_adapter.validate_python(json.loads(text))


class BookingStore(ABC):
    """One named slot holding the full booking list as a JSON array."""

    key = BOOKINGS_SLOT_KEY

    @abstractmethod
    def _read(self) -> str | None:
        ...

    @abstractmethod
    def _write(self, data: str) -> None:
        ...

    @abstractmethod
    def _delete(self) -> None:
        ...

    def load(self) -> list[Booking]:
        """Returns [] when the slot is missing or corrupt."""
        try:
            stored = self._read()
            if not stored:
                return []
            bookings = deserialize_bookings(stored)
        except (OSError, ValueError, ValidationError) as e:
            print(f"Error loading bookings from {self.key}: {e}")
            log_event("store", "load_failed", outcome="error", extra={"key": self.key, "error": str(e)})
            return []
        log_event("store", "loaded", output_data={"count": len(bookings)}, extra={"key": self.key})
        return bookings

    def save(self, bookings) -> bool:
        """Writes the whole list. Failures are logged, never raised."""
        try:
            data = serialize_bookings(bookings)
            with _lock:
                self._write(data)
        except (OSError, TypeError, ValueError) as e:
            print(f"Error saving bookings to {self.key}: {e}")
            log_event("store", "save_failed", outcome="error", extra={"key": self.key, "error": str(e)})
            return False
        return True

    def clear(self) -> None:
        try:
            with _lock:
                self._delete()
        except OSError as e:
            print(f"Error clearing bookings from {self.key}: {e}")
            log_event("store", "clear_failed", outcome="error", extra={"key": self.key, "error": str(e)})
            return
        log_event("store", "cleared", extra={"key": self.key})


class JsonBookingStore(BookingStore):
    def __init__(self, path: Path | str = BOOKINGS_JSON_PATH):
        self.path = Path(path)
        self.key = self.path.stem

    def _read(self) -> str | None:
        if not self.path.exists():
            return None
        return self.path.read_text(encoding="utf-8")

    def _write(self, data: str) -> None:
        _atomic_write(self.path, data)

    def _delete(self) -> None:
        self.path.unlink(missing_ok=True)


class MemoryBookingStore(BookingStore):
    """Keeps the serialized slot in memory; handy for tests and dry runs."""

    def __init__(self, data: str | None = None):
        self.data = data

    def _read(self) -> str | None:
        return self.data

    def _write(self, data: str) -> None:
        self.data = data

    def _delete(self) -> None:
        self.data = None
