# booking/repository.py

import threading

from booking.conflicts import find_conflicts
from booking.errors import BookingConflictError
from booking.models import Booking
from utils.structured_logger import log_event


class BookingRepository:
    """
    Ordered in-memory booking list backed by a store handle.

    The list is loaded once on construction; every mutation builds a new
    list and writes it through to the store wholesale.
    """

    def __init__(self, store):
        self._store = store
        self._lock = threading.RLock()
        self._bookings: list[Booking] = store.load()

    @property
    def bookings(self) -> list[Booking]:
        return list(self._bookings)

    def __len__(self):
        return len(self._bookings)

    def __iter__(self):
        return iter(self.bookings)

    def get(self, booking_id: str) -> Booking | None:
        return next((b for b in self._bookings if b.id == booking_id), None)

    def ids(self) -> set[str]:
        return {b.id for b in self._bookings}

    def _replace_all(self, bookings: list[Booking]):
        self._bookings = bookings
        self._store.save(bookings)

    def add(self, booking: Booking) -> None:
        with self._lock:
            self._replace_all([*self._bookings, booking])
        log_event("repository", "booking_added", output_data={"id": booking.id})

    def update(self, booking_id: str, booking: Booking) -> None:
        with self._lock:
            if self.get(booking_id) is None:
                log_event("repository", "update_skipped", input_data=booking_id, outcome="not_found")
                return
            self._replace_all([booking if b.id == booking_id else b for b in self._bookings])
        log_event("repository", "booking_updated", input_data=booking_id, output_data={"id": booking.id})

    def remove(self, booking_id: str) -> None:
        with self._lock:
            self._replace_all([b for b in self._bookings if b.id != booking_id])
        log_event("repository", "booking_removed", input_data=booking_id)

    def try_add(self, booking: Booking) -> Booking:
        """Conflict check and append as one step. Raises BookingConflictError."""
        with self._lock:
            conflicts = find_conflicts(booking.check_in, booking.check_out, self._bookings)
            if conflicts:
                log_event(
                    "repository", "conflict_detected", input_data=booking.id, outcome="rejected",
                    extra={"conflicts": [b.id for b in conflicts]},
                )
                raise BookingConflictError(conflicts)
            self.add(booking)
        return booking

    def try_update(self, booking_id: str, booking: Booking) -> Booking:
        with self._lock:
            conflicts = find_conflicts(booking.check_in, booking.check_out, self._bookings, exclude_id=booking_id)
            if conflicts:
                log_event(
                    "repository", "conflict_detected", input_data=booking_id, outcome="rejected",
                    extra={"conflicts": [b.id for b in conflicts]},
                )
                raise BookingConflictError(conflicts)
            self.update(booking_id, booking)
        return booking

    def clear(self) -> None:
        with self._lock:
            self._bookings = []
            self._store.clear()
        log_event("repository", "cleared")
