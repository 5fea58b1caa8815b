# booking/errors.py


class BookingError(Exception):
    pass


class BookingConflictError(BookingError):
    """Raised when a stay overlaps one or more stored bookings."""

    def __init__(self, conflicts, message: str | None = None):
        self.conflicts = list(conflicts)
        ids = ", ".join(b.id for b in self.conflicts)
        super().__init__(message or f"These dates conflict with an existing booking ({ids})")
