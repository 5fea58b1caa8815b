# calendar_integration/month_view.py

from datetime import date
from typing import NamedTuple, Optional

from booking.dates import SUNDAY, calendar_dates, is_date_in_range, is_today
from booking.models import Booking

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


class CalendarCell(NamedTuple):
    day: date
    in_month: bool
    today: bool
    booking: Optional[Booking]

    @property
    def booked(self) -> bool:
        return self.booking is not None


def booking_for_date(bookings, day) -> Booking | None:
    # check-out day still shows as booked
    return next((b for b in bookings if is_date_in_range(day, b.check_in, b.check_out)), None)


def is_date_booked(bookings, day) -> bool:
    return booking_for_date(bookings, day) is not None


def weekday_header(first_weekday: int = SUNDAY) -> list[str]:
    return [WEEKDAY_NAMES[(first_weekday + i) % 7] for i in range(7)]


def build_month_grid(bookings, month: int, year: int, today: date | None = None, first_weekday: int = SUNDAY) -> list[list[CalendarCell]]:
    """Weeks of seven cells covering ``month`` of ``year``."""
    today = today or date.today()
    cells = [
        CalendarCell(
            day=d,
            in_month=d.month == month,
            today=is_today(d, today),
            booking=booking_for_date(bookings, d),
        )
        for d in calendar_dates(month, year, first_weekday)
    ]
    return [cells[i:i + 7] for i in range(0, len(cells), 7)]
