# booking/periods.py

from datetime import date
from enum import Enum

from booking.dates import month_bookings, shift_month


class Period(str, Enum):
    LAST = "last"
    CURRENT = "current"
    NEXT = "next"
    UPCOMING = "upcoming"

    @property
    def label(self) -> str:
        return {
            Period.LAST: "Last Month",
            Period.CURRENT: "This Month",
            Period.NEXT: "Next Month",
            Period.UPCOMING: "Upcoming",
        }[self]


_MONTH_OFFSETS = {Period.LAST: -1, Period.CURRENT: 0, Period.NEXT: 1}


def bookings_for_period(bookings, period: Period, today: date | None = None) -> list:
    """
    Month periods keep check-ins inside that calendar month. Upcoming keeps
    check-ins after today, soonest first.
    """
    today = today or date.today()
    period = Period(period)
    if period is Period.UPCOMING:
        return sorted((b for b in bookings if b.check_in > today), key=lambda b: b.check_in)
    year, month = shift_month(today.year, today.month, _MONTH_OFFSETS[period])
    return month_bookings(bookings, month, year)
