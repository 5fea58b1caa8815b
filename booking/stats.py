# booking/stats.py

from enum import IntEnum

from booking.dates import calculate_nights
from booking.models import MonthlySummary


class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def label(self) -> str:
        # English regardless of locale
        return self.name.capitalize()


class BookingStats:
    """
    Year -> Month -> MonthlySummary buckets built from check-in dates.

    Years iterate newest first, months in calendar order.
    """

    def __init__(self):
        self._buckets: dict[int, dict[Month, MonthlySummary]] = {}

    def bucket(self, year: int, month: Month) -> MonthlySummary:
        months = self._buckets.setdefault(year, {})
        if month not in months:
            months[month] = MonthlySummary()
        return months[month]

    def record(self, booking) -> None:
        summary = self.bucket(booking.check_in.year, Month(booking.check_in.month))
        summary.bookings += 1
        summary.nights += calculate_nights(booking.check_in, booking.check_out)
        summary.revenue += booking.total_amount

    def get(self, year: int, month: Month) -> MonthlySummary | None:
        return self._buckets.get(year, {}).get(Month(month))

    def years(self) -> list[int]:
        return sorted(self._buckets, reverse=True)

    def months(self, year: int) -> list[tuple[Month, MonthlySummary]]:
        return sorted(self._buckets.get(year, {}).items())

    def year_total(self, year: int) -> MonthlySummary:
        total = MonthlySummary()
        for _, summary in self.months(year):
            total = total.add(summary)
        return total

    def totals(self) -> MonthlySummary:
        total = MonthlySummary()
        for year in self.years():
            total = total.add(self.year_total(year))
        return total

    def merge(self, other: "BookingStats") -> "BookingStats":
        merged = BookingStats()
        for source in (self, other):
            for year in source.years():
                for month, summary in source.months(year):
                    cell = merged.bucket(year, month)
                    cell.bookings += summary.bookings
                    cell.nights += summary.nights
                    cell.revenue += summary.revenue
        return merged

    def as_named_dict(self) -> dict[str, dict[str, dict]]:
        return {
            str(year): {month.label: summary.model_dump() for month, summary in self.months(year)}
            for year in self.years()
        }

    def __eq__(self, other):
        if not isinstance(other, BookingStats):
            return NotImplemented
        return self.as_named_dict() == other.as_named_dict()

    def __bool__(self):
        return bool(self._buckets)


def aggregate(bookings) -> BookingStats:
    stats = BookingStats()
    for booking in bookings:
        stats.record(booking)
    return stats


def summarize(bookings) -> MonthlySummary:
    """Count, nights and revenue over an arbitrary list of bookings."""
    total = MonthlySummary()
    for booking in bookings:
        total.bookings += 1
        total.nights += calculate_nights(booking.check_in, booking.check_out)
        total.revenue += booking.total_amount
    return total
