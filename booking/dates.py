# booking/dates.py

import calendar
from datetime import date, datetime

SUNDAY = calendar.SUNDAY
MONDAY = calendar.MONDAY

# Accepted input formats, most specific first
DATE_INPUT_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y")

# Locale-invariant, calendar.month_abbr follows the process locale
_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_date(value)


def parse_date(value: str) -> date:
    """
    Parse YYYY-MM-DD, DD/MM/YYYY or DD-MM-YYYY. Raises ValueError otherwise.
    """
    text = str(value).strip()
    for fmt in DATE_INPUT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"'{value}' is not a valid date. Expected YYYY-MM-DD or DD/MM/YYYY.")


def format_date(value) -> str:
    return as_date(value).strftime("%d/%m/%Y")


def format_date_display(value) -> str:
    d = as_date(value)
    return f"{_MONTH_ABBR[d.month - 1]} {d.day:02d}, {d.year}"


def format_short(value) -> str:
    d = as_date(value)
    return f"{_MONTH_ABBR[d.month - 1]} {d.day:02d}"


def calculate_nights(check_in, check_out) -> int:
    """Whole days between the two dates; negative if check_out precedes check_in."""
    return (as_date(check_out) - as_date(check_in)).days


def is_date_in_range(day, start, end) -> bool:
    """Inclusive on both ends, time of day ignored."""
    return as_date(start) <= as_date(day) <= as_date(end)


def is_today(day, today: date | None = None) -> bool:
    return as_date(day) == (today or date.today())


def calendar_dates(month: int, year: int, first_weekday: int = SUNDAY) -> list[date]:
    """
    Every date of the full weeks covering ``month`` (1-12) of ``year``:
    from the start of the week holding the 1st to the end of the week
    holding the last day.
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    cal = calendar.Calendar(firstweekday=first_weekday)
    return list(cal.itermonthdates(year, month))


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_bookings(bookings, month: int, year: int) -> list:
    return [b for b in bookings if b.check_in.month == month and b.check_in.year == year]
