# calendar_integration/ics_writer.py

from pathlib import Path
from datetime import datetime, timedelta, time as dtime
from ics import Calendar, Event
import time

from booking.dates import calculate_nights
from booking.errors import BookingError
from core.paths import CALENDAR_ICS_PATH
from utils.structured_logger import log_event

ICS_FILE = CALENDAR_ICS_PATH
UID_DOMAIN = "rental-manager"


class CalendarExportError(BookingError):
    pass


def load_calendar(ics_path: Path | str = ICS_FILE) -> Calendar:
    if Path(ics_path).exists():
        try:
            with open(ics_path, "r", encoding="utf-8") as f:
                return Calendar(f.read())
        except Exception:
            # fallback to empty calendar if corrupted
            return Calendar()
    return Calendar()


def save_calendar(calendar: Calendar, ics_path: Path | str = ICS_FILE):
    Path(ics_path).parent.mkdir(parents=True, exist_ok=True)
    with open(ics_path, "w", encoding="utf-8") as f:
        f.writelines(calendar.serialize_iter())


def booking_to_event(booking) -> Event:
    """
    All-day event spanning the nights of the stay; the exclusive DTEND
    lands on the check-out day.
    """
    nights = calculate_nights(booking.check_in, booking.check_out)
    event = Event(
        name=f"{booking.customer_name} ({booking.id})",
        begin=datetime.combine(booking.check_in, dtime()),
        end=datetime.combine(booking.check_out - timedelta(days=1), dtime()),
        uid=f"{booking.id}@{UID_DOMAIN}",
        description=(
            f"Phone: {booking.customer_phone}\n"
            f"Guests: {booking.guest_count} ({booking.booking_type.label})\n"
            f"Nights: {nights}\n"
            f"Balance due: {booking.balance_amount:g}"
        ),
    )
    event.make_all_day()
    return event


def build_calendar(bookings) -> Calendar:
    calendar = Calendar()
    for booking in bookings:
        calendar.events.add(booking_to_event(booking))
    return calendar


def export_bookings(bookings, ics_path: Path | str = ICS_FILE, max_retries: int = 2, backoff_seconds: float = 0.5) -> Path:
    """
    Rewrites the .ics file with every booking. Retries transient I/O
    failures, then raises CalendarExportError.
    """
    bookings = list(bookings)
    calendar = build_calendar(bookings)
    attempt = 0
    while True:
        try:
            save_calendar(calendar, ics_path)
            log_event("calendar", "exported", output_data={"events": len(bookings)}, extra={"path": str(ics_path)})
            return Path(ics_path)
        except OSError as e:
            if attempt < max_retries:
                time.sleep(backoff_seconds * (2 ** attempt))  # exponential backoff
                attempt += 1
                continue
            log_event("calendar", "export_failed", outcome="error", extra={"error": str(e)})
            raise CalendarExportError(f"Failed to write calendar after {attempt + 1} attempts: {e}") from e
