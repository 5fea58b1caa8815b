# booking/form.py

import math
from datetime import datetime

from booking.conflicts import has_conflict
from booking.dates import parse_date
from booking.errors import BookingConflictError
from booking.history import get_customer_history
from booking.ids import generate_unique_booking_id
from booking.models import PHONE_PATTERN, Booking, BookingType, CustomerHistory
from utils.structured_logger import log_event, redact_phone

CONFLICT_MESSAGE = "These dates conflict with an existing booking"

FORM_FIELDS = (
    "customer_name",
    "customer_phone",
    "check_in",
    "check_out",
    "guest_count",
    "booking_type",
    "total_amount",
    "advance_amount",
)


def _text(raw: dict, field: str) -> str:
    value = raw.get(field)
    return "" if value is None else str(value).strip()


def _parse_number(value, cast):
    try:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            number = cast(value)
        else:
            number = cast(str(value).strip())
    except OverflowError as e:
        raise ValueError(str(e)) from e
    if not math.isfinite(number):
        raise ValueError(f"{value!r} is not a finite number")
    return number


def _parse_booking_type(value) -> BookingType:
    text = str(value or BookingType.FAMILY.value).strip().lower()
    if text in ("bachelor", "bachelor party"):
        text = BookingType.BACHELORS.value
    if text in ("family stay",):
        text = BookingType.FAMILY.value
    return BookingType(text)


def validate_booking_form(raw: dict, bookings, exclude_id: str | None = None) -> dict[str, str]:
    """
    Field -> message for every problem in the raw form values. An empty
    dict means the form can be turned into a Booking. Never raises.
    """
    errors: dict[str, str] = {}

    if not _text(raw, "customer_name"):
        errors["customer_name"] = "Customer name is required"

    phone = _text(raw, "customer_phone")
    if not phone:
        errors["customer_phone"] = "Phone number is required"
    elif not PHONE_PATTERN.fullmatch(phone):
        errors["customer_phone"] = "Phone number must be exactly 10 digits"

    check_in = check_out = None
    if not _text(raw, "check_in"):
        errors["check_in"] = "Check-in date is required"
    else:
        try:
            check_in = parse_date(_text(raw, "check_in"))
        except ValueError:
            errors["check_in"] = "Check-in date is not a valid date"

    if not _text(raw, "check_out"):
        errors["check_out"] = "Check-out date is required"
    else:
        try:
            check_out = parse_date(_text(raw, "check_out"))
        except ValueError:
            errors["check_out"] = "Check-out date is not a valid date"
        else:
            if check_in and check_out <= check_in:
                errors["check_out"] = "Check-out must be after check-in date"

    try:
        if _parse_number(raw.get("guest_count", 1), int) < 1:
            errors["guest_count"] = "Guest count must be at least 1"
    except ValueError:
        errors["guest_count"] = "Guest count must be a whole number"

    try:
        _parse_booking_type(raw.get("booking_type"))
    except ValueError:
        errors["booking_type"] = "Booking type must be family or bachelors"

    total = None
    try:
        total = _parse_number(raw.get("total_amount", 0), float)
        if total <= 0:
            errors["total_amount"] = "Total amount must be greater than 0"
    except ValueError:
        errors["total_amount"] = "Total amount must be a number"

    try:
        advance = _parse_number(raw.get("advance_amount", 0), float)
        if advance < 0 or (total is not None and advance > total):
            errors["advance_amount"] = "Advance amount must be between 0 and total amount"
    except ValueError:
        errors["advance_amount"] = "Advance amount must be a number"

    if check_in and check_out and check_out > check_in:
        if has_conflict(check_in, check_out, bookings, exclude_id):
            errors["check_in"] = CONFLICT_MESSAGE
            errors["check_out"] = CONFLICT_MESSAGE

    return errors


def build_booking(raw: dict, existing_ids=(), created_at: datetime | None = None) -> Booking:
    """
    Turns validated raw values into a Booking with a fresh id. Call
    validate_booking_form first; invalid values raise ValidationError here.
    """
    total = _parse_number(raw.get("total_amount", 0), float)
    advance = _parse_number(raw.get("advance_amount", 0), float)
    return Booking.create(
        booking_id=generate_unique_booking_id(existing_ids),
        customer_name=_text(raw, "customer_name"),
        customer_phone=_text(raw, "customer_phone"),
        check_in=parse_date(_text(raw, "check_in")),
        check_out=parse_date(_text(raw, "check_out")),
        guest_count=_parse_number(raw.get("guest_count", 1), int),
        booking_type=_parse_booking_type(raw.get("booking_type")),
        total_amount=total,
        advance_amount=advance,
        created_at=created_at,
    )


def submit_booking(raw: dict, repository) -> tuple[Booking | None, dict[str, str]]:
    """
    Validates, builds and stores a new booking. Returns (booking, {}) on
    success or (None, errors) when the form is rejected.
    """
    errors = validate_booking_form(raw, repository.bookings)
    if errors:
        log_event("form", "booking_rejected", outcome="invalid", extra={"fields": sorted(errors)})
        return None, errors

    booking = build_booking(raw, existing_ids=repository.ids())
    try:
        repository.try_add(booking)
    except BookingConflictError:
        return None, {"check_in": CONFLICT_MESSAGE, "check_out": CONFLICT_MESSAGE}

    log_event(
        "form", "booking_created",
        output_data={"id": booking.id, "phone": redact_phone(booking.customer_phone)},
    )
    return booking, {}


def preview_customer_history(phone: str, bookings) -> CustomerHistory:
    """History shown while the form is filled in; only for a complete phone number."""
    phone = (phone or "").strip()
    if not PHONE_PATTERN.fullmatch(phone):
        return CustomerHistory()
    return get_customer_history(phone, bookings)
