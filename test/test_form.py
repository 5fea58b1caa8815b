# test/test_form.py

import re
from datetime import date

import pytest

from booking.form import (
    CONFLICT_MESSAGE,
    build_booking,
    preview_customer_history,
    submit_booking,
    validate_booking_form,
)
from booking.models import BookingType


def valid_form(**overrides):
    form = {
        "customer_name": "  Alice Fernandes ",
        "customer_phone": "9876543210",
        "check_in": "2025-07-01",
        "check_out": "04/07/2025",
        "guest_count": "4",
        "booking_type": "family",
        "total_amount": "9000",
        "advance_amount": "3000",
    }
    form.update(overrides)
    return form


def test_valid_form_has_no_errors():
    assert validate_booking_form(valid_form(), []) == {}


@pytest.mark.parametrize("field, value, message", [
    ("customer_name", "   ", "Customer name is required"),
    ("customer_phone", "", "Phone number is required"),
    ("customer_phone", "98765", "Phone number must be exactly 10 digits"),
    ("customer_phone", "98765abcde", "Phone number must be exactly 10 digits"),
    ("check_in", "", "Check-in date is required"),
    ("check_out", "", "Check-out date is required"),
    ("check_out", "2025-07-01", "Check-out must be after check-in date"),
    ("check_out", "2025-06-30", "Check-out must be after check-in date"),
    ("guest_count", "0", "Guest count must be at least 1"),
    ("total_amount", "0", "Total amount must be greater than 0"),
    ("advance_amount", "9500", "Advance amount must be between 0 and total amount"),
    ("advance_amount", "-1", "Advance amount must be between 0 and total amount"),
    ("booking_type", "corporate", "Booking type must be family or bachelors"),
])
def test_field_errors(field, value, message):
    errors = validate_booking_form(valid_form(**{field: value}), [])
    assert errors[field] == message


def test_unparseable_values_are_reported_not_raised():
    errors = validate_booking_form(valid_form(check_in="someday", total_amount="lots", guest_count="many"), [])
    assert set(errors) == {"check_in", "total_amount", "guest_count"}


def test_conflict_marks_both_date_fields(make_booking):
    existing = [make_booking("2025-07-03", "2025-07-06")]
    errors = validate_booking_form(valid_form(), existing)
    assert errors == {"check_in": CONFLICT_MESSAGE, "check_out": CONFLICT_MESSAGE}


def test_conflict_check_can_exclude_booking_being_edited(make_booking):
    existing = make_booking("2025-07-01", "2025-07-04")
    assert validate_booking_form(valid_form(), [existing], exclude_id=existing.id) == {}


def test_build_booking_trims_and_computes_balance():
    booking = build_booking(valid_form(booking_type="Bachelors"))
    assert booking.customer_name == "Alice Fernandes"
    assert booking.check_out == date(2025, 7, 4)
    assert booking.booking_type is BookingType.BACHELORS
    assert booking.balance_amount == 6000
    assert re.fullmatch(r"BK\d{8}", booking.id)


def test_submit_booking_stores_valid_form(repository):
    booking, errors = submit_booking(valid_form(), repository)
    assert errors == {}
    assert repository.bookings == [booking]


def test_submit_booking_rejects_conflict(repository):
    submit_booking(valid_form(), repository)
    booking, errors = submit_booking(valid_form(check_in="2025-07-03", check_out="2025-07-05"), repository)
    assert booking is None
    assert errors["check_in"] == CONFLICT_MESSAGE
    assert len(repository) == 1


def test_submit_booking_rejects_invalid_form(repository):
    booking, errors = submit_booking(valid_form(customer_phone="123"), repository)
    assert booking is None
    assert "customer_phone" in errors
    assert len(repository) == 0


def test_preview_history_only_for_complete_phone(make_booking):
    bookings = [make_booking()]
    assert preview_customer_history("98765", bookings).total_bookings == 0
    history = preview_customer_history(" 9876543210 ", bookings)
    assert history.is_repeat
    assert history.total_nights == 3


@pytest.mark.parametrize("overrides, field", [
    ({"total_amount": "nan"}, "total_amount"),
    ({"total_amount": "inf", "advance_amount": "inf"}, "total_amount"),
    ({"advance_amount": "nan"}, "advance_amount"),
    ({"advance_amount": "-inf"}, "advance_amount"),
    ({"total_amount": float("inf")}, "total_amount"),
])
def test_non_finite_amounts_are_rejected(overrides, field):
    errors = validate_booking_form(valid_form(**overrides), [])
    assert errors[field].endswith("must be a number")


@pytest.mark.parametrize("amount", ["nan", "inf"])
def test_submit_with_non_finite_amount_returns_errors(repository, amount):
    booking, errors = submit_booking(valid_form(total_amount=amount, advance_amount=amount), repository)
    assert booking is None
    assert errors["total_amount"] == "Total amount must be a number"
    assert len(repository) == 0


def test_non_ascii_digits_are_not_a_phone_number():
    errors = validate_booking_form(valid_form(customer_phone="١٢٣٤٥٦٧٨٩٠"), [])
    assert errors["customer_phone"] == "Phone number must be exactly 10 digits"
    assert preview_customer_history("١٢٣٤٥٦٧٨٩٠", []).total_bookings == 0


def test_infinite_guest_count_is_not_a_whole_number():
    errors = validate_booking_form(valid_form(guest_count=float("inf")), [])
    assert errors["guest_count"] == "Guest count must be a whole number"
