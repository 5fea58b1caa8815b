# booking/history.py

from booking.dates import calculate_nights
from booking.models import CustomerHistory


def get_customer_history(phone: str, bookings, exclude_id: str | None = None) -> CustomerHistory:
    """
    Bookings and nights stayed for a phone number. ``exclude_id`` keeps a
    booking out of its own history.
    """
    matches = [
        b for b in bookings
        if b.customer_phone == phone and (not exclude_id or b.id != exclude_id)
    ]
    return CustomerHistory(
        total_bookings=len(matches),
        total_nights=sum(calculate_nights(b.check_in, b.check_out) for b in matches),
    )


def is_repeat_customer(phone: str, bookings, exclude_id: str | None = None) -> bool:
    return get_customer_history(phone, bookings, exclude_id).is_repeat
