# booking/summary.py

from booking.dates import calculate_nights, format_date
from booking.models import Booking, CustomerHistory
from core.config_schema import DEFAULT_HOUSE_RULES


def format_amount(value: float, currency: str = "₹") -> str:
    if float(value).is_integer():
        return f"{currency}{int(value)}"
    return f"{currency}{value:.2f}"


def house_rules_line(rules) -> str:
    return "Rules: " + " ".join(f"{i}. {rule}" for i, rule in enumerate(rules, start=1))


def get_booking_details(
    booking: Booking,
    history: CustomerHistory,
    house_rules=DEFAULT_HOUSE_RULES,
    currency: str = "₹",
) -> str:
    """Plain-text summary of a booking, for pasting into a chat with the guest."""
    nights = calculate_nights(booking.check_in, booking.check_out)
    lines = [
        f"Booking ID: {booking.id}",
        f"Customer: {booking.customer_name}",
        f"Phone: {booking.customer_phone}",
        f"Check-in: {format_date(booking.check_in)}",
        f"Check-out: {format_date(booking.check_out)}",
        f"Nights: {nights}",
        f"Guests: {booking.guest_count}",
        f"Type: {booking.booking_type.label}",
        f"Total Amount: {format_amount(booking.total_amount, currency)}",
        f"Advance: {format_amount(booking.advance_amount, currency)}",
        f"Balance: {format_amount(booking.balance_amount, currency)}",
    ]
    if history.is_repeat:
        lines.append(
            f"Repeat Customer: {history.total_bookings} previous bookings, "
            f"{history.total_nights} total nights"
        )
    return "\n".join(lines) + "\n\n" + house_rules_line(house_rules)
