# cli/views.py

from booking.dates import SUNDAY, calculate_nights, format_date_display, format_short
from booking.history import get_customer_history
from booking.stats import BookingStats, Month, summarize
from booking.summary import format_amount
from calendar_integration.month_view import build_month_grid, weekday_header


def render_booking_card(booking, bookings, currency: str = "₹") -> str:
    history = get_customer_history(booking.customer_phone, bookings, exclude_id=booking.id)
    nights = calculate_nights(booking.check_in, booking.check_out)
    title = f"{booking.customer_name}  [{booking.id}]"
    if history.is_repeat:
        title += "  ⭐ Repeat Guest"
    lines = [
        title,
        f"  📞 {booking.customer_phone}   👥 {booking.guest_count} guests",
        f"  📅 {format_short(booking.check_in)} - {format_date_display(booking.check_out)}   "
        f"{nights} night{'s' if nights != 1 else ''} • {booking.booking_type.label}",
    ]
    if history.is_repeat:
        lines.append(
            f"  Customer History: {history.total_bookings} booking{'s' if history.total_bookings != 1 else ''}, "
            f"{history.total_nights} total night{'s' if history.total_nights != 1 else ''}"
        )
    lines.append(
        f"  Total {format_amount(booking.total_amount, currency)} | "
        f"Advance {format_amount(booking.advance_amount, currency)} | "
        f"Balance {format_amount(booking.balance_amount, currency)}"
    )
    return "\n".join(lines)


def render_booking_list(title: str, selected, all_bookings, currency: str = "₹") -> str:
    if not selected:
        return f"\n{title}\nNo bookings found. There are no bookings for this period yet."
    totals = summarize(selected)
    header = (
        f"\n{title}: {totals.bookings} bookings, {totals.nights} nights, "
        f"{format_amount(totals.revenue, currency)} revenue"
    )
    cards = [render_booking_card(b, all_bookings, currency) for b in selected]
    return header + "\n\n" + "\n\n".join(cards)


def render_month(bookings, month: int, year: int, today=None, first_weekday: int = SUNDAY) -> str:
    """
    Text grid: `*` marks a booked day, brackets mark today, days outside
    the month are dots.
    """
    grid = build_month_grid(bookings, month, year, today=today, first_weekday=first_weekday)
    rows = [f"{Month(month).label} {year}", " ".join(f"{name:>5}" for name in weekday_header(first_weekday))]
    for week in grid:
        cells = []
        for cell in week:
            if not cell.in_month:
                cells.append(f"{'.':>5}")
                continue
            text = f"{cell.day.day:02d}{'*' if cell.booked else ''}"
            if cell.today:
                text = f"[{text}]"
            cells.append(f"{text:>5}")
        rows.append(" ".join(cells))
    booked = sum(1 for week in grid for cell in week if cell.in_month and cell.booked)
    rows.append(f"{booked} booked day{'s' if booked != 1 else ''} (* = booked)")
    return "\n".join(rows)


def render_stats(stats: BookingStats, currency: str = "₹") -> str:
    if not stats:
        return "No bookings yet. Summary will appear once bookings are added."
    totals = stats.totals()
    lines = [
        f"All time: {totals.bookings} bookings, {totals.nights} nights, "
        f"{format_amount(totals.revenue, currency)} revenue",
    ]
    for year in stats.years():
        year_total = stats.year_total(year)
        lines.append("")
        lines.append(
            f"{year}: {year_total.bookings} bookings, {year_total.nights} nights, "
            f"{format_amount(year_total.revenue, currency)} revenue"
        )
        for month, summary in stats.months(year):
            lines.append(
                f"  {month.label:<10} {summary.bookings:>3} bookings {summary.nights:>4} nights "
                f"{format_amount(summary.revenue, currency):>12}"
            )
    return "\n".join(lines)
