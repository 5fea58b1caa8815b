# booking/search.py

from booking.dates import as_date

# DD/MM/YYYY, DD-MM-YYYY, YYYY-MM-DD
SEARCH_DATE_FORMATS = ("%d/%m/%Y", "%d-%m-%Y", "%Y-%m-%d")


def _date_renderings(value) -> list[str]:
    d = as_date(value)
    return [d.strftime(fmt) for fmt in SEARCH_DATE_FORMATS]


def matches_query(booking, term: str) -> bool:
    """``term`` must already be trimmed and lowercased."""
    if term in booking.customer_name.lower():
        return True
    if term in booking.customer_phone:
        return True
    if term in booking.id.lower():
        return True
    rendered = _date_renderings(booking.check_in) + _date_renderings(booking.check_out)
    return any(term in text for text in rendered)


def search_bookings(bookings, query: str) -> list:
    """
    Case-insensitive substring filter over name, phone, id and the stay
    dates. A blank query returns every booking; order is preserved.
    """
    if not query or not query.strip():
        return list(bookings)
    term = query.strip().lower()
    return [b for b in bookings if matches_query(b, term)]
