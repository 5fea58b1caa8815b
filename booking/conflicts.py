# booking/conflicts.py

from booking.dates import as_date


def find_conflicts(new_check_in, new_check_out, existing_bookings, exclude_id: str | None = None) -> list:
    """
    Bookings whose stay [check_in, check_out) overlaps the requested one.
    A stay ending on the day another begins is not an overlap.
    """
    new_start = as_date(new_check_in)
    new_end = as_date(new_check_out)

    conflicts = []
    for booking in existing_bookings:
        if exclude_id and booking.id == exclude_id:
            continue
        if new_start < booking.check_out and new_end > booking.check_in:
            conflicts.append(booking)
    return conflicts


def has_conflict(new_check_in, new_check_out, existing_bookings, exclude_id: str | None = None) -> bool:
    return bool(find_conflicts(new_check_in, new_check_out, existing_bookings, exclude_id))
