# booking/ids.py

import random
import time

from booking.errors import BookingError

ID_PREFIX = "BK"
MAX_ID_ATTEMPTS = 20


def generate_booking_id(now_ms: int | None = None, rng: random.Random | None = None) -> str:
    """
    BK + last 6 digits of the epoch-millisecond clock + 2 random digits,
    e.g. BK48213907. Not guaranteed unique.
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    rng = rng or random
    return f"{ID_PREFIX}{str(now_ms)[-6:]}{rng.randint(0, 99):02d}"


def generate_unique_booking_id(existing_ids, now_ms: int | None = None, rng: random.Random | None = None) -> str:
    taken = set(existing_ids)
    for _ in range(MAX_ID_ATTEMPTS):
        candidate = generate_booking_id(now_ms, rng)
        if candidate not in taken:
            return candidate
    raise BookingError(f"Could not generate a free booking id after {MAX_ID_ATTEMPTS} attempts")
