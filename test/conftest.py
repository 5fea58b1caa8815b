# test/conftest.py

import os
import tempfile
from datetime import date, datetime

# Point every data path at a scratch directory before project modules load
os.environ["DATA_DIR"] = tempfile.mkdtemp(prefix="rental-test-data-")

import pytest

from booking.models import Booking, BookingType
from booking.repository import BookingRepository
from core.config_schema import RootConfig
from utils.persistence import MemoryBookingStore


def _as_day(value):
    return value if isinstance(value, date) else date.fromisoformat(value)


@pytest.fixture
def make_booking():
    counter = {"n": 0}

    def factory(check_in="2025-07-01", check_out="2025-07-04", **overrides):
        counter["n"] += 1
        total = overrides.pop("total_amount", 9000)
        advance = overrides.pop("advance_amount", 3000)
        fields = dict(
            booking_id=overrides.pop("id", f"BK{100000 + counter['n']:06d}{counter['n'] % 100:02d}"),
            customer_name="Alice Fernandes",
            customer_phone="9876543210",
            check_in=_as_day(check_in),
            check_out=_as_day(check_out),
            guest_count=4,
            booking_type=BookingType.FAMILY,
            total_amount=total,
            advance_amount=advance,
            created_at=datetime(2025, 6, 1, 10, 0),
        )
        fields.update(overrides)
        return Booking.create(**fields)

    return factory


@pytest.fixture
def repository():
    return BookingRepository(MemoryBookingStore())


@pytest.fixture
def config(tmp_path):
    return RootConfig(
        storage={"bookings_path": tmp_path / "bookings" / "slot.json"},
        calendar={"ics_path": tmp_path / "calendar" / "bookings.ics"},
    )
