# booking/models.py

import re
from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# ASCII digits only, no trailing newline; use with fullmatch
PHONE_PATTERN = re.compile(r"[0-9]{10}")


class BookingType(str, Enum):
    FAMILY = "family"
    BACHELORS = "bachelors"

    @property
    def label(self) -> str:
        return "Bachelor Party" if self is BookingType.BACHELORS else "Family Stay"


class Booking(BaseModel):
    """
    A single stay at the property.

    Serialized with camelCase keys (``customerName``, ``checkIn``...) so the
    storage slot keeps the same shape regardless of which tool wrote it.
    Instances are frozen; edits go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=False)

    id: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    customer_phone: str
    check_in: date
    check_out: date
    guest_count: int = Field(1, ge=1)
    booking_type: BookingType = BookingType.FAMILY
    total_amount: float = Field(..., ge=0)
    advance_amount: float = Field(0, ge=0)
    # stored at creation time, not recomputed when totals are edited later
    balance_amount: float
    created_at: datetime

    @field_validator("customer_phone")
    def phone_is_ten_digits(cls, v):
        if not PHONE_PATTERN.fullmatch(v):
            raise ValueError("phone number must be exactly 10 digits")
        return v

    @model_validator(mode="after")
    def check_stay_and_amounts(self):
        if self.check_out <= self.check_in:
            raise ValueError("check-out must be after check-in")
        if self.advance_amount > self.total_amount:
            raise ValueError("advance amount cannot exceed total amount")
        return self

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days

    @classmethod
    def create(
        cls,
        booking_id: str,
        customer_name: str,
        customer_phone: str,
        check_in: date,
        check_out: date,
        guest_count: int,
        booking_type: BookingType,
        total_amount: float,
        advance_amount: float,
        created_at: Optional[datetime] = None,
    ) -> "Booking":
        return cls(
            id=booking_id,
            customer_name=customer_name,
            customer_phone=customer_phone,
            check_in=check_in,
            check_out=check_out,
            guest_count=guest_count,
            booking_type=booking_type,
            total_amount=total_amount,
            advance_amount=advance_amount,
            balance_amount=total_amount - advance_amount,
            created_at=created_at or datetime.now(),
        )

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class CustomerHistory(BaseModel):
    total_bookings: int = 0
    total_nights: int = 0

    @property
    def is_repeat(self) -> bool:
        return self.total_bookings > 0


class MonthlySummary(BaseModel):
    bookings: int = 0
    nights: int = 0
    revenue: float = 0

    def add(self, other: "MonthlySummary") -> "MonthlySummary":
        return MonthlySummary(
            bookings=self.bookings + other.bookings,
            nights=self.nights + other.nights,
            revenue=self.revenue + other.revenue,
        )
