# core/config_schema.py

from pydantic import BaseModel, Field, field_validator
from typing import List, Literal, Optional
from pathlib import Path

from core.paths import BOOKINGS_JSON_PATH, CALENDAR_ICS_PATH

DEFAULT_HOUSE_RULES = [
    "Unmarried couples not allowed.",
    "Pets are not allowed.",
    "Smoking inside villa not allowed.",
    "Playing cards is strictly prohibited.",
    "Extra head count ₹300/person will be charged beyond confirmed guest count.",
    "No cancellation & no refund.",
]


class StorageConfig(BaseModel):
    bookings_path: Path = BOOKINGS_JSON_PATH

    def ensure_parent(self):
        self.bookings_path.parent.mkdir(parents=True, exist_ok=True)


class CalendarConfig(BaseModel):
    ics_path: Path = CALENDAR_ICS_PATH
    week_start: Literal["sunday", "monday"] = "sunday"

    def ensure_parent(self):
        self.ics_path.parent.mkdir(parents=True, exist_ok=True)


class RootConfig(BaseModel):
    property_name: Optional[str] = "Weekend Property Rental"
    currency_symbol: str = Field("₹", min_length=1)
    house_rules: List[str] = Field(default_factory=lambda: list(DEFAULT_HOUSE_RULES))
    storage: StorageConfig = StorageConfig()
    calendar: CalendarConfig = CalendarConfig()

    @field_validator("house_rules")
    def rules_not_empty(cls, v):
        cleaned = [rule.strip() for rule in v]
        if any(not rule for rule in cleaned):
            raise ValueError("house rules must not be empty strings")
        return cleaned
