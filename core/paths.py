# core/paths.py

import os
from pathlib import Path

# Base directory for all persistent data, overridable in tests
BASE_DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Single JSON slot holding every booking
BOOKINGS_SLOT_KEY  = "rental-manager-bookings"
BOOKINGS_JSON_PATH = BASE_DATA_DIR / "bookings" / f"{BOOKINGS_SLOT_KEY}.json"

# Exported calendar .ics
CALENDAR_ICS_PATH = BASE_DATA_DIR / "calendar" / "bookings.ics"

# Structured logging NDJSON file + archive dir
STRUCT_LOG_DIR     = BASE_DATA_DIR / "logs"
STRUCT_LOG_FILE    = STRUCT_LOG_DIR / "rental_events.ndjson"
STRUCT_LOG_ARCHIVE = STRUCT_LOG_DIR / "archived"
