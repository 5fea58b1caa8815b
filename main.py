#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# 1) Auto-load an optional .env from the `secrets/` directory
from dotenv import load_dotenv
import os
import sys
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.resolve()

DOTENV_PATH = PROJECT_ROOT / "secrets" / ".env"
if DOTENV_PATH.exists():
    load_dotenv(DOTENV_PATH, override=True)

# 2) Make project modules importable
sys.path.insert(0, str(PROJECT_ROOT))

# 3) Configure data directory before core.paths is imported
os.environ.setdefault("DATA_DIR", str(PROJECT_ROOT / "data"))
os.environ.setdefault("RENTAL_CONFIG_PATH", str(PROJECT_ROOT / "config" / "rental_config.json"))

# 4) Core imports
from core.config_loader import load_config
from booking.repository import BookingRepository
from utils.persistence import JsonBookingStore
from utils.structured_logger import log_event
from cli.cli_router import start_desk
from io_adapters.console_adapter import ConsoleAdapter

def main():
    try:
        config = load_config()
    except RuntimeError as e:
        print(f"[CONFIG ERROR] {e}")
        return 1

    store      = JsonBookingStore(config.storage.bookings_path)
    repository = BookingRepository(store)
    io_adapter = ConsoleAdapter()

    print("Weekend Property Rental Manager")
    print("Type 0 or Ctrl-D to quit.")
    print("─────────────────────────────────")

    try:
        start_desk(config, repository, io_adapter)
    except (EOFError, KeyboardInterrupt):
        print("\nGoodbye!")
        log_event("cli", "exit", output_data="interrupted")
    return 0

if __name__ == "__main__":
    sys.exit(main())
