# utils/structured_logger.py

import json
from datetime import datetime, timezone
import threading
import shutil

from core.paths import STRUCT_LOG_DIR, STRUCT_LOG_FILE, STRUCT_LOG_ARCHIVE

LOG_DIR = STRUCT_LOG_DIR
LOG_FILE = STRUCT_LOG_FILE
ROTATED_DIR = STRUCT_LOG_ARCHIVE
MAX_BYTES = 5 * 1024 * 1024  # 5 MB before rotation; adjust as needed

_lock = threading.Lock()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _rotate_if_needed():
    try:
        if LOG_FILE.exists() and LOG_FILE.stat().st_size >= MAX_BYTES:
            ROTATED_DIR.mkdir(parents=True, exist_ok=True)
            timestamp = _utcnow().strftime("%Y%m%dT%H%M%SZ")
            archived = ROTATED_DIR / f"rental_events_{timestamp}.ndjson"
            shutil.move(str(LOG_FILE), str(archived))
    except OSError:
        # rotation must not break logging
        pass


def log_event(source: str, step: str, input_data=None, output_data=None, outcome: str = "ok", extra: dict | None = None):
    """
    Appends a structured event as a single line JSON (NDJSON). Thread-safe.
    """
    entry = {
        "source": source,
        "step": step,
        "input": input_data,
        "output": output_data,
        "outcome": outcome,
        "extra": extra or {},
        "timestamp": _utcnow().isoformat(),
    }
    line = json.dumps(entry, ensure_ascii=False, default=str)
    with _lock:
        try:
            LOG_DIR.mkdir(parents=True, exist_ok=True)
            _rotate_if_needed()
            with open(LOG_FILE, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            # a broken log must not break the caller
            print(f"Failed to log event {step}: {e}")


def redact_phone(number: str):
    if len(number) >= 4:
        return "******" + number[-4:]
    return number


def read_events(source: str = None, limit: int = 100):
    """
    Reads the last `limit` events, optionally filtered by source.
    """
    if not LOG_FILE.exists():
        return []

    results = []
    with open(LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                obj = json.loads(line)
            except json.JSONDecodeError:
                continue
            if source is None or obj.get("source") == source:
                results.append(obj)
    return results[-limit:]
