# core/config_loader.py

import json
import os
import re
from pathlib import Path
from dotenv import load_dotenv
from core.config_schema import RootConfig

# Path constants (adjust if your layout differs)
DEFAULT_CONFIG_PATH = Path("config/rental_config.json")
DEFAULT_ENV_PATH = Path("secrets/.env")

# "1. Pets are not allowed. 2. No smoking." -> numbered chunks
_NUMBERED_RULE = re.compile(r"(?:^|\s)\d+\.\s+")


def split_rules_string(s: str) -> list[str]:
    """
    Given a legacy footer like "1. No pets. 2. No smoking.", returns ["No pets.", "No smoking."].
    """
    parts = [p.strip() for p in _NUMBERED_RULE.split(s)]
    rules = [p for p in parts if p]
    if not rules:
        raise ValueError(f"Cannot parse house rules string: {s!r}")
    return rules


def normalize_house_rules(raw_rules):
    """
    Accepts either a list of rules (returned as-is) or the legacy single
    numbered string used in the copied booking summary.
    """
    if isinstance(raw_rules, str):
        return split_rules_string(raw_rules)
    return raw_rules


def load_env_variables() -> dict:
    """
    Loads optional overrides (DATA_DIR, RENTAL_CONFIG_PATH) into a plain dict.
    """
    if DEFAULT_ENV_PATH.exists():
        load_dotenv(dotenv_path=DEFAULT_ENV_PATH)
    else:
        load_dotenv()

    return {
        "DATA_DIR": os.getenv("DATA_DIR", "data").strip(),
        "RENTAL_CONFIG_PATH": os.getenv("RENTAL_CONFIG_PATH", str(DEFAULT_CONFIG_PATH)).strip(),
    }


def load_raw_config(path: Path = DEFAULT_CONFIG_PATH) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path.resolve()}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: Path | None = None) -> RootConfig:
    """
    Loads environment variables and the JSON config, normalizes legacy formats,
    validates against schema, and returns a typed RootConfig instance.
    A missing config file yields the defaults.
    """
    env = load_env_variables()
    config_path = Path(path) if path is not None else Path(env["RENTAL_CONFIG_PATH"])

    try:
        raw = load_raw_config(config_path)
    except FileNotFoundError:
        raw = {}
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Configuration file {config_path} is not valid JSON: {e}") from e

    if "house_rules" in raw:
        raw["house_rules"] = normalize_house_rules(raw["house_rules"])

    try:
        config = RootConfig(**raw)
    except Exception as e:
        # Fail fast with clear message
        raise RuntimeError(f"Configuration validation failed: {e}") from e

    config.storage.ensure_parent()
    config.calendar.ensure_parent()
    return config
