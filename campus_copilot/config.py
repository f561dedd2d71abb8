# Role: Central configuration module. Loads .env into environment variables and computes runtime settings.
# Importers read campus_copilot.config.<NAME> at call time, so load_env() may run after import.

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEBUG: bool = False

_DEFAULT_DATA_FILE = str(Path(__file__).resolve().parent.parent / "data" / "campus_seed.json")

CAMPUS_DATA_FILE: str = _DEFAULT_DATA_FILE
CAMPUS_API_URL: Optional[str] = None
CAMPUS_API_TIMEOUT: float = 10.0

FALLBACK_ESCALATION_THRESHOLD: int = 2
SESSION_TTL_MINUTES: int = 60
TRANSLITERATION_HINTS: bool = False

_TRUTHY = {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


def load_env() -> None:
    """
    Load .env into os.environ, then recompute every setting.
    This makes the settings correct even if load_env() is called after import.
    """
    global DEBUG, CAMPUS_DATA_FILE, CAMPUS_API_URL, CAMPUS_API_TIMEOUT
    global FALLBACK_ESCALATION_THRESHOLD, SESSION_TTL_MINUTES, TRANSLITERATION_HINTS

    load_dotenv()

    DEBUG = os.getenv("DEBUG", "0").lower() in _TRUTHY

    CAMPUS_DATA_FILE = os.getenv("CAMPUS_DATA_FILE") or _DEFAULT_DATA_FILE
    # Key line: an empty CAMPUS_API_URL means "use the seed file".
    CAMPUS_API_URL = (os.getenv("CAMPUS_API_URL") or "").strip() or None
    CAMPUS_API_TIMEOUT = _env_float("CAMPUS_API_TIMEOUT", 10.0)

    FALLBACK_ESCALATION_THRESHOLD = max(0, _env_int("FALLBACK_ESCALATION_THRESHOLD", 2))
    SESSION_TTL_MINUTES = max(1, _env_int("SESSION_TTL_MINUTES", 60))
    TRANSLITERATION_HINTS = os.getenv("TRANSLITERATION_HINTS", "0").lower() in _TRUTHY
