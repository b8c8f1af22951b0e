"""
computor — Local JSON storage for settings and solve history.

Data is persisted in ``<project>/data/computor.json`` unless the
``COMPUTOR_SETTINGS`` environment variable points somewhere else.
"""

import json
import logging
import os
import time
from datetime import datetime
from typing import Optional

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "computor.json")

ENV_VAR = "COMPUTOR_SETTINGS"
HISTORY_LIMIT = 100

# ── Default settings ────────────────────────────────────────────────────
DEFAULT_SETTINGS = {
    "mode": "exact",          # "exact" or "numerical"
    "max_decimals": 6,        # digits shown for approximated roots
    "show_steps": False,      # print the step-by-step trail in the CLI
    "save_history": False,    # record every solved equation
    "log_level": "WARNING",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _data_file(path: Optional[str] = None) -> str:
    return path or os.environ.get(ENV_VAR) or _DATA_FILE


def _load_db(path: Optional[str] = None) -> dict:
    data_file = _data_file(path)
    if os.path.exists(data_file):
        try:
            with open(data_file, "r", encoding="utf-8") as f:
                db = json.load(f)
            if isinstance(db, dict):
                return db
            logger.warning("ignoring %s: top-level value is not an object", data_file)
        except (json.JSONDecodeError, OSError):
            logger.warning("could not read %s, using defaults", data_file, exc_info=True)
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _save_db(db: dict, path: Optional[str] = None) -> None:
    data_file = _data_file(path)
    os.makedirs(os.path.dirname(os.path.abspath(data_file)), exist_ok=True)
    with open(data_file, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def validate_settings(settings: dict) -> dict:
    """Return *settings* if every known key has a usable value.

    Raises ``ValueError`` naming the first offending key.
    """
    if settings.get("mode") not in ("exact", "numerical"):
        raise ValueError(f"Invalid mode {settings.get('mode')!r}; use 'exact' or 'numerical'.")
    decimals = settings.get("max_decimals")
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 < decimals <= 30:
        raise ValueError(f"max_decimals must be an integer between 1 and 30, got {decimals!r}.")
    for key in ("show_steps", "save_history"):
        if not isinstance(settings.get(key), bool):
            raise ValueError(f"{key} must be true or false.")
    if str(settings.get("log_level", "")).upper() not in _LOG_LEVELS:
        raise ValueError(f"Unknown log_level {settings.get('log_level')!r}.")
    return settings


def load_settings(path: Optional[str] = None) -> dict:
    """Return the stored settings merged over ``DEFAULT_SETTINGS``.

    Unknown keys are dropped and so are stored values that fail
    validation, so a hand-edited file can never break the solver.
    """
    stored = _load_db(path).get("settings", {})
    merged = dict(DEFAULT_SETTINGS)
    if isinstance(stored, dict):
        for key, value in stored.items():
            if key not in DEFAULT_SETTINGS:
                continue
            candidate = dict(merged, **{key: value})
            try:
                validate_settings(candidate)
            except ValueError as exc:
                logger.warning("ignoring setting %s: %s", key, exc)
                continue
            merged = candidate
    return merged


def save_settings(settings: dict, path: Optional[str] = None) -> None:
    """Validate and persist *settings*, keeping the stored history."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})
    validate_settings(merged)
    db = _load_db(path)
    db["settings"] = merged
    _save_db(db, path)


# ── History ──────────────────────────────────────────────────────────────

def add_history(equation: str, answer: str, path: Optional[str] = None) -> None:
    """Append a solve record (newest first, capped at ``HISTORY_LIMIT``)."""
    db = _load_db(path)
    record = {
        "equation": equation,
        "answer": answer,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    }
    history = db.get("history")
    if not isinstance(history, list):
        history = []
    history.insert(0, record)
    db["history"] = history[:HISTORY_LIMIT]
    _save_db(db, path)


def get_history(path: Optional[str] = None) -> list[dict]:
    """Return the history list (newest first)."""
    history = _load_db(path).get("history", [])
    return history if isinstance(history, list) else []


def clear_history(path: Optional[str] = None) -> None:
    """Remove every history entry."""
    db = _load_db(path)
    db["history"] = []
    _save_db(db, path)
