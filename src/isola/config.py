# src/isola/config.py

from __future__ import annotations
import logging
import os

SIZE = 7

START_POSITIONS = {
    "P1": (0, 3),
    "P2": (6, 3),
}
SYMBOLS = {
    "P1": "B",
    "P2": "W",
}
FIRST_PLAYER = "P1"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True



def resolve_log_level(raw: str) -> str:
    """Unknown level names fall back to WARNING."""
    name = raw.strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "WARNING"


LOG_LEVEL = resolve_log_level(os.environ.get("ISOLA_LOG_LEVEL", "WARNING"))
