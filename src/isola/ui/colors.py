from __future__ import annotations
from isola import config

_RESET = "\033[0m"
_RED = "\033[31m"
_CYAN = "\033[36m"


def _paint(text: str, code: str) -> str:
    if not config.USE_COLOR:
        return text
    return f"{code}{text}{_RESET}"


def rejection(message: str) -> str:
    """Why an answer was refused, in red."""
    return _paint(message, _RED)


def status(message: str) -> str:
    return _paint(message, _CYAN)
