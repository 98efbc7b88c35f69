from __future__ import annotations

from isola.types import Direction


def _parse_int(raw: str) -> int:
    s = raw.strip()
    if not s.lstrip("+-").isdigit():
        raise ValueError(f"not a number: {raw!r}")
    return int(s)


def parse_direction(raw: str) -> Direction:
    try:
        code = _parse_int(raw)
        return Direction(code)
    except ValueError:
        # covers non-numbers, values outside 1-9 and the centre key 5
        raise ValueError("Invalid Input!") from None


def parse_coordinate(raw: str, size: int) -> int:
    """1-based coordinate as typed by the player -> 0-based index."""
    try:
        n = _parse_int(raw)
    except ValueError:
        raise ValueError("Invalid coordinate!") from None
    if n < 1 or n > size:
        raise ValueError("Invalid coordinate!")
    return n - 1
