from .board import Board
from .rules import IllegalMove, IllegalShot, has_legal_move, other

__all__ = [
    "Board",
    "IllegalMove",
    "IllegalShot",
    "has_legal_move",
    "other",
]
