"""Board layout and movement rule for Chutes and Ladders."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

FIRST_SQUARE = 0
LAST_SQUARE = 100

LADDERS: Mapping[int, int] = MappingProxyType({
    1: 38, 4: 14, 9: 31, 21: 42, 28: 84,
    36: 44, 51: 67, 71: 91, 80: 100,
})

CHUTES: Mapping[int, int] = MappingProxyType({
    17: 7, 47: 26, 49: 11, 56: 53, 62: 19,
    64: 60, 87: 24, 93: 73, 95: 75, 98: 78,
})

BOARD: Mapping[int, int] = MappingProxyType({**LADDERS, **CHUTES})


def is_ladder(square: int) -> bool:
    return square in LADDERS


def is_chute(square: int) -> bool:
    return square in CHUTES


def clamp_square(square: int) -> int:
    """Clamp a square index into the board range."""
    return max(FIRST_SQUARE, min(LAST_SQUARE, square))


def resolve_move(current_square: int, roll: int, board: Mapping[int, int] = BOARD) -> int:
    """Add the roll, follow a ladder or chute from the landed square, then clamp."""
    landed = current_square + roll
    return clamp_square(board.get(landed, landed))
