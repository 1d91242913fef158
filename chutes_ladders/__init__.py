"""Chutes and Ladders package exports."""

from .chutes_board import BOARD, CHUTES, LADDERS, LAST_SQUARE, clamp_square, is_chute, is_ladder, resolve_move
from .chutes_game import DEFAULT_MAX_TURNS, ClassicChutesAndLadders

__all__ = [
    "BOARD",
    "CHUTES",
    "ClassicChutesAndLadders",
    "DEFAULT_MAX_TURNS",
    "LADDERS",
    "LAST_SQUARE",
    "clamp_square",
    "is_chute",
    "is_ladder",
    "resolve_move",
]
