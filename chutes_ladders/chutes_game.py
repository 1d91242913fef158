"""Reference Chutes and Ladders implementation."""

from __future__ import annotations

import random

from gamecore.game import ChutesAndLaddersGame
from gamecore.turns import BoardTurn, GameTurn

from .chutes_board import FIRST_SQUARE, LAST_SQUARE, resolve_move

DEFAULT_MAX_TURNS = 500
DIE_FACES = 6


class ClassicChutesAndLadders(ChutesAndLaddersGame):
    """Single-piece race to square 100 on the classic board."""

    def __init__(self, max_turns: int = DEFAULT_MAX_TURNS, seed: int | None = None):
        if max_turns < 1:
            raise ValueError("max_turns must be at least 1.")
        self.max_turns = max_turns
        self.seed = seed

    @property
    def name(self) -> str:
        return "Chutes and Ladders"

    def turn(self, current_square: int, roll: int) -> BoardTurn:
        return BoardTurn(roll=roll, end_square=resolve_move(current_square, roll))

    def play(self) -> list[GameTurn]:
        rng = random.Random(self.seed)
        history: list[GameTurn] = []
        square = FIRST_SQUARE
        while square < LAST_SQUARE and len(history) < self.max_turns:
            move = self.turn(square, rng.randint(1, DIE_FACES))
            history.append(move)
            square = move.end_square
        return history
