"""Enumerated value types shared by every game."""

from __future__ import annotations

from enum import Enum


class HandShape(str, Enum):
    """The three Rock-Paper-Scissors moves."""

    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"

    @property
    def symbol(self) -> str:
        """Display glyph for the shape."""
        return _SYMBOLS[self]

    def beats(self, other: HandShape) -> bool:
        """Return whether this shape beats `other` (rock > scissors > paper > rock)."""
        return _BEATS[self] is other


_SYMBOLS: dict[HandShape, str] = {
    HandShape.ROCK: "🪨",
    HandShape.PAPER: "📄",
    HandShape.SCISSORS: "✂️",
}

_BEATS: dict[HandShape, HandShape] = {
    HandShape.ROCK: HandShape.SCISSORS,
    HandShape.SCISSORS: HandShape.PAPER,
    HandShape.PAPER: HandShape.ROCK,
}


class Player(str, Enum):
    """Seats in a two-player game."""

    ONE = "one"
    TWO = "two"

    @property
    def label(self) -> str:
        return "Player 1" if self is Player.ONE else "Player 2"
