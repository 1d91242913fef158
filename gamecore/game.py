"""Capability contracts every game implementation must satisfy."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .turns import BoardTurn, GameTurn, RPSTurn
from .values import HandShape


class Game(ABC):
    """Base interface for every game: a display name and a full-match simulation."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the game (e.g. "Rock Paper Scissors")."""

    @abstractmethod
    def play(self) -> Sequence[GameTurn]:
        """Run one full simulated match and return its turn history."""


class RockPaperScissorsGame(Game):
    """Rules for Rock-Paper-Scissors.

    Implementations must be constructible with no arguments.
    """

    @abstractmethod
    def turn(self, player1: HandShape, player2: HandShape) -> RPSTurn:
        """Resolve one round without side effects."""


class ChutesAndLaddersGame(Game):
    """Rules for Chutes and Ladders.

    `turn` must add the roll to the current square, replace a ladder or
    chute entry with its destination, and cap the result at square 100.
    Implementations must be constructible with no arguments.
    """

    @abstractmethod
    def turn(self, current_square: int, roll: int) -> BoardTurn:
        """Resolve one move without side effects."""
