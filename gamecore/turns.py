"""Immutable turn records and the tagged `GameTurn` union."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Self

from .values import HandShape, Player


@dataclass(frozen=True)
class RPSTurn:
    """One round of Rock-Paper-Scissors.

    `winner` is None for a tie. The record does not check that `winner`
    agrees with the shapes; grading does.
    """

    player1: HandShape
    player2: HandShape
    winner: Player | None
    turn_kind: ClassVar[str] = "rps"

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the round."""
        return {
            "type": self.turn_kind,
            "player1": self.player1.value,
            "player2": self.player2.value,
            "winner": self.winner.value if self.winner is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build the round from a dictionary payload."""
        winner = data.get("winner")
        return cls(
            player1=HandShape(str(data["player1"])),
            player2=HandShape(str(data["player2"])),
            winner=Player(str(winner)) if winner is not None else None,
        )


@dataclass(frozen=True)
class BoardTurn:
    """One move on the Chutes and Ladders board."""

    roll: int
    end_square: int
    turn_kind: ClassVar[str] = "board"

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable representation of the move."""
        return {"type": self.turn_kind, "roll": self.roll, "end_square": self.end_square}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Self:
        """Build the move from a dictionary payload."""
        return cls(roll=int(data["roll"]), end_square=int(data["end_square"]))


GameTurn = RPSTurn | BoardTurn

TURN_TYPES: dict[str, type[RPSTurn] | type[BoardTurn]] = {
    RPSTurn.turn_kind: RPSTurn,
    BoardTurn.turn_kind: BoardTurn,
}


def turn_from_dict(data: Mapping[str, Any]) -> GameTurn:
    """Parse either kind of turn record from its tagged payload."""
    kind = data.get("type")
    turn_type = TURN_TYPES.get(str(kind))
    if turn_type is None:
        raise ValueError(f"Unknown turn type: {kind!r}")
    return turn_type.from_dict(data)
