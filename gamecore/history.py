"""Summaries and JSONL persistence for mixed match histories."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Sequence

from .serialize import json_dumps
from .turns import BoardTurn, GameTurn, RPSTurn, turn_from_dict
from .values import Player


@dataclass(frozen=True)
class HistorySummary:
    """Aggregate view over a stored turn history."""

    rps_rounds: int = 0
    rps_wins: dict[str, int] = field(default_factory=dict)
    rps_ties: int = 0
    board_moves: int = 0
    final_square: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rps_rounds": self.rps_rounds,
            "rps_wins": dict(self.rps_wins),
            "rps_ties": self.rps_ties,
            "board_moves": self.board_moves,
            "final_square": self.final_square,
        }


def summarize_history(turns: Iterable[GameTurn]) -> HistorySummary:
    """Count round outcomes and board moves in a mixed history."""
    wins = {player.value: 0 for player in Player}
    rounds = ties = moves = 0
    final_square: int | None = None

    for turn in turns:
        if isinstance(turn, RPSTurn):
            rounds += 1
            if turn.winner is None:
                ties += 1
            else:
                wins[turn.winner.value] += 1
        elif isinstance(turn, BoardTurn):
            moves += 1
            final_square = turn.end_square
        else:
            raise TypeError(f"Unsupported turn record: {type(turn).__name__}")

    return HistorySummary(
        rps_rounds=rounds,
        rps_wins=wins,
        rps_ties=ties,
        board_moves=moves,
        final_square=final_square,
    )


def write_history_jsonl(path: str | Path, turns: Iterable[GameTurn]) -> None:
    """Persist turns as JSONL, one tagged record per line."""
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as handle:
        for turn in turns:
            handle.write(json_dumps(turn.to_dict()))
            handle.write("\n")


def read_history_jsonl(path: str | Path) -> Sequence[GameTurn]:
    """Load a history written by `write_history_jsonl`."""
    turns: list[GameTurn] = []
    with Path(path).open("r", encoding="utf-8") as handle:
        for line in handle:
            line = line.strip()
            if not line:
                continue
            turns.append(turn_from_dict(json.loads(line)))
    return turns
