"""Command-line driver for grading implementations and playing matches."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Sequence

from .factory import load_game
from .game import ChutesAndLaddersGame, Game, RockPaperScissorsGame
from .history import summarize_history, write_history_jsonl
from .runner import GradingRunner, RunnerConfig
from .serialize import digest, json_dumps
from .turns import GameTurn

DEFAULT_RPS_IMPL = "rock_paper_scissors:ClassicRockPaperScissors"
DEFAULT_CHUTES_IMPL = "chutes_ladders:ClassicChutesAndLadders"

GAME_CONTRACTS: dict[str, tuple[str, type[Game]]] = {
    "rps": (DEFAULT_RPS_IMPL, RockPaperScissorsGame),
    "chutes": (DEFAULT_CHUTES_IMPL, ChutesAndLaddersGame),
}


def match_payload(game: Game, turns: Sequence[GameTurn]) -> dict[str, Any]:
    """Return the serialized history and summary of a played match."""
    return {
        "name": game.name,
        "turns": [turn.to_dict() for turn in turns],
        "summary": summarize_history(turns).to_dict(),
        "history_digest": digest([turn.to_dict() for turn in turns]),
    }


def _grade(args: argparse.Namespace) -> int:
    rps_game = load_game(args.rps, RockPaperScissorsGame) if args.rps else None
    chutes_game = load_game(args.chutes, ChutesAndLaddersGame) if args.chutes else None
    runner = GradingRunner(RunnerConfig(stop_on_failure=args.stop_on_failure, report_path=args.output))
    report = runner.run(rps_game=rps_game, chutes_game=chutes_game, rps_output=args.rps_output)
    print(json_dumps(report.to_dict(), indent=2))
    return 0 if report.passed else 1


def _play(args: argparse.Namespace) -> int:
    default_impl, contract = GAME_CONTRACTS[args.game]
    game = load_game(args.impl or default_impl, contract)
    if args.seed is not None and hasattr(game, "seed"):
        game.seed = args.seed
    turns = list(game.play())
    if args.history:
        write_history_jsonl(Path(args.history), turns)
    print(json_dumps(match_payload(game, turns), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grade game implementations or play a match.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    grade = subparsers.add_parser("grade", help="Run the grading checks.")
    grade.add_argument("--rps", type=str, default=None, help="module:Class of a RockPaperScissorsGame.")
    grade.add_argument("--chutes", type=str, default=None, help="module:Class of a ChutesAndLaddersGame.")
    grade.add_argument("--rps-output", type=str, default=None, help="Rendered text of a player 1 win.")
    grade.add_argument("--stop-on-failure", action="store_true")
    grade.add_argument("--output", type=str, default=None)
    grade.set_defaults(handler=_grade)

    play = subparsers.add_parser("play", help="Play one full match and print its history.")
    play.add_argument("--game", default="rps", choices=sorted(GAME_CONTRACTS))
    play.add_argument("--impl", type=str, default=None)
    play.add_argument("--seed", type=int, default=None)
    play.add_argument("--history", type=str, default=None)
    play.set_defaults(handler=_play)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)
    return args.handler(args)


if __name__ == "__main__":
    raise SystemExit(main())
