"""Rock-Paper-Scissors package exports."""

from .rps_game import DEFAULT_ROUNDS, ClassicRockPaperScissors, describe_turn

__all__ = [
    "ClassicRockPaperScissors",
    "DEFAULT_ROUNDS",
    "describe_turn",
]
