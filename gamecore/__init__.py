"""Game core exports: value types, turn records, contracts, and the grader."""

from .errors import GameCoreError, GameLoadError, GradingError
from .game import ChutesAndLaddersGame, Game, RockPaperScissorsGame
from .grader import Grader
from .runner import CheckResult, GradeReport, GradingRunner, RunnerConfig
from .turns import BoardTurn, GameTurn, RPSTurn, turn_from_dict
from .values import HandShape, Player

__all__ = [
    "BoardTurn",
    "CheckResult",
    "ChutesAndLaddersGame",
    "Game",
    "GameCoreError",
    "GameLoadError",
    "GameTurn",
    "GradeReport",
    "Grader",
    "GradingError",
    "GradingRunner",
    "HandShape",
    "Player",
    "RPSTurn",
    "RockPaperScissorsGame",
    "RunnerConfig",
    "turn_from_dict",
]
