"""Fixed grading oracle for the game contracts.

The vectors below are part of the contract. They are module constants and
no check accepts anything besides the implementation (or rendered text)
under test.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import GradingError
from .game import ChutesAndLaddersGame, RockPaperScissorsGame
from .turns import BoardTurn, RPSTurn
from .values import HandShape, Player

RPS_LOGIC_CHECK = "rps_logic"
RPS_STRING_CHECK = "rps_string"
CHUTES_LOGIC_CHECK = "chutes_logic"


@dataclass(frozen=True)
class RPSVector:
    """One Rock-Paper-Scissors input with its required winner."""

    player1: HandShape
    player2: HandShape
    winner: Player | None
    failure: str


@dataclass(frozen=True)
class BoardVector:
    """One board move with its required end square."""

    current_square: int
    roll: int
    end_square: int
    failure: str


RPS_LOGIC_VECTORS: tuple[RPSVector, ...] = (
    RPSVector(HandShape.PAPER, HandShape.ROCK, Player.ONE, "Paper (P1) vs Rock (P2) should be Player 1 Win."),
    RPSVector(HandShape.ROCK, HandShape.PAPER, Player.TWO, "Rock (P1) vs Paper (P2) should be Player 2 Win."),
    RPSVector(HandShape.SCISSORS, HandShape.SCISSORS, None, "Scissors vs Scissors should be a Tie (None)."),
)

CHUTES_LOGIC_VECTORS: tuple[BoardVector, ...] = (
    BoardVector(0, 4, 14, "0 + 4 is a ladder to 14."),
    BoardVector(10, 7, 7, "Landed on 17 (Chute). Should be 7."),
)

PLAYER_ONE_WIN_MARKERS: tuple[str, ...] = ("Player 1 Wins", "Player 1")
SEPARATOR_TOKEN = "vs"


def _winner_label(winner: Any) -> str:
    if winner is None:
        return "Tie (None)"
    if isinstance(winner, Player):
        return winner.label
    return repr(winner)


class Grader:
    """Stateless verification checks run against a supplied implementation.

    Each check prints a progress line, raises `GradingError` on the first
    violated expectation, and returns None when every expectation holds.
    """

    @staticmethod
    def verify_rps_logic(game: RockPaperScissorsGame) -> None:
        """Verify player 1 win, player 2 win, and tie resolution, in that order."""
        print("🔍 Grader: Verifying RPS Logic...")
        if not isinstance(game, RockPaperScissorsGame):
            raise GradingError(
                f"❌ Contract Fail: {type(game).__name__} does not implement RockPaperScissorsGame.",
                check=RPS_LOGIC_CHECK,
            )

        for vector in RPS_LOGIC_VECTORS:
            result = game.turn(vector.player1, vector.player2)
            if not isinstance(result, RPSTurn):
                raise GradingError(
                    f"❌ Contract Fail: turn() must return RPSTurn. Got: {type(result).__name__}",
                    check=RPS_LOGIC_CHECK,
                )
            if result.winner is not vector.winner:
                raise GradingError(
                    f"❌ Logic Fail: {vector.failure} Got: {_winner_label(result.winner)}",
                    check=RPS_LOGIC_CHECK,
                    expected=vector.winner,
                    actual=result.winner,
                )

        print("✅ RPS Logic Passed")

    @staticmethod
    def verify_rps_string(output: str) -> None:
        """Verify a rendered round names the player 1 win and uses the "vs" separator."""
        print("🔍 Grader: Verifying RPS String Format...")
        if not isinstance(output, str):
            raise GradingError(
                f"❌ String Fail: Output must be text. Got: {type(output).__name__}",
                check=RPS_STRING_CHECK,
            )

        if not any(marker in output for marker in PLAYER_ONE_WIN_MARKERS):
            raise GradingError(
                f"❌ String Fail: Output must identify 'Player 1 Wins'. Got: {output}",
                check=RPS_STRING_CHECK,
                actual=output,
            )

        if SEPARATOR_TOKEN not in output:
            raise GradingError(
                f"❌ String Fail: Output must contain '{SEPARATOR_TOKEN}'. Got: {output}",
                check=RPS_STRING_CHECK,
                actual=output,
            )

        print("✅ RPS Printing Passed")

    @staticmethod
    def verify_chutes_logic(game: ChutesAndLaddersGame) -> None:
        """Verify the ladder and chute checkpoints, in that order."""
        print("🔍 Grader: Verifying Chutes Logic...")
        if not isinstance(game, ChutesAndLaddersGame):
            raise GradingError(
                f"❌ Contract Fail: {type(game).__name__} does not implement ChutesAndLaddersGame.",
                check=CHUTES_LOGIC_CHECK,
            )

        for vector in CHUTES_LOGIC_VECTORS:
            result = game.turn(vector.current_square, vector.roll)
            if not isinstance(result, BoardTurn):
                raise GradingError(
                    f"❌ Contract Fail: turn() must return BoardTurn. Got: {type(result).__name__}",
                    check=CHUTES_LOGIC_CHECK,
                )
            if result.end_square != vector.end_square:
                raise GradingError(
                    f"❌ Logic Fail: {vector.failure} Got: {result.end_square}",
                    check=CHUTES_LOGIC_CHECK,
                    expected=vector.end_square,
                    actual=result.end_square,
                )

        print("✅ Chutes Logic Passed")
