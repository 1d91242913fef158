"""Tests for the fixed grading oracle."""

from __future__ import annotations

import pytest

from chutes_ladders import ClassicChutesAndLadders
from gamecore.errors import GradingError
from gamecore.game import ChutesAndLaddersGame, RockPaperScissorsGame
from gamecore.grader import CHUTES_LOGIC_VECTORS, RPS_LOGIC_VECTORS, Grader
from gamecore.turns import BoardTurn, RPSTurn
from gamecore.values import HandShape, Player
from rock_paper_scissors import ClassicRockPaperScissors, describe_turn


class _RecordingRPS(RockPaperScissorsGame):
    """Returns a scripted winner per call and records the inputs it saw."""

    def __init__(self, winners: list[Player | None] | None = None):
        self.winners = list(winners or [])
        self.calls: list[tuple[HandShape, HandShape]] = []

    @property
    def name(self) -> str:
        return "scripted"

    def turn(self, player1: HandShape, player2: HandShape) -> RPSTurn:
        self.calls.append((player1, player2))
        return RPSTurn(player1=player1, player2=player2, winner=self.winners[len(self.calls) - 1])

    def play(self) -> list:
        return []


class _NoLaddersChutes(ChutesAndLaddersGame):
    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    @property
    def name(self) -> str:
        return "flat board"

    def turn(self, current_square: int, roll: int) -> BoardTurn:
        self.calls.append((current_square, roll))
        return BoardTurn(roll=roll, end_square=min(current_square + roll, 100))

    def play(self) -> list:
        return []


class _LaddersOnlyChutes(_NoLaddersChutes):
    def turn(self, current_square: int, roll: int) -> BoardTurn:
        self.calls.append((current_square, roll))
        landed = current_square + roll
        return BoardTurn(roll=roll, end_square=14 if landed == 4 else landed)


def test_reference_rps_passes_logic_check(capsys: pytest.CaptureFixture[str]) -> None:
    Grader.verify_rps_logic(ClassicRockPaperScissors())
    output = capsys.readouterr().out
    assert "Verifying RPS Logic" in output
    assert "RPS Logic Passed" in output


def test_rps_vectors_run_in_fixed_order() -> None:
    game = _RecordingRPS([Player.ONE, Player.TWO, None])
    Grader.verify_rps_logic(game)
    assert game.calls == [(vector.player1, vector.player2) for vector in RPS_LOGIC_VECTORS]
    assert game.calls == [
        (HandShape.PAPER, HandShape.ROCK),
        (HandShape.ROCK, HandShape.PAPER),
        (HandShape.SCISSORS, HandShape.SCISSORS),
    ]


def test_rps_player_one_failure_short_circuits(capsys: pytest.CaptureFixture[str]) -> None:
    game = _RecordingRPS([Player.TWO, Player.TWO, None])
    with pytest.raises(GradingError, match=r"Paper \(P1\) vs Rock \(P2\) should be Player 1 Win") as excinfo:
        Grader.verify_rps_logic(game)

    assert len(game.calls) == 1
    assert excinfo.value.expected is Player.ONE
    assert excinfo.value.actual is Player.TWO
    assert "Passed" not in capsys.readouterr().out


def test_rps_player_two_failure_is_reported() -> None:
    game = _RecordingRPS([Player.ONE, Player.ONE, None])
    with pytest.raises(GradingError, match="should be Player 2 Win"):
        Grader.verify_rps_logic(game)
    assert len(game.calls) == 2


def test_rps_tie_failure_is_reported() -> None:
    game = _RecordingRPS([Player.ONE, Player.TWO, Player.ONE])
    with pytest.raises(GradingError, match="Scissors vs Scissors should be a Tie") as excinfo:
        Grader.verify_rps_logic(game)
    assert excinfo.value.check == "rps_logic"
    assert excinfo.value.to_dict()["actual"] == "one"


def test_rps_logic_rejects_wrong_contract() -> None:
    with pytest.raises(GradingError, match="does not implement RockPaperScissorsGame"):
        Grader.verify_rps_logic(ClassicChutesAndLadders())  # type: ignore[arg-type]


def test_rps_logic_rejects_wrong_record_type() -> None:
    class _WrongRecord(_RecordingRPS):
        def turn(self, player1: HandShape, player2: HandShape) -> RPSTurn:
            return BoardTurn(roll=1, end_square=1)  # type: ignore[return-value]

    with pytest.raises(GradingError, match="must return RPSTurn"):
        Grader.verify_rps_logic(_WrongRecord())


@pytest.mark.parametrize(
    "output",
    [
        "Player 1 Wins: paper vs rock",
        "Player 1 (paper) vs Player 2 (rock)",
        describe_turn(ClassicRockPaperScissors().turn(HandShape.PAPER, HandShape.ROCK)),
    ],
)
def test_rps_string_accepts_player_one_win(output: str) -> None:
    Grader.verify_rps_string(output)


def test_rps_string_requires_player_one() -> None:
    with pytest.raises(GradingError, match="must identify 'Player 1 Wins'. Got: Player 2 Wins: rock vs paper"):
        Grader.verify_rps_string("Player 2 Wins: rock vs paper")


def test_rps_string_requires_separator() -> None:
    with pytest.raises(GradingError, match="must contain 'vs'. Got: Player 1 Wins with paper"):
        Grader.verify_rps_string("Player 1 Wins with paper")


def test_rps_string_checks_player_before_separator() -> None:
    with pytest.raises(GradingError, match="Player 1 Wins"):
        Grader.verify_rps_string("no winner and no separator")


def test_reference_chutes_passes_logic_check(capsys: pytest.CaptureFixture[str]) -> None:
    Grader.verify_chutes_logic(ClassicChutesAndLadders())
    assert "Chutes Logic Passed" in capsys.readouterr().out


def test_chutes_ladder_failure_short_circuits() -> None:
    game = _NoLaddersChutes()
    with pytest.raises(GradingError, match="0 \\+ 4 is a ladder to 14. Got: 4") as excinfo:
        Grader.verify_chutes_logic(game)

    assert game.calls == [(0, 4)]
    assert excinfo.value.expected == 14
    assert excinfo.value.actual == 4


def test_chutes_chute_failure_reports_expected_and_actual() -> None:
    game = _LaddersOnlyChutes()
    with pytest.raises(GradingError, match=r"Landed on 17 \(Chute\). Should be 7. Got: 17"):
        Grader.verify_chutes_logic(game)
    assert game.calls == [(vector.current_square, vector.roll) for vector in CHUTES_LOGIC_VECTORS]


def test_chutes_logic_rejects_wrong_contract() -> None:
    with pytest.raises(GradingError, match="does not implement ChutesAndLaddersGame"):
        Grader.verify_chutes_logic(ClassicRockPaperScissors())  # type: ignore[arg-type]


def test_vectors_are_immutable() -> None:
    assert isinstance(RPS_LOGIC_VECTORS, tuple)
    assert isinstance(CHUTES_LOGIC_VECTORS, tuple)
    with pytest.raises(AttributeError):
        CHUTES_LOGIC_VECTORS[0].end_square = 4  # type: ignore[misc]


def test_progress_and_failure_text_carry_status_markers(capsys: pytest.CaptureFixture[str]) -> None:
    Grader.verify_chutes_logic(ClassicChutesAndLadders())
    output = capsys.readouterr().out
    assert "🔍 Grader: Verifying Chutes Logic..." in output
    assert "✅ Chutes Logic Passed" in output

    with pytest.raises(GradingError) as excinfo:
        Grader.verify_rps_string("Player 2 Wins: rock vs paper")
    assert str(excinfo.value).startswith("❌ String Fail:")
