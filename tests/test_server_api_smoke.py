"""Smoke tests for the local FastAPI grading API."""

from __future__ import annotations

import pytest
from fastapi import HTTPException

import server.main as main_module
from server.main import grade, health, list_games, play
from server.schemas import GradeRequest, PlayRequest


def _grade(payload: dict) -> dict:
    return grade(GradeRequest.model_validate(payload))


def _play(payload: dict) -> dict:
    return play(PlayRequest.model_validate(payload))


def test_health_and_registry() -> None:
    assert health() == {"status": "ok"}
    games = list_games()
    assert games["rps"]["contract"] == "RockPaperScissorsGame"
    assert games["chutes"]["contract"] == "ChutesAndLaddersGame"


def test_grade_registered_games_by_short_name() -> None:
    report = _grade({"rps": "rps", "chutes": "chutes", "rps_output": "Player 1 Wins: paper vs rock"})

    assert report["passed"] is True
    assert [check["name"] for check in report["checks"]] == ["rps_logic", "rps_string", "chutes_logic"]


def test_grade_reports_string_failure() -> None:
    report = _grade({"rps_output": "Player 1 Wins with paper"})

    assert report["passed"] is False
    failed = [check for check in report["checks"] if not check["passed"] and not check["skipped"]]
    assert failed[0]["name"] == "rps_string"
    assert "must contain 'vs'" in failed[0]["message"]


def test_grade_rejects_wrong_contract() -> None:
    with pytest.raises(HTTPException) as excinfo:
        _grade({"rps": "chutes"})
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail["type"] == "GameLoadError"
    assert "does not implement RockPaperScissorsGame" in excinfo.value.detail["message"]


def test_grade_only_loads_registered_games(monkeypatch: pytest.MonkeyPatch) -> None:
    def _fail_load(*args, **kwargs):
        raise AssertionError("import paths from requests must not be loaded")

    monkeypatch.setattr(main_module, "load_game", _fail_load)
    with pytest.raises(HTTPException) as excinfo:
        _grade({"rps": "chutes_ladders:ClassicChutesAndLadders"})
    assert excinfo.value.status_code == 400
    assert excinfo.value.detail["type"] == "GameLoadError"
    assert "not a registered game" in excinfo.value.detail["message"]


def test_grade_requires_some_input() -> None:
    with pytest.raises(HTTPException) as excinfo:
        _grade({})
    assert excinfo.value.status_code == 400


def test_play_returns_serialized_history() -> None:
    payload = _play({"game": "chutes", "seed": 2})

    assert payload["name"] == "Chutes and Ladders"
    assert payload["turns"][-1]["end_square"] == 100
    assert all(turn["type"] == "board" for turn in payload["turns"])
    assert len(payload["history_digest"]) == 64
    assert payload == _play({"game": "chutes", "seed": 2})
