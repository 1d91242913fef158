"""FastAPI server exposing the grading suite and reference games."""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, HTTPException

from gamecore.arena import match_payload
from gamecore.errors import GameLoadError
from gamecore.factory import load_game
from gamecore.game import ChutesAndLaddersGame, Game, RockPaperScissorsGame
from gamecore.runner import GradingRunner, RunnerConfig
from server.schemas import GradeRequest, PlayRequest

app = FastAPI(title="Game Core Grading API", version="0.1.0")

# Only these implementations can be loaded through the API.
GAME_REGISTRY: dict[str, tuple[str, type[Game]]] = {
    "rps": ("rock_paper_scissors:ClassicRockPaperScissors", RockPaperScissorsGame),
    "chutes": ("chutes_ladders:ClassicChutesAndLadders", ChutesAndLaddersGame),
}


def _resolve(key: str, contract: type[Game]) -> Game:
    if key not in GAME_REGISTRY:
        error = GameLoadError(key, f"not a registered game; expected one of {sorted(GAME_REGISTRY)}")
        raise HTTPException(status_code=400, detail=error.to_dict())
    try:
        return load_game(GAME_REGISTRY[key][0], contract)
    except GameLoadError as exc:
        raise HTTPException(status_code=400, detail=exc.to_dict()) from exc


@app.get("/api/health")
def health() -> dict[str, str]:
    """Healthcheck endpoint."""
    return {"status": "ok"}


@app.get("/api/games")
def list_games() -> dict[str, Any]:
    """List the registered reference implementations."""
    return {
        key: {"implementation": path, "contract": contract.__name__}
        for key, (path, contract) in GAME_REGISTRY.items()
    }


@app.post("/api/grade")
def grade(request: GradeRequest) -> dict[str, Any]:
    """Run the grading checks against the requested implementations."""
    rps_game = _resolve(request.rps, RockPaperScissorsGame) if request.rps else None
    chutes_game = _resolve(request.chutes, ChutesAndLaddersGame) if request.chutes else None
    if rps_game is None and chutes_game is None and request.rps_output is None:
        raise HTTPException(status_code=400, detail="Nothing to grade: supply rps, chutes, or rps_output.")

    runner = GradingRunner(RunnerConfig(stop_on_failure=request.stop_on_failure))
    report = runner.run(rps_game=rps_game, chutes_game=chutes_game, rps_output=request.rps_output)
    return report.to_dict()


@app.post("/api/play")
def play(request: PlayRequest) -> dict[str, Any]:
    """Play one full match with a registered implementation."""
    game = _resolve(request.game, GAME_REGISTRY[request.game][1])
    if request.seed is not None:
        game.seed = request.seed
    return match_payload(game, list(game.play()))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.main:app", host="0.0.0.0", port=8000, reload=True)
