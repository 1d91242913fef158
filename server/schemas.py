"""Pydantic request schemas for the grading API."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel


GameKind = Literal["rps", "chutes"]


class GradeRequest(BaseModel):
    """Request body for a grading run. Omitted inputs are skipped."""

    rps: str | None = None
    chutes: str | None = None
    rps_output: str | None = None
    stop_on_failure: bool = False


class PlayRequest(BaseModel):
    """Request body for playing one simulated match."""

    game: GameKind = "rps"
    seed: int | None = None
