"""Structured exceptions raised by the game core and its drivers."""

from __future__ import annotations

from typing import Any

from .serialize import to_serializable


class GameCoreError(Exception):
    """Base class for game-core exceptions."""

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {"type": self.__class__.__name__, "message": str(self)}


class GradingError(GameCoreError):
    """Raised when an implementation disagrees with a fixed grading vector."""

    def __init__(
        self,
        message: str,
        *,
        check: str | None = None,
        expected: Any = None,
        actual: Any = None,
    ):
        self.check = check
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    @property
    def description(self) -> str:
        return str(self)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        if self.check is not None:
            payload["check"] = self.check
        if self.expected is not None:
            payload["expected"] = to_serializable(self.expected)
        if self.actual is not None:
            payload["actual"] = to_serializable(self.actual)
        return payload


class GameLoadError(GameCoreError):
    """Raised when a game implementation cannot be resolved or constructed."""

    def __init__(self, target: str, reason: str):
        self.target = target
        self.reason = reason
        super().__init__(f"Cannot load game {target!r}: {reason}")

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["target"] = self.target
        return payload
