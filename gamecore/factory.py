"""Factory helpers that build games through their no-argument constructor."""

from __future__ import annotations

import importlib
from typing import TypeVar

from .errors import GameLoadError
from .game import Game

GameT = TypeVar("GameT", bound=Game)


def load_game_class(path: str) -> type[Game]:
    """Resolve a `package.module:ClassName` path to a Game subclass."""
    module_name, sep, attr = path.strip().partition(":")
    if not sep or not module_name or not attr:
        raise GameLoadError(path, "expected 'package.module:ClassName'")

    try:
        module = importlib.import_module(module_name)
    except Exception as exc:
        raise GameLoadError(path, f"module import failed: {exc}") from exc

    target = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise GameLoadError(path, f"{module_name} has no attribute {attr!r}") from exc

    if not isinstance(target, type) or not issubclass(target, Game):
        raise GameLoadError(path, "target is not a Game subclass")
    return target


def create_game(game_cls: type[GameT], contract: type[Game] = Game) -> GameT:
    """Instantiate `game_cls` with no arguments, checking it refines `contract`."""
    label = getattr(game_cls, "__qualname__", repr(game_cls))
    if not isinstance(game_cls, type) or not issubclass(game_cls, contract):
        raise GameLoadError(label, f"does not implement {contract.__name__}")
    try:
        return game_cls()
    except Exception as exc:
        raise GameLoadError(label, f"default construction failed: {exc}") from exc


def load_game(path: str, contract: type[Game] = Game) -> Game:
    """Resolve and default-construct a game from its import path."""
    return create_game(load_game_class(path), contract)
