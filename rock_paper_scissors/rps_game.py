"""Reference Rock-Paper-Scissors implementation."""

from __future__ import annotations

import random

from gamecore.game import RockPaperScissorsGame
from gamecore.turns import GameTurn, RPSTurn
from gamecore.values import HandShape, Player

DEFAULT_ROUNDS = 5


def describe_turn(turn: RPSTurn) -> str:
    """Render a round as e.g. 'Player 1 Wins: 📄 paper vs 🪨 rock'."""
    matchup = (
        f"{turn.player1.symbol} {turn.player1.value} vs {turn.player2.symbol} {turn.player2.value}"
    )
    if turn.winner is None:
        return f"Tie: {matchup}"
    return f"{turn.winner.label} Wins: {matchup}"


class ClassicRockPaperScissors(RockPaperScissorsGame):
    """Standard rules with a seeded random full-match simulation."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS, seed: int | None = None):
        if rounds < 1:
            raise ValueError("rounds must be at least 1.")
        self.rounds = rounds
        self.seed = seed

    @property
    def name(self) -> str:
        return "Rock Paper Scissors"

    def turn(self, player1: HandShape, player2: HandShape) -> RPSTurn:
        if player1 is player2:
            winner = None
        elif player1.beats(player2):
            winner = Player.ONE
        else:
            winner = Player.TWO
        return RPSTurn(player1=player1, player2=player2, winner=winner)

    def play(self) -> list[GameTurn]:
        rng = random.Random(self.seed)
        shapes = list(HandShape)
        return [self.turn(rng.choice(shapes), rng.choice(shapes)) for _ in range(self.rounds)]

    def __str__(self) -> str:
        return f"{self.name} ({self.rounds} rounds)"
