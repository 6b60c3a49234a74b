from __future__ import annotations

import random
from typing import Optional

from reversi.othello.grid import Position
from reversi.othello.moves import LegalMoves


def most_captures(legal_moves: LegalMoves) -> Position:
    """Move flipping the most discs. Ties go to the first move in row-major order."""

    best_move: Optional[Position] = None
    best_count = -1

    for move in sorted(legal_moves):
        count = len(legal_moves[move])
        if count > best_count:
            best_count = count
            best_move = move

    if best_move is None:
        raise ValueError("No legal moves to choose from")

    return best_move


class HeuristicAgent:
    """
    Single-ply agent: half of the time it plays a random move,
    otherwise it plays the move that flips the most discs.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        if rng is None:
            rng = random.Random()
        self.rng = rng

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> HeuristicAgent:
        return HeuristicAgent(random.Random(seed))

    def __call__(self, player: int, legal_moves: LegalMoves) -> Position:
        _ = player

        if not legal_moves:
            raise ValueError("No legal moves to choose from")

        if self.rng.random() < 0.5:
            return self.rng.choice(sorted(legal_moves))

        return most_captures(legal_moves)
