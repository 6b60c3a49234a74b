import pytest
import random
from typing import Sequence, TypeVar

from reversi.agent import HeuristicAgent, most_captures
from reversi.othello.grid import O, X, Grid
from reversi.othello.moves import LegalMoves, get_legal_moves

T = TypeVar("T")


class FixedRandom(random.Random):
    """Coin flip with a fixed outcome; `choice` always takes the last item."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value

    def choice(self, seq: Sequence[T]) -> T:
        return seq[-1]


LEGAL_MOVES: LegalMoves = {
    (2, 0): {(2, 1), (1, 1)},
    (0, 2): {(1, 2)},
    (1, 3): {(1, 2), (1, 1)},
}


@pytest.mark.parametrize(
    ["legal_moves", "expected"],
    [
        pytest.param({(3, 3): {(2, 2)}}, (3, 3), id="single-move"),
        pytest.param(LEGAL_MOVES, (1, 3), id="tie-goes-to-row-major-first"),
        pytest.param(
            {(0, 0): {(0, 1)}, (3, 0): {(2, 0), (1, 0)}},
            (3, 0),
            id="most-captures",
        ),
    ],
)
def test_most_captures(legal_moves: LegalMoves, expected: tuple[int, int]) -> None:
    assert most_captures(legal_moves) == expected


def test_most_captures_empty() -> None:
    with pytest.raises(ValueError):
        most_captures({})


def test_agent_tails_plays_most_captures() -> None:
    agent = HeuristicAgent(FixedRandom(0.9))
    assert agent(X, LEGAL_MOVES) == (1, 3)


def test_agent_heads_plays_random_move() -> None:
    agent = HeuristicAgent(FixedRandom(0.1))

    # Candidates are offered in row-major order, the stub picks the last one.
    assert agent(X, LEGAL_MOVES) == (2, 0)


def test_agent_no_moves() -> None:
    agent = HeuristicAgent(random.Random(0))

    with pytest.raises(ValueError):
        agent(X, {})


def test_agent_picks_legal_move() -> None:
    grid = Grid.start(8)
    agent = HeuristicAgent.from_seed(7)

    for player in [X, O]:
        legal_moves = get_legal_moves(grid, player)
        for _ in range(20):
            assert agent(player, legal_moves) in legal_moves


def test_agent_seeded_is_deterministic() -> None:
    legal_moves = get_legal_moves(Grid.start(10), X)

    first = HeuristicAgent.from_seed(42)
    second = HeuristicAgent.from_seed(42)

    first_choices = [first(X, legal_moves) for _ in range(30)]
    second_choices = [second(X, legal_moves) for _ in range(30)]

    assert first_choices == second_choices
