from __future__ import annotations

from typing import Callable, Iterable, Optional

from reversi.othello.grid import O, X, Grid, Position, opponent, player_name
from reversi.othello.moves import LegalMoves, get_legal_moves

# Receives the player to move and its legal moves, returns one of the keys.
MoveProvider = Callable[[int, LegalMoves], Position]


class IllegalMoveAttempt(Exception):
    def __init__(self, player: int, position: Position) -> None:
        super().__init__(f"Player {player_name(player)} cannot play {position}")
        self.player = player
        self.position = position


class MoveRecord:
    def __init__(self, player: int, position: Position, flipped: int) -> None:
        self.player = player
        self.position = position
        self.flipped = flipped

    def __repr__(self) -> str:
        return f"MoveRecord({player_name(self.player)}, {self.position})"

    def __str__(self) -> str:
        row, col = self.position
        name = player_name(self.player)
        return f"{name} plays {row + 1} {col + 1} (flips {self.flipped})"


class Tally:
    def __init__(self, x_count: int, o_count: int) -> None:
        self.x_count = x_count
        self.o_count = o_count

    def __repr__(self) -> str:
        return f"Tally(X={self.x_count}, O={self.o_count})"

    def get_count(self, player: int) -> int:
        assert player in [X, O]

        if player == X:
            return self.x_count
        return self.o_count

    def get_winner(self) -> Optional[int]:
        if self.x_count > self.o_count:
            return X
        if self.o_count > self.x_count:
            return O
        return None


class Game:
    def __init__(self, size: int, agents: Iterable[int] = ()) -> None:
        self.grid = Grid.start(size)
        self.agents = set(agents)
        assert self.agents <= {X, O}

        self.turn = X
        self.passes = 0
        self.history: list[MoveRecord] = []
        self.tally: Optional[Tally] = None

    def is_agent(self, player: int) -> bool:
        return player in self.agents

    def is_game_end(self) -> bool:
        return self.tally is not None

    def legal_moves(self) -> LegalMoves:
        return get_legal_moves(self.grid, self.turn)

    def count_tally(self) -> Tally:
        return Tally(self.grid.count(X), self.grid.count(O))

    def step(
        self, human_moves: MoveProvider, agent_moves: MoveProvider
    ) -> Optional[Tally]:
        """
        Plays one turn. Returns the final tally once the game has ended, None otherwise.
        Raises IllegalMoveAttempt without changing any state if the provider returns
        a position that is not a legal move, so the caller can simply step again.
        """

        if self.tally is not None:
            return self.tally

        legal_moves = self.legal_moves()

        if not legal_moves:
            if self.passes > 0:
                # Neither player can move.
                self.tally = self.count_tally()
                return self.tally

            self.passes += 1
            self.turn = opponent(self.turn)
            return None

        if self.is_agent(self.turn):
            position = agent_moves(self.turn, legal_moves)
        else:
            position = human_moves(self.turn, legal_moves)

        if position not in legal_moves:
            raise IllegalMoveAttempt(self.turn, position)

        captures = legal_moves[position]
        self.grid.place(position, self.turn, captures)
        self.history.append(MoveRecord(self.turn, position, len(captures)))

        self.passes = 0
        self.turn = opponent(self.turn)
        return None

    def play(self, human_moves: MoveProvider, agent_moves: MoveProvider) -> Tally:
        while True:
            tally = self.step(human_moves, agent_moves)
            if tally is not None:
                return tally
