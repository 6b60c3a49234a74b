from __future__ import annotations

from typing import Callable

from reversi.othello.grid import Grid, Position, player_name
from reversi.othello.moves import LegalMoves

CLEAR_SCREEN = "\033[2J\033[H"

PROMPT = "Enter your move (row and column, e.g., '3 4'): "


class InvalidInput(ValueError):
    pass


def parse_move(text: str, size: int) -> Position:
    words = text.split()

    try:
        row, col = [int(word) for word in words]
    except ValueError:
        raise InvalidInput("Invalid input. Please enter two numbers.")

    if not 1 <= row <= size:
        problem = "too small" if row < 1 else "too large"
        raise InvalidInput(f"Invalid row: {row} ({problem}).")

    if not 1 <= col <= size:
        problem = "too small" if col < 1 else "too large"
        raise InvalidInput(f"Invalid column: {col} ({problem}).")

    return (row - 1, col - 1)


class TerminalPlayer:
    """Asks a human for moves on the terminal until a legal one is entered."""

    def __init__(
        self,
        grid: Grid,
        show_moves: bool,
        input_func: Callable[[str], str] = input,
        clear_screen: bool = True,
    ) -> None:
        self.grid = grid
        self.show_moves = show_moves
        self.input_func = input_func
        self.clear_screen = clear_screen

    def __call__(self, player: int, legal_moves: LegalMoves) -> Position:
        error_message = ""

        while True:
            if self.clear_screen:
                print(CLEAR_SCREEN, end="")

            print(f"Player {player_name(player)}'s turn.")

            if self.show_moves:
                self.grid.show(legal_moves)
            else:
                self.grid.show()

            if error_message:
                print(error_message)

            text = self.input_func(PROMPT)

            try:
                move = parse_move(text, self.grid.size)
            except InvalidInput as e:
                error_message = str(e)
                continue

            if move not in legal_moves:
                error_message = "Invalid move. Please choose an empty and valid spot."
                continue

            return move
