from __future__ import annotations

from typing import Iterable, Iterator

X = -1
O = 1
EMPTY = 0

MIN_SIZE = 4

SYMBOLS = {X: "X", O: "O", EMPTY: "."}
HIGHLIGHT_SYMBOL = "*"

Position = tuple[int, int]


class InvalidSizeError(Exception):
    pass


class OccupiedCellError(Exception):
    pass


class EmptyCellFlipError(Exception):
    pass


def opponent(player: int) -> int:
    assert player in [X, O]
    return -player


def player_name(player: int) -> str:
    assert player in [X, O]
    return SYMBOLS[player]


class Grid:
    """
    Square board of cells, stored row-major. Each cell holds EMPTY, X or O.
    """

    def __init__(self, size: int, cells: list[int]) -> None:
        if size < MIN_SIZE:
            raise InvalidSizeError(
                f"Board size must be at least {MIN_SIZE}, got {size}"
            )

        assert len(cells) == size * size
        assert all(cell in [X, O, EMPTY] for cell in cells)

        self.size = size
        self.cells = cells

    @classmethod
    def empty(cls, size: int) -> Grid:
        return Grid(size, [EMPTY] * size * size)

    @classmethod
    def start(cls, size: int) -> Grid:
        grid = cls.empty(size)
        c = size // 2

        grid.cells[grid.index((c - 1, c - 1))] = X
        grid.cells[grid.index((c, c))] = X
        grid.cells[grid.index((c - 1, c))] = O
        grid.cells[grid.index((c, c - 1))] = O
        return grid

    @classmethod
    def from_rows(cls, rows: list[str]) -> Grid:
        size = len(rows)
        cells: list[int] = []

        for row in rows:
            if len(row) != size:
                raise ValueError(f"Expected row of length {size}, got {row!r}")

            for char in row:
                if char == "X":
                    cells.append(X)
                elif char == "O":
                    cells.append(O)
                elif char == ".":
                    cells.append(EMPTY)
                else:
                    raise ValueError(f'Invalid cell "{char}"')

        return Grid(size, cells)

    def __repr__(self) -> str:
        rows = [
            "".join(SYMBOLS[cell] for cell in self.row(r)) for r in range(self.size)
        ]
        return f"Grid({rows})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            raise TypeError(f"Cannot compare Grid with {type(other)}")

        return (self.size, self.cells) == (other.size, other.cells)

    def copy(self) -> Grid:
        return Grid(self.size, list(self.cells))

    def in_bounds(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.size and 0 <= col < self.size

    def index(self, position: Position) -> int:
        if not self.in_bounds(position):
            raise IndexError(
                f"Position {position} is outside a {self.size}x{self.size} board"
            )

        row, col = position
        return row * self.size + col

    def positions(self) -> Iterator[Position]:
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def row(self, row: int) -> list[int]:
        return self.cells[row * self.size : (row + 1) * self.size]

    def get(self, position: Position) -> int:
        return self.cells[self.index(position)]

    def is_empty(self, position: Position) -> bool:
        return self.get(position) == EMPTY

    def place(
        self, position: Position, player: int, captures: Iterable[Position]
    ) -> None:
        assert player in [X, O]

        index = self.index(position)
        if self.cells[index] != EMPTY:
            raise OccupiedCellError(f"Cannot place on occupied cell {position}")

        # Validate everything first so a failed placement leaves the grid untouched.
        capture_indexes: list[int] = []
        for capture in captures:
            capture_index = self.index(capture)
            if self.cells[capture_index] == EMPTY:
                raise EmptyCellFlipError(f"Cannot flip empty cell {capture}")
            capture_indexes.append(capture_index)

        self.cells[index] = player
        for capture_index in capture_indexes:
            self.cells[capture_index] = opponent(self.cells[capture_index])

    def count(self, player: int) -> int:
        assert player in [X, O]
        return self.cells.count(player)

    def count_empties(self) -> int:
        return self.cells.count(EMPTY)

    def to_string(self, highlight: Iterable[Position] = ()) -> str:
        highlighted = {self.index(position) for position in highlight}
        width = len(str(self.size))

        header = " " * (width + 1) + " ".join(
            f"{col + 1:>{width}}" for col in range(self.size)
        )
        lines = [header]

        for row in range(self.size):
            squares: list[str] = []
            for col in range(self.size):
                index = row * self.size + col
                cell = self.cells[index]

                if cell == EMPTY and index in highlighted:
                    square = HIGHLIGHT_SYMBOL
                else:
                    square = SYMBOLS[cell]
                squares.append(f"{square:>{width}}")

            lines.append(f"{row + 1:>{width}} " + " ".join(squares))

        return "\n".join(lines)

    def show(self, highlight: Iterable[Position] = ()) -> None:
        print(self.to_string(highlight))
