from __future__ import annotations

from reversi.othello.grid import EMPTY, Grid, Position, opponent

# (row, col) steps: N, S, E, W, NE, NW, SE, SW
DIRECTIONS = [
    (-1, 0),
    (1, 0),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, -1),
    (1, 1),
    (1, -1),
]

LegalMoves = dict[Position, set[Position]]


def scan_ray(
    grid: Grid, origin: Position, player: int, direction: tuple[int, int]
) -> list[Position]:
    """
    Returns the opponent discs that playing `origin` would flip in one direction.
    The run only counts if it is closed off by a disc of `player`.
    """

    other = opponent(player)
    d_row, d_col = direction
    row, col = origin
    run: list[Position] = []

    while True:
        row += d_row
        col += d_col
        position = (row, col)

        if not grid.in_bounds(position):
            return []

        cell = grid.get(position)

        if cell == other:
            run.append(position)
            continue

        if cell == EMPTY:
            return []

        # Anchor found, but it may be directly adjacent to the origin.
        return run


def get_captures(grid: Grid, origin: Position, player: int) -> set[Position]:
    captures: set[Position] = set()

    for direction in DIRECTIONS:
        captures.update(scan_ray(grid, origin, player, direction))

    return captures


def get_legal_moves(grid: Grid, player: int) -> LegalMoves:
    legal_moves: LegalMoves = {}

    for position in grid.positions():
        if not grid.is_empty(position):
            continue

        captures = get_captures(grid, position, player)
        if captures:
            legal_moves[position] = captures

    return legal_moves
