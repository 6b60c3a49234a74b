import pygame
from typing import Optional

from reversi.arguments import GameArguments
from reversi.mode.game import GameMode
from reversi.othello.grid import EMPTY, O, X, Position, player_name

BOARD_SIZE_PX = 600

# Smallest square that still fits a visible disc.
MIN_SQUARE_PX = 12
MAX_BOARD_SIZE = BOARD_SIZE_PX // MIN_SQUARE_PX

COLOR_X_DISC = (0, 0, 0)
COLOR_O_DISC = (255, 255, 255)
COLOR_BACKGROUND = (0, 128, 0)
COLOR_GRID_LINE = (0, 96, 0)
COLOR_PLAYED_MOVE = (255, 0, 0)

DISC_COLORS = {X: COLOR_X_DISC, O: COLOR_O_DISC}

FRAME_RATE = 60


class NonMoveEvent(Exception):
    pass


def get_square_size(size: int) -> int:
    if size > MAX_BOARD_SIZE:
        raise ValueError(
            f"Board size must be at most {MAX_BOARD_SIZE} to fit in the window"
        )

    return BOARD_SIZE_PX // size


def get_position_from_pixel(x: int, y: int, square_size: int, size: int) -> Position:
    col = x // square_size
    row = y // square_size

    if not (row in range(size) and col in range(size)):
        raise NonMoveEvent

    return (row, col)


class Window:
    def __init__(self, args: GameArguments) -> None:
        self.size = args.board_size
        self.square_size = get_square_size(self.size)

        pygame.init()
        self.mode = GameMode(args)
        self.disc_radius = self.square_size // 2 - max(2, self.square_size // 15)
        self.indicator_radius = max(2, self.square_size // 8)

        side = self.square_size * self.size
        self.screen = pygame.display.set_mode((side, side))
        self.clock = pygame.time.Clock()

        pygame.display.set_caption("Reversi")

    def run(self) -> None:
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break

                try:
                    move = self.get_move_from_event(event)
                except NonMoveEvent:
                    continue

                self.mode.on_move(move)

            self.mode.on_frame()
            self.draw()
            self.clock.tick(FRAME_RATE)

        pygame.quit()

    def get_square_center(self, position: Position) -> tuple[int, int]:
        row, col = position

        x = col * self.square_size + self.square_size // 2
        y = row * self.square_size + self.square_size // 2

        return (x, y)

    def draw_disc(self, position: Position, color: tuple[int, int, int]) -> None:
        center = self.get_square_center(position)
        pygame.draw.circle(self.screen, color, center, self.disc_radius)

    def draw_move_indicator(
        self, position: Position, color: tuple[int, int, int]
    ) -> None:
        center = self.get_square_center(position)
        pygame.draw.circle(self.screen, color, center, self.indicator_radius)

    def draw_grid_lines(self) -> None:
        side = self.square_size * self.size

        for i in range(1, self.size):
            offset = i * self.square_size
            pygame.draw.line(self.screen, COLOR_GRID_LINE, (offset, 0), (offset, side))
            pygame.draw.line(self.screen, COLOR_GRID_LINE, (0, offset), (side, offset))

    def get_caption(self) -> str:
        game = self.mode.get_game()

        if game.tally is None:
            return f"Reversi - {player_name(game.turn)} to move"

        winner = game.tally.get_winner()
        score = f"X {game.tally.x_count} - O {game.tally.o_count}"

        if winner is None:
            return f"Reversi - draw, {score}"
        return f"Reversi - {player_name(winner)} wins, {score}"

    def draw(self) -> None:
        game = self.mode.get_game()

        ui_details = self.mode.get_ui_details()
        possible_moves: set[Position] = ui_details.pop("possible_moves", set())
        played_move: Optional[Position] = ui_details.pop("played_move", None)

        if ui_details:
            print(
                "WARNING: found unused ui details key(s): "
                + ", ".join(sorted(ui_details))
            )

        self.screen.fill(COLOR_BACKGROUND)
        self.draw_grid_lines()

        turn_color = DISC_COLORS[game.turn]

        for position in game.grid.positions():
            cell = game.grid.get(position)

            if cell != EMPTY:
                self.draw_disc(position, DISC_COLORS[cell])
            elif position in possible_moves:
                self.draw_move_indicator(position, turn_color)

            if position == played_move:
                self.draw_move_indicator(position, COLOR_PLAYED_MOVE)

        pygame.display.set_caption(self.get_caption())
        pygame.display.flip()

    def get_move_from_event(self, event: pygame.event.Event) -> Position:
        if event.type != pygame.MOUSEBUTTONDOWN:
            raise NonMoveEvent

        if event.button != pygame.BUTTON_LEFT:
            raise NonMoveEvent

        x, y = event.pos
        return get_position_from_pixel(x, y, self.square_size, self.size)
