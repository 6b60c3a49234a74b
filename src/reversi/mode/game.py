from __future__ import annotations

import pygame
from typing import Any

from reversi.agent import HeuristicAgent
from reversi.arguments import GameArguments
from reversi.othello.game import Game, MoveProvider
from reversi.othello.grid import Position
from reversi.othello.moves import LegalMoves

# Pause before an agent moves, so the human can follow the game.
AGENT_DELAY_MS = 400


class NoHumanMove(Exception):
    pass


class GameMode:
    def __init__(
        self, args: GameArguments, agent_delay_ms: int = AGENT_DELAY_MS
    ) -> None:
        self.args = args
        self.agent_delay_ms = agent_delay_ms
        self.new_game()

    def new_game(self) -> None:
        self.game = Game(self.args.board_size, self.args.get_agents())
        self.agent = HeuristicAgent.from_seed(self.args.seed)
        self.legal_moves = self.game.legal_moves()
        self.last_step_ticks = pygame.time.get_ticks()

    def get_game(self) -> Game:
        return self.game

    def is_human_turn(self) -> bool:
        return not self.game.is_agent(self.game.turn)

    def on_move(self, position: Position) -> None:
        if self.game.is_game_end():
            # Restart game
            self.new_game()
            return

        if not self.is_human_turn() or position not in self.legal_moves:
            return

        def human_moves(player: int, legal_moves: LegalMoves) -> Position:
            return position

        self.step(human_moves)

    def on_frame(self) -> None:
        if self.game.is_game_end():
            return

        if self.is_human_turn() and self.legal_moves:
            # Waiting for a click.
            return

        if pygame.time.get_ticks() - self.last_step_ticks < self.agent_delay_ms:
            return

        self.step(self.no_human_move)

    def no_human_move(self, player: int, legal_moves: LegalMoves) -> Position:
        raise NoHumanMove

    def step(self, human_moves: MoveProvider) -> None:
        self.game.step(human_moves, self.agent)
        self.legal_moves = self.game.legal_moves()
        self.last_step_ticks = pygame.time.get_ticks()

    def get_ui_details(self) -> dict[str, Any]:
        details: dict[str, Any] = {}

        show_moves = self.args.show_moves and self.is_human_turn()

        if show_moves and not self.game.is_game_end():
            details["possible_moves"] = set(self.legal_moves)

        if self.game.history:
            details["played_move"] = self.game.history[-1].position

        return details
