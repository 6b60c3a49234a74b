import os
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

# Values are returned as strings, GameArguments converts and validates them.


def get_board_size() -> str:
    return os.getenv("REVERSI_BOARD_SIZE", "8")


def get_players() -> str:
    return os.getenv("REVERSI_PLAYERS", "1")


def get_show_moves() -> str:
    return os.getenv("REVERSI_SHOW_MOVES", "0")


def get_seed() -> Optional[str]:
    seed = os.getenv("REVERSI_SEED")
    if not seed:
        return None
    return seed
