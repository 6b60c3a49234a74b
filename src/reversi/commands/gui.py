# Don't complain about setting env var in the middle of imports.
# ruff: noqa: E402

import os
import typer
from typing import Annotated, Optional

# Disable pygame start-up text.
# This needs to be before first pygame import.
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.commands.play import collect_arguments
from reversi.window import MAX_BOARD_SIZE, Window

app = typer.Typer(pretty_exceptions_enable=False)


@app.command()
def main(
    size: Annotated[Optional[int], typer.Option("--size", "-s")] = None,
    players: Annotated[Optional[int], typer.Option("--players", "-p")] = None,
    show_moves: Annotated[
        Optional[bool], typer.Option("--show-moves/--hide-moves", "-m/-M")
    ] = None,
    seed: Annotated[Optional[int], typer.Option("--seed")] = None,
) -> None:
    """Play reversi in a window"""
    args = collect_arguments(size, players, show_moves, seed)

    if args.board_size > MAX_BOARD_SIZE:
        print(f"Invalid board_size: the window fits at most {MAX_BOARD_SIZE} squares")
        raise typer.Exit(1)

    Window(args).run()


if __name__ == "__main__":
    app()
