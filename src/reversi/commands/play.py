import typer
from pydantic import ValidationError
from typing import Annotated, Any, Callable, Optional

from reversi import config
from reversi.agent import HeuristicAgent
from reversi.arguments import GameArguments
from reversi.othello.game import Game, Tally
from reversi.othello.grid import player_name
from reversi.terminal import TerminalPlayer

app = typer.Typer(pretty_exceptions_enable=False)


def collect_arguments(
    size: Optional[int],
    players: Optional[int],
    show_moves: Optional[bool],
    seed: Optional[int],
) -> GameArguments:
    values: dict[str, Any] = {
        "board_size": config.get_board_size() if size is None else size,
        "players": config.get_players() if players is None else players,
        "show_moves": config.get_show_moves() if show_moves is None else show_moves,
        "seed": config.get_seed() if seed is None else seed,
    }

    try:
        return GameArguments.model_validate(values)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(loc) for loc in error["loc"])
            print(f"Invalid {field}: {error['msg']}")
        raise typer.Exit(1)


def print_result(game: Game, tally: Tally) -> None:
    game.grid.show()
    print(f"Final score: X {tally.x_count} - O {tally.o_count}")

    winner = tally.get_winner()
    if winner is None:
        print("The game is a draw.")
    else:
        print(f"Player {player_name(winner)} wins!")


def run_game(args: GameArguments, input_func: Callable[[str], str] = input) -> Tally:
    game = Game(args.board_size, args.get_agents())
    agent = HeuristicAgent.from_seed(args.seed)
    human = TerminalPlayer(game.grid, args.show_moves, input_func)

    # Nobody is prompted when only agents play, so print moves as they happen.
    watching = args.players == 0

    while True:
        turn = game.turn
        move_count = len(game.history)

        tally = game.step(human, agent)
        if tally is not None:
            break

        if len(game.history) == move_count:
            print(f"Player {player_name(turn)} has no legal moves and passes.")
        elif watching:
            print(game.history[-1])

    print_result(game, tally)
    return tally


@app.command()
def main(
    size: Annotated[Optional[int], typer.Option("--size", "-s")] = None,
    players: Annotated[Optional[int], typer.Option("--players", "-p")] = None,
    show_moves: Annotated[
        Optional[bool], typer.Option("--show-moves/--hide-moves", "-m/-M")
    ] = None,
    seed: Annotated[Optional[int], typer.Option("--seed")] = None,
) -> None:
    """Play reversi in the terminal"""
    args = collect_arguments(size, players, show_moves, seed)

    while True:
        try:
            run_game(args)
        except EOFError:
            # Input closed at the move prompt.
            print()
            raise typer.Exit(1)

        if not typer.confirm("Play again?", default=False):
            break


if __name__ == "__main__":
    app()
