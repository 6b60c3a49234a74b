import pytest

from reversi.othello.grid import X, Grid, Position
from reversi.othello.moves import get_legal_moves
from reversi.terminal import PROMPT, InvalidInput, TerminalPlayer, parse_move


@pytest.mark.parametrize(
    ["text", "expected"],
    [
        pytest.param("1 1", (0, 0), id="top-left"),
        pytest.param("8 8", (7, 7), id="bottom-right"),
        pytest.param("  3   4 ", (2, 3), id="extra-whitespace"),
    ],
)
def test_parse_move_ok(text: str, expected: Position) -> None:
    assert parse_move(text, 8) == expected


@pytest.mark.parametrize(
    ["text", "error_message"],
    [
        pytest.param("", "Invalid input. Please enter two numbers.", id="empty"),
        pytest.param("3", "Invalid input. Please enter two numbers.", id="one-number"),
        pytest.param("1 2 3", "Invalid input. Please enter two numbers.", id="three"),
        pytest.param("a b", "Invalid input. Please enter two numbers.", id="letters"),
        pytest.param("0 1", r"Invalid row: 0 \(too small\).", id="row-too-small"),
        pytest.param("9 1", r"Invalid row: 9 \(too large\).", id="row-too-large"),
        pytest.param("1 0", r"Invalid column: 0 \(too small\).", id="col-too-small"),
        pytest.param("1 9", r"Invalid column: 9 \(too large\).", id="col-too-large"),
    ],
)
def test_parse_move_error(text: str, error_message: str) -> None:
    with pytest.raises(InvalidInput, match=error_message):
        parse_move(text, 8)


def test_terminal_player_retries(capsys: pytest.CaptureFixture[str]) -> None:
    grid = Grid.start(4)
    legal_moves = get_legal_moves(grid, X)

    inputs = iter(["abc", "5 1", "1 1", "1 3"])
    prompts: list[str] = []

    def fake_input(prompt: str) -> str:
        prompts.append(prompt)
        return next(inputs)

    player = TerminalPlayer(grid, False, fake_input, clear_screen=False)

    assert player(X, legal_moves) == (0, 2)
    assert prompts == [PROMPT] * 4

    output = capsys.readouterr().out
    assert "Player X's turn." in output
    assert "Invalid input. Please enter two numbers." in output
    assert "Invalid row: 5 (too large)." in output
    assert "Invalid move. Please choose an empty and valid spot." in output
    assert "*" not in output


def test_terminal_player_shows_moves(capsys: pytest.CaptureFixture[str]) -> None:
    grid = Grid.start(4)
    legal_moves = get_legal_moves(grid, X)

    player = TerminalPlayer(grid, True, lambda prompt: "2 4")

    assert player(X, legal_moves) == (1, 3)

    output = capsys.readouterr().out
    assert output.startswith("\033[2J\033[H")
    assert "2 . X O *" in output
