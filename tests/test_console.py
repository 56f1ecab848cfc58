import io

from gridworks.console import ConsoleGame, main
from gridworks.sudoku import format_board, sample_puzzle


def _reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def _game(lines, board=None):
    out = []
    game = ConsoleGame(board if board is not None else sample_puzzle(), _reader(lines), out.append)
    return game, out


def test_quit_ends_the_game():
    game, out = _game(["q", "p"])
    game.run()
    text = "".join(out)
    assert text.startswith("Sudoku Game \n" + format_board(sample_puzzle()))
    assert "No Progress will be saved! Goodbye!" in text
    assert "Call add function!" not in text


def test_step_returns_false_on_quit_and_true_otherwise():
    game, _ = _game(["Q", "x"])
    assert game.step() is False
    assert game.step() is True


def test_place_number_through_menu():
    game, out = _game(["p", "1", "1", "5", "q"])
    game.run()
    assert game.board[0][0] == 5
    expected = sample_puzzle()
    expected[0][0] = 5
    assert format_board(expected) in "".join(out)


def test_invalid_numbers_are_asked_again():
    game, out = _game(["P", "0", "10", "abc", "1", "2", "3", "q"])
    game.run()
    text = "".join(out)
    assert game.board[0][1] == 3
    assert text.count("Please give valid Row(1-9): ") == 3


def test_occupied_cell_is_refused():
    game, out = _game(["p", "1", "4", "5", "q"])
    game.run()
    assert game.board[0][3] == 4
    assert "You can not change number in this position, Row:1, Col:4." in "".join(out)


def test_solve_fills_the_board():
    game, out = _game(["s", "q"])
    game.run()
    assert all(0 not in row for row in game.board)
    assert format_board(game.board) in "".join(out)


def test_invalid_option_and_create():
    game, out = _game(["z", "c", "q"])
    game.run()
    text = "".join(out)
    assert "Invalid option. Try again." in text
    assert "Created new puzzle!" in text
    assert game.board == sample_puzzle()


def test_end_of_input_stops_quietly():
    game, out = _game([])
    game.run()
    assert "".join(out).endswith("Option: \n") is False
    assert game.board == sample_puzzle()


def test_ask_number_and_ask_move():
    game, _ = _game(["", "7"])
    assert game.ask_number("Col") == 7
    game, _ = _game(["9", "8", "6"])
    assert game.ask_move() == (9, 8, 6)


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sudoku Game \n")
    assert "Goodbye!" in out