# tests/test_board_io.py
import pytest
from PIL import Image

from singles_solver.board_io import format_board, parse_board, read_board, render_board_image
from singles_solver.engine import solve
from singles_solver.errors import InvalidBoard
from singles_solver.grid import Board


def test_parse_board(puzzle_text, puzzle_grid):
    board = parse_board(puzzle_text)
    assert board.to_grid() == puzzle_grid


def test_parse_board_tolerates_crlf_and_dots(puzzle_text, puzzle_grid):
    text = puzzle_text.replace("0", ".").replace("\n", "\r\n") + "\r\n\r\n"
    assert parse_board(text).to_grid() == puzzle_grid


def test_parse_board_rejects_short_line(puzzle_text):
    lines = puzzle_text.splitlines()
    lines[3] = lines[3][:8]
    with pytest.raises(InvalidBoard, match="line is not 9"):
        parse_board("\n".join(lines))


def test_parse_board_rejects_non_digit(puzzle_text):
    with pytest.raises(InvalidBoard, match="r1c1"):
        parse_board("x" + puzzle_text[1:])


def test_parse_board_rejects_missing_rows(puzzle_text):
    eight_rows = "\n".join(puzzle_text.splitlines()[:8])
    with pytest.raises(InvalidBoard, match="wrong field count"):
        parse_board(eight_rows)


def test_read_board(tmp_path, puzzle_text, puzzle_grid):
    path = tmp_path / "easy.txt"
    path.write_text(puzzle_text, encoding="utf-8")
    assert read_board(path).to_grid() == puzzle_grid
    with pytest.raises(FileNotFoundError):
        read_board(tmp_path / "missing.txt")


def test_format_board(solution_grid):
    text = format_board(Board.from_grid(solution_grid))
    lines = text.splitlines()
    assert len(lines) == 19
    assert lines[0] == "|---+---+---|"
    assert lines[1] == "|534|678|912|"
    assert lines[2] == "|---+---+---|"
    assert lines[17] == "|345|286|179|"
    assert lines[-1] == "|---+---+---|"


def test_format_board_shows_empty_cells():
    text = format_board(Board.empty())
    assert "|000|000|000|" in text


def test_render_board_image(tmp_path, puzzle_grid):
    board = solve(Board.from_grid(puzzle_grid))
    out = tmp_path / "solved.png"
    assert render_board_image(board, out, givens=puzzle_grid) == str(out)
    with Image.open(out) as im:
        assert im.size == (900, 900)


@pytest.mark.parametrize("ch", ["²", "٥"])
def test_parse_board_rejects_non_ascii_digits(puzzle_text, ch):
    # superscript two and Arabic-Indic five both pass str.isdigit()
    with pytest.raises(InvalidBoard, match="not a digit at r1c1"):
        parse_board(ch + puzzle_text[1:])
