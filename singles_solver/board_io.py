"""Input and output adapters around the solver: text boards in, text grid or PNG out."""

# board_io.py
# Text format: 9 lines of 9 digits, 0 (or '.') = empty.

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from sudoku_types import Grid

from .errors import InvalidBoard
from .grid import CELL_COUNT, DIGIT_CHARS, SIZE, Board, Cell

SEPARATOR = "|---+---+---|"

CELL = 100  # 900/9
W = H = SIZE * CELL


def parse_board(text: str) -> Board:
    lines = [line.rstrip() for line in text.splitlines()]
    while lines and not lines[-1]:
        lines.pop()
    cells = []
    for r, line in enumerate(lines, 1):
        if len(line) != SIZE:
            raise InvalidBoard(f"line is not 9. Instead got {line!r}")
        for c, ch in enumerate(line, 1):
            if ch == ".":
                ch = "0"
            if ch not in DIGIT_CHARS:
                raise InvalidBoard(f"not a digit at r{r}c{c}: {ch!r}")
            cells.append(Cell(row=r, column=c, value=int(ch)))
    if len(cells) != CELL_COUNT:
        raise InvalidBoard(f"wrong field count: expected {CELL_COUNT}, got {len(cells)}")
    return Board(cells)


def read_board(path: str | Path) -> Board:
    return parse_board(Path(path).read_text(encoding="utf-8"))


def format_board(board: Board) -> str:
    """One '|abc|def|ghi|' line per row, with a separator line around every row."""
    out = [SEPARATOR]
    for row in board.rows():
        digits = "".join(str(cell.value) for cell in row)
        out.append(f"|{digits[0:3]}|{digits[3:6]}|{digits[6:9]}|")
        out.append(SEPARATOR)
    return "\n".join(out)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def cell_rect(r, c, pad=2):
    x0 = (c - 1) * CELL + pad
    y0 = (r - 1) * CELL + pad
    x1 = c * CELL - pad
    y1 = r * CELL - pad
    return (x0, y0, x1, y1)


def render_board_image(board: Board, out_path: str | Path, givens: Optional[Grid] = None) -> str:
    """Draw the board as a 900x900 PNG/JPEG. Digits present in ``givens`` are drawn black,
    digits placed by the solver green; empty cells are left blank."""
    im = Image.new("RGB", (W, H), (255, 255, 255))
    d = ImageDraw.Draw(im)

    for i in range(SIZE + 1):
        width = 6 if i % 3 == 0 else 2
        d.line((i * CELL, 0, i * CELL, H), fill=(0, 0, 0), width=width)
        d.line((0, i * CELL, W, i * CELL), fill=(0, 0, 0), width=width)

    f = load_font(64)
    for cell in board:
        if not cell.is_filled:
            continue
        given = givens is None or givens[cell.row - 1][cell.column - 1] == cell.value
        color = (0, 0, 0) if given else (0, 128, 0)
        if not given:
            d.rectangle(cell_rect(cell.row, cell.column, pad=6), fill=(220, 245, 220))
        x0, y0, x1, y1 = cell_rect(cell.row, cell.column)
        d.text(((x0 + x1) // 2, (y0 + y1) // 2), str(cell.value), fill=color, font=f, anchor="mm")

    im.save(str(out_path))
    return str(out_path)
