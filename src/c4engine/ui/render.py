from __future__ import annotations
from typing import Optional, Iterable, Tuple, Set

from c4engine.config import CLEAR_SCREEN, USE_COLOR
from c4engine.core.board import Board
from c4engine.types import Cell, PLAYER_ONE

Coord = Tuple[int, int]

# SGR parameters
_RESET = "0"
_BOLD = "1"
_DIM = "2"
_REVERSE = "7"
_CYAN = "36"

# Player One green, Player Two yellow, empty slots gray
_PIECES = {
    None: ("·", "90"),
    PLAYER_ONE: ("●", "32"),
}
_OTHER_PIECE = ("○", "33")


def paint(s: str, *codes: str) -> str:
    if not USE_COLOR or not codes:
        return s
    return f"\033[{';'.join(codes)}m{s}\033[{_RESET}m"


def _cell_text(cell: Cell, winning: bool) -> str:
    glyph, code = _PIECES.get(cell, _OTHER_PIECE)
    # Winning run is shown inverted
    return paint(glyph, _REVERSE, code) if winning else paint(glyph, code)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_to_text(board: Board, highlight: Optional[Iterable[Coord]] = None) -> str:
    hl: Set[Coord] = {(int(r), int(c)) for r, c in highlight} if highlight else set()
    width = len(board.grid[0])

    lines = [paint("   " + " ".join(str(i + 1) for i in range(width)), _DIM)]
    for r, row in enumerate(board.grid):
        cells = " ".join(_cell_text(cell, (r, col) in hl) for col, cell in enumerate(row))
        lines.append(f" | {cells} |")
    lines.append(paint("   " + "—" * (2 * width - 1), _DIM))
    return "\n".join(lines)


def render(board: Board, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(paint("CONNECT 4", _BOLD))
    print(paint(status, _CYAN) if status else "")

    print(board_to_text(board, highlight))
    print(paint(f"   Enter 1-{len(board.grid[0])} to drop. Enter q to quit.", _DIM))
