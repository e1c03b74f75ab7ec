"""Board fixtures shared by the test modules."""

from c4engine.core.board import Board


def parse_board(*lines: str) -> Board:
    """
    Build a Board from six strings, top row first.
    '.' is empty, '1' is PlayerOne, '2' is PlayerTwo.
    """
    cells = {".": None, "1": 1, "2": 2}
    return Board.from_rows([[cells[ch] for ch in line.replace(" ", "")] for line in lines])


# Full board with no four-in-a-row anywhere: rows alternate 1122112 / 2211221.
DRAW_ROWS = (
    "1122112",
    "2211221",
    "1122112",
    "2211221",
    "1122112",
    "2211221",
)


def draw_board() -> Board:
    return parse_board(*DRAW_ROWS)
