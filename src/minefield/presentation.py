"""
Display mapping for Minefield boards.

Pure functions from cell state to colours and text. No widget code lives
here; a front-end asks these functions how a cell should look and paints
it however it likes.
"""
from dataclasses import dataclass
from typing import Optional

from .board import Board
from .cell import Cell


TITLE = "Minesweeper"

PROXIMITY_COLORS = (
    "default",
    "blue",
    "darkgreen",
    "brown",
    "darkblue",
    "red",
    "violet",
    "darkred",
    "darkorange",
)


@dataclass(frozen=True)
class CellAppearance:
    """Colours and text used to draw one cell."""

    back_color: str
    fore_color: str
    border_color: str
    text: str


HIDDEN_APPEARANCE = CellAppearance("darkgray", "black", "darkgray", "")
FLAGGED_APPEARANCE = CellAppearance("orange", "darkred", "darkorange", "!")
MINE_APPEARANCE = CellAppearance("red", "black", "darkred", "*")


def proximity_color(n: int) -> str:
    """
    Get the text colour for a proximity count.

    Args:
        n: Number of neighbouring mines, 0-8.

    Raises:
        ValueError: If ``n`` is outside 0-8.
    """
    if not 0 <= n < len(PROXIMITY_COLORS):
        raise ValueError(f"Proximity count must be 0-8, got {n}")
    return PROXIMITY_COLORS[n]


def cell_appearance(cell: Cell, show_mines: bool = False) -> CellAppearance:
    """
    Map a cell to its appearance.

    Args:
        cell: Cell to draw.
        show_mines: Draw mines uncovered, used after a loss.
    """
    if show_mines and cell.is_mine:
        return MINE_APPEARANCE
    if cell.flagged:
        return FLAGGED_APPEARANCE
    if not cell.revealed:
        return HIDDEN_APPEARANCE
    n = cell.mines_in_proximity
    return CellAppearance(
        "lightgray",
        proximity_color(n),
        "lightgray",
        str(n) if n else "",
    )


def window_title(flagged: int, mine_count: int) -> str:
    """Title text with the flags-used counter once any flag is placed."""
    if flagged == 0:
        return TITLE
    return f"{TITLE} {flagged}/{mine_count}"


def render_text(board: Board, show_mines: Optional[bool] = None) -> str:
    """
    Render a board as ASCII text, one line per row.

    Mines are shown automatically once the board is lost unless
    ``show_mines`` says otherwise.
    """
    if show_mines is None:
        show_mines = board.is_lost
    obs = board.get_observation(show_mines)
    symbols = {-1: ".", -2: "F", 9: "*", 0: " "}

    lines = []
    for row in obs:
        lines.append(" ".join(symbols.get(int(v), str(int(v))) for v in row))
    return "\n".join(lines)
