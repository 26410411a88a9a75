"""
Minefield board engine.

Provides the Minesweeper board logic, its display mapping and a
Gymnasium environment around it.
"""
from .cell import Cell, CellState
from .outcome import ActionError, InvalidDimensionError, OutcomeKind, RevealOutcome
from .board import Board, BoardConfig, GameState, generate, make_rng
from .presentation import (
    CellAppearance,
    cell_appearance,
    proximity_color,
    render_text,
    window_title,
)
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "ActionError",
    "InvalidDimensionError",
    "OutcomeKind",
    "RevealOutcome",
    "Board",
    "BoardConfig",
    "GameState",
    "generate",
    "make_rng",
    "CellAppearance",
    "cell_appearance",
    "proximity_color",
    "render_text",
    "window_title",
    "MinesweeperEnv",
]
