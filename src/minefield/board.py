"""
Board module for the Minefield engine.

Implements the grid with mine placement, proximity counting, flood-fill
reveal, flagging and win/loss detection.
"""
import random
from dataclasses import dataclass, field, InitVar
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .cell import Cell
from .outcome import (
    ActionError,
    InvalidDimensionError,
    OutcomeKind,
    Position,
    RevealOutcome,
)


RandomSource = Union[int, random.Random, None]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minefield board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place, clamped to the cell count.
    """

    width: int = 60
    height: int = 40
    num_mines: int = 300

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Reject bad dimensions and clamp the mine count."""
        if self.width < 1 or self.height < 1:
            raise InvalidDimensionError("Board dimensions must be positive")
        self.num_mines = max(0, min(self.num_mines, self.width * self.height))

    @property
    def size(self) -> int:
        return self.width * self.height


def make_rng(source: RandomSource = None) -> random.Random:
    """Turn a seed (or nothing) into a private random generator."""
    if isinstance(source, random.Random):
        return source
    return random.Random(source)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Owns the grid of cells and the two running counters. Cells are
    addressed as ``(x, y)`` with ``0 <= x < width`` and ``0 <= y < height``.
    Actions never raise for bad positions or illegal moves; they report
    the problem through their return value and leave the board untouched.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: InitVar[RandomSource] = None
    revealed_safe_count: int = field(default=0, init=False)
    flagged_count: int = field(default=0, init=False)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _rng: random.Random = field(init=False, repr=False, compare=False)
    _lost_at: Optional[Position] = field(default=None, init=False)
    _won: bool = field(default=False, init=False)

    def __post_init__(self, rng: RandomSource) -> None:
        """Build the grid and draw the first layout."""
        self._rng = make_rng(rng)
        self._init_grid()
        self.reset()

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Create a board with a fixed mine layout.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: ``(x, y)`` positions holding a mine.

        Raises:
            ValueError: If a mine lies outside the grid.
        """
        mine_set = set(mines)
        board = cls(BoardConfig(width, height, len(mine_set)), rng=0)
        for x, y in mine_set:
            if not board._is_valid_position(x, y):
                raise ValueError(f"Mine position ({x}, {y}) is out of bounds")
        board._load_layout(mine_set)
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create the grid of hidden cells, indexed ``[y][x]``."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _pick_mine_positions(self) -> set:
        """Choose a uniform random subset of positions for the mines."""
        positions = [
            (x, y)
            for x in range(self.config.width)
            for y in range(self.config.height)
        ]
        return set(self._rng.sample(positions, self.config.num_mines))

    def _load_layout(self, mine_positions: set) -> None:
        """Reinitialize every cell in place from a set of mine positions."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                count = sum(
                    1 for n in self.neighbors(x, y) if n in mine_positions
                )
                cell.initialize((x, y) in mine_positions, count)
        self.revealed_safe_count = 0
        self.flagged_count = 0
        self._lost_at = None
        self._won = False

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get the edge-clamped 8-neighbourhood of a position.

        Args:
            x: Column of the center cell.
            y: Row of the center cell.

        Returns:
            List of ``(x, y)`` tuples, never including the center.
        """
        result = []
        for delta_x in (-1, 0, 1):
            for delta_y in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self._is_valid_position(new_x, new_y):
                    result.append((new_x, new_y))
        return result

    def _is_valid_position(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def check_reveal(self, x: int, y: int) -> Optional[ActionError]:
        """Return why ``reveal(x, y)`` would be refused, or None."""
        if not self._is_valid_position(x, y):
            return ActionError.OUT_OF_BOUNDS
        if not self._grid[y][x].is_hidden:
            return ActionError.ILLEGAL_ACTION
        return None

    def check_flag(self, x: int, y: int) -> Optional[ActionError]:
        """Return why ``toggle_flag(x, y)`` would be refused, or None."""
        if not self._is_valid_position(x, y):
            return ActionError.OUT_OF_BOUNDS
        if self._grid[y][x].revealed:
            return ActionError.ILLEGAL_ACTION
        return None

    def reveal(self, x: int, y: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A mine reports LOST and changes nothing else. A safe cell is
        revealed, and if it has no neighbouring mines the reveal spreads
        through the connected zero region and its numbered border. The
        spread also reaches flagged cells, clearing their flags.

        A safe reveal after a loss means the caller kept playing, so the
        loss is dropped and the state follows this outcome.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            CONTINUE or WON with the newly revealed positions, LOST with
            the mine position, or REJECTED with the reason.
        """
        error = self.check_reveal(x, y)
        if error is not None:
            return RevealOutcome.rejected(error)

        if self._grid[y][x].is_mine:
            self._lost_at = (x, y)
            return RevealOutcome.lost(x, y)

        revealed, flags_cleared = self._flood_reveal(x, y)
        self._lost_at = None
        kind = OutcomeKind.WON if self._won else OutcomeKind.CONTINUE
        return RevealOutcome(
            kind, revealed=tuple(revealed), flags_cleared=flags_cleared
        )

    def _flood_reveal(self, x: int, y: int) -> Tuple[List[Position], int]:
        """Reveal from a safe cell using an explicit stack."""
        revealed = []
        flags_cleared = 0
        stack = [(x, y)]
        while stack:
            cx, cy = stack.pop()
            cell = self._grid[cy][cx]
            if cell.revealed or cell.is_mine:
                continue
            if cell.flagged:
                self.flagged_count += cell.toggle_flag()
                flags_cleared += 1
            cell.reveal()
            self.revealed_safe_count += 1
            revealed.append((cx, cy))
            self._check_win_condition()

            if cell.mines_in_proximity == 0:
                for nx, ny in self.neighbors(cx, cy):
                    neighbor = self._grid[ny][nx]
                    if not neighbor.revealed and not neighbor.is_mine:
                        stack.append((nx, ny))
        return revealed, flags_cleared

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self.revealed_safe_count == self.safe_cells:
            self._won = True

    def toggle_flag(self, x: int, y: int) -> int:
        """
        Toggle the flag on a cell.

        Flagging the mine that just ended the game accepts the loss as a
        mistake and returns the board to PLAYING.

        Args:
            x: Column.
            y: Row.

        Returns:
            +1 or -1 as the change in ``flagged_count``, or 0 when the
            position is out of bounds or the cell is revealed.
        """
        if self.check_flag(x, y) is not None:
            return 0
        delta = self._grid[y][x].toggle_flag()
        self.flagged_count += delta
        if delta == 1 and self._lost_at == (x, y):
            self._lost_at = None
        return delta

    def reset(self, rng: RandomSource = None) -> None:
        """
        Start a new game on this same board.

        Args:
            rng: Optional seed or generator to use from now on. The
                board keeps its current generator when omitted.
        """
        if rng is not None:
            self._rng = make_rng(rng)
        self._load_layout(self._pick_mine_positions())

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.num_mines

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.config.size - self.config.num_mines

    @property
    def remaining_mines(self) -> int:
        """Mines left once every flag is counted as correct."""
        return self.config.num_mines - self.flagged_count

    @property
    def lost_at(self) -> Optional[Position]:
        """Position of the mine that ended the game, if any."""
        return self._lost_at

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._lost_at is not None:
            return GameState.LOST
        if self._won:
            return GameState.WON
        return GameState.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    def get_cell(self, x: int, y: int) -> Optional[Cell]:
        """
        Get cell at position, or None if invalid.

        The returned cell is the live record and is meant for reading.
        Change it only through ``reveal``, ``toggle_flag`` and ``reset``;
        calling its own mutators skips the board counters.
        """
        if not self._is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def iter_cells(self) -> Iterator[Tuple[Position, Cell]]:
        """Yield ``((x, y), cell)`` row by row."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                yield (x, y), cell

    def mine_positions(self) -> List[Position]:
        """All positions holding a mine."""
        return [pos for pos, cell in self.iter_cells() if cell.is_mine]

    def hidden_positions(self) -> List[Position]:
        """
        Get positions that can still be revealed.

        Returns:
            List of ``(x, y)`` positions that are neither revealed nor
            flagged.
        """
        return [pos for pos, cell in self.iter_cells() if cell.is_hidden]

    def get_observation(self, show_mines: bool = False) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D ``int8`` array of shape ``(height, width)`` where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with proximity count
                9 = mine (only when ``show_mines`` is set)
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for (x, y), cell in self.iter_cells():
            obs[y, x] = cell.to_observation(show_mines)
        return obs

    def proximity_map(self) -> np.ndarray:
        """Proximity count of every cell, hidden or not."""
        counts = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for (x, y), cell in self.iter_cells():
            counts[y, x] = cell.mines_in_proximity
        return counts


def generate(
    width: int, height: int, mine_count: int, rng: RandomSource = None
) -> Board:
    """
    Create a board with a random mine layout.

    Args:
        width: Number of columns, at least 1.
        height: Number of rows, at least 1.
        mine_count: Mines to place, clamped to ``[0, width * height]``.
        rng: Seed or ``random.Random`` instance driving the layout.

    Raises:
        InvalidDimensionError: If width or height is not positive.
    """
    return Board(BoardConfig(width, height, mine_count), rng=rng)
