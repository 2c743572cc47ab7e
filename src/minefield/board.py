"""
Board module for the minefield engine.

Implements the grid with mine placement, adjacency counting,
flood-fill revealing and flag toggling. Rendering is left to callers.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Tuple, Set, Optional

import numpy as np

from .cell import Cell, CellState, CellView


logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Dimensions and mine count of a board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place.
    """

    width: int
    height: int
    mine_count: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name in ("width", "height", "mine_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mine_count < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.mine_count > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.width * self.height


@dataclass(frozen=True)
class RevealResult:
    """
    Outcome of a reveal.

    Attributes:
        hit_mine: The target cell was a mine; nothing was opened.
        opened: (column, row) of every cell opened, in opening order.
        visits: Cells expanded by the flood fill.
    """

    hit_mine: bool = False
    opened: Tuple[Position, ...] = ()
    visits: int = 0

    @property
    def count(self) -> int:
        """Number of cells opened."""
        return len(self.opened)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper board engine.

    Owns the grid of cells as a flat row-major list. A new board is
    empty until populate() is called; calling populate() again discards
    everything and generates a fresh layout.

    Coordinates are always given as (column, row).
    """

    rng: random.Random = field(default_factory=random.Random, repr=False)
    _config: Optional[BoardConfig] = field(default=None, init=False)
    _cells: List[Cell] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def generate(
        cls,
        width: int,
        height: int,
        mine_count: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create and populate a board in one step."""
        return cls.from_config(BoardConfig(width, height, mine_count), rng)

    @classmethod
    def from_config(
        cls, config: BoardConfig, rng: Optional[random.Random] = None
    ) -> "Board":
        """Create a board populated from an existing configuration."""
        board = cls(rng) if rng is not None else cls()
        board._populate(config)
        return board

    # ========================================================================
    # Generation (Low-level)
    # ========================================================================

    def populate(self, width: int, height: int, mine_count: int) -> None:
        """
        Generate a fresh board, replacing any previous state.

        Args:
            width: Number of columns, at least 1.
            height: Number of rows, at least 1.
            mine_count: Mines to place, less than width * height.

        Raises:
            ValueError: If the arguments are invalid. The board is left
                unchanged in that case.
        """
        self._populate(BoardConfig(width, height, mine_count))

    def _populate(self, config: BoardConfig) -> None:
        previous = self._config, self._cells
        cells = [Cell() for _ in range(config.total_cells)]
        self._config, self._cells = config, cells
        try:
            self._place_mines()
            self._calculate_adjacent_mines()
        except BaseException:
            self._config, self._cells = previous
            raise
        logger.debug(
            "Populated %dx%d board with %d mines",
            config.width, config.height, config.mine_count,
        )

    def _place_mines(self) -> None:
        """Rejection-sample mine positions over every cell index."""
        total = self._config.total_cells
        placed = 0
        while placed < self._config.mine_count:
            cell = self._cells[self.rng.randrange(total)]
            if not cell.is_mine:
                cell.is_mine = True
                placed += 1

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.height):
            for column in range(self.width):
                count = sum(
                    1 for c, r in self._nearby(column, row)
                    if self._cell(c, r).is_mine
                )
                self._cell(column, row).adjacent_mines = count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _is_valid_position(self, column: int, row: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= column < self.width and 0 <= row < self.height

    def _check_position(self, column: int, row: int) -> None:
        if not self._is_valid_position(column, row):
            raise ValueError(
                f"Position ({column}, {row}) out of bounds for "
                f"{self.width}x{self.height} board"
            )

    def _cell(self, column: int, row: int) -> Cell:
        return self._cells[row * self.width + column]

    def _nearby(self, column: int, row: int) -> Set[Position]:
        neighbors = set()
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_col = column + delta_col
                new_row = row + delta_row
                if self._is_valid_position(new_col, new_row):
                    neighbors.add((new_col, new_row))
        return neighbors

    def _adjacent(self, column: int, row: int) -> Set[Position]:
        neighbors = set()
        for delta_col, delta_row in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            new_col = column + delta_col
            new_row = row + delta_row
            if self._is_valid_position(new_col, new_row):
                neighbors.add((new_col, new_row))
        return neighbors

    def nearby_cells(self, column: int, row: int) -> Set[Position]:
        """
        Get the 8-directional neighbors used for mine counting.

        Args:
            column: Column index of center cell.
            row: Row index of center cell.

        Returns:
            Set of (column, row) tuples inside the grid.
        """
        self._check_position(column, row)
        return self._nearby(column, row)

    def adjacent_cells(self, column: int, row: int) -> Set[Position]:
        """
        Get the 4-directional neighbors the reveal cascade follows.

        Args:
            column: Column index of center cell.
            row: Row index of center cell.

        Returns:
            Set of (column, row) tuples inside the grid.
        """
        self._check_position(column, row)
        return self._adjacent(column, row)

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, column: int, row: int) -> RevealResult:
        """
        Reveal a cell and flood-fill its connected non-mine region.

        The cascade follows up/down/left/right neighbors only and does
        not stop at numbered cells. Flagged cells are opened as well.
        Mines are never opened: revealing one changes nothing and is
        reported through RevealResult.hit_mine.

        Args:
            column: Column index to reveal.
            row: Row index to reveal.

        Returns:
            RevealResult describing what happened.

        Raises:
            ValueError: If the position is outside the board.
        """
        self._check_position(column, row)
        target = self._cell(column, row)
        if target.is_mine:
            logger.debug("Mine hit at (%d, %d)", column, row)
            return RevealResult(hit_mine=True)
        if not target.open():
            return RevealResult()

        opened = [(column, row)]
        stack = [(column, row)]
        visits = 0
        while stack:
            current = stack.pop()
            visits += 1
            for next_col, next_row in self._adjacent(*current):
                neighbor = self._cell(next_col, next_row)
                if neighbor.is_mine:
                    continue
                # Opened on push, so every cell is expanded once.
                if neighbor.open():
                    opened.append((next_col, next_row))
                    stack.append((next_col, next_row))

        logger.debug(
            "Revealed %d cells from (%d, %d)", len(opened), column, row
        )
        return RevealResult(opened=tuple(opened), visits=visits)

    def toggle_flag(self, column: int, row: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            column: Column index.
            row: Row index.

        Returns:
            True if flag was toggled, False if the cell is opened.

        Raises:
            ValueError: If the position is outside the board.
        """
        self._check_position(column, row)
        return self._cell(column, row).toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def config(self) -> Optional[BoardConfig]:
        """Get the configuration, or None before populate()."""
        return self._config

    @property
    def width(self) -> int:
        """Get number of columns."""
        return self._config.width if self._config else 0

    @property
    def height(self) -> int:
        """Get number of rows."""
        return self._config.height if self._config else 0

    @property
    def mine_count(self) -> int:
        """Get number of mines placed."""
        return self._config.mine_count if self._config else 0

    @property
    def is_populated(self) -> bool:
        """Check if populate() has been called."""
        return self._config is not None

    @property
    def opened_count(self) -> int:
        """Count opened cells."""
        return sum(1 for cell in self._cells if cell.is_opened)

    @property
    def flag_count(self) -> int:
        """Count flagged cells."""
        return sum(1 for cell in self._cells if cell.state == CellState.FLAGGED)

    def is_mine(self, column: int, row: int) -> bool:
        """Check whether the cell at position holds a mine."""
        self._check_position(column, row)
        return self._cell(column, row).is_mine

    def cell(self, column: int, row: int) -> CellView:
        """Get a snapshot of the cell at position."""
        self._check_position(column, row)
        return self._cell(column, row).view()

    def state(self, column: int, row: int) -> CellState:
        """Get the interaction state of the cell at position."""
        self._check_position(column, row)
        return self._cell(column, row).state

    def adjacent_mines(self, column: int, row: int) -> int:
        """Get the adjacent mine count of the cell at position."""
        self._check_position(column, row)
        return self._cell(column, row).adjacent_mines

    def hidden_cells(self) -> List[Position]:
        """
        Get cells that are not opened yet.

        Returns:
            List of (column, row) positions in row-major order.
        """
        return [
            (index % self.width, index // self.width)
            for index, cell in enumerate(self._cells)
            if not cell.is_opened
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get the player-visible board as a numpy array.

        Returns:
            Array of shape (height, width) where:
                -1 = undiscovered
                -2 = flagged
                0-8 = opened with adjacent count
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for index, cell in enumerate(self._cells):
            obs[divmod(index, self.width)] = cell.to_observation()
        return obs

    def mine_mask(self) -> np.ndarray:
        """Boolean array of shape (height, width), True where mines are."""
        mask = np.array([cell.is_mine for cell in self._cells], dtype=bool)
        return mask.reshape((self.height, self.width))

    def dump(self) -> str:
        """
        Render the grid as text for debugging.

        Each row is one line of space separated glyphs: "X" for an
        undiscovered mine, the adjacent count for any other undiscovered
        cell, a blank for an opened cell and "!" for a flag.
        """
        lines = []
        for row in range(self.height):
            glyphs = [self._cell(column, row).glyph() for column in range(self.width)]
            lines.append(" ".join(glyphs))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.dump()
