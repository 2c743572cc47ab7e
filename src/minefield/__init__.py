"""
Minefield board engine.

Provides the grid, mine placement, adjacency counts and flood-fill
reveal that a minesweeper front end renders.
"""
from .cell import Cell, CellState, CellView, UNCOMPUTED
from .board import Board, BoardConfig, RevealResult

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "UNCOMPUTED",
    "Board",
    "BoardConfig",
    "RevealResult",
]
