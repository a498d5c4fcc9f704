"""Coordinate arithmetic on the square game grid."""

from .constants import GRID_SIZE
from .models import DIRECTIONS, Cell, Direction


def step(cell: Cell, direction: Direction) -> Cell:
    """Move one cell without wrapping; the result may be out of bounds."""
    dx, dy = DIRECTIONS[direction]
    return (cell[0] + dx, cell[1] + dy)


def advance(cell: Cell, direction: Direction, size: int = GRID_SIZE) -> Cell:
    """Move one cell, wrapping around to the opposite edge."""
    x, y = step(cell, direction)
    return (x % size, y % size)


def in_bounds(cell: Cell, size: int = GRID_SIZE) -> bool:
    return 0 <= cell[0] < size and 0 <= cell[1] < size


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def footprint(anchor: Cell) -> list[Cell]:
    """Cells covered by a 2x2 item whose top-left corner is ``anchor``."""
    x, y = anchor
    return [(x, y), (x + 1, y), (x, y + 1), (x + 1, y + 1)]
