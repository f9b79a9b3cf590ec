"""
Static maze storage and the query surface the simulation consumes.

A maze is a rectangular grid of ``Cell`` kinds. Walls never change; the dot
and power-item sets shrink as the seeker collects them and are refilled from
the original layout by ``reset``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable

from .constants import DOT_SCORE, POWER_SCORE
from .errors import MazeError
from .models import Direction, ItemKind, Pickup, Position


class Cell(IntEnum):
    EMPTY = 0
    WALL = 1
    DOT = 2
    POWER = 3
    SEEKER_START = 4
    HUNTER_START = 5


LAYOUT_CHARS = {
    " ": Cell.EMPTY,
    "#": Cell.WALL,
    ".": Cell.DOT,
    "o": Cell.POWER,
    "S": Cell.SEEKER_START,
    "H": Cell.HUNTER_START,
}


class Maze:
    """
    Grid maze with walkability queries and a live item collection.

    Parameters
    ----------
    grid : list[list[Cell]]
        Row-major cells, ``grid[y][x]``. Every row must have the same length.
    dot_score : int, optional
        Points awarded by ``collect_item_at`` for a dot.
    power_score : int, optional
        Points awarded for a power item.

    Raises
    ------
    MazeError
        If the grid is empty or ragged, has no single seeker start, or a
        start cell is not walkable.
    """

    def __init__(self, grid: list[list[Cell]], dot_score: int = DOT_SCORE,
                 power_score: int = POWER_SCORE) -> None:
        if not grid or not grid[0]:
            raise MazeError("Maze grid is empty")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise MazeError("Maze rows have different lengths")

        self.grid = [[Cell(c) for c in row] for row in grid]
        self.cols = width
        self.rows = len(grid)
        self.dot_score = dot_score
        self.power_score = power_score

        seeker_starts = self._cells_of(Cell.SEEKER_START)
        if len(seeker_starts) != 1:
            raise MazeError(f"Maze needs exactly one seeker start, found {len(seeker_starts)}")
        self.seeker_start = seeker_starts[0]
        self.hunter_starts = self._cells_of(Cell.HUNTER_START)
        for start in [self.seeker_start] + self.hunter_starts:
            if not self.valid_directions(start):
                raise MazeError(f"Start position ({start.x}, {start.y}) is walled in")

        self.dots: set[Position] = set()
        self.power_items: set[Position] = set()
        self.reset()

    # --------------------------------- Builders -------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[str], **scores) -> Maze:
        """
        Build a maze from a text layout.

        ``#`` wall, ``.`` dot, ``o`` power item, space empty floor, ``S``
        seeker start, ``H`` hunter start (in reading order).
        """
        grid = []
        for y, line in enumerate(rows):
            row = []
            for x, ch in enumerate(line):
                if ch not in LAYOUT_CHARS:
                    raise MazeError(f"Unknown layout character {ch!r} at ({x}, {y})")
                row.append(LAYOUT_CHARS[ch])
            grid.append(row)
        return cls(grid, **scores)

    @classmethod
    def generate(cls, cols: int, rows: int, **scores) -> Maze:
        """
        Build the lattice maze: outer walls, a regular pillar pattern inside,
        dots everywhere else, a power item near each corner, the seeker in the
        top-left and up to three hunters in the other corners.
        """
        if cols < 5 or rows < 5:
            raise MazeError(f"Generated maze must be at least 5x5, got {cols}x{rows}")

        def is_wall(x: int, y: int) -> bool:
            if x in (0, cols - 1) or y in (0, rows - 1):
                return True
            if x % 4 == 0 and y % 4 == 0 and x < cols - 2 and y < rows - 2:
                return True
            return (x % 8 == 4 and y % 4 == 2) or (x % 4 == 2 and y % 8 == 4)

        grid = [[Cell.WALL if is_wall(x, y) else Cell.DOT for x in range(cols)] for y in range(rows)]
        grid[1][1] = Cell.SEEKER_START
        for x, y in [(cols - 2, 1), (cols - 2, rows - 2), (1, rows - 2)]:
            grid[y][x] = Cell.HUNTER_START
        for x, y in [(2, 2), (cols - 3, 2), (2, rows - 3), (cols - 3, rows - 3)]:
            if grid[y][x] == Cell.DOT:
                grid[y][x] = Cell.POWER
        return cls(grid, **scores)

    # --------------------------------- Queries --------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.cols and 0 <= pos.y < self.rows

    def cell_at(self, pos: Position) -> Cell:
        """Static cell kind from the layout (items collected since are not reflected)."""
        if not self.in_bounds(pos):
            return Cell.WALL
        return self.grid[pos.y][pos.x]

    def is_walkable(self, pos: Position) -> bool:
        return self.cell_at(pos) != Cell.WALL

    def valid_directions(self, pos: Position) -> list[Direction]:
        """Directions leading to a walkable neighbour, in UP, DOWN, LEFT, RIGHT order."""
        return [d for d in Direction if self.is_walkable(pos.step(d))]

    def collect_item_at(self, pos: Position) -> Pickup | None:
        """Remove the item at ``pos`` from the live set, if any, and return what it was worth."""
        if pos in self.dots:
            self.dots.discard(pos)
            return Pickup(pos, ItemKind.DOT, self.dot_score)
        if pos in self.power_items:
            self.power_items.discard(pos)
            return Pickup(pos, ItemKind.POWER, self.power_score)
        return None

    def remaining_item_count(self) -> int:
        return len(self.dots) + len(self.power_items)

    def items(self) -> dict[Position, ItemKind]:
        """Live items keyed by position."""
        live = {pos: ItemKind.DOT for pos in self.dots}
        live.update((pos, ItemKind.POWER) for pos in self.power_items)
        return live

    def start_positions(self) -> tuple[Position, list[Position]]:
        return self.seeker_start, list(self.hunter_starts)

    def corners(self) -> list[Position]:
        """Scatter destinations: top-left, top-right, bottom-left, bottom-right inner cells."""
        return [
            Position(1, 1),
            Position(self.cols - 2, 1),
            Position(1, self.rows - 2),
            Position(self.cols - 2, self.rows - 2),
        ]

    def reset(self) -> None:
        """Repopulate every dot and power item from the layout."""
        self.dots = set(self._cells_of(Cell.DOT))
        self.power_items = set(self._cells_of(Cell.POWER))

    def _cells_of(self, kind: Cell) -> list[Position]:
        return [Position(x, y)
                for y, row in enumerate(self.grid)
                for x, cell in enumerate(row)
                if cell == kind]
