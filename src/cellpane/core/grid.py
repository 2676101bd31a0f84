"""CellGrid - the shared character grid every window draws into."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from cellpane.core.cell import Cell, Style
from cellpane.core.grapheme import GraphemeCluster, iter_clusters, text_width
from cellpane.core.window import Window


@dataclass
class CellGrid:
    """
    A fixed-size 2D grid of Cells.

    The grid itself is never drawn into directly by widgets: call
    ``create_root_window()`` and hand the resulting Window to the
    top-level widget or layout.
    """
    width: int
    height: int
    _buffer: list[list[Cell]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Grid size must be non-negative, got {self.width}x{self.height}")
        if not self._buffer:
            self._buffer = [[Cell() for _ in range(self.width)] for _ in range(self.height)]

    @classmethod
    def with_size(cls, size: tuple[int, int]) -> "CellGrid":
        """Create an empty grid of (width, height)."""
        width, height = size
        return cls(width=width, height=height)

    @classmethod
    def from_str(cls, size: tuple[int, int], description: str) -> "CellGrid":
        """
        Create a grid from whitespace-separated rows.

        Example: ``CellGrid.from_str((4, 2), "1222 1222")``. Every row must
        cover exactly ``width`` columns; all cells use the default style.
        """
        width, height = size
        rows = description.split()
        if len(rows) != height:
            raise ValueError(f"Expected {height} rows, got {len(rows)}")

        grid = cls(width=width, height=height)
        for y, row in enumerate(rows):
            row_width = text_width(row)
            if row_width != width:
                raise ValueError(f"Row {y} is {row_width} columns wide, expected {width}")
            x = 0
            for cluster in iter_clusters(row):
                x = grid.put_cluster(x, y, cluster, Style())
        return grid

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"({x}, {y}) out of bounds ({self.width}x{self.height})")

    def get(self, x: int, y: int) -> Cell:
        """Get the cell at position (x, y)."""
        self._check(x, y)
        return self._buffer[y][x]

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Set the cell at position (x, y)."""
        self._check(x, y)
        self._buffer[y][x] = cell

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        """Get cell using indexing: grid[x, y]."""
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        """Set cell using indexing: grid[x, y] = cell."""
        x, y = pos
        self.set(x, y, cell)

    def put_cluster(self, x: int, y: int, cluster: str, style: Style, width: int | None = None) -> int:
        """
        Write a cluster at (x, y) and mark its continuation cells.

        Any wide cluster partly covered by the write is replaced by spaces,
        so a row never holds half of a cluster. Returns the column after
        the cluster.
        """
        if width is None:
            width = GraphemeCluster(cluster).width
        self._check(x, y)
        if width > 1:
            self._check(x + width - 1, y)
        self._break_overlapped(x, y, width)
        self.set(x, y, Cell(cluster, style))
        for offset in range(1, width):
            self.set(x + offset, y, Cell('', style))
        return x + width

    def _break_overlapped(self, x: int, y: int, width: int) -> None:
        row = self._buffer[y]
        # Head of a cluster whose tail we are about to overwrite
        start = x
        while start > 0 and row[start].is_continuation:
            start -= 1
        for col in range(start, x):
            row[col] = Cell(' ', row[col].style)
        # Tail of a cluster whose head we are about to overwrite
        col = x + width
        while col < self.width and row[col].is_continuation:
            row[col] = Cell(' ', row[col].style)
            col += 1

    def rows(self) -> Iterator[list[Cell]]:
        """Iterate over rows."""
        yield from self._buffer

    def cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Iterate over all cells as (x, y, cell) tuples."""
        for y, row in enumerate(self._buffer):
            for x, cell in enumerate(row):
                yield x, y, cell

    def row_text(self, y: int) -> str:
        """Characters of row y, skipping wide-cluster continuation cells."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} out of bounds (height={self.height})")
        return ''.join(cell.char for cell in self._buffer[y])

    def create_root_window(self) -> Window:
        """Create a window spanning the whole grid."""
        return Window(self, 0, 0, self.width, self.height)

    def __str__(self) -> str:
        return '\n'.join(self.row_text(y) for y in range(self.height))
