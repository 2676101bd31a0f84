"""Window - an exclusively owned rectangular region of a CellGrid."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cellpane.core.cell import Cell, Style, StyleModifier
from cellpane.core.grapheme import GraphemeCluster

if TYPE_CHECKING:
    from cellpane.core.grid import CellGrid


class Window:
    """
    A rectangular view into a CellGrid.

    Windows never overlap: splitting a window consumes it and yields two
    disjoint children, after which the parent refuses every operation.
    All coordinates passed to a window are relative to its top-left corner.
    Every window carries a default style used by ``clear`` and ``fill``,
    which its children inherit.
    """

    def __init__(
        self,
        grid: CellGrid,
        x: int,
        y: int,
        width: int,
        height: int,
        default_style: Style = Style(),
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Window size must be non-negative, got {width}x{height}")
        if x < 0 or y < 0 or x + width > grid.width or y + height > grid.height:
            raise IndexError(
                f"Window {width}x{height}+{x}+{y} exceeds grid {grid.width}x{grid.height}"
            )
        self._grid = grid
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._default_style = default_style
        self._consumed = False

    def __repr__(self) -> str:
        state = " consumed" if self._consumed else ""
        return f"<Window {self._width}x{self._height}+{self._x}+{self._y}{state}>"

    def _ensure_usable(self) -> None:
        if self._consumed:
            raise RuntimeError(f"{self!r} was split and can no longer be used")

    @property
    def width(self) -> int:
        self._ensure_usable()
        return self._width

    @property
    def height(self) -> int:
        self._ensure_usable()
        return self._height

    def get_width(self) -> int:
        return self.width

    def get_height(self) -> int:
        return self.height

    @property
    def default_style(self) -> Style:
        self._ensure_usable()
        return self._default_style

    @property
    def consumed(self) -> bool:
        """Whether this window has been split into children."""
        return self._consumed

    def _child(self, x: int, y: int, width: int, height: int) -> "Window":
        return Window(self._grid, x, y, width, height, self._default_style)

    def split_horizontal(self, offset: int) -> tuple["Window", "Window"]:
        """
        Split at column ``offset`` into (left, right).

        The left window is ``offset`` columns wide, the right one holds the
        rest. Raises IndexError if offset lies outside [0, width].
        """
        self._ensure_usable()
        if not 0 <= offset <= self._width:
            raise IndexError(f"Split offset {offset} outside window width {self._width}")
        left = self._child(self._x, self._y, offset, self._height)
        right = self._child(self._x + offset, self._y, self._width - offset, self._height)
        self._consumed = True
        return left, right

    def split_vertical(self, offset: int) -> tuple["Window", "Window"]:
        """
        Split at row ``offset`` into (top, bottom).

        Raises IndexError if offset lies outside [0, height].
        """
        self._ensure_usable()
        if not 0 <= offset <= self._height:
            raise IndexError(f"Split offset {offset} outside window height {self._height}")
        top = self._child(self._x, self._y, self._width, offset)
        bottom = self._child(self._x, self._y + offset, self._width, self._height - offset)
        self._consumed = True
        return top, bottom

    def set_default_style(self, style: Style) -> None:
        self._ensure_usable()
        self._default_style = style

    def modify_default_style(self, modifier: StyleModifier) -> None:
        """Apply a modifier on top of the current default style."""
        self._ensure_usable()
        self._default_style = modifier.apply(self._default_style)

    def clear(self) -> None:
        """Fill the window with spaces in its default style."""
        self.fill(GraphemeCluster.space())

    def fill(self, cluster: GraphemeCluster) -> None:
        """
        Fill every row with repeated copies of cluster.

        Columns left over when a wide cluster does not divide the width
        are filled with spaces.
        """
        self._ensure_usable()
        style = self._default_style
        step = cluster.width
        for row in range(self._height):
            col = 0
            while col + step <= self._width:
                self._grid.put_cluster(self._x + col, self._y + row, cluster.text, style, step)
                col += step
            for rest in range(col, self._width):
                self._grid.set(self._x + rest, self._y + row, Cell(' ', style))

    def put_cluster(self, x: int, y: int, cluster: GraphemeCluster, style: Style | None = None) -> bool:
        """
        Write a single cluster at (x, y) relative to this window.

        Returns False (and writes nothing) if the cluster does not fit
        completely inside the window.
        """
        self._ensure_usable()
        if x < 0 or y < 0 or y >= self._height or x + cluster.width > self._width:
            return False
        self._grid.put_cluster(
            self._x + x,
            self._y + y,
            cluster.text,
            style if style is not None else self._default_style,
            cluster.width,
        )
        return True

    def get_cell(self, x: int, y: int) -> Cell:
        """Read the cell at (x, y) relative to this window."""
        self._ensure_usable()
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"({x}, {y}) outside window {self._width}x{self._height}")
        return self._grid.get(self._x + x, self._y + y)
