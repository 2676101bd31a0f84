"""
cellpane: space negotiation and linear layout for terminal widgets

Widgets report how much room they want, layouts share the available
space out fairly and split the screen into non-overlapping windows.

Quick Start:
    >>> from cellpane import CellGrid, HorizontalLayout, LineLabel, RenderingHints, SeparatingStyle
    >>> grid = CellGrid.with_size((11, 1))
    >>> labels = [LineLabel("hello"), LineLabel("world")]
    >>> layout = HorizontalLayout(SeparatingStyle.draw("|"))
    >>> layout.draw(grid.create_root_window(), [(l, RenderingHints()) for l in labels])
    >>> print(grid)
    hello|world

Features:
    - Demands with exact, bounded and unbounded extents
    - Max-min fair allocation of space along one axis
    - Horizontal and vertical layouts with optional separators
    - Grapheme-aware character grid with exclusively owned windows
    - Render to terminal escape sequences, or print the grid as plain text
"""

__version__ = "0.1.0"

# Drawing primitives
from cellpane.core.cell import Cell, Style, StyleModifier
from cellpane.core.grapheme import GraphemeCluster
from cellpane.core.grid import CellGrid
from cellpane.core.window import Window
from cellpane.core.cursor import Cursor

# Layout
from cellpane.widget.demand import ColDemand, Demand, Demand2D, RowDemand
from cellpane.widget.base import RenderingHints, Widget
from cellpane.widget.layouts import (
    HorizontalLayout,
    SeparatingStyle,
    VerticalLayout,
    draw_linearly,
    layout_linearly,
)
from cellpane.widget.widgets import LineLabel

# Output
from cellpane.render import TerminalRenderer

__all__ = [
    # Version
    "__version__",
    # Drawing primitives
    "Cell",
    "Style",
    "StyleModifier",
    "GraphemeCluster",
    "CellGrid",
    "Window",
    "Cursor",
    # Layout
    "Demand",
    "Demand2D",
    "ColDemand",
    "RowDemand",
    "RenderingHints",
    "Widget",
    "SeparatingStyle",
    "layout_linearly",
    "draw_linearly",
    "HorizontalLayout",
    "VerticalLayout",
    "LineLabel",
    # Output
    "TerminalRenderer",
]
