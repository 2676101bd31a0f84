"""Core drawing primitives - cells, styles, graphemes, grid and windows."""

from cellpane.core.cell import Cell, Style, StyleModifier
from cellpane.core.grapheme import GraphemeCluster, text_width
from cellpane.core.window import Window
from cellpane.core.grid import CellGrid
from cellpane.core.cursor import Cursor

__all__ = [
    "Cell",
    "Style",
    "StyleModifier",
    "GraphemeCluster",
    "text_width",
    "Window",
    "CellGrid",
    "Cursor",
]
