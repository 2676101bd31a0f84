"""Single-line text label widget."""

from __future__ import annotations

from cellpane.core.cell import StyleModifier
from cellpane.core.cursor import Cursor
from cellpane.core.grapheme import text_width
from cellpane.core.window import Window
from cellpane.widget.base import RenderingHints
from cellpane.widget.demand import Demand, Demand2D


class LineLabel:
    """
    A line of text that wants exactly as many columns as it is wide.

    If ``active_style`` is given, it is applied while the label is drawn
    with ``hints.active`` set.
    """

    def __init__(self, text: str = "", active_style: StyleModifier | None = None) -> None:
        self._text = text
        self.active_style = active_style

    @property
    def text(self) -> str:
        return self._text

    def set(self, text: str) -> None:
        """Replace the label text."""
        self._text = text

    def space_demand(self) -> Demand2D:
        return Demand2D(Demand.exact(text_width(self._text)), Demand.exact(1))

    def draw(self, window: Window, hints: RenderingHints) -> None:
        cursor = Cursor(window)
        if hints.active and self.active_style is not None:
            cursor.set_style_modifier(self.active_style)
        cursor.write(self._text)
