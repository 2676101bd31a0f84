"""Cursor - grapheme-aware text output into a window."""

from __future__ import annotations

from cellpane.core.cell import StyleModifier
from cellpane.core.grapheme import GraphemeCluster, iter_clusters
from cellpane.core.window import Window


class Cursor:
    """
    Writes text into a Window starting at a position.

    Output that does not fit is clipped silently; the cursor position
    keeps advancing so callers can measure what they tried to write.
    """

    def __init__(self, window: Window, x: int = 0, y: int = 0) -> None:
        self.window = window
        self.x = x
        self.y = y
        self.style_modifier = StyleModifier()

    def move_to(self, x: int, y: int) -> None:
        self.x = x
        self.y = y

    def set_style_modifier(self, modifier: StyleModifier) -> None:
        self.style_modifier = modifier

    def write(self, text: str) -> None:
        """Write text at the cursor, handling newlines and wide characters."""
        style = self.style_modifier.apply(self.window.default_style)
        for cluster in iter_clusters(text):
            if cluster == '\n':
                self.x = 0
                self.y += 1
                continue
            try:
                grapheme = GraphemeCluster(cluster)
            except ValueError:
                # Control characters and stray marks take up no space
                continue
            self.window.put_cluster(self.x, self.y, grapheme, style)
            self.x += grapheme.width

    def writeln(self, text: str) -> None:
        self.write(text)
        self.write('\n')
