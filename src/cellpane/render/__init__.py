"""Renderers for outputting a cell grid."""

from cellpane.render.terminal import TerminalRenderer

__all__ = ["TerminalRenderer"]
