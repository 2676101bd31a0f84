"""Reusable leaf widgets."""

from cellpane.widget.widgets.label import LineLabel

__all__ = ["LineLabel"]
