"""Widgets, space demands and linear layouts."""

from cellpane.widget.demand import ColDemand, Demand, Demand2D, RowDemand, parse_demand
from cellpane.widget.base import RenderingHints, Widget
from cellpane.widget.layouts import (
    HorizontalLayout,
    SeparatingStyle,
    SeparatorKind,
    VerticalLayout,
    draw_linearly,
    layout_linearly,
)
from cellpane.widget.widgets import LineLabel

__all__ = [
    "Demand",
    "Demand2D",
    "ColDemand",
    "RowDemand",
    "parse_demand",
    "RenderingHints",
    "Widget",
    "SeparatingStyle",
    "SeparatorKind",
    "layout_linearly",
    "draw_linearly",
    "HorizontalLayout",
    "VerticalLayout",
    "LineLabel",
]
