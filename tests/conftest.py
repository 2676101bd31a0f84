"""Shared fixtures: fake widgets with fixed demands and grid factories."""

from typing import Callable

import pytest

from cellpane.core.grapheme import GraphemeCluster
from cellpane.core.grid import CellGrid
from cellpane.core.window import Window
from cellpane.widget.base import RenderingHints
from cellpane.widget.demand import Demand, Demand2D


class FakeWidget:
    """Widget with a fixed demand that fills its window with one character."""

    def __init__(self, width: Demand, height: Demand, fill_char: str | None = '_'):
        self.demand = Demand2D(width, height)
        self.fill_char = fill_char
        self.drawn_sizes: list[tuple[int, int]] = []

    def space_demand(self) -> Demand2D:
        return self.demand

    def draw(self, window: Window, hints: RenderingHints) -> None:
        self.drawn_sizes.append((window.get_width(), window.get_height()))
        if self.fill_char is not None:
            window.fill(GraphemeCluster(self.fill_char))


@pytest.fixture
def fake_widget() -> Callable[..., FakeWidget]:
    """Factory: fake_widget(width_demand, height_demand, fill_char='_')."""
    return FakeWidget


@pytest.fixture
def with_hints() -> Callable[[list], list]:
    """Pair every widget with default rendering hints."""
    def pair(widgets: list) -> list:
        return [(w, RenderingHints()) for w in widgets]
    return pair


@pytest.fixture
def make_grid() -> Callable[..., CellGrid]:
    """Factory: make_grid(width, height) or make_grid(width, height, "row row")."""
    def build(width: int, height: int, rows: str | None = None) -> CellGrid:
        if rows is None:
            return CellGrid.with_size((width, height))
        return CellGrid.from_str((width, height), rows)
    return build
