"""Base widget protocol and rendering hints."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Protocol, runtime_checkable

from cellpane.core.window import Window
from cellpane.widget.demand import Demand2D


@dataclass(frozen=True)
class RenderingHints:
    """Information passed down to widgets while drawing."""
    active: bool = True

    def with_active(self, active: bool) -> "RenderingHints":
        """Return a copy with the active (focused) flag replaced."""
        return replace(self, active=active)


@runtime_checkable
class Widget(Protocol):
    """Protocol for widgets that take part in layout."""

    def space_demand(self) -> Demand2D:
        """Report the space this widget wants. Must be side-effect free."""
        ...

    def draw(self, window: Window, hints: RenderingHints) -> None:
        """Draw into window. Must not touch anything outside of it."""
        ...
