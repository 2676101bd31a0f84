"""
Linear layouts - distribute space along one axis and draw children.

The allocation is max-min fair: every child first receives its minimum
(as long as space lasts), then the surplus is poured into the children
that can still grow, raising the smallest ones first ("ladder
equalization") until space runs out or everyone hits their maximum.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Sequence

from cellpane.core.cell import StyleModifier
from cellpane.core.grapheme import GraphemeCluster
from cellpane.core.window import Window
from cellpane.widget.base import RenderingHints, Widget
from cellpane.widget.demand import Demand, Demand2D

logger = logging.getLogger(__name__)


class SeparatorKind(Enum):
    """What goes between consecutive children of a layout."""
    NONE = "none"
    ALTERNATING = "alternating"  # Every other child gets a modified style
    DRAW = "draw"                # A line of repeated clusters


@dataclass(frozen=True)
class SeparatingStyle:
    """
    How children of a linear layout are visually separated.

    Use ``SeparatingStyle.NONE``, ``SeparatingStyle.alternating(modifier)``
    or ``SeparatingStyle.draw(cluster)``. Only the draw variant takes up
    space: one cluster wide in a horizontal layout, one row tall in a
    vertical layout.
    """
    kind: SeparatorKind
    modifier: StyleModifier | None = None
    cluster: GraphemeCluster | None = None

    NONE: ClassVar["SeparatingStyle"]

    def __post_init__(self) -> None:
        wants_modifier = self.kind is SeparatorKind.ALTERNATING
        wants_cluster = self.kind is SeparatorKind.DRAW
        if (self.modifier is not None) != wants_modifier:
            raise ValueError(f"{self.kind.name} separator: modifier must be {'set' if wants_modifier else 'None'}")
        if (self.cluster is not None) != wants_cluster:
            raise ValueError(f"{self.kind.name} separator: cluster must be {'set' if wants_cluster else 'None'}")

    @classmethod
    def alternating(cls, modifier: StyleModifier) -> "SeparatingStyle":
        return cls(SeparatorKind.ALTERNATING, modifier=modifier)

    @classmethod
    def draw(cls, cluster: GraphemeCluster | str) -> "SeparatingStyle":
        if isinstance(cluster, str):
            cluster = GraphemeCluster(cluster)
        return cls(SeparatorKind.DRAW, cluster=cluster)

    def width(self) -> int:
        """Columns taken by one separator in a horizontal layout."""
        if self.kind is SeparatorKind.DRAW:
            assert self.cluster is not None
            return self.cluster.width
        return 0

    def height(self) -> int:
        """Rows taken by one separator in a vertical layout."""
        if self.kind is SeparatorKind.DRAW:
            return 1
        return 0


SeparatingStyle.NONE = SeparatingStyle(SeparatorKind.NONE)


def layout_linearly(
    available_space: int,
    separator_width: int,
    demands: Sequence[Demand],
) -> list[int]:
    """
    Assign an extent to every demand, in order.

    Guarantees:
      - the assigned extents plus one separator between each pair of
        placed elements never exceed available_space;
      - no element exceeds its maximum;
      - surplus space is only left over if every element that could still
        grow has reached its maximum.

    If space runs out before every minimum is met, the elements that no
    longer fit (including the separator in front of them) get 0.
    """
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("layout_linearly: available=%d separator=%d demands=%s",
                     available_space, separator_width, [str(d) for d in demands])

    assigned = [0] * len(demands)
    unfinished: list[int] = []

    # Everyone gets their minimum first, in order
    for i, demand in enumerate(demands):
        if demand.max is None or demand.max != demand.min:
            unfinished.append(i)

        space = min(available_space, demand.min)
        available_space -= space
        assigned[i] = space

        # Last element does not have a following separator
        separator = 0 if i == len(demands) - 1 else separator_width
        if available_space <= separator:
            logger.debug("layout_linearly: out of space after element %d: %s", i, assigned)
            return assigned
        available_space -= separator

    # Equalize the remaining space over unfinished elements
    while True:
        unfinished.sort(key=lambda idx: assigned[idx])
        if not unfinished:
            logger.debug("layout_linearly: all elements at maximum: %s", assigned)
            return assigned

        # Plan how far up the "ladder" of current extents we can afford to
        # raise the smallest elements
        planned_to_spend = 0
        planned_level = 0
        num_equalized = 0
        for step, idx in enumerate(unfinished):
            level = assigned[idx]
            increase_cost = (level - planned_level) * step
            if planned_to_spend + increase_cost > available_space:
                break
            num_equalized = step + 1
            planned_to_spend += increase_cost
            planned_level = level

        # What is left is less than the next step up the ladder: share it
        per_element_increase = (available_space - planned_to_spend) // num_equalized
        planned_level += per_element_increase

        min_space = assigned[unfinished[0]]
        if min_space == planned_level:
            break
        assert min_space < planned_level, "Invalid planned increase"

        still_unfinished: list[int] = []
        for idx in unfinished:
            max_demand = demands[idx].max
            if max_demand is None or max_demand > planned_level:
                still_unfinished.append(idx)
                target = planned_level
            else:
                target = max_demand
            increase = max(target - assigned[idx], 0)
            assigned[idx] += increase
            available_space -= increase
        unfinished = still_unfinished

    # Hand out what is left one unit at a time
    for idx in unfinished:
        if available_space == 0:
            break
        max_demand = demands[idx].max
        assert max_demand is None or max_demand > assigned[idx], "Invalid demand for unfinished"
        assigned[idx] += 1
        available_space -= 1
    assert available_space == 0, "Not all space distributed"

    logger.debug("layout_linearly: result %s", assigned)
    return assigned


SplitFn = Callable[[Window, int], tuple[Window, Window]]


def draw_linearly(
    window: Window,
    widgets: Sequence[tuple[Widget, RenderingHints]],
    separating_style: SeparatingStyle,
    split: SplitFn,
    window_length: Callable[[Window], int],
    separator_length: Callable[[SeparatingStyle], int],
    demand_dimension: Callable[[Demand2D], Demand],
) -> None:
    """
    Draw widgets one after another along a single axis.

    The axis is defined by the given functions: ``split`` cuts a window
    into head and rest at an offset, ``window_length`` measures a window,
    ``separator_length`` measures the separator and ``demand_dimension``
    picks the relevant component of a widget's demand.
    """
    sep_length = separator_length(separating_style)
    demands = [demand_dimension(w.space_demand()) for w, _ in widgets]
    assigned_spaces = layout_linearly(window_length(window), sep_length, demands)
    assert len(assigned_spaces) == len(widgets), "widgets and spaces length mismatch"
    logger.debug("draw_linearly: length=%d separator=%d spaces=%s",
                 window_length(window), sep_length, assigned_spaces)

    rest = window
    for i, ((widget, hints), space) in enumerate(zip(widgets, assigned_spaces)):
        head, rest = split(rest, space)
        if i % 2 == 1 and separating_style.kind is SeparatorKind.ALTERNATING:
            assert separating_style.modifier is not None
            head.modify_default_style(separating_style.modifier)
        head.clear()  # Fill background using the (possibly modified) style
        widget.draw(head, hints)

        has_next = i + 1 < len(widgets)
        if has_next and separating_style.kind is SeparatorKind.DRAW:
            if window_length(rest) >= sep_length:
                assert separating_style.cluster is not None
                separator, rest = split(rest, sep_length)
                separator.fill(separating_style.cluster)


class HorizontalLayout:
    """Arranges widgets left to right."""

    def __init__(self, separating_style: SeparatingStyle = SeparatingStyle.NONE) -> None:
        self.separating_style = separating_style

    def space_demand(self, widgets: Sequence[Widget]) -> Demand2D:
        """Widths add up, the height is the largest height of any child."""
        total_x = Demand.exact(0)
        total_y = Demand.exact(0)
        for w in widgets:
            demand2d = w.space_demand()
            total_x = total_x + demand2d.width
            total_y = total_y.max_with(demand2d.height)
        if self.separating_style.kind is SeparatorKind.DRAW and widgets:
            total_x = total_x + Demand.exact(self.separating_style.width() * (len(widgets) - 1))
        return Demand2D(width=total_x, height=total_y)

    def draw(self, window: Window, widgets: Sequence[tuple[Widget, RenderingHints]]) -> None:
        draw_linearly(
            window,
            widgets,
            self.separating_style,
            lambda w, pos: w.split_horizontal(pos),
            lambda w: w.get_width(),
            SeparatingStyle.width,
            lambda d: d.width,
        )


class VerticalLayout:
    """Arranges widgets top to bottom."""

    def __init__(self, separating_style: SeparatingStyle = SeparatingStyle.NONE) -> None:
        self.separating_style = separating_style

    def space_demand(self, widgets: Sequence[Widget]) -> Demand2D:
        """Heights add up, the width is the largest width of any child."""
        total_x = Demand.exact(0)
        total_y = Demand.exact(0)
        for w in widgets:
            demand2d = w.space_demand()
            total_x = total_x.max_with(demand2d.width)
            total_y = total_y + demand2d.height
        if self.separating_style.kind is SeparatorKind.DRAW and widgets:
            total_y = total_y + Demand.exact(self.separating_style.height() * (len(widgets) - 1))
        return Demand2D(width=total_x, height=total_y)

    def draw(self, window: Window, widgets: Sequence[tuple[Widget, RenderingHints]]) -> None:
        draw_linearly(
            window,
            widgets,
            self.separating_style,
            lambda w, pos: w.split_vertical(pos),
            lambda w: w.get_height(),
            SeparatingStyle.height,
            lambda d: d.height,
        )
