"""Space demands - how much room a widget wants along each axis."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Demand:
    """
    Size requirement along a single axis.

    ``min`` is the extent the widget needs, ``max`` the most it can make
    use of. ``max=None`` means the widget can use any amount of space.
    """
    min: int
    max: int | None = None

    def __post_init__(self) -> None:
        if self.min < 0:
            raise ValueError(f"Demand minimum must be non-negative, got {self.min}")
        if self.max is not None and self.max < self.min:
            raise ValueError(f"Demand maximum {self.max} is less than minimum {self.min}")

    @classmethod
    def exact(cls, n: int) -> "Demand":
        """Exactly n units, no more, no less."""
        return cls(n, n)

    @classmethod
    def from_to(cls, lo: int, hi: int) -> "Demand":
        """At least lo, at most hi units."""
        return cls(lo, hi)

    @classmethod
    def at_least(cls, n: int) -> "Demand":
        """At least n units, unbounded above."""
        return cls(n, None)

    @property
    def is_exact(self) -> bool:
        return self.max == self.min

    @property
    def is_bounded(self) -> bool:
        return self.max is not None

    def __add__(self, other: "Demand") -> "Demand":
        if not isinstance(other, Demand):
            return NotImplemented
        if self.max is None or other.max is None:
            return Demand(self.min + other.min, None)
        return Demand(self.min + other.min, self.max + other.max)

    def max_with(self, other: "Demand") -> "Demand":
        """Pairwise maximum: the demand of something that must fit either."""
        if self.max is None or other.max is None:
            hi = None
        else:
            hi = max(self.max, other.max)
        return Demand(max(self.min, other.min), hi)

    def __str__(self) -> str:
        if self.max is None:
            return f"{self.min}+"
        if self.max == self.min:
            return str(self.min)
        return f"{self.min}..{self.max}"


# Axis aliases. They are the same type; the names document intent.
ColDemand = Demand
RowDemand = Demand


@dataclass(frozen=True, slots=True)
class Demand2D:
    """Independent width and height demands reported by a widget."""
    width: Demand
    height: Demand

    @classmethod
    def exact(cls, width: int, height: int) -> "Demand2D":
        return cls(Demand.exact(width), Demand.exact(height))


def parse_demand(text: str) -> Demand:
    """
    Parse the compact demand notation used by ``str(Demand)``.

    ``"3"`` is exact, ``"1..5"`` is from_to, ``"2+"`` is at_least.
    """
    text = text.strip()
    try:
        if text.endswith('+'):
            return Demand.at_least(int(text[:-1]))
        if '..' in text:
            lo, hi = text.split('..', 1)
            return Demand.from_to(int(lo), int(hi))
        return Demand.exact(int(text))
    except ValueError as e:
        raise ValueError(f"Invalid demand {text!r}: {e}") from e
