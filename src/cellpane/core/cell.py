"""Cell and style primitives - atomic units of the character grid."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_FG = 37  # White
DEFAULT_BG = 40  # Black


@dataclass(frozen=True, slots=True)
class Style:
    """
    Visual attributes of a cell.

    Colors are SGR codes (30-37/90-97 foreground, 40-47/100-107 background).
    """
    fg: int = DEFAULT_FG
    bg: int = DEFAULT_BG
    bold: bool = False
    underline: bool = False
    reverse: bool = False

    def is_default(self) -> bool:
        """Check if this style equals the plain default style."""
        return self == Style()


@dataclass(frozen=True, slots=True)
class StyleModifier:
    """
    A set of optional overrides applied on top of an existing Style.

    Attributes left as None are inherited unchanged. ``toggle_reverse``
    flips the reverse attribute after ``reverse`` has been applied.
    """
    fg: int | None = None
    bg: int | None = None
    bold: bool | None = None
    underline: bool | None = None
    reverse: bool | None = None
    toggle_reverse: bool = False

    def apply(self, style: Style) -> Style:
        """Return a new style with this modifier's overrides applied."""
        changes: dict[str, object] = {}
        for name in ("fg", "bg", "bold", "underline", "reverse"):
            value = getattr(self, name)
            if value is not None:
                changes[name] = value
        result = replace(style, **changes)
        if self.toggle_reverse:
            result = replace(result, reverse=not result.reverse)
        return result

    def on_top_of(self, other: "StyleModifier") -> "StyleModifier":
        """Combine two modifiers; overrides from self win over other."""
        return StyleModifier(
            fg=self.fg if self.fg is not None else other.fg,
            bg=self.bg if self.bg is not None else other.bg,
            bold=self.bold if self.bold is not None else other.bold,
            underline=self.underline if self.underline is not None else other.underline,
            reverse=self.reverse if self.reverse is not None else other.reverse,
            toggle_reverse=self.toggle_reverse != other.toggle_reverse,
        )


@dataclass(slots=True)
class Cell:
    """
    A single position in the character grid.

    ``char`` holds one grapheme cluster. An empty ``char`` marks the
    continuation of a wide cluster that started in a cell to the left.
    """
    char: str = ' '
    style: Style = Style()

    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, style=self.style)

    @property
    def is_continuation(self) -> bool:
        return self.char == ''

    def is_default(self) -> bool:
        """Check if this cell is an empty space in the default style."""
        return self.char == ' ' and self.style.is_default()
