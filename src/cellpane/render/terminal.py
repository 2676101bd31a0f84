"""Render a cell grid to terminal-compatible escape sequences."""

from cellpane.core.cell import DEFAULT_BG, Style
from cellpane.core.grid import CellGrid


def _sgr_transition(last: Style, style: Style) -> list[str]:
    """SGR parameters needed to go from one style to the next."""
    parts: list[str] = []
    if style.bold != last.bold:
        parts.append('1' if style.bold else '22')
    if style.underline != last.underline:
        parts.append('4' if style.underline else '24')
    if style.reverse != last.reverse:
        parts.append('7' if style.reverse else '27')
    if style.fg != last.fg:
        parts.append(str(style.fg))
    if style.bg != last.bg:
        # Use default bg (49) for black to match terminal background
        parts.append('49' if style.bg == DEFAULT_BG else str(style.bg))
    return parts


class TerminalRenderer:
    """
    Render a CellGrid to ANSI escape sequences for terminal display.

    Only emits SGR codes when attributes change, and resets at the end of
    each styled line so colors do not bleed into the rest of the terminal.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, grid: CellGrid) -> str:
        """Render grid to ANSI string."""
        lines: list[str] = []
        default = Style()
        last = default

        for row in grid.rows():
            line_parts: list[str] = []

            for cell in row:
                if cell.is_continuation:
                    continue
                sgr_parts = _sgr_transition(last, cell.style)
                if sgr_parts:
                    line_parts.append(f"\x1b[{';'.join(sgr_parts)}m")
                    last = cell.style
                line_parts.append(cell.char)

            if last != default:
                line_parts.append('\x1b[0m')
                last = default

            lines.append(''.join(line_parts))

        result = '\n'.join(lines)

        if self.reset_at_end:
            result += '\x1b[0m'

        return result
