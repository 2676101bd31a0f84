"""Typer CLI application for experimenting with layouts."""

import json
import logging
import os
from typing import Annotated, Optional

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
    HAS_TYPER = True
except ImportError:
    HAS_TYPER = False

LOG_LEVEL_ENV = "CELLPANE_LOG_LEVEL"


def _configure_logging(verbose: bool, console: "Console") -> None:
    """Send library logs to stderr through rich if requested."""
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV)
    if not level_name:
        return
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level in {LOG_LEVEL_ENV}: {level_name}")
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_app() -> "typer.Typer":
    """Create and configure the CLI application."""
    if not HAS_TYPER:
        raise ImportError("typer and rich are required for CLI. Install with: pip install cellpane[cli]")

    from cellpane.core.cell import StyleModifier
    from cellpane.core.grid import CellGrid
    from cellpane.render import TerminalRenderer
    from cellpane.widget.base import RenderingHints
    from cellpane.widget.demand import parse_demand
    from cellpane.widget.layouts import HorizontalLayout, SeparatingStyle, VerticalLayout, layout_linearly
    from cellpane.widget.widgets import LineLabel
    from cellpane.cli.terminal import Terminal

    app = typer.Typer(
        name="cellpane",
        help="Inspect how cellpane distributes space between widgets.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log layout decisions to stderr")] = False,
    ) -> None:
        """Inspect how cellpane distributes space between widgets."""
        _configure_logging(verbose, err_console)

    @app.command()
    def allocate(
        available: Annotated[int, typer.Argument(min=0, help="Space to distribute")],
        demands: Annotated[list[str], typer.Argument(help="Demands: N (exact), A..B (range) or N+ (at least)")],
        separator: Annotated[int, typer.Option("--separator", "-s", min=0, help="Separator size between elements")] = 0,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show how AVAILABLE units are shared between DEMANDS."""
        try:
            parsed = [parse_demand(d) for d in demands]
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="DEMANDS") from e

        result = layout_linearly(available, separator, parsed)

        if json_output:
            print(json.dumps(result))
            return

        table = Table(title=f"{available} units, separator {separator}")
        table.add_column("#", justify="right")
        table.add_column("Demand")
        table.add_column("Assigned", justify="right")
        for i, (demand, space) in enumerate(zip(parsed, result)):
            table.add_row(str(i), str(demand), str(space))
        console.print(table)

    @app.command()
    def demo(
        texts: Annotated[list[str], typer.Argument(help="One label per text")],
        width: Annotated[Optional[int], typer.Option("--width", "-w", min=0, help="Grid width (default: terminal)")] = None,
        height: Annotated[Optional[int], typer.Option("--height", "-H", min=0, help="Grid height (default: terminal)")] = None,
        vertical: Annotated[bool, typer.Option("--vertical", help="Stack labels top to bottom")] = False,
        separator: Annotated[Optional[str], typer.Option("--separator", "-s", help="Character drawn between labels")] = None,
        alternate: Annotated[bool, typer.Option("--alternate", "-a", help="Invert every other label")] = False,
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Print without colors")] = False,
    ) -> None:
        """Lay out TEXTS as labels and print the resulting grid."""
        if separator is not None and alternate:
            raise typer.BadParameter("--separator and --alternate are mutually exclusive")

        if separator is not None:
            try:
                style = SeparatingStyle.draw(separator)
            except ValueError as e:
                raise typer.BadParameter(str(e), param_hint="--separator") from e
        elif alternate:
            style = SeparatingStyle.alternating(StyleModifier(toggle_reverse=True))
        else:
            style = SeparatingStyle.NONE

        size = Terminal.size()
        grid = CellGrid(
            width=width if width is not None else size.cols,
            height=height if height is not None else size.rows - 1,
        )
        layout = VerticalLayout(style) if vertical else HorizontalLayout(style)
        labels = [LineLabel(text) for text in texts]
        layout.draw(grid.create_root_window(), [(label, RenderingHints()) for label in labels])

        output = str(grid) if plain else TerminalRenderer().render(grid)
        Terminal.write(output + "\n")

    return app
