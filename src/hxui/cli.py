"""
hxui command line.

Inspection helpers for the component library: the icon registry, sparkline
geometry and the head asset tags for a project's options.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from hxui._version import get_version
from hxui.components import Sparkline, icons
from hxui.config import find_options, head_assets, load_options
from hxui.core.context import render
from hxui.core.geometry import compute_points, format_points
from hxui.core.variants import SparklineType
from hxui.errors import ConfigError

app = typer.Typer(
    help="Server-rendered htmx UI components.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log render decisions at DEBUG level")
    ] = False,
) -> None:
    """Server-rendered htmx UI components."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def version() -> None:
    """Print the hxui version."""
    typer.echo(f"hxui {get_version()}")


@app.command(name="icons")
def list_icons(
    search: Annotated[
        str | None, typer.Argument(help="Only show icons whose name contains this text")
    ] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List the registered icon names."""
    names = sorted(icons.names(), key=str.casefold)
    if search:
        names = [n for n in names if search.casefold() in n.casefold()]

    if output_json:
        console.print_json(json.dumps(names))
        return

    if not names:
        console.print("[dim]No icons found.[/dim]")
        return

    table = Table(title="Icons")
    table.add_column("Name")
    for name in names:
        table.add_row(name)
    console.print(table)
    console.print(f"\n[dim]{len(names)} icon(s)[/dim]")


@app.command()
def sparkline(
    values: Annotated[list[float], typer.Argument(help="Data series")],
    chart_type: Annotated[
        SparklineType, typer.Option("--type", "-t", help="line, area or bar")
    ] = SparklineType.LINE,
    svg: Annotated[bool, typer.Option("--svg", help="Print the rendered SVG")] = False,
    width: Annotated[float, typer.Option(help="Drawing width")] = 200,
    height: Annotated[float, typer.Option(help="Drawing height")] = 40,
) -> None:
    """Print the points a series maps to, or the full sparkline SVG."""
    if svg:
        typer.echo(render(Sparkline(values=tuple(values), type=chart_type)))
        return
    typer.echo(format_points(compute_points(values, width, height)))


@app.command()
def assets(
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="pyproject.toml or hxui.toml to read options from"),
    ] = None,
) -> None:
    """Print the <link> and <script> tags to place in the page head."""
    try:
        options = load_options(config) if config else find_options(Path.cwd())
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e
    typer.echo(head_assets(options))
