"""gridmodel CLI.

Command-line interface for resolving grids and querying their geometry.
"""

from __future__ import annotations

import json
import sys
from typing import Annotated, Any, NoReturn

import typer

from gridmodel import __version__
from gridmodel.exceptions import GridError
from gridmodel.geometry.primitives import Region
from gridmodel.layout.grid import Grid, create_grid
from gridmodel.layout.iteration import Axis, Corner
from gridmodel.utils.logging import bind_grid_context, configure_logging, get_logger

app = typer.Typer(
    name="gridmodel",
    help="gridmodel: resolve grid layouts and query cell geometry",
    add_completion=False,
)


# =============================================================================
# Shared options
# =============================================================================

WidthOpt = Annotated[float | None, typer.Option("--width", help="Overall width")]
HeightOpt = Annotated[float | None, typer.Option("--height", help="Overall height")]
AspectRatioOpt = Annotated[
    float | None, typer.Option("--aspect-ratio", help="Overall width / height")
]
RowsOpt = Annotated[float | None, typer.Option("--rows", "-r", help="Number of rows")]
ColumnsOpt = Annotated[
    float | None, typer.Option("--columns", "-c", help="Number of columns")
]
CellWidthOpt = Annotated[float | None, typer.Option("--cell-width", help="Cell width")]
CellHeightOpt = Annotated[float | None, typer.Option("--cell-height", help="Cell height")]
GutterWidthOpt = Annotated[
    float | None, typer.Option("--gutter-width", help="Horizontal gutter")
]
GutterHeightOpt = Annotated[
    float | None, typer.Option("--gutter-height", help="Vertical gutter")
]
GutterOpt = Annotated[
    float | None, typer.Option("--gutter", "-g", help="Gutter in both directions")
]
VerboseOpt = Annotated[
    int, typer.Option("--verbose", "-v", count=True, help="Increase verbosity (-v, -vv)")
]
JsonOpt = Annotated[bool, typer.Option("--json", help="Output as JSON")]


# =============================================================================
# Commands
# =============================================================================


@app.command()
def version(json_output: JsonOpt = False) -> None:
    """Show version information."""
    if json_output:
        typer.echo(json.dumps({"version": __version__}))
    else:
        typer.echo(f"gridmodel {__version__}")


@app.command()
def info(  # noqa: PLR0913
    width: WidthOpt = None,
    height: HeightOpt = None,
    aspect_ratio: AspectRatioOpt = None,
    rows: RowsOpt = None,
    columns: ColumnsOpt = None,
    cell_width: CellWidthOpt = None,
    cell_height: CellHeightOpt = None,
    gutter_width: GutterWidthOpt = None,
    gutter_height: GutterHeightOpt = None,
    gutter: GutterOpt = None,
    verbose: VerboseOpt = 0,
    json_output: JsonOpt = False,
) -> None:
    """Resolve a grid and print its dimensions."""
    _configure_logging(verbose)
    bind_grid_context(command="info")
    try:
        grid = _build_grid(locals())
        if json_output:
            typer.echo(json.dumps(grid.summary(), indent=2))
        else:
            for key, value in grid.info().items():
                typer.echo(f"{key.replace('_', ' '):<16}{value}")
    except GridError as e:
        _fail(e, json_output)


@app.command()
def cell(  # noqa: PLR0913
    column: Annotated[int, typer.Argument(help="Zero-based column index")],
    row: Annotated[int, typer.Argument(help="Zero-based row index")],
    width: WidthOpt = None,
    height: HeightOpt = None,
    aspect_ratio: AspectRatioOpt = None,
    rows: RowsOpt = None,
    columns: ColumnsOpt = None,
    cell_width: CellWidthOpt = None,
    cell_height: CellHeightOpt = None,
    gutter_width: GutterWidthOpt = None,
    gutter_height: GutterHeightOpt = None,
    gutter: GutterOpt = None,
    verbose: VerboseOpt = 0,
    json_output: JsonOpt = False,
) -> None:
    """Print the region of one cell."""
    _configure_logging(verbose)
    bind_grid_context(command="cell")
    try:
        grid = _build_grid(locals())
        _echo_region(grid.cell_region(column, row), json_output)
    except GridError as e:
        _fail(e, json_output)


@app.command(name="range")
def cell_range(  # noqa: PLR0913
    start_column: Annotated[int, typer.Argument(help="Column of the first cell")],
    start_row: Annotated[int, typer.Argument(help="Row of the first cell")],
    end_column: Annotated[int, typer.Argument(help="Column of the last cell")],
    end_row: Annotated[int, typer.Argument(help="Row of the last cell")],
    width: WidthOpt = None,
    height: HeightOpt = None,
    aspect_ratio: AspectRatioOpt = None,
    rows: RowsOpt = None,
    columns: ColumnsOpt = None,
    cell_width: CellWidthOpt = None,
    cell_height: CellHeightOpt = None,
    gutter_width: GutterWidthOpt = None,
    gutter_height: GutterHeightOpt = None,
    gutter: GutterOpt = None,
    verbose: VerboseOpt = 0,
    json_output: JsonOpt = False,
) -> None:
    """Print the region covering a block of cells."""
    _configure_logging(verbose)
    bind_grid_context(command="range")
    try:
        grid = _build_grid(locals())
        region = grid.cell_range_region(start_column, start_row, end_column, end_row)
        _echo_region(region, json_output)
    except GridError as e:
        _fail(e, json_output)


@app.command()
def walk(  # noqa: PLR0913
    width: WidthOpt = None,
    height: HeightOpt = None,
    aspect_ratio: AspectRatioOpt = None,
    rows: RowsOpt = None,
    columns: ColumnsOpt = None,
    cell_width: CellWidthOpt = None,
    cell_height: CellHeightOpt = None,
    gutter_width: GutterWidthOpt = None,
    gutter_height: GutterHeightOpt = None,
    gutter: GutterOpt = None,
    corner: Annotated[
        Corner | None, typer.Option("--corner", help="Starting corner")
    ] = None,
    axis: Annotated[Axis | None, typer.Option("--axis", help="Primary axis")] = None,
    verbose: VerboseOpt = 0,
    json_output: JsonOpt = False,
) -> None:
    """Print the cells in traversal order."""
    _configure_logging(verbose)
    bind_grid_context(command="walk")
    try:
        grid = _build_grid(locals())
        order = [list(index) for index in grid.cells(corner, axis)]
        if json_output:
            typer.echo(json.dumps(order))
        else:
            typer.echo(" ".join(f"({c},{r})" for c, r in order))
    except GridError as e:
        _fail(e, json_output)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """gridmodel: resolve grid layouts and query cell geometry."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


# =============================================================================
# Helpers
# =============================================================================

_GRID_OPTIONS = (
    "width",
    "height",
    "aspect_ratio",
    "rows",
    "columns",
    "cell_width",
    "cell_height",
    "gutter_width",
    "gutter_height",
    "gutter",
)


def _build_grid(options: dict[str, Any]) -> Grid:
    params = {key: options[key] for key in _GRID_OPTIONS if options.get(key) is not None}
    return create_grid(**params)


def _region_to_dict(region: Region) -> dict[str, Any]:
    return {
        "top": region.top,
        "right": region.right,
        "bottom": region.bottom,
        "left": region.left,
        "width": region.dimensions.width,
        "height": region.dimensions.height,
    }


def _echo_region(region: Region, json_output: bool) -> None:
    data = _region_to_dict(region)
    if json_output:
        typer.echo(json.dumps(data, indent=2))
    else:
        for key, value in data.items():
            typer.echo(f"{key:<8}{value}")


def _fail(error: GridError, json_output: bool) -> NoReturn:
    """Report a grid error and exit with status 1."""
    get_logger(__name__).debug("Command failed", error=str(error))
    if json_output:
        typer.echo(json.dumps({"error": str(error)}))
    else:
        typer.echo(f"Error: {error}", err=True)
    raise typer.Exit(1)


def _configure_logging(verbose: int) -> None:
    """Configure logging based on verbosity level."""
    if verbose == 0:
        level = "WARNING"
    elif verbose == 1:
        level = "INFO"
    else:  # verbose >= 2
        level = "DEBUG"

    # stdout carries command output
    configure_logging(level=level, stream=sys.stderr)


if __name__ == "__main__":  # pragma: no cover
    app()
