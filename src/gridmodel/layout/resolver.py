"""Grid dimension resolution.

This module turns a partial :class:`GridConfig` into the four mutually
consistent :class:`Dimensions` a grid is made of. Resolution runs in four
stages, each depending only on the stages before it:

1. Overall dimensions: width, height and aspect ratio of the whole grid.
   A missing width (height) is inferred from columns, cell width and
   gutter width (rows, cell height, gutter height) when neither it nor the
   aspect ratio was given.
2. Matrix dimensions: column and row counts. Missing counts are derived
   as ``overall / cell`` and truncated to whole cells; the truncated matrix
   may not exactly fill the overall size, and the gutters absorb the rest.
3. Cell dimensions: ``(overall - gutter * (count - 1)) / count`` when not
   given.
4. Gutter dimensions: always derived as
   ``(overall - count * cell) / (count - 1)``, zero for a single row or
   column. An explicit gutter is a consistency check, not an override.

Span invariant:
    After resolution, for each axis with more than one row or column,
    ``overall == count * cell + (count - 1) * gutter``
    holds to within the float tolerance. A single row or column may be
    narrower than the grid: its gutter is zero and nothing is checked.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from gridmodel.config import settings
from gridmodel.exceptions import (
    ConflictingParamsError,
    InsufficientParamsError,
    ZeroGridDimensionError,
)
from gridmodel.geometry.primitives import Dimensions
from gridmodel.layout.params import GridConfig
from gridmodel.utils.logging import get_logger

logger = get_logger(__name__)

INSUFFICIENT_PARAMS_MESSAGE = "You didn't supply sufficient params to derive a valid grid"
CONFLICTING_PARAMS_MESSAGE = "You supplied params that cannot be reconciled to a valid grid"
ZERO_GRID_DIMENSION_MESSAGE = "Zero is not a valid value for rows or columns"


class ResolvedDimensions(NamedTuple):
    """Result of resolving a grid configuration.

    Attributes:
        dimensions: Overall pixel size of the grid.
        matrix_dimensions: Column count (width) and row count (height).
        cell_dimensions: Pixel size of one cell.
        gutter_dimensions: Pixel size of the space between cells.
    """

    dimensions: Dimensions
    matrix_dimensions: Dimensions
    cell_dimensions: Dimensions
    gutter_dimensions: Dimensions


def span(count: float, cell: float, gutter: float) -> float:
    """Length covered by ``count`` cells separated by gutters."""
    return cell * count + gutter * (count - 1)


def _exceeds(a: float, b: float, tolerance: float) -> bool:
    return a > b and not math.isclose(a, b, abs_tol=tolerance)


def _agrees(a: float, b: float, tolerance: float) -> bool:
    return math.isclose(a, b, abs_tol=tolerance)


def check_cross_constraints(config: GridConfig, tolerance: float) -> None:
    """Reject configurations whose cells cannot fit the explicit overall size.

    Raises:
        ConflictingParamsError: If ``columns * cell_width > width`` or
            ``rows * cell_height > height`` with all three values explicit.
    """
    columns, rows = config.whole_columns, config.whole_rows
    if (
        columns is not None
        and config.cell_width is not None
        and config.width is not None
        and _exceeds(columns * config.cell_width, config.width, tolerance)
    ):
        raise ConflictingParamsError(
            f"{CONFLICTING_PARAMS_MESSAGE}: {columns} columns of {config.cell_width} "
            f"exceed width {config.width}"
        )
    if (
        rows is not None
        and config.cell_height is not None
        and config.height is not None
        and _exceeds(rows * config.cell_height, config.height, tolerance)
    ):
        raise ConflictingParamsError(
            f"{CONFLICTING_PARAMS_MESSAGE}: {rows} rows of {config.cell_height} "
            f"exceed height {config.height}"
        )


def resolve_dimensions(config: GridConfig) -> Dimensions:
    """Stage 1: resolve the overall width, height and aspect ratio.

    Raises:
        InsufficientParamsError: If fewer than two of width, height and
            aspect ratio are given or inferable.
        ConflictingParamsError: If all three are given and disagree.
    """
    width, height = config.width, config.height
    columns, rows = config.whole_columns, config.whole_rows

    if width is None and config.aspect_ratio is None:
        if columns is not None and config.cell_width is not None:
            width = span(columns, config.cell_width, config.effective_gutter_width or 0)

    if height is None and config.aspect_ratio is None:
        if rows is not None and config.cell_height is not None:
            height = span(rows, config.cell_height, config.effective_gutter_height or 0)

    supplied = [v for v in (width, height, config.aspect_ratio) if v is not None]
    if len(supplied) < 2:
        raise InsufficientParamsError(
            f"{INSUFFICIENT_PARAMS_MESSAGE}: need two of width, height, aspect_ratio"
        )

    return Dimensions(width=width, height=height, aspect_ratio=config.aspect_ratio)


def _whole_count(value: float, tolerance: float) -> int:
    # Absorb float noise such as 0.3 / 0.1 == 2.9999999999999996
    return math.floor(value + tolerance)


def resolve_matrix_dimensions(
    config: GridConfig, dimensions: Dimensions, tolerance: float
) -> Dimensions:
    """Stage 2: resolve the column and row counts.

    Raises:
        InsufficientParamsError: If a count is neither given nor derivable.
        ZeroGridDimensionError: If a derived count truncates to zero.
    """
    columns = config.whole_columns
    if columns is None and config.cell_width is not None:
        columns = _whole_count(dimensions.width / config.cell_width, tolerance)

    rows = config.whole_rows
    if rows is None and config.cell_height is not None:
        rows = _whole_count(dimensions.height / config.cell_height, tolerance)

    if columns is None or rows is None:
        raise InsufficientParamsError(
            f"{INSUFFICIENT_PARAMS_MESSAGE}: cannot determine rows and columns"
        )

    if columns == 0:
        raise ZeroGridDimensionError(
            f"{ZERO_GRID_DIMENSION_MESSAGE}: cell_width is wider than the grid",
            param="columns",
            value=columns,
        )
    if rows == 0:
        raise ZeroGridDimensionError(
            f"{ZERO_GRID_DIMENSION_MESSAGE}: cell_height is taller than the grid",
            param="rows",
            value=rows,
        )

    return Dimensions(width=columns, height=rows)


def _derive_cell(
    overall: float, count: int, gutter: float, axis: str, tolerance: float
) -> float:
    cell = (overall - gutter * (count - 1)) / count
    if cell < 0:
        if not math.isclose(cell, 0, abs_tol=tolerance):
            raise ConflictingParamsError(
                f"{CONFLICTING_PARAMS_MESSAGE}: gutters leave no room for cells",
                param=f"cell_{axis}",
                value=cell,
            )
        cell = 0.0
    return cell


def resolve_cell_dimensions(
    config: GridConfig,
    dimensions: Dimensions,
    matrix_dimensions: Dimensions,
    tolerance: float,
) -> Dimensions:
    """Stage 3: resolve the size of a single cell.

    Raises:
        ConflictingParamsError: If the gutters alone overflow the grid.
    """
    cell_width = config.cell_width
    if cell_width is None:
        cell_width = _derive_cell(
            dimensions.width,
            int(matrix_dimensions.width),
            config.effective_gutter_width or 0,
            "width",
            tolerance,
        )

    cell_height = config.cell_height
    if cell_height is None:
        cell_height = _derive_cell(
            dimensions.height,
            int(matrix_dimensions.height),
            config.effective_gutter_height or 0,
            "height",
            tolerance,
        )

    return Dimensions(width=cell_width, height=cell_height)


def _derive_gutter(
    overall: float,
    count: int,
    cell: float,
    explicit: float | None,
    axis: str,
    tolerance: float,
) -> float:
    if count == 1:
        # A lone row or column has no gutters; any leftover space stays unfilled
        return 0.0

    gutter = (overall - count * cell) / (count - 1)
    if gutter < 0 and not _agrees(gutter, 0, tolerance):
        raise ConflictingParamsError(
            f"{CONFLICTING_PARAMS_MESSAGE}: {count} cells of {cell} overflow {overall}",
            param=f"cell_{axis}",
            value=cell,
        )
    if explicit is not None and not _agrees(explicit, gutter, tolerance):
        raise ConflictingParamsError(
            f"{CONFLICTING_PARAMS_MESSAGE}: gutter_{axis} should be {gutter}",
            param=f"gutter_{axis}",
            value=explicit,
        )
    return max(gutter, 0.0)


def resolve_gutter_dimensions(
    config: GridConfig,
    dimensions: Dimensions,
    matrix_dimensions: Dimensions,
    cell_dimensions: Dimensions,
    tolerance: float,
) -> Dimensions:
    """Stage 4: derive the gutters and check them against explicit values.

    Raises:
        ConflictingParamsError: If an explicit gutter disagrees with the
            derived one, or the cells do not fit.
    """
    gutter_width = _derive_gutter(
        dimensions.width,
        int(matrix_dimensions.width),
        cell_dimensions.width,
        config.effective_gutter_width,
        "width",
        tolerance,
    )
    gutter_height = _derive_gutter(
        dimensions.height,
        int(matrix_dimensions.height),
        cell_dimensions.height,
        config.effective_gutter_height,
        "height",
        tolerance,
    )
    return Dimensions(width=gutter_width, height=gutter_height)


def resolve(config: GridConfig, *, tolerance: float | None = None) -> ResolvedDimensions:
    """Resolve a grid configuration into its four dimensions.

    Args:
        config: Partial grid description.
        tolerance: Absolute tolerance for float comparisons.
            Defaults to settings.FLOAT_TOLERANCE.

    Returns:
        ResolvedDimensions with overall, matrix, cell and gutter dimensions.

    Raises:
        InsufficientParamsError: If the configuration does not pin down a grid.
        ConflictingParamsError: If the configuration contradicts itself.
        ZeroGridDimensionError: If rows or columns come out as zero.
    """
    tolerance = settings.FLOAT_TOLERANCE if tolerance is None else tolerance
    log = logger.bind(**config.supplied())

    try:
        check_cross_constraints(config, tolerance)
        dimensions = resolve_dimensions(config)
        matrix_dimensions = resolve_matrix_dimensions(config, dimensions, tolerance)
        cell_dimensions = resolve_cell_dimensions(
            config, dimensions, matrix_dimensions, tolerance
        )
        gutter_dimensions = resolve_gutter_dimensions(
            config, dimensions, matrix_dimensions, cell_dimensions, tolerance
        )
    except (InsufficientParamsError, ConflictingParamsError, ZeroGridDimensionError) as e:
        log.debug("Grid resolution failed", error=str(e), error_type=type(e).__name__)
        raise

    log.debug(
        "Grid resolved",
        dimensions=dimensions.to_tuple(),
        matrix=matrix_dimensions.to_tuple(),
        cell=cell_dimensions.to_tuple(),
        gutter=gutter_dimensions.to_tuple(),
    )
    return ResolvedDimensions(
        dimensions=dimensions,
        matrix_dimensions=matrix_dimensions,
        cell_dimensions=cell_dimensions,
        gutter_dimensions=gutter_dimensions,
    )
