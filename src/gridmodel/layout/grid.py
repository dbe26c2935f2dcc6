"""The Grid aggregate and its region queries.

A :class:`Grid` holds four resolved :class:`Dimensions` (overall, matrix,
cell, gutter) and answers geometry questions about them: where a cell is,
which region a run of rows or columns covers, how many cells there are.
Grids are immutable; build one with :func:`create_grid` or
:meth:`Grid.from_config`.

Cell Placement:
    The cell at (column, row) has its top-left point at
    ``((cell_width + gutter_width) * column, (cell_height + gutter_height) * row)``.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Self

from pydantic import BaseModel

from gridmodel.exceptions import (
    InvalidColumnIndexError,
    InvalidRowIndexError,
)
from gridmodel.geometry.primitives import Dimensions, Point, Region, region_enclosing
from gridmodel.geometry.validators import is_positive_integer
from gridmodel.layout.iteration import Axis, CellIndex, Corner, GridIterator, Strategy
from gridmodel.layout.params import GridConfig
from gridmodel.layout.resolver import resolve
from gridmodel.utils.logging import get_logger

logger = get_logger(__name__)

INVALID_COLUMN_INDEX_MESSAGE = "The column index supplied was invalid"
INVALID_ROW_INDEX_MESSAGE = "The row index supplied was invalid"


class Grid(BaseModel, frozen=True):
    """A rectangular matrix of uniform cells separated by gutters.

    Attributes:
        dimensions: Overall pixel width, height and aspect ratio.
        matrix_dimensions: Column count (width) and row count (height).
        cell_dimensions: Pixel size of every cell.
        gutter_dimensions: Pixel size of the space between adjacent cells.
    """

    dimensions: Dimensions
    matrix_dimensions: Dimensions
    cell_dimensions: Dimensions
    gutter_dimensions: Dimensions

    @classmethod
    def from_config(cls, config: GridConfig) -> Self:
        """Resolve a configuration into a grid.

        Raises:
            InsufficientParamsError: If the configuration does not pin down a grid.
            ConflictingParamsError: If the configuration contradicts itself.
            ZeroGridDimensionError: If rows or columns come out as zero.
        """
        resolved = resolve(config)
        return cls(**resolved._asdict())

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def width(self) -> float:
        return self.dimensions.width

    @property
    def height(self) -> float:
        return self.dimensions.height

    @property
    def aspect_ratio(self) -> float | None:
        return self.dimensions.aspect_ratio

    @property
    def columns(self) -> int:
        return int(self.matrix_dimensions.width)

    @property
    def rows(self) -> int:
        return int(self.matrix_dimensions.height)

    @property
    def cell_width(self) -> float:
        return self.cell_dimensions.width

    @property
    def cell_height(self) -> float:
        return self.cell_dimensions.height

    @property
    def gutter_width(self) -> float:
        return self.gutter_dimensions.width

    @property
    def gutter_height(self) -> float:
        return self.gutter_dimensions.height

    @property
    def cell_count(self) -> int:
        """Number of cells in the grid (columns * rows)."""
        return int(self.matrix_dimensions.area)

    # ------------------------------------------------------------------
    # Regions
    # ------------------------------------------------------------------

    def _check_column_index(self, index: Any) -> int:
        if not is_positive_integer(index) or index > self.columns - 1:
            raise InvalidColumnIndexError(
                INVALID_COLUMN_INDEX_MESSAGE, index=index, total=self.columns
            )
        return int(index)

    def _check_row_index(self, index: Any) -> int:
        if not is_positive_integer(index) or index > self.rows - 1:
            raise InvalidRowIndexError(INVALID_ROW_INDEX_MESSAGE, index=index, total=self.rows)
        return int(index)

    def cell_region(self, column_index: int, row_index: int) -> Region:
        """Get the region of the cell at the supplied indexes.

        Args:
            column_index: Zero-based column of the cell.
            row_index: Zero-based row of the cell.

        Returns:
            Region of the cell.

        Raises:
            InvalidColumnIndexError: If the column does not exist.
            InvalidRowIndexError: If the row does not exist.
        """
        column = self._check_column_index(column_index)
        row = self._check_row_index(row_index)

        origin = Point(
            x=(self.cell_width + self.gutter_width) * column,
            y=(self.cell_height + self.gutter_height) * row,
        )
        return Region(origin=origin, dimensions=self.cell_dimensions)

    def cell_range_region(
        self,
        start_column: int,
        start_row: int,
        end_column: int,
        end_row: int,
    ) -> Region:
        """Get the region covering every cell between two corner cells.

        The two cells may be given in either order.
        """
        start = self.cell_region(start_column, start_row)
        end = self.cell_region(end_column, end_row)
        return region_enclosing([start, end])

    def column_region(self, index: int) -> Region:
        """Get the region of one column, spanning the full grid height."""
        return self.column_range_region(index)

    def column_range_region(self, start: int, end: int | None = None) -> Region:
        """Get the region covering consecutive columns.

        Args:
            start: Index of the first column.
            end: Index of the last column. Defaults to start.
        """
        return self.cell_range_region(
            start, 0, start if end is None else end, self.rows - 1
        )

    def row_region(self, index: int) -> Region:
        """Get the region of one row, spanning the full grid width."""
        return self.row_range_region(index)

    def row_range_region(self, start: int, end: int | None = None) -> Region:
        """Get the region covering consecutive rows.

        Args:
            start: Index of the first row.
            end: Index of the last row. Defaults to start.
        """
        return self.cell_range_region(
            0, start, self.columns - 1, start if end is None else end
        )

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def iterator(
        self,
        corner: Corner | str | None = None,
        axis: Axis | str | None = None,
        *,
        regions: bool = False,
    ) -> GridIterator:
        """Get a fresh iterator over the cells of this grid.

        Args:
            corner: Starting corner. Defaults to settings.DEFAULT_CORNER.
            axis: Primary axis. Defaults to settings.DEFAULT_AXIS.
            regions: Yield cell regions instead of (column, row) indexes.
        """
        return GridIterator(self, Strategy.of(corner, axis), regions=regions)

    def cells(
        self,
        corner: Corner | str | None = None,
        axis: Axis | str | None = None,
    ) -> Iterator[CellIndex]:
        """Iterate over (column, row) indexes in the given traversal order."""
        return self.iterator(corner, axis)

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary(self) -> dict[str, Any]:
        """Return the resolved grid values as a flat dict."""
        return {
            "width": self.width,
            "height": self.height,
            "aspect_ratio": self.aspect_ratio,
            "columns": self.columns,
            "rows": self.rows,
            "cell_width": self.cell_width,
            "cell_height": self.cell_height,
            "gutter_width": self.gutter_width,
            "gutter_height": self.gutter_height,
            "cell_count": self.cell_count,
        }

    def info(self) -> dict[str, Any]:
        """Log the resolved grid values and return them."""
        summary = self.summary()
        logger.info("grid_info", **summary)
        return summary


def create_grid(config: GridConfig | None = None, **params: Any) -> Grid:
    """Create a grid from a configuration or keyword parameters.

    Example:
        >>> grid = create_grid(width=100, height=200, columns=5, rows=8)
        >>> grid.cell_width, grid.cell_height
        (20.0, 25.0)

    Args:
        config: Base configuration.
        **params: Configuration values, snake_case or camelCase. These
            override values of the same name in config.

    Returns:
        The resolved grid.
    """
    if config is None:
        config = GridConfig.model_validate(params)
    elif params:
        config = config.model_copy(update=GridConfig.model_validate(params).supplied())
    return Grid.from_config(config)
