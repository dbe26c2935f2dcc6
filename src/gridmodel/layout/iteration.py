"""Linear traversal orders over the cells of a grid.

A traversal starts in one of the four corners and moves along a primary
axis, one cell at a time. When it runs off the end of the current row
(horizontal) or column (vertical) it steps one line inward along the other
axis and starts again from the same side it began on. It finishes on the
corner diagonally opposite the start, having visited every cell exactly
once. Four corners times two axes gives eight strategies.

Example (3 columns x 2 rows):
    TOP_LEFT / HORIZONTAL      (0,0) (1,0) (2,0) (0,1) (1,1) (2,1)
    TOP_RIGHT / VERTICAL       (2,0) (2,1) (1,0) (1,1) (0,0) (0,1)
    BOTTOM_LEFT / HORIZONTAL   (0,1) (1,1) (2,1) (0,0) (1,0) (2,0)

Iterators are single use: once exhausted they stay exhausted, and a new
one must be created to walk the grid again.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from enum import Enum
from functools import partial
from typing import TYPE_CHECKING, NamedTuple

from gridmodel.exceptions import InvalidParamError
from gridmodel.geometry.validators import is_positive_integer

if TYPE_CHECKING:
    from gridmodel.geometry.primitives import Region
    from gridmodel.layout.grid import Grid


class Corner(str, Enum):
    """Grid corner a traversal starts from."""

    TOP_LEFT = "tl"
    TOP_RIGHT = "tr"
    BOTTOM_RIGHT = "br"
    BOTTOM_LEFT = "bl"

    @property
    def is_left(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.BOTTOM_LEFT)

    @property
    def is_top(self) -> bool:
        return self in (Corner.TOP_LEFT, Corner.TOP_RIGHT)

    @property
    def opposite(self) -> Corner:
        """The corner diagonally across the grid."""
        return {
            Corner.TOP_LEFT: Corner.BOTTOM_RIGHT,
            Corner.TOP_RIGHT: Corner.BOTTOM_LEFT,
            Corner.BOTTOM_RIGHT: Corner.TOP_LEFT,
            Corner.BOTTOM_LEFT: Corner.TOP_RIGHT,
        }[self]

    def cell(self, total_columns: int, total_rows: int) -> CellIndex:
        """Indexes of the cell in this corner."""
        return CellIndex(
            column=0 if self.is_left else total_columns - 1,
            row=0 if self.is_top else total_rows - 1,
        )


class Axis(str, Enum):
    """Primary direction of travel."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class CellIndex(NamedTuple):
    """Zero-based (column, row) position of a cell."""

    column: int
    row: int


class Strategy(Enum):
    """The eight linear traversal orders, one per (corner, axis) pair."""

    TOP_LEFT_HORIZONTAL = (Corner.TOP_LEFT, Axis.HORIZONTAL)
    TOP_LEFT_VERTICAL = (Corner.TOP_LEFT, Axis.VERTICAL)
    TOP_RIGHT_HORIZONTAL = (Corner.TOP_RIGHT, Axis.HORIZONTAL)
    TOP_RIGHT_VERTICAL = (Corner.TOP_RIGHT, Axis.VERTICAL)
    BOTTOM_RIGHT_HORIZONTAL = (Corner.BOTTOM_RIGHT, Axis.HORIZONTAL)
    BOTTOM_RIGHT_VERTICAL = (Corner.BOTTOM_RIGHT, Axis.VERTICAL)
    BOTTOM_LEFT_HORIZONTAL = (Corner.BOTTOM_LEFT, Axis.HORIZONTAL)
    BOTTOM_LEFT_VERTICAL = (Corner.BOTTOM_LEFT, Axis.VERTICAL)

    @property
    def corner(self) -> Corner:
        return self.value[0]

    @property
    def axis(self) -> Axis:
        return self.value[1]

    @classmethod
    def of(cls, corner: Corner | str | None = None, axis: Axis | str | None = None) -> Strategy:
        """Look up the strategy for a corner and axis.

        Missing values fall back to settings.DEFAULT_CORNER and
        settings.DEFAULT_AXIS.

        Raises:
            InvalidParamError: If corner or axis is not recognised.
            ConfigError: If a default is needed and the setting is invalid.
        """
        if corner is None or axis is None:
            from gridmodel.config import settings  # noqa: PLC0415

            default_corner, default_axis = settings.default_strategy()
            corner = default_corner if corner is None else corner
            axis = default_axis if axis is None else axis
        try:
            corner = Corner(corner)
        except ValueError:
            raise InvalidParamError("Unknown corner", param="corner", value=corner) from None
        try:
            axis = Axis(axis)
        except ValueError:
            raise InvalidParamError("Unknown axis", param="axis", value=axis) from None
        return cls((corner, axis))

    def start_cell(self, total_columns: int, total_rows: int) -> CellIndex:
        """First cell visited."""
        return self.corner.cell(total_columns, total_rows)

    def is_end_cell(self, cell: CellIndex, total_columns: int, total_rows: int) -> bool:
        """Whether cell is the last one visited."""
        return cell == self.corner.opposite.cell(total_columns, total_rows)

    def next_cell(self, cell: CellIndex, total_columns: int, total_rows: int) -> CellIndex:
        """Cell visited after cell.

        Only meaningful when cell is not the end cell.
        """
        start = self.start_cell(total_columns, total_rows)
        column_step = 1 if self.corner.is_left else -1
        row_step = 1 if self.corner.is_top else -1

        if self.axis is Axis.HORIZONTAL:
            column = cell.column + column_step
            if 0 <= column < total_columns:
                return CellIndex(column, cell.row)
            return CellIndex(start.column, cell.row + row_step)

        row = cell.row + row_step
        if 0 <= row < total_rows:
            return CellIndex(cell.column, row)
        return CellIndex(cell.column + column_step, start.row)


class LinearCursor(Iterator[CellIndex]):
    """Stateful walk over a total_columns x total_rows matrix.

    States:
        running at (column, row) -> running at the next cell -> ...
        -> running at the end cell -> exhausted.

    Nothing leaves the exhausted state.
    """

    def __init__(self, strategy: Strategy, total_columns: int, total_rows: int) -> None:
        for name, value in (("total_columns", total_columns), ("total_rows", total_rows)):
            if not is_positive_integer(value) or value == 0:
                raise InvalidParamError(
                    "Matrix size must be a whole number greater than zero",
                    param=name,
                    value=value,
                )
        self.strategy = strategy
        self.total_columns = int(total_columns)
        self.total_rows = int(total_rows)
        self._current = strategy.start_cell(self.total_columns, self.total_rows)
        self._done = False

    @property
    def done(self) -> bool:
        """True once the end cell has been produced."""
        return self._done

    def __iter__(self) -> LinearCursor:
        return self

    def __next__(self) -> CellIndex:
        if self._done:
            raise StopIteration

        current = self._current
        if self.strategy.is_end_cell(current, self.total_columns, self.total_rows):
            self._done = True
        else:
            self._current = self.strategy.next_cell(
                current, self.total_columns, self.total_rows
            )
        return current


class GridIterator(Iterator["CellIndex | Region"]):
    """Walk the cells of a grid with a traversal strategy.

    Yields (column, row) indexes, or the cell regions when regions=True.
    """

    def __init__(self, grid: Grid, strategy: Strategy, *, regions: bool = False) -> None:
        self.grid = grid
        self.strategy = strategy
        self.regions = regions
        self._cursor = LinearCursor(strategy, grid.columns, grid.rows)

    @property
    def done(self) -> bool:
        return self._cursor.done

    def __iter__(self) -> GridIterator:
        return self

    def __next__(self) -> CellIndex | Region:
        cell = next(self._cursor)
        if self.regions:
            return self.grid.cell_region(cell.column, cell.row)
        return cell


def linear_iterator(
    corner: Corner | str,
    axis: Axis | str,
    *,
    regions: bool = False,
) -> Callable[[Grid], GridIterator]:
    """Build an iterator factory for one traversal order.

    Example:
        >>> walk = linear_iterator("br", "vertical")
        >>> list(walk(grid))  # doctest: +SKIP
    """
    return partial(GridIterator, strategy=Strategy.of(corner, axis), regions=regions)
