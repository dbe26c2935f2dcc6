"""gridmodel: resolve partial grid descriptions into complete grid geometry.

Example:
    from gridmodel import create_grid

    grid = create_grid(width=500, height=700, columns=5, rows=14, gutter=20)
    grid.cell_width                  # 84.0
    grid.cell_region(2, 3).top_left_point
    [cell for cell in grid.cells("br", "vertical")]
"""

from gridmodel.exceptions import (
    ConfigError,
    ConflictingParamsError,
    GridError,
    IncorrectParamCountError,
    InsufficientParamsError,
    InvalidColumnIndexError,
    InvalidIndexError,
    InvalidParamError,
    InvalidRowIndexError,
    ZeroGridDimensionError,
)
from gridmodel.geometry import Dimensions, Point, Region, region_enclosing
from gridmodel.layout import (
    Axis,
    CellIndex,
    Corner,
    Grid,
    GridConfig,
    GridIterator,
    Strategy,
    create_grid,
    linear_iterator,
)

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "CellIndex",
    "ConfigError",
    "ConflictingParamsError",
    "Corner",
    "Dimensions",
    "Grid",
    "GridConfig",
    "GridError",
    "GridIterator",
    "IncorrectParamCountError",
    "InsufficientParamsError",
    "InvalidColumnIndexError",
    "InvalidIndexError",
    "InvalidParamError",
    "InvalidRowIndexError",
    "Point",
    "Region",
    "Strategy",
    "ZeroGridDimensionError",
    "__version__",
    "create_grid",
    "linear_iterator",
    "region_enclosing",
]
