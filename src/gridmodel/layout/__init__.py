"""Grid layout for gridmodel.

This package resolves partial grid descriptions into complete grids and
answers region and traversal queries against them.

Public API:
    - GridConfig: Partial description of a grid (all values optional).
    - resolve / ResolvedDimensions: The four-stage dimension resolver.
    - Grid / create_grid: The immutable grid and its region queries.
    - Corner, Axis, Strategy: The eight linear traversal orders.
    - LinearCursor, GridIterator, linear_iterator: Traversal iterators.
"""

from gridmodel.layout.grid import Grid, create_grid
from gridmodel.layout.iteration import (
    Axis,
    CellIndex,
    Corner,
    GridIterator,
    LinearCursor,
    Strategy,
    linear_iterator,
)
from gridmodel.layout.params import GridConfig
from gridmodel.layout.resolver import ResolvedDimensions, resolve

__all__ = [
    "Axis",
    "CellIndex",
    "Corner",
    "Grid",
    "GridConfig",
    "GridIterator",
    "LinearCursor",
    "ResolvedDimensions",
    "Strategy",
    "create_grid",
    "linear_iterator",
    "resolve",
]
