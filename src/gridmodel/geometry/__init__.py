"""Geometry module for gridmodel.

This package provides the value objects a grid is described with and the
predicates used to validate raw input.

Key Components:
    - Primitives: Point, Dimensions, Region models in grid pixel coordinates
    - region_enclosing: bounding region of several regions
    - Validators: number, integer and percent-string predicates

Example:
    from gridmodel.geometry import Dimensions, Point, Region

    size = Dimensions(width=100, aspect_ratio=0.5)   # height derived: 200
    region = Region(origin=Point(x=10, y=20), dimensions=size)
    region.bottom_right_point                         # Point(x=110, y=220)
"""

from gridmodel.geometry.primitives import Dimensions, Point, Region, region_enclosing
from gridmodel.geometry.validators import (
    is_integer,
    is_number,
    is_percent_string,
    is_positive_integer,
    is_positive_number,
)

__all__ = [
    "Dimensions",
    "Point",
    "Region",
    "is_integer",
    "is_number",
    "is_percent_string",
    "is_positive_integer",
    "is_positive_number",
    "region_enclosing",
]
