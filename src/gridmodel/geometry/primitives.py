"""Geometry primitives for gridmodel.

This module provides immutable Pydantic models for representing points,
dimensions, and regions in grid pixel coordinates. All coordinates follow
the convention where (0, 0) is the top-left corner of the grid, x grows
rightward and y grows downward.

Values are validated with the predicates in
:mod:`gridmodel.geometry.validators` before pydantic sees them, so bad input
surfaces as a :class:`~gridmodel.exceptions.GridError` rather than a
pydantic ``ValidationError``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any, Self

from pydantic import BaseModel, model_validator

from gridmodel.exceptions import (
    ConflictingParamsError,
    IncorrectParamCountError,
    InvalidParamError,
)
from gridmodel.geometry.validators import (
    is_number,
    is_percent_string,
    is_positive_number,
)


def _ratio(width: float, height: float) -> float | None:
    """Width over height, or None when the height is zero."""
    if height == 0:
        return None
    return width / height


class Point(BaseModel, frozen=True):
    """A 2D point in grid pixel coordinates.

    Attributes:
        x: Horizontal position (pixels from the left edge).
        y: Vertical position (pixels from the top edge).
    """

    x: float
    y: float

    @model_validator(mode="before")
    @classmethod
    def _check_coordinates(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        for name in ("x", "y"):
            if not is_number(data.get(name)):
                raise InvalidParamError(
                    "Point coordinates must be numbers", param=name, value=data.get(name)
                )
        return data

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (x, y) tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, coord: tuple[float, float]) -> Self:
        """Create Point from (x, y) tuple."""
        return cls(x=coord[0], y=coord[1])


class Dimensions(BaseModel, frozen=True):
    """A width/height/aspect-ratio triple.

    Any two of the three values are enough; the third is derived:

    - width and height give ``aspect_ratio = width / height``
    - width and aspect_ratio give ``height = width / aspect_ratio``
    - height and aspect_ratio give ``width = height * aspect_ratio``

    Zero widths and heights are valid. The aspect ratio of a zero-height
    triple is undefined and stored as None.

    The same model describes pixel sizes (overall, cell, gutter) and the
    matrix size of a grid, where width is the column count and height the
    row count.

    Attributes:
        width: Horizontal extent (>= 0).
        height: Vertical extent (>= 0).
        aspect_ratio: width / height, None when height is zero.
    """

    width: float
    height: float
    aspect_ratio: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_missing(cls, data: Any) -> Any:
        """Validate the supplied values and derive the missing one.

        Raises:
            InvalidParamError: If width/height is not a non-negative number
                or aspect_ratio is not a number greater than zero.
            IncorrectParamCountError: If fewer than two values are supplied.
            ConflictingParamsError: If all three are supplied and disagree.
        """
        if not isinstance(data, dict):
            return data

        width = data.get("width")
        height = data.get("height")
        aspect_ratio = data.get("aspect_ratio")

        for name, value in (("width", width), ("height", height)):
            if value is None:
                continue
            if is_percent_string(value):
                raise InvalidParamError(
                    "Percentage sizes need a reference size and are not supported",
                    param=name,
                    value=value,
                )
            if not is_positive_number(value):
                raise InvalidParamError("Parameter was invalid", param=name, value=value)

        if aspect_ratio is not None and not (is_number(aspect_ratio) and aspect_ratio > 0):
            raise InvalidParamError(
                "Parameter was invalid", param="aspect_ratio", value=aspect_ratio
            )

        supplied = [v for v in (width, height, aspect_ratio) if v is not None]
        if len(supplied) < 2:
            raise IncorrectParamCountError(
                "You must supply at least two of: width, height, aspect_ratio"
            )

        if width is not None and height is not None:
            derived = _ratio(width, height)
            if derived is not None:
                if aspect_ratio is not None and not math.isclose(aspect_ratio, derived):
                    raise ConflictingParamsError(
                        "aspect_ratio does not match width / height",
                        param="aspect_ratio",
                        value=aspect_ratio,
                    )
                aspect_ratio = derived
        elif width is not None:
            height = width / aspect_ratio
        else:
            width = height * aspect_ratio

        return {"width": width, "height": height, "aspect_ratio": aspect_ratio}

    @property
    def area(self) -> float:
        """Calculate the area (width * height)."""
        return self.width * self.height

    def to_tuple(self) -> tuple[float, float]:
        """Convert to (width, height) tuple."""
        return (self.width, self.height)


class Region(BaseModel, frozen=True):
    """An axis-aligned rectangle positioned in grid coordinates.

    A region is built from the origin (its top-left point) and its
    dimensions. Edges and corners are derived:

    - left = origin.x, top = origin.y
    - right = left + width, bottom = top + height

    Attributes:
        origin: Top-left corner.
        dimensions: Width and height of the region.
    """

    origin: Point
    dimensions: Dimensions

    @model_validator(mode="before")
    @classmethod
    def _require_parts(cls, data: Any) -> Any:
        if isinstance(data, dict) and (
            data.get("origin") is None or data.get("dimensions") is None
        ):
            raise InvalidParamError("You must supply a point object and a dimensions object")
        return data

    @property
    def top(self) -> float:
        """Y coordinate of the top edge."""
        return self.origin.y

    @property
    def left(self) -> float:
        """X coordinate of the left edge."""
        return self.origin.x

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.origin.x + self.dimensions.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.origin.y + self.dimensions.height

    @property
    def top_left_point(self) -> Point:
        return self.origin

    @property
    def top_right_point(self) -> Point:
        return Point(x=self.right, y=self.top)

    @property
    def bottom_right_point(self) -> Point:
        return Point(x=self.right, y=self.bottom)

    @property
    def bottom_left_point(self) -> Point:
        return Point(x=self.left, y=self.bottom)

    @property
    def center(self) -> Point:
        """Return the center of the region."""
        return Point(
            x=self.left + self.dimensions.width / 2,
            y=self.top + self.dimensions.height / 2,
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (x, y, width, height) tuple."""
        return (self.left, self.top, self.dimensions.width, self.dimensions.height)

    @classmethod
    def from_bounds(cls, left: float, top: float, right: float, bottom: float) -> Self:
        """Create Region from its edge coordinates.

        Args:
            left: X coordinate of the left edge.
            top: Y coordinate of the top edge.
            right: X coordinate of the right edge (>= left).
            bottom: Y coordinate of the bottom edge (>= top).

        Returns:
            Region spanning the specified edges.
        """
        return cls(
            origin=Point(x=left, y=top),
            dimensions=Dimensions(width=right - left, height=bottom - top),
        )

    def contains_point(self, point: Point) -> bool:
        """Check if a point is inside this region.

        The top and left edges are inclusive, the bottom and right edges
        exclusive, so adjacent regions never both contain a point.

        Args:
            point: Point to check.

        Returns:
            True if point is within region bounds.
        """
        return self.left <= point.x < self.right and self.top <= point.y < self.bottom


def region_enclosing(regions: Iterable[Region]) -> Region:
    """Compute the smallest region covering all of the supplied regions.

    Args:
        regions: One or more regions.

    Returns:
        Region from the minimum top-left to the maximum bottom-right.

    Raises:
        InvalidParamError: If no regions are supplied.
    """
    regions = list(regions)
    if not regions:
        raise InvalidParamError("At least one region is required to compute an enclosing region")

    return Region.from_bounds(
        left=min(r.top_left_point.x for r in regions),
        top=min(r.top_left_point.y for r in regions),
        right=max(r.bottom_right_point.x for r in regions),
        bottom=max(r.bottom_right_point.y for r in regions),
    )
