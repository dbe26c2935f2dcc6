"""Grid configuration record.

A grid is described by up to ten optional values. Any of them may be left
out; the resolver decides whether what remains pins down a grid. Keys can
be given in snake_case or camelCase (``cell_width`` or ``cellWidth``) so
that configuration written for CSS-style tooling loads unchanged.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from gridmodel.exceptions import InvalidParamError, ZeroGridDimensionError
from gridmodel.geometry.validators import (
    is_percent_string,
    is_positive_number,
)

# Values that must be strictly greater than zero when supplied
_STRICTLY_POSITIVE = frozenset({"aspect_ratio", "cell_width", "cell_height"})


class GridConfig(BaseModel):
    """Partial description of a grid.

    Attributes:
        width: Overall width in pixels.
        height: Overall height in pixels.
        aspect_ratio: Overall width / height.
        rows: Number of rows. Fractional values are truncated.
        columns: Number of columns. Fractional values are truncated.
        cell_width: Width of one cell in pixels.
        cell_height: Height of one cell in pixels.
        gutter_width: Horizontal space between adjacent cells.
        gutter_height: Vertical space between adjacent cells.
        gutter: Shorthand for gutter_width and gutter_height.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    width: float | None = None
    height: float | None = None
    aspect_ratio: float | None = None
    rows: float | None = None
    columns: float | None = None
    cell_width: float | None = None
    cell_height: float | None = None
    gutter_width: float | None = None
    gutter_height: float | None = None
    gutter: float | None = None

    @model_validator(mode="before")
    @classmethod
    def _check_values(cls, data: Any) -> Any:
        """Reject unknown keys and values that are not usable numbers.

        Raises:
            InvalidParamError: On an unknown key, a non-numeric or negative
                value, or a zero aspect ratio or cell size.
            ZeroGridDimensionError: If rows or columns truncate to zero.
        """
        if not isinstance(data, dict):
            return data

        known = {
            key
            for name, field in cls.model_fields.items()
            for key in (name, field.alias)
            if key is not None
        }
        for key, value in data.items():
            if key not in known:
                raise InvalidParamError("Unknown grid parameter", param=key, value=value)
            if value is None:
                continue
            name = _field_name(cls, key)
            if is_percent_string(value):
                raise InvalidParamError(
                    "Percentage sizes need a reference size and are not supported",
                    param=name,
                    value=value,
                )
            if not is_positive_number(value):
                raise InvalidParamError("Parameter was invalid", param=name, value=value)
            if name in _STRICTLY_POSITIVE and value == 0:
                raise InvalidParamError("Parameter must be greater than zero", param=name, value=value)
            if name in ("rows", "columns") and math.trunc(value) == 0:
                raise ZeroGridDimensionError(
                    "Zero is not a valid value for rows or columns", param=name, value=value
                )
        return data

    @property
    def whole_columns(self) -> int | None:
        """Explicit column count with any fractional part dropped."""
        return None if self.columns is None else math.trunc(self.columns)

    @property
    def whole_rows(self) -> int | None:
        """Explicit row count with any fractional part dropped."""
        return None if self.rows is None else math.trunc(self.rows)

    @property
    def effective_gutter_width(self) -> float | None:
        """gutter_width, falling back to the gutter shorthand."""
        return self.gutter_width if self.gutter_width is not None else self.gutter

    @property
    def effective_gutter_height(self) -> float | None:
        """gutter_height, falling back to the gutter shorthand."""
        return self.gutter_height if self.gutter_height is not None else self.gutter

    def supplied(self) -> dict[str, float]:
        """Return only the values that were given, keyed by field name."""
        return self.model_dump(exclude_none=True)


def _field_name(model: type[BaseModel], key: str) -> str:
    if key in model.model_fields:
        return key
    for name, field in model.model_fields.items():
        if field.alias == key:
            return name
    return key
