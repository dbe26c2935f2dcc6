"""Validation predicates for grid parameters.

These are pure guards used at the boundary of the geometry primitives and
the grid configuration. Strings are never numbers here: ``"12"`` fails
``is_number`` and only matches ``is_percent_string`` when it carries a
trailing ``%``. Booleans are rejected even though ``bool`` subclasses ``int``.
"""

from __future__ import annotations

import math
import re
from typing import Any, TypeGuard

PERCENT_PATTERN = re.compile(r"(\d+|\d+\.\d+)%")


def is_number(value: Any) -> TypeGuard[int | float]:
    """Check that a value is a finite int or float."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def is_integer(value: Any) -> bool:
    """Check that a value is a number with no fractional part.

    ``3.0`` counts as an integer, matching how derived indexes arrive as floats.
    """
    return is_number(value) and float(value).is_integer()


def is_positive_number(value: Any) -> bool:
    """Check that a value is a finite number greater than or equal to zero."""
    return is_number(value) and value >= 0


def is_positive_integer(value: Any) -> bool:
    """Check that a value is a whole number greater than or equal to zero."""
    return is_integer(value) and value >= 0


def is_percent_string(value: Any) -> bool:
    """Check that a value is a number followed by a percent sign, e.g. ``"44%"``."""
    return isinstance(value, str) and PERCENT_PATTERN.fullmatch(value) is not None
