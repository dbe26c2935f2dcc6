"""Custom exceptions for grid construction and queries.

Every failure in gridmodel is terminal for the call that raised it: a grid
is never returned partially built and a region is never returned for an
invalid index. None of these exceptions derive from ``ValueError`` so that
they pass through pydantic validators unchanged.
"""

from __future__ import annotations

from typing import Any

ERROR_PREFIX = "[Grid Model]"


class GridError(Exception):
    """Base exception for all gridmodel errors."""

    def __init__(
        self,
        message: str,
        *,
        param: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the error with optional parameter context.

        Args:
            message: Human-readable error description.
            param: Name of the offending parameter, if there is one.
            value: Value supplied for ``param``.
        """
        self.message = message
        self.param = param
        self.value = value
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with parameter context if available."""
        if self.param is not None:
            return f"{ERROR_PREFIX} {self.message} ({self.param}={self.value!r})"
        return f"{ERROR_PREFIX} {self.message}"


class ConfigError(GridError):
    """Raised when a runtime setting cannot be interpreted."""

    pass


class InvalidParamError(GridError):
    """Raised when a supplied value has the wrong type or shape.

    For example a non-numeric width, a negative row count or an aspect
    ratio of zero.
    """

    pass


class InsufficientParamsError(GridError):
    """Raised when too few values were supplied to resolve a grid."""

    pass


class IncorrectParamCountError(InsufficientParamsError):
    """Raised when fewer than two of width, height and aspect ratio are given."""

    pass


class ConflictingParamsError(GridError):
    """Raised when individually valid values cannot be reconciled.

    This error is raised when:
    - cell size multiplied by the cell count exceeds the overall size
    - an explicit gutter disagrees with the derived gutter
    - a derived cell size would be negative
    """

    pass


class ZeroGridDimensionError(GridError):
    """Raised when rows or columns are, or resolve to, zero."""

    pass


class InvalidIndexError(GridError):
    """Raised when a query index is missing, fractional, negative or out of range."""

    def __init__(self, message: str, *, index: Any, total: int) -> None:
        """Initialize index error with the valid range.

        Args:
            message: Human-readable error description.
            index: The index that was supplied.
            total: Number of valid positions along the queried axis.
        """
        self.index = index
        self.total = total
        super().__init__(message, param="index", value=index)

    def _format_message(self) -> str:
        """Format error message with the index and valid range."""
        return (
            f"{ERROR_PREFIX} {self.message} "
            f"(index={self.index!r}, valid=0..{self.total - 1})"
        )


class InvalidColumnIndexError(InvalidIndexError):
    """Raised when a column index does not exist in the grid."""

    pass


class InvalidRowIndexError(InvalidIndexError):
    """Raised when a row index does not exist in the grid."""

    pass
