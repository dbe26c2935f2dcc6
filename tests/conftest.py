"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from gridmodel.config import Settings
from gridmodel.layout import Grid, create_grid
from gridmodel.utils.logging import clear_grid_context, configure_logging


@pytest.fixture(autouse=True)
def reset_logging_context() -> Iterator[None]:
    """Reset bound log context between tests."""
    clear_grid_context()
    yield
    clear_grid_context()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
    )


@pytest.fixture
def configure_test_logging() -> Iterator[None]:
    """Configure logging for tests with console output."""
    configure_logging(level="DEBUG", log_format="console")
    yield


@pytest.fixture
def simple_grid() -> Grid:
    """5 x 8 grid of 20 x 25 cells with no gutters."""
    return create_grid(width=100, height=200, columns=5, rows=8)


@pytest.fixture
def gutter_grid() -> Grid:
    """12 x 13 grid with 1px gutters, matching a common layout example."""
    return create_grid(width=100, height=300, columns=12, rows=13, gutter=1)


@pytest.fixture
def small_grid() -> Grid:
    """3 columns x 2 rows, used for traversal order tests."""
    return create_grid(width=100, height=100, columns=3, rows=2)
