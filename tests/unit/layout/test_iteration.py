"""Tests for gridmodel.layout.iteration module.

All eight traversal orders are checked against a 3 column x 2 row grid:

    (0,0) (1,0) (2,0)
    (0,1) (1,1) (2,1)
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from gridmodel.config import Settings
from gridmodel.exceptions import ConfigError, InvalidParamError
from gridmodel.geometry import Region
from gridmodel.layout import (
    Axis,
    CellIndex,
    Corner,
    Grid,
    GridIterator,
    LinearCursor,
    Strategy,
    create_grid,
    linear_iterator,
)

EXPECTED_ORDERS = {
    Strategy.TOP_LEFT_HORIZONTAL: [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)],
    Strategy.TOP_LEFT_VERTICAL: [(0, 0), (0, 1), (1, 0), (1, 1), (2, 0), (2, 1)],
    Strategy.TOP_RIGHT_HORIZONTAL: [(2, 0), (1, 0), (0, 0), (2, 1), (1, 1), (0, 1)],
    Strategy.TOP_RIGHT_VERTICAL: [(2, 0), (2, 1), (1, 0), (1, 1), (0, 0), (0, 1)],
    Strategy.BOTTOM_RIGHT_HORIZONTAL: [(2, 1), (1, 1), (0, 1), (2, 0), (1, 0), (0, 0)],
    Strategy.BOTTOM_RIGHT_VERTICAL: [(2, 1), (2, 0), (1, 1), (1, 0), (0, 1), (0, 0)],
    Strategy.BOTTOM_LEFT_HORIZONTAL: [(0, 1), (1, 1), (2, 1), (0, 0), (1, 0), (2, 0)],
    Strategy.BOTTOM_LEFT_VERTICAL: [(0, 1), (0, 0), (1, 1), (1, 0), (2, 1), (2, 0)],
}


class TestCorner:
    """Tests for the Corner enum."""

    def test_tokens(self) -> None:
        """Test Corner token values."""
        assert [c.value for c in Corner] == ["tl", "tr", "br", "bl"]

    @pytest.mark.parametrize(
        "corner, opposite",
        [
            (Corner.TOP_LEFT, Corner.BOTTOM_RIGHT),
            (Corner.TOP_RIGHT, Corner.BOTTOM_LEFT),
            (Corner.BOTTOM_RIGHT, Corner.TOP_LEFT),
            (Corner.BOTTOM_LEFT, Corner.TOP_RIGHT),
        ],
    )
    def test_opposite(self, corner: Corner, opposite: Corner) -> None:
        """Test each corner's opposite corner."""
        assert corner.opposite is opposite

    def test_corner_cells(self) -> None:
        """Test corner cells."""
        assert Corner.TOP_LEFT.cell(3, 2) == (0, 0)
        assert Corner.TOP_RIGHT.cell(3, 2) == (2, 0)
        assert Corner.BOTTOM_RIGHT.cell(3, 2) == (2, 1)
        assert Corner.BOTTOM_LEFT.cell(3, 2) == (0, 1)


class TestStrategy:
    """Tests for Strategy lookup and its step primitives."""

    def test_eight_strategies(self) -> None:
        """Test eight strategies."""
        assert len(Strategy) == 8
        assert {(s.corner, s.axis) for s in Strategy} == {
            (corner, axis) for corner in Corner for axis in Axis
        }

    def test_of_accepts_tokens(self) -> None:
        """Test Strategy.of with string tokens."""
        assert Strategy.of("br", "vertical") is Strategy.BOTTOM_RIGHT_VERTICAL

    def test_of_accepts_enums(self) -> None:
        """Test Strategy.of with enum members."""
        assert Strategy.of(Corner.TOP_RIGHT, Axis.HORIZONTAL) is Strategy.TOP_RIGHT_HORIZONTAL

    def test_of_defaults_to_top_left_horizontal(self) -> None:
        """Test Strategy.of defaults to top left horizontal."""
        assert Strategy.of() is Strategy.TOP_LEFT_HORIZONTAL

    def test_of_fills_only_the_missing_half(self) -> None:
        """Test Strategy.of fills only the missing half."""
        assert Strategy.of(axis="vertical") is Strategy.TOP_LEFT_VERTICAL
        assert Strategy.of(corner="bl") is Strategy.BOTTOM_LEFT_HORIZONTAL

    def test_of_uses_configured_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test Strategy.of uses the configured default."""
        custom = Settings(
            _env_file=None,  # type: ignore[call-arg]
            DEFAULT_CORNER="br",
            DEFAULT_AXIS="vertical",
        )
        monkeypatch.setattr("gridmodel.config.settings", custom)
        assert Strategy.of() is Strategy.BOTTOM_RIGHT_VERTICAL

    def test_of_bad_default_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test Strategy.of raises ConfigError for a bad default."""
        custom = Settings(
            _env_file=None,  # type: ignore[call-arg]
            DEFAULT_CORNER="middle",
        )
        monkeypatch.setattr("gridmodel.config.settings", custom)
        with pytest.raises(ConfigError):
            Strategy.of()

    def test_unknown_corner(self) -> None:
        """Test unknown corner."""
        with pytest.raises(InvalidParamError) as exc_info:
            Strategy.of("centre", "horizontal")
        assert exc_info.value.param == "corner"

    def test_unknown_axis(self) -> None:
        """Test unknown axis."""
        with pytest.raises(InvalidParamError) as exc_info:
            Strategy.of("tl", "diagonal")
        assert exc_info.value.param == "axis"

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_start_and_end_cells_are_opposite(self, strategy: Strategy) -> None:
        """Test start and end cells are opposite."""
        start = strategy.start_cell(3, 2)
        end = strategy.corner.opposite.cell(3, 2)
        assert start == tuple(EXPECTED_ORDERS[strategy][0])
        assert strategy.is_end_cell(end, 3, 2)
        assert not strategy.is_end_cell(start, 3, 2)

    def test_next_cell_wraps_row(self) -> None:
        """Test next cell wraps row."""
        strategy = Strategy.TOP_LEFT_HORIZONTAL
        assert strategy.next_cell(CellIndex(2, 0), 3, 2) == CellIndex(0, 1)

    def test_next_cell_wraps_column(self) -> None:
        """Test next cell wraps column."""
        strategy = Strategy.BOTTOM_RIGHT_VERTICAL
        assert strategy.next_cell(CellIndex(2, 0), 3, 2) == CellIndex(1, 1)


class TestLinearCursor:
    """Tests for the LinearCursor state machine."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_order(self, strategy: Strategy) -> None:
        """Test traversal order for each strategy."""
        assert list(LinearCursor(strategy, 3, 2)) == EXPECTED_ORDERS[strategy]

    def test_single_cell(self) -> None:
        """Test single cell."""
        cursor = LinearCursor(Strategy.BOTTOM_RIGHT_VERTICAL, 1, 1)
        assert next(cursor) == (0, 0)
        assert cursor.done

    def test_done_is_set_after_last_value(self) -> None:
        """Test done is set after last value."""
        cursor = LinearCursor(Strategy.TOP_LEFT_HORIZONTAL, 2, 1)
        assert not cursor.done
        next(cursor)
        assert not cursor.done
        next(cursor)
        assert cursor.done

    def test_exhausted_cursor_stays_exhausted(self) -> None:
        """Test exhausted cursor stays exhausted."""
        cursor = LinearCursor(Strategy.TOP_LEFT_HORIZONTAL, 2, 2)
        assert len(list(cursor)) == 4
        assert list(cursor) == []
        with pytest.raises(StopIteration):
            next(cursor)

    def test_is_its_own_iterator(self) -> None:
        """Test the cursor is its own iterator."""
        cursor = LinearCursor(Strategy.TOP_LEFT_HORIZONTAL, 2, 2)
        assert iter(cursor) is cursor

    @pytest.mark.parametrize(
        "columns, rows", [(0, 2), (2, 0), (-1, 2), (1.5, 2), (2, "2")]
    )
    def test_invalid_size(self, columns: object, rows: object) -> None:
        """Test invalid size."""
        with pytest.raises(InvalidParamError, match="Matrix size"):
            LinearCursor(Strategy.TOP_LEFT_HORIZONTAL, columns, rows)  # type: ignore[arg-type]

    @given(
        strategy=st.sampled_from(list(Strategy)),
        columns=st.integers(min_value=1, max_value=12),
        rows=st.integers(min_value=1, max_value=12),
    )
    def test_visits_every_cell_once(self, strategy: Strategy, columns: int, rows: int) -> None:
        """Test visits every cell once."""
        cursor = LinearCursor(strategy, columns, rows)
        visited = list(cursor)
        assert len(visited) == columns * rows
        assert set(visited) == {(c, r) for c in range(columns) for r in range(rows)}
        assert visited[0] == strategy.start_cell(columns, rows)
        assert visited[-1] == strategy.corner.opposite.cell(columns, rows)
        assert cursor.done


class TestGridIterator:
    """Tests for GridIterator and the Grid iteration helpers."""

    def test_default_order(self, small_grid: Grid) -> None:
        """Test default order."""
        assert list(small_grid.cells()) == EXPECTED_ORDERS[Strategy.TOP_LEFT_HORIZONTAL]

    def test_cells_with_tokens(self, small_grid: Grid) -> None:
        """Test cells with tokens."""
        assert list(small_grid.cells("tr", "vertical")) == EXPECTED_ORDERS[Strategy.TOP_RIGHT_VERTICAL]

    def test_yields_cell_index(self, small_grid: Grid) -> None:
        """Test yields cell index."""
        first = next(small_grid.iterator())
        assert isinstance(first, CellIndex)
        assert first.column == 0
        assert first.row == 0

    def test_regions(self, small_grid: Grid) -> None:
        """Test iterating cell regions."""
        regions = list(small_grid.iterator("bl", "horizontal", regions=True))
        assert len(regions) == 6
        assert all(isinstance(r, Region) for r in regions)
        assert regions[0] == small_grid.cell_region(0, 1)
        assert regions[-1] == small_grid.cell_region(2, 0)

    def test_each_iterator_is_fresh(self, small_grid: Grid) -> None:
        """Test each iterator is fresh."""
        first = small_grid.iterator()
        list(first)
        assert first.done
        second = small_grid.iterator()
        assert not second.done
        assert len(list(second)) == 6

    def test_exhausted_iterator_stays_exhausted(self, small_grid: Grid) -> None:
        """Test exhausted iterator stays exhausted."""
        iterator = GridIterator(small_grid, Strategy.TOP_LEFT_VERTICAL)
        list(iterator)
        with pytest.raises(StopIteration):
            next(iterator)

    def test_unknown_corner(self, small_grid: Grid) -> None:
        """Test unknown corner."""
        with pytest.raises(InvalidParamError):
            small_grid.iterator("middle")


class TestLinearIterator:
    """Tests for the linear_iterator factory."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_factory_per_strategy(self, small_grid: Grid, strategy: Strategy) -> None:
        """Test factory per strategy."""
        walk = linear_iterator(strategy.corner, strategy.axis)
        assert list(walk(small_grid)) == EXPECTED_ORDERS[strategy]

    def test_factory_is_reusable(self, small_grid: Grid) -> None:
        """Test factory is reusable."""
        walk = linear_iterator("br", "horizontal")
        assert list(walk(small_grid)) == list(walk(small_grid))

    def test_factory_with_regions(self) -> None:
        """Test factory with regions."""
        grid = create_grid(width=20, height=10, columns=2, rows=1)
        walk = linear_iterator("tr", "horizontal", regions=True)
        assert [r.left for r in walk(grid)] == [10, 0]

    def test_bad_token_fails_on_creation(self) -> None:
        """Test bad token fails on creation."""
        with pytest.raises(InvalidParamError):
            linear_iterator("tl", "sideways")
