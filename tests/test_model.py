import dataclasses

import pytest

from latinsearch.core.grid import Grid
from latinsearch.core.model import Cell, ConfigurationError


def test_cell_hash_eq_and_order():
    assert Cell(1, 2) == Cell(1, 2)
    assert hash(Cell(1, 2)) == hash(Cell(1, 2))
    assert sorted([Cell(1, 0), Cell(0, 3), Cell(0, 1)]) == [Cell(0, 1), Cell(0, 3), Cell(1, 0)]
    assert str(Cell(2, 3)) == "2,3"


def test_blank_grid():
    grid = Grid.create(3)
    assert grid.size == 3
    assert grid.rows == ((0, 0, 0), (0, 0, 0), (0, 0, 0))
    assert grid.blank_count() == 9
    assert not grid.is_complete()


@pytest.mark.parametrize("size", [0, -1, 2.0, "4", True, None])
def test_create_rejects_bad_size(size):
    with pytest.raises(ConfigurationError):
        Grid.create(size)


@pytest.mark.parametrize("seed", [
    [[1, 2]],
    [[1, 2], [2]],
    [[1, 2], [2, 1], [0, 0]],
    [[1, 3], [0, 0]],
    [[1, -1], [0, 0]],
    [[1, "2"], [0, 0]],
    [1, 2],
    ["12", "21"],
    12,
])
def test_create_rejects_malformed_seed(seed):
    with pytest.raises(ConfigurationError):
        Grid.create(2, seed)


def test_seed_with_duplicates_is_accepted():
    grid = Grid.create(2, [[1, 1], [0, 0]])
    assert grid.get(Cell(0, 1)) == 1


def test_with_value_returns_independent_copy():
    grid = Grid.create(2)
    filled = grid.with_value(Cell(1, 0), 2)
    assert filled.get(Cell(1, 0)) == 2
    assert grid.get(Cell(1, 0)) == 0
    assert filled.rows == ((0, 0), (2, 0))


def test_grid_is_frozen():
    grid = Grid.create(2, [[1, 2], [2, 1]])
    assert grid.is_complete()
    with pytest.raises(dataclasses.FrozenInstanceError):
        grid.rows = ((0, 0), (0, 0))


def test_to_lists_is_detached():
    grid = Grid.create(2, [[1, 2], [2, 1]])
    values = grid.to_lists()
    values[0][0] = 9
    assert grid.get(Cell(0, 0)) == 1


def test_cells_row_major():
    assert list(Grid.create(2).cells()) == [Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)]
