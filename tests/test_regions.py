import pytest

from cavegen.cave import OutOfBoundsError, SeededRandom
from cavegen.cave.generator import random_fill
from cavegen.cave.regions import flood_region, get_all_regions
from tests.cave_test_utils import OPEN, WALL, grid_from_rows


def test_diagonal_cells_are_separate_regions():
    grid = grid_from_rows([
        "####",
        "#.##",
        "##.#",
        "####",
    ])
    regions = get_all_regions(grid, OPEN)
    assert sorted(len(r) for r in regions) == [1, 1]
    assert flood_region(grid, 1, 1) == [(1, 1)]


def test_flood_collects_orthogonal_run():
    grid = grid_from_rows([
        "#####",
        "#...#",
        "#.#.#",
        "#####",
        "#####",
    ])
    region = flood_region(grid, 1, 1)
    assert region[0] == (1, 1)
    assert set(region) == {(1, 1), (1, 2), (2, 1), (3, 1), (3, 2)}


def test_wall_regions_found_too():
    grid = grid_from_rows([
        "....",
        ".##.",
        "....",
        "#...",
    ])
    walls = get_all_regions(grid, WALL)
    assert len(walls) == 2
    # scan is x outer, y inner: (0,3) comes before (1,1)
    assert walls[0] == [(0, 3)]
    assert set(walls[1]) == {(1, 1), (2, 1)}


def test_regions_partition_grid(closed_area):
    size = 30
    grid = random_fill(size, closed_area, 50, SeededRandom("partition"))
    seen = []
    for tile_type in (WALL, OPEN):
        for region in get_all_regions(grid, tile_type):
            assert all(grid[x][y] == tile_type for x, y in region)
            seen.extend(region)
    assert len(seen) == size * size
    assert len(set(seen)) == size * size


def test_flood_out_of_range():
    grid = grid_from_rows(["..", ".."])
    with pytest.raises(OutOfBoundsError):
        flood_region(grid, 2, 0)
    with pytest.raises(IndexError):
        flood_region(grid, -1, 0)
