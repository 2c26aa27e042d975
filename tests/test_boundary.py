import pytest

from cavegen.cave import (
    BOTTOM,
    LEFT,
    RIGHT,
    TOP,
    Area,
    CaveConfigError,
    EdgePattern,
    SeededRandom,
    opposite_side,
)
from cavegen.cave.boundary import (
    GAP_STRIP_DEPTH,
    GAP_WIDTH,
    BoundaryStitcher,
    edge_pattern,
    transition_side,
)
from tests.cave_test_utils import OPEN, WALL, filled


def _alternating(size):
    return [OPEN if i % 2 else WALL for i in range(size)]


def test_closed_edges_only_on_sides_without_neighbours():
    size = 12
    grid = filled(size, OPEN)
    area = Area(neighbors=(True, False, True, False))  # top/bottom have neighbours
    BoundaryStitcher(area, size).ensure_closed_edges(grid)
    assert all(grid[size - 1][y] == WALL for y in range(size))
    assert all(grid[0][y] == WALL for y in range(size))
    assert all(grid[x][size - 1] == OPEN for x in range(1, size - 1))
    assert all(grid[x][0] == OPEN for x in range(1, size - 1))


def _cell_on_line(grid, side, line, i):
    if side in (TOP, BOTTOM):
        return grid[i][line]
    return grid[line][i]


@pytest.mark.parametrize(
    "side, lines, inner",
    [
        (TOP, (11, 10, 9), 8),
        (RIGHT, (11, 10, 9), 8),
        (BOTTOM, (0, 1, 2), 3),
        (LEFT, (0, 1, 2), 3),
    ],
)
def test_parent_imprint_every_side(side, lines, inner):
    size = 12
    pattern = _alternating(size)
    neighbors = tuple(s == side for s in range(4))
    area = Area(neighbors=neighbors, parent_side=side)
    stitcher = BoundaryStitcher(area, size, EdgePattern(opposite_side(side), pattern), is_root=False)
    grid = filled(size, WALL)
    stitcher.apply(grid)
    for line in lines:
        # the first and last cell of each line sit on closed sides
        for i in range(1, size - 1):
            assert _cell_on_line(grid, side, line, i) == pattern[i], (line, i)
    assert all(_cell_on_line(grid, side, inner, i) == WALL for i in range(size))


def test_root_area_skips_imprint():
    size = 8
    area = Area(neighbors=(True, True, True, True), parent_side=LEFT)
    grid = filled(size, OPEN)
    BoundaryStitcher(area, size, EdgePattern(RIGHT, [WALL] * size), is_root=True).apply(grid)
    assert grid == filled(size, OPEN)


def test_non_root_requires_parent_edge():
    area = Area(neighbors=(False, False, False, True), parent_side=LEFT)
    with pytest.raises(CaveConfigError) as exc:
        BoundaryStitcher(area, 10, None, is_root=False)
    assert exc.value.field == "parent_edge"


def test_non_root_pattern_length_checked():
    area = Area(neighbors=(False, False, False, True), parent_side=LEFT)
    with pytest.raises(CaveConfigError) as exc:
        BoundaryStitcher(area, 10, EdgePattern(RIGHT, [WALL] * 9), is_root=False)
    assert exc.value.code == "length"


def test_parent_side_must_be_a_neighbour():
    area = Area(neighbors=(False, False, False, False), parent_side=LEFT)
    with pytest.raises(CaveConfigError):
        BoundaryStitcher(area, 10, EdgePattern(RIGHT, [WALL] * 10), is_root=False)


def test_edge_pattern_reads_outer_lines():
    size = 6
    grid = filled(size, WALL)
    for x in range(size):
        grid[x][size - 1] = OPEN  # top row
    grid[0][2] = OPEN  # left column, y=2
    assert edge_pattern(grid, TOP).pattern == [OPEN] * size
    assert edge_pattern(grid, BOTTOM).pattern == [WALL] * size
    left = edge_pattern(grid, LEFT)
    assert left.side == LEFT
    assert left.pattern == [WALL, WALL, OPEN, WALL, WALL, OPEN]
    assert edge_pattern(grid, RIGHT).pattern == [WALL] * (size - 1) + [OPEN]
    with pytest.raises(ValueError):
        edge_pattern(grid, 4)


def test_edge_pattern_rejects_non_cell_values():
    with pytest.raises(ValueError):
        EdgePattern(TOP, [0, 1, 2])


def test_transition_side_choice():
    assert transition_side(Area(neighbors=(False, True, False, True), parent_side=LEFT)) == RIGHT
    # last qualifying side wins
    assert transition_side(Area(neighbors=(True, True, False, False))) == RIGHT
    assert transition_side(Area(neighbors=(True, False, True, False), parent_side=BOTTOM)) == TOP
    assert transition_side(Area(neighbors=(False, False, False, True), parent_side=LEFT)) is None


def test_transition_gap_on_right_side():
    size = 40
    area = Area(identity="exit", neighbors=(False, True, False, True), parent_side=LEFT)
    stitcher = BoundaryStitcher(area, size)
    grid = filled(size, OPEN)
    expected = SeededRandom("gap").next(15, size - 15)
    side, offset = stitcher.carve_transition_gap(grid, SeededRandom("gap"))
    assert side == RIGHT
    assert offset == expected
    for x in range(size - GAP_STRIP_DEPTH, size):
        column = [grid[x][y] for y in range(size)]
        assert column.count(OPEN) == GAP_WIDTH
        for y in range(size):
            assert (column[y] == OPEN) == (offset <= y < offset + GAP_WIDTH), (x, y)
    # the strip stops at its depth
    assert all(grid[size - GAP_STRIP_DEPTH - 1][y] == OPEN for y in range(size))


def test_transition_gap_on_bottom_side():
    size = 36
    area = Area(neighbors=(True, False, True, False), parent_side=TOP)
    grid = filled(size, OPEN)
    side, offset = BoundaryStitcher(area, size).carve_transition_gap(grid, SeededRandom(5))
    assert side == BOTTOM
    for y in range(GAP_STRIP_DEPTH):
        row = [grid[x][y] for x in range(size)]
        assert row.count(OPEN) == GAP_WIDTH
        assert all(row[x] == OPEN for x in range(offset, offset + GAP_WIDTH))
    assert all(grid[x][GAP_STRIP_DEPTH] == OPEN for x in range(size))


def test_transition_gap_needs_outward_side():
    area = Area(neighbors=(False, False, False, True), parent_side=LEFT)
    with pytest.raises(CaveConfigError):
        BoundaryStitcher(area, 40).carve_transition_gap(filled(40, OPEN), SeededRandom(1))


def test_opposite_side_pairs_seams():
    assert opposite_side(RIGHT) == LEFT
    assert opposite_side(LEFT) == RIGHT
    assert opposite_side(TOP) == BOTTOM
    assert opposite_side(BOTTOM) == TOP
