from cozychristmas.common.types import Cell, Direction, TileKind
from cozychristmas.engine.grid import Grid, wrap


def test_neighbor_wraps_on_every_edge():
    grid = Grid(8)
    assert grid.neighbor((3, 0), Direction.WEST) == (3, 7)
    assert grid.neighbor((4, 7), Direction.EAST) == (4, 0)
    assert grid.neighbor((0, 5), Direction.NORTH) == (7, 5)
    assert grid.neighbor((7, 2), Direction.SOUTH) == (0, 2)


def test_neighbor_inside_grid():
    grid = Grid(8)
    assert grid.neighbor((3, 3), Direction.NORTH) == (2, 3)
    assert grid.neighbor((3, 3), Direction.SOUTH) == (4, 3)
    assert grid.neighbor((3, 3), Direction.WEST) == (3, 2)
    assert grid.neighbor((3, 3), Direction.EAST) == (3, 4)


def test_get_and_set_reduce_out_of_range_coordinates():
    grid = Grid(8)
    grid.set((-1, 9), Cell(TileKind.PICKUP))
    assert grid.get((7, 1)).kind == TileKind.PICKUP
    assert grid.kind_at((15, -7)) == TileKind.PICKUP
    assert wrap((-1, 9), 8) == (7, 1)


def test_empty_tiles_row_major_and_excludes_tile():
    grid = Grid(2)
    grid.set((0, 1), Cell(TileKind.HAZARD))
    assert grid.empty_tiles() == [(0, 0), (1, 0), (1, 1)]
    assert grid.empty_tiles(exclude=(1, 0)) == [(0, 0), (1, 1)]


def test_new_grid_is_empty():
    grid = Grid(8)
    assert len(grid.empty_tiles()) == 64
    assert all(kind == TileKind.EMPTY for row in grid.rows() for kind in row)
