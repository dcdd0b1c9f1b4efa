from __future__ import annotations

from typing import Iterator

from cozychristmas.common.constants import DIRECTION_DELTAS, GRID_SIZE
from cozychristmas.common.types import EMPTY_CELL, Cell, Direction, Tile, TileKind


def wrap(tile: Tile, size: int = GRID_SIZE) -> Tile:
    row, col = tile
    return (row % size, col % size)


class Grid:
    """Fixed square map of cells with toroidal coordinates.

    Any coordinate is accepted; it is reduced modulo the side length before
    it reaches the backing array.
    """

    def __init__(self, size: int = GRID_SIZE) -> None:
        self.size = size
        self._cells: list[list[Cell]] = [[EMPTY_CELL] * size for _ in range(size)]

    def wrap(self, tile: Tile) -> Tile:
        return wrap(tile, self.size)

    def get(self, tile: Tile) -> Cell:
        row, col = self.wrap(tile)
        return self._cells[row][col]

    def set(self, tile: Tile, cell: Cell) -> None:
        row, col = self.wrap(tile)
        self._cells[row][col] = cell

    def kind_at(self, tile: Tile) -> TileKind:
        return self.get(tile).kind

    def neighbor(self, tile: Tile, direction: Direction) -> Tile:
        d_row, d_col = DIRECTION_DELTAS[direction]
        return self.wrap((tile[0] + d_row, tile[1] + d_col))

    def tiles(self) -> Iterator[Tile]:
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def empty_tiles(self, exclude: Tile | None = None) -> list[Tile]:
        """Empty tiles in row-major order, optionally skipping one tile."""
        skip = self.wrap(exclude) if exclude is not None else None
        return [
            tile
            for tile in self.tiles()
            if tile != skip and self._cells[tile[0]][tile[1]].kind == TileKind.EMPTY
        ]

    def rows(self) -> list[list[TileKind]]:
        return [[cell.kind for cell in row] for row in self._cells]
