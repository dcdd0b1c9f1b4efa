from __future__ import annotations

from typing import Iterator

from cozychristmas.common.errors import InvariantError
from cozychristmas.common.types import EMPTY_CELL, NO_LINK, Cell, Tile, TileKind
from cozychristmas.engine.grid import Grid


class Chain:
    """Carried items threaded through grid cells.

    The chain owns no storage: each link is a ``CHAIN_LINK`` cell and the
    list pointers are the ``link`` coordinates stored inline in those cells.
    Every link except the head points one step toward the head, so walking
    ``link`` from the tail ``length - 1`` times lands on the head. The head's
    own field holds the link behind it (or ``NO_LINK`` for a lone link) and
    is rewritten when a newer head is pushed.

    ``push_head`` followed by ``drop_tail`` shifts the whole body by one tile
    without touching interior links.
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.head: Tile | None = None
        self.tail: Tile | None = None
        self._length = 0

    @property
    def length(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    def is_occupied(self, tile: Tile) -> bool:
        return self.grid.kind_at(tile) == TileKind.CHAIN_LINK

    def push_head(self, at: Tile) -> None:
        at = self.grid.wrap(at)
        if self.is_occupied(at):
            raise InvariantError(f"push_head onto {at}, which already holds a chain link")
        if self._length == 0:
            self.grid.set(at, Cell(TileKind.CHAIN_LINK, NO_LINK))
            self.tail = at
        else:
            if self.head is None:
                raise InvariantError(f"chain of length {self._length} has no head")
            previous_head = self.head
            self.grid.set(at, Cell(TileKind.CHAIN_LINK, previous_head))
            self.grid.set(previous_head, Cell(TileKind.CHAIN_LINK, at))
        self.head = at
        self._length += 1

    def drop_tail(self) -> Tile:
        """Remove the oldest link and return the tile it freed."""
        if self._length == 0 or self.tail is None:
            raise InvariantError("drop_tail called on an empty chain")
        freed = self.tail
        cell = self.grid.get(freed)
        if cell.kind != TileKind.CHAIN_LINK:
            raise InvariantError(f"chain tail {freed} holds {cell.kind.value}, not a chain link")
        self.grid.set(freed, EMPTY_CELL)
        self._length -= 1
        if self._length == 0:
            self.head = None
            self.tail = None
        else:
            self.tail = cell.link
        return freed

    def links(self) -> Iterator[Tile]:
        """Yield link tiles from tail to head."""
        tile = self.tail
        for index in range(self._length):
            if tile is None:
                raise InvariantError(f"chain of length {self._length} has no tail")
            yield tile
            if index < self._length - 1:
                tile = self.grid.get(tile).link

    def verify(self) -> None:
        """Walk the list and raise ``InvariantError`` on any inconsistency."""
        if self._length < 0:
            raise InvariantError(f"negative chain length {self._length}")
        if self._length == 0:
            if self.head is not None or self.tail is not None:
                raise InvariantError("empty chain still has head/tail coordinates")
            return
        if self.head is None or self.tail is None:
            raise InvariantError("non-empty chain is missing head or tail")
        seen: set[Tile] = set()
        last: Tile | None = None
        for tile in self.links():
            if tile in seen:
                raise InvariantError(f"chain revisits {tile}")
            if not self.is_occupied(tile):
                raise InvariantError(f"chain passes through non-link tile {tile}")
            seen.add(tile)
            last = tile
        if last != self.head:
            raise InvariantError(f"chain walk ends at {last}, head is {self.head}")
        stray = sum(1 for tile in self.grid.tiles() if self.is_occupied(tile))
        if stray != self._length:
            raise InvariantError(
                f"grid holds {stray} chain links but chain length is {self._length}"
            )

    def clear(self) -> None:
        for tile in list(self.links()):
            self.grid.set(tile, EMPTY_CELL)
        self.head = None
        self.tail = None
        self._length = 0
