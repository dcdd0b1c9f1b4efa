import pytest

from cozychristmas.common.errors import InvariantError
from cozychristmas.common.types import EMPTY_CELL, NO_LINK, TileKind
from cozychristmas.engine.chain import Chain
from cozychristmas.engine.grid import Grid


def _make_chain(*tiles):
    chain = Chain(Grid(8))
    for tile in tiles:
        chain.push_head(tile)
    return chain


def test_first_push_is_head_and_tail():
    chain = _make_chain((2, 2))
    assert chain.length == 1
    assert chain.head == (2, 2)
    assert chain.tail == (2, 2)
    assert chain.grid.get((2, 2)).link == NO_LINK
    assert chain.is_occupied((2, 2))
    chain.verify()


def test_push_rewrites_previous_head_link():
    chain = _make_chain((2, 2), (2, 3))
    # new head points back at the old head, old head now points at the new head
    assert chain.grid.get((2, 3)).link == (2, 2)
    assert chain.grid.get((2, 2)).link == (2, 3)
    assert chain.head == (2, 3)
    assert chain.tail == (2, 2)
    chain.verify()


def test_links_walk_tail_to_head():
    chain = _make_chain((0, 0), (0, 1), (1, 1), (1, 2))
    assert list(chain.links()) == [(0, 0), (0, 1), (1, 1), (1, 2)]
    assert len(chain) == 4


def test_drop_tail_frees_oldest_link():
    chain = _make_chain((0, 0), (0, 1), (0, 2))
    freed = chain.drop_tail()
    assert freed == (0, 0)
    assert chain.grid.get((0, 0)) == EMPTY_CELL
    assert chain.tail == (0, 1)
    assert chain.head == (0, 2)
    assert chain.length == 2
    chain.verify()


def test_drop_last_link_invalidates_head_and_tail():
    chain = _make_chain((4, 4))
    assert chain.drop_tail() == (4, 4)
    assert chain.length == 0
    assert chain.head is None
    assert chain.tail is None
    assert not chain.is_occupied((4, 4))
    chain.verify()


def test_push_then_drop_shifts_without_length_change():
    chain = _make_chain((0, 0), (0, 1), (0, 2))
    chain.push_head((0, 3))
    chain.drop_tail()
    assert list(chain.links()) == [(0, 1), (0, 2), (0, 3)]
    assert chain.length == 3
    chain.verify()


def test_shift_single_link_chain():
    chain = _make_chain((0, 0))
    chain.push_head((0, 1))
    assert chain.drop_tail() == (0, 0)
    assert chain.head == (0, 1)
    assert chain.tail == (0, 1)
    chain.verify()


def test_drop_from_empty_chain_raises():
    chain = _make_chain()
    with pytest.raises(InvariantError):
        chain.drop_tail()


def test_verify_detects_cleared_link():
    chain = _make_chain((0, 0), (0, 1), (0, 2))
    chain.grid.set((0, 1), EMPTY_CELL)
    with pytest.raises(InvariantError):
        chain.verify()


def test_verify_detects_stray_link_cell():
    chain = _make_chain((0, 0))
    chain.grid.set((5, 5), chain.grid.get((0, 0)))
    with pytest.raises(InvariantError):
        chain.verify()


def test_clear_empties_every_link():
    chain = _make_chain((0, 0), (0, 1), (0, 2))
    chain.clear()
    assert chain.length == 0
    assert all(kind == TileKind.EMPTY for row in chain.grid.rows() for kind in row)
    chain.verify()


def test_push_onto_existing_link_raises():
    chain = _make_chain((0, 0), (0, 1), (0, 2))
    with pytest.raises(InvariantError):
        chain.push_head((0, 1))
    assert chain.length == 3
    assert chain.head == (0, 2)
    chain.verify()


def test_push_with_missing_head_raises():
    chain = _make_chain((0, 0))
    chain.head = None
    with pytest.raises(InvariantError):
        chain.push_head((0, 1))
    assert chain.grid.kind_at((0, 1)) == TileKind.EMPTY


def test_links_with_missing_tail_raises():
    chain = _make_chain((0, 0), (0, 1))
    chain.tail = None
    with pytest.raises(InvariantError):
        list(chain.links())
