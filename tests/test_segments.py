from __future__ import annotations

import pytest

from input_engine.buffer import Segment, SegmentStore


def make_store(*pastes: tuple[int, int]) -> SegmentStore:
    store = SegmentStore()
    for at, length in pastes:
        store.register_large_insert(at, length)
    return store


def test_register_large_insert_assigns_increasing_ids() -> None:
    store = SegmentStore()

    first = store.register_large_insert(0, 200)
    second = store.register_large_insert(0, 300)

    assert (first, second) == (0, 1)
    # The earlier paste started at the insertion point and moves right.
    assert store.snapshot() == (
        Segment(start=0, length=300, id=1),
        Segment(start=300, length=200, id=0),
    )


def test_register_large_insert_supersedes_split_segment() -> None:
    store = make_store((10, 200))

    store.register_large_insert(50, 250)

    assert store.snapshot() == (Segment(start=50, length=250, id=1),)


def test_register_large_insert_keeps_segments_before_insertion() -> None:
    store = make_store((0, 200))

    store.register_large_insert(205, 200)

    assert store.snapshot() == (
        Segment(start=0, length=200, id=0),
        Segment(start=205, length=200, id=1),
    )


def test_shift_for_insert_moves_segments_at_or_after_offset() -> None:
    store = make_store((10, 200))

    store.shift_for_insert(10, 3)
    assert store.snapshot()[0].start == 13

    store.shift_for_insert(20, 3)
    assert store.snapshot()[0].start == 13


def test_shift_for_delete_moves_segments_after_removed_range() -> None:
    store = make_store((10, 200))

    store.shift_for_delete(0, 2)
    assert store.snapshot()[0].start == 8

    store.shift_for_delete(7, 2)
    assert store.snapshot()[0].start == 8


def test_find_containing_uses_half_open_range() -> None:
    store = make_store((10, 200))

    assert store.find_containing(9) is None
    assert store.find_containing(10) == Segment(start=10, length=200, id=0)
    assert store.find_containing(209) == Segment(start=10, length=200, id=0)
    assert store.find_containing(210) is None


def test_find_containing_with_several_segments() -> None:
    store = make_store((0, 200), (300, 250))

    found = store.find_containing(400)

    assert found is not None
    assert found.id == 1
    assert store.find_containing(250) is None


def test_find_ending_at() -> None:
    store = make_store((10, 200))

    assert store.find_ending_at(210) == Segment(start=10, length=200, id=0)
    assert store.find_ending_at(209) is None
    assert store.find_ending_at(0) is None


def test_remove_by_id() -> None:
    store = make_store((0, 200), (300, 200))

    removed = store.remove(0)

    assert removed.id == 0
    assert [seg.id for seg in store] == [1]


def test_remove_unknown_id_raises() -> None:
    store = make_store((0, 200))

    with pytest.raises(KeyError):
        store.remove(42)


def test_discard_containing_ignores_segment_start() -> None:
    store = make_store((10, 200))

    assert store.discard_containing(10) is None
    assert len(store) == 1

    discarded = store.discard_containing(11)
    assert discarded is not None
    assert not store


def test_segment_rejects_empty_length() -> None:
    with pytest.raises(ValueError):
        Segment(start=0, length=0, id=0)
