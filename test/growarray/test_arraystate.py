# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
Tests for ArrayState: invariants and the resize engine.
"""

from typing import Any, List

import pytest
from loguru import logger

from growarray.arraystate import ArrayState
from growarray.constants import CHECK_INVARIANTS_ENV, INDEX_MAX, SIZE_MAX
from growarray.errors import ArrayFreedError, ArrayInvariantError, ArrayOutOfMemory


@pytest.fixture
def state() -> ArrayState[Any]:
    """A fresh, empty state with 4-byte elements."""
    return ArrayState[Any](4)


def fill(state: ArrayState[Any], n: int) -> None:
    state.resize(n)
    for i in range(n):
        state.items[i] = i  # type: ignore[index]


def test_new_state_is_empty(state: ArrayState[Any]):
    assert state.items is None
    assert state.capacity == 0
    assert state.len == 0
    assert state.len_hint is None
    assert not state.freed
    state.check_invariants()


def test_resize_same_len_is_noop(state: ArrayState[Any]):
    state.resize(0)
    assert state.items is None
    assert state.capacity == 0

    fill(state, 3)
    items = state.items
    state.resize(3)
    assert state.items is items
    assert state.len == 3


def test_resize_grows_with_margin(state: ArrayState[Any]):
    state.resize(1)
    assert state.len == 1
    assert state.capacity == 5
    assert state.items == [None] * 5
    state.check_invariants()


def test_resize_keeps_data(state: ArrayState[Any]):
    fill(state, 10)
    state.resize(100)
    assert state.items[:10] == list(range(10))  # type: ignore[index]
    state.resize(5)
    assert state.items[:5] == list(range(5))  # type: ignore[index]
    state.check_invariants()


def test_resize_within_window_keeps_backing_store(state: ArrayState[Any]):
    fill(state, 100)
    capacity = state.capacity
    items = state.items
    state.resize(capacity // 2)
    assert state.capacity == capacity
    assert state.items is items


def test_resize_shrink_clears_vacated_slots(state: ArrayState[Any]):
    fill(state, 10)
    state.resize(3)
    assert all(slot is None for slot in state.items[3:])  # type: ignore[index]
    state.check_invariants()


def test_resize_unaddressable_len(state: ArrayState[Any]):
    huge = ArrayState[Any](SIZE_MAX)
    huge.resize(1)
    with pytest.raises(ArrayOutOfMemory, match="Cannot address 2 slots"):
        huge.resize(2)
    assert huge.len == 1
    assert huge.capacity == 1

    with pytest.raises(ArrayOutOfMemory, match="Cannot address"):
        state.resize(INDEX_MAX + 1)
    assert state.items is None
    assert state.capacity == 0
    assert state.len == 0


def test_resize_allocation_failure_leaves_state(
    state: ArrayState[Any], monkeypatch: pytest.MonkeyPatch
):
    fill(state, 5)
    items = state.items
    capacity = state.capacity

    def fail(self, capacity):
        raise MemoryError()

    monkeypatch.setattr(ArrayState, "_reallocate", fail)
    with pytest.raises(ArrayOutOfMemory, match="Failed to allocate"):
        state.resize(1000)

    assert state.items is items
    assert state.capacity == capacity
    assert state.len == 5
    assert state.items[:5] == list(range(5))  # type: ignore[index]


def test_resize_real_allocation_failure():
    state = ArrayState[Any](1)
    with pytest.raises(ArrayOutOfMemory):
        state.resize(INDEX_MAX)
    assert state.items is None
    assert state.capacity == 0
    assert state.len == 0


def test_resize_with_hint():
    state = ArrayState[Any](4, len_hint=1000)
    state.resize(1)
    assert state.capacity == 334


def test_resize_hint_zero_releases_backing_store():
    state = ArrayState[Any](4, len_hint=0)
    fill(state, 4)
    assert state.capacity == 8
    state.resize(0)
    assert state.capacity == 0
    assert state.items is None
    state.check_invariants()


def test_resize_logs_reallocation(state: ArrayState[Any]):
    messages: List[str] = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        state.resize(1)
        state.resize(2)
    finally:
        logger.remove(handler_id)
    # the second resize fits the existing capacity
    assert len(messages) == 1
    assert "Reallocated array from 0 to 5 slots (len 0 -> 1)" in messages[0]


def test_check_invariants_len_past_capacity(state: ArrayState[Any]):
    fill(state, 2)
    state.len = state.capacity + 1
    with pytest.raises(ArrayInvariantError, match="exceeds capacity"):
        state.check_invariants()


def test_check_invariants_absent_store(state: ArrayState[Any]):
    state.capacity = 3
    with pytest.raises(ArrayInvariantError, match="absent if and only if"):
        state.check_invariants()


def test_check_invariants_store_size(state: ArrayState[Any]):
    fill(state, 2)
    state.items.append(None)  # type: ignore[union-attr]
    with pytest.raises(ArrayInvariantError, match="Backing store has"):
        state.check_invariants()


def test_check_invariants_dirty_tail(state: ArrayState[Any]):
    fill(state, 2)
    state.items[-1] = "stale"  # type: ignore[index]
    with pytest.raises(ArrayInvariantError, match="Slots past len"):
        state.check_invariants()


def test_release(state: ArrayState[Any]):
    fill(state, 10)
    state.release()
    assert state.freed
    assert state.items is None
    assert state.capacity == 0
    assert state.len == 0
    with pytest.raises(ArrayFreedError, match="freed"):
        state.require_live()


def test_bookkeeping_checked_without_environment_switch(
    state: ArrayState[Any], monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.setenv(CHECK_INVARIANTS_ENV, "0")
    fill(state, 2)

    # the tail scan is skipped
    state.items[-1] = "stale"  # type: ignore[index]
    state.maybe_check_invariants()

    state.items[-1] = None  # type: ignore[index]
    state.len = state.capacity + 1
    with pytest.raises(ArrayInvariantError, match="exceeds capacity"):
        state.maybe_check_invariants()


def test_bookkeeping_detects_absent_store(state: ArrayState[Any]):
    state.capacity = 3
    with pytest.raises(ArrayInvariantError, match="absent if and only if"):
        state.check_bookkeeping()
