# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
ItemsView: list-like access to the occupied slots of an array.
"""

from typing import Generic, Iterator, List, Sequence
from .typedefs import Count, Index, ElemType
from .arraystate import ArrayState
from pydantic import validate_call


# A raw items pointer would dangle after the backing store is reallocated. The
# view holds the ArrayState instead, so it always sees the current backing
# store and the current length, and refuses to reach past it.
class ItemsView(Generic[ElemType]):
    """A window onto slots [0, len) of an array.

    Reads and in-place writes are allowed; the length can only be changed
    through the array operations.
    """

    __slots__ = ("_state",)

    # No @validate_call here: the view must share the caller's ArrayState, not
    # a validated copy of it.
    def __init__(self, state: ArrayState[ElemType]):
        self._state = state

    def __len__(self) -> Count:
        self._state.require_live()
        return self._state.len

    @validate_call
    def __getitem__(self, idx: Index) -> ElemType:
        self._state.require_live()
        if not (0 <= idx < self._state.len):
            raise IndexError(idx)
        return self._state.items[idx]  # type: ignore[index]

    def __setitem__(self, idx: Index, value: ElemType) -> None:
        self._state.require_live()
        if not (0 <= idx < self._state.len):
            raise IndexError(idx)
        self._state.items[idx] = value  # type: ignore[index]

    def __iter__(self) -> Iterator[ElemType]:
        i = 0
        while i < len(self):
            yield self._state.items[i]  # type: ignore[index]
            i += 1

    def to_list(self) -> List[ElemType]:
        self._state.require_live()
        if self._state.items is None:
            return []
        return self._state.items[: self._state.len]

    def store(self, items: Sequence[ElemType]) -> None:
        if len(items) != len(self):
            raise ValueError("Length mismatch in store()")
        for i, v in enumerate(items):
            self[i] = v
