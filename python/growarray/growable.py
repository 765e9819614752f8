# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
GrowableArray: typed interface over the array engine.

This module provides a GrowableArray class that wraps an ArrayState and the
functional operations in arrayapi, so that callers work with one object whose
element type is carried by the generic parameter rather than by per-type
wrapper functions.
"""

from typing import Any, Generic, Iterator, List, Optional, Sequence

from . import arrayapi
from .arrayapi import ArrayStats
from .arraystate import ArrayState
from .constants import DEFAULT_ELEMENT_SIZE
from .typedefs import Comparator, Count, ElemType, Index, Size, SlotCount
from .view import ItemsView


class GrowableArray(Generic[ElemType]):
    """
    Resizable contiguous array of items of one type.

    Capacity is managed automatically: the backing store grows ahead of the
    length and shrinks once the array uses less than half of it. All
    operations either succeed completely or leave the array untouched and
    raise an ArrayError.

    Example:
        arr = GrowableArray[int]()
        for v in range(50, 65):
            arr.append(v)
        arr.remove(2)
        evens = arr.slice(0, len(arr), 2)

        with GrowableArray[int](len_hint=1000) as scratch:
            scratch.extend(arr)
    """

    def __init__(
        self,
        element_size: Size = DEFAULT_ELEMENT_SIZE,
        len_hint: Optional[SlotCount] = None,
        *,
        _state: Optional[ArrayState] = None,
    ):
        """
        Initialize an empty GrowableArray.

        Args:
            element_size: Bytes per slot, used for addressability checks
            len_hint: Expected steady-state length used to bias capacity, if known

        Raises:
            pydantic.ValidationError: If element_size or len_hint are invalid
        """
        self._state: ArrayState = (
            _state if _state is not None else arrayapi.array_new(element_size, len_hint)
        )

    @classmethod
    def from_array(
        cls,
        source: Optional[Sequence[ElemType]],
        source_len: Optional[Count] = None,
        element_size: Size = DEFAULT_ELEMENT_SIZE,
        len_hint: Optional[SlotCount] = None,
    ) -> "GrowableArray[ElemType]":
        """
        Create an array holding a copy of the first source_len items of source.

        source_len defaults to the whole source. With source_len 0 the source
        is not read and may be None.
        """
        if source_len is None:
            source_len = 0 if source is None else len(source)
        state = arrayapi.array_from_array(source, source_len, element_size, len_hint)
        return cls(_state=state)

    def append(self, obj: ElemType) -> None:
        arrayapi.array_append(self._state, obj)

    def extend(self, other: "GrowableArray[ElemType]") -> None:
        """Append a copy of every item of other. other may be self."""
        if not isinstance(other, GrowableArray):
            raise TypeError(f"Cannot extend from {type(other).__name__}")
        arrayapi.array_extend(self._state, other._state)

    def remove(self, index: Index) -> None:
        arrayapi.array_remove(self._state, index)

    def truncate(self, new_len: Count) -> None:
        arrayapi.array_truncate(self._state, new_len)

    def slice(self, start: Count, stop: Count, step: int = 1) -> "GrowableArray[ElemType]":
        return type(self)(_state=arrayapi.array_slice(self._state, start, stop, step))

    def copy(self) -> "GrowableArray[ElemType]":
        return type(self)(_state=arrayapi.array_copy(self._state))

    def min(self, cmp: Optional[Comparator] = None, ctx: Any = None) -> Optional[ElemType]:
        return arrayapi.array_min(self._state, cmp, ctx)

    def max(self, cmp: Optional[Comparator] = None, ctx: Any = None) -> Optional[ElemType]:
        return arrayapi.array_max(self._state, cmp, ctx)

    def index_of_min(self, cmp: Optional[Comparator] = None, ctx: Any = None) -> Optional[Index]:
        return arrayapi.array_index_of_min(self._state, cmp, ctx)

    def index_of_max(self, cmp: Optional[Comparator] = None, ctx: Any = None) -> Optional[Index]:
        return arrayapi.array_index_of_max(self._state, cmp, ctx)

    def free(self) -> None:
        """Release the backing store. The array may not be used afterwards."""
        arrayapi.array_free(self._state)

    def stats(self) -> ArrayStats:
        return arrayapi.array_stats(self._state)

    @property
    def items(self) -> ItemsView[ElemType]:
        """Bounds-checked view of the occupied slots."""
        self._state.require_live()
        return ItemsView[ElemType](self._state)

    @property
    def capacity(self) -> Count:
        self._state.require_live()
        return self._state.capacity

    @property
    def element_size(self) -> Size:
        return self._state.element_size

    @property
    def len_hint(self) -> Optional[SlotCount]:
        return self._state.len_hint

    @len_hint.setter
    def len_hint(self, value: Optional[SlotCount]) -> None:
        arrayapi.array_set_len_hint(self._state, value)

    @property
    def freed(self) -> bool:
        return self._state.freed

    def to_list(self) -> List[ElemType]:
        return self.items.to_list()

    def __len__(self) -> Count:
        return arrayapi.array_len(self._state)

    def __iter__(self) -> Iterator[ElemType]:
        return iter(self.items)

    def __getitem__(self, idx: Index) -> ElemType:
        return self.items[idx]

    def __setitem__(self, idx: Index, value: ElemType) -> None:
        self.items[idx] = value

    def __enter__(self) -> "GrowableArray[ElemType]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._state.freed:
            self.free()

    def __repr__(self) -> str:
        if self._state.freed:
            return "GrowableArray(<freed>)"
        return (
            f"GrowableArray(len={self._state.len}, capacity={self._state.capacity}, "
            f"element_size={self._state.element_size}, len_hint={self._state.len_hint})"
        )


def make_array_like(
    element: ElemType,
    element_size: Size = DEFAULT_ELEMENT_SIZE,
    len_hint: Optional[SlotCount] = None,
) -> GrowableArray[ElemType]:
    """
    Create an empty GrowableArray with the same element type as the element.

    Args:
        element: An instance used to determine the array's element type
        element_size: Bytes per slot, used for addressability checks
        len_hint: Expected steady-state length, if known

    Returns:
        A GrowableArray with element type matching the element

    Example:
        x = 3.5
        xs = make_array_like(x, len_hint=64)
    """
    return GrowableArray[type(element)](element_size=element_size, len_hint=len_hint)  # type: ignore[misc]
