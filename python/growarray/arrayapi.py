# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Core operations for growarray: functions over ArrayState.

Every operation validates its arguments and checks for overflow before it
mutates anything, so a failed call leaves the array exactly as it was. Length
changes always go through ArrayState.resize.
"""

from typing import Any, List, NamedTuple, Optional, Sequence
from loguru import logger
from pydantic import ConfigDict, SkipValidation, validate_call
from .constants import DEFAULT_ELEMENT_SIZE
from .errors import (
    ArrayInvalidArgument,
    ArrayNotFound,
    ArrayOutOfMemory,
    ArrayOverflow,
)
from .overflow import can_add, max_slot_count
from .typedefs import Comparator, Count, Index, Size, SlotCount
from .arraystate import ArrayState

# ArrayState is not a pydantic type; it is checked with isinstance and passed
# through untouched
_validate = validate_call(config=ConfigDict(arbitrary_types_allowed=True))


class ArrayStats(NamedTuple):
    """Statistics for a growable array."""

    length: int
    capacity: int
    element_size: int
    len_hint: Optional[int]
    nbytes: int
    max_length: int


def _natural_cmp(a: Any, b: Any, ctx: Any) -> int:
    return (a > b) - (a < b)


@_validate
def array_new(
    element_size: Size = DEFAULT_ELEMENT_SIZE, len_hint: Optional[SlotCount] = None
) -> ArrayState:
    """Create an empty array. Nothing is allocated until it grows."""
    return ArrayState[Any](element_size, len_hint)


@_validate
def _array_new_of_len(
    element_size: Size, length: Count, len_hint: Optional[SlotCount] = None
) -> ArrayState:
    # Slots [0, length) are occupied but still hold None; callers fill them
    state = ArrayState[Any](element_size, len_hint)
    state.resize(length)
    return state


# source is only read, so it is not copied into a validated list
@_validate
def array_from_array(
    source: SkipValidation[Optional[Sequence[Any]]],
    source_len: Count,
    element_size: Size = DEFAULT_ELEMENT_SIZE,
    len_hint: Optional[SlotCount] = None,
) -> ArrayState:
    """
    Create an array holding a copy of the first source_len items of source.

    If source_len is zero the source is never read, and may be None.

    Raises:
        ArrayInvalidArgument: If source is None or shorter than source_len
        ArrayOutOfMemory: If source_len items cannot be stored
    """
    if source_len and source is None:
        raise ArrayInvalidArgument("source may only be None when source_len is 0")
    if source_len and len(source) < source_len:  # type: ignore[arg-type]
        raise ArrayInvalidArgument(
            f"source has {len(source)} items, fewer than source_len={source_len}"  # type: ignore[arg-type]
        )

    state = _array_new_of_len(element_size, source_len, len_hint)
    if source_len == 0:
        return state

    state.items[:source_len] = [source[i] for i in range(source_len)]  # type: ignore[index]
    state.maybe_check_invariants()
    return state


@_validate
def array_copy(state: ArrayState) -> ArrayState:
    """Create a new array holding a copy of another array's items."""
    state.require_live()
    return array_from_array(state.items, state.len, state.element_size, state.len_hint)


@_validate
def array_len(state: ArrayState) -> Count:
    state.require_live()
    return state.len


@_validate
def array_append(state: ArrayState, obj: Any) -> None:
    """
    Append an object to the end of an array, growing it if necessary.

    Raises:
        ArrayOverflow: If the length cannot be incremented
        ArrayOutOfMemory: If the array cannot grow
    """
    state.require_live()
    old_len = state.len

    if not can_add(old_len, 1):
        raise ArrayOverflow(f"Cannot append to an array of length {old_len}")

    state.resize(old_len + 1)
    state.items[old_len] = obj  # type: ignore[index]
    state.maybe_check_invariants()


@_validate
def array_extend(dest: ArrayState, src: ArrayState) -> None:
    """
    Append a copy of every item in src to dest.

    src is left unaltered. dest and src may be the same array, in which case
    the array is extended with a copy of its own items.

    Raises:
        ArrayInvalidArgument: If the element sizes differ
        ArrayOverflow: If the combined length cannot be represented
        ArrayOutOfMemory: If dest cannot grow
    """
    dest.require_live()
    src.require_live()

    if dest.element_size != src.element_size:
        raise ArrayInvalidArgument(
            f"Element size mismatch: dest={dest.element_size}, src={src.element_size}"
        )

    dest_len = dest.len
    src_len = src.len
    if not can_add(dest_len, src_len):
        raise ArrayOverflow(
            f"Cannot extend an array of length {dest_len} by {src_len} items"
        )

    # Capture the source before dest's backing store can be replaced
    incoming = src.items[:src_len] if src.items is not None else []

    dest.resize(dest_len + src_len)
    if src_len:
        dest.items[dest_len : dest_len + src_len] = incoming  # type: ignore[index]
    dest.maybe_check_invariants()


@_validate
def array_remove(state: ArrayState, index: Index) -> None:
    """
    Remove the item at index, moving back every item after it.

    Raises:
        ArrayNotFound: If index is not below the array's length
        ArrayOutOfMemory: If the backing store could not be shrunk
    """
    state.require_live()
    old_len = state.len

    if index >= old_len:
        raise ArrayNotFound(f"index {index} out of range for length {old_len}")

    items: List[Any] = state.items  # type: ignore[assignment]
    removed = items[index]
    items[index : old_len - 1] = items[index + 1 : old_len]
    items[old_len - 1] = None

    try:
        state.resize(old_len - 1)
    except ArrayOutOfMemory:
        items[index + 1 : old_len] = items[index : old_len - 1]
        items[index] = removed
        raise
    state.maybe_check_invariants()


@_validate
def array_truncate(state: ArrayState, new_len: Count) -> None:
    """
    Shrink an array to new_len items, dropping the rest.

    Raises:
        ArrayInvalidArgument: If new_len is greater than the current length
    """
    state.require_live()
    if new_len > state.len:
        raise ArrayInvalidArgument(
            f"Cannot truncate an array of length {state.len} to {new_len}"
        )
    state.resize(new_len)
    state.maybe_check_invariants()


@_validate
def array_slice(state: ArrayState, start: Count, stop: Count, step: int) -> ArrayState:
    """
    Create a new array from the items of state between start and stop.

    Items are taken every `step` positions starting at `start`, moving towards
    `stop` (exclusive). A negative step slices backwards; when slicing
    backwards from at or past the end, the last item is the effective start
    and `stop` itself is included, so slice(a, len(a), 0, -1) reverses a.
    Counting from the end with negative indexes is not supported.

    Returns an empty array when start == stop, when the direction of
    stop - start contradicts step, or when the lower bound is at or past the
    end of the array.

    Raises:
        ArrayInvalidArgument: If step is zero
    """
    state.require_live()
    if step == 0:
        raise ArrayInvalidArgument("slice step cannot be zero")

    length = state.len
    element_size = state.element_size
    lo_bound = min(start, stop)
    hi_bound = min(max(start, stop), length)

    if start == stop or (start < stop) != (step > 0) or lo_bound >= length:
        return array_new(element_size)

    if step == 1:
        # straightforward cut
        return array_from_array(state.items[lo_bound:hi_bound], hi_bound - lo_bound, element_size)  # type: ignore[index]

    slice_len = 1 + (hi_bound - lo_bound - 1) // abs(step)
    # when going backwards the caller may start beyond the array
    real_start = min(start, length - 1)
    src: List[Any] = state.items  # type: ignore[assignment]

    result = _array_new_of_len(element_size, slice_len)
    result.items[:slice_len] = [  # type: ignore[index]
        src[real_start + i * step] for i in range(slice_len)
    ]
    result.maybe_check_invariants()
    return result


def _scan(
    state: ArrayState, cmp: Optional[Comparator], ctx: Any, sign: int
) -> Optional[int]:
    # Keeps the first item for which no later item compares strictly better
    state.require_live()
    if state.len == 0:
        return None
    if cmp is None:
        cmp = _natural_cmp

    items: List[Any] = state.items  # type: ignore[assignment]
    best = 0
    for i in range(1, state.len):
        if cmp(items[i], items[best], ctx) * sign > 0:
            best = i
    return best


@_validate
def array_index_of_min(
    state: ArrayState, cmp: Optional[Comparator] = None, ctx: Any = None
) -> Optional[Index]:
    """Index of the smallest item under cmp, or None for an empty array."""
    return _scan(state, cmp, ctx, -1)


@_validate
def array_index_of_max(
    state: ArrayState, cmp: Optional[Comparator] = None, ctx: Any = None
) -> Optional[Index]:
    """Index of the largest item under cmp, or None for an empty array."""
    return _scan(state, cmp, ctx, 1)


@_validate
def array_min(
    state: ArrayState, cmp: Optional[Comparator] = None, ctx: Any = None
) -> Any:
    """
    Find the smallest item of an array.

    cmp(a, b, ctx) must return a negative number, zero or a positive number
    when a is less than, equal to or greater than b; ctx is passed through
    untouched. Natural ordering is used when cmp is None. Ties go to the
    leftmost item.

    Returns the item itself, or None for an empty array.
    """
    best = _scan(state, cmp, ctx, -1)
    return None if best is None else state.items[best]  # type: ignore[index]


@_validate
def array_max(
    state: ArrayState, cmp: Optional[Comparator] = None, ctx: Any = None
) -> Any:
    """Find the largest item of an array. See array_min."""
    best = _scan(state, cmp, ctx, 1)
    return None if best is None else state.items[best]  # type: ignore[index]


@_validate
def array_set_len_hint(state: ArrayState, len_hint: Optional[SlotCount]) -> None:
    """Set (or clear, with None) the expected length. Applies from the next resize."""
    state.require_live()
    state.len_hint = len_hint


@_validate
def array_stats(state: ArrayState) -> ArrayStats:
    state.require_live()
    return ArrayStats(
        length=state.len,
        capacity=state.capacity,
        element_size=state.element_size,
        len_hint=state.len_hint,
        nbytes=state.capacity * state.element_size,
        max_length=max_slot_count(state.element_size),
    )


@_validate
def array_free(state: ArrayState) -> None:
    """
    Release an array's backing store.

    The array is unusable afterwards; any further operation on it raises
    ArrayFreedError.
    """
    state.require_live()
    logger.debug(f"Freeing array of {state.len} items ({state.capacity} slots)")
    state.release()
