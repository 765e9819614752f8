# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
Capacity planning for growable arrays.

The planner decides how many slots the backing store should have for a given
length. It never allocates; the resize engine in arraystate applies its
decisions. Both planners share a hysteresis window: while the new length stays
within [old_capacity // SHRINK_RATIO, old_capacity] the capacity is kept, so
alternating append/remove patterns do not cause repeated reallocation.

Every result r satisfies r >= new_len and is_valid_slot_count(r, element_size),
and planning twice gives the same answer as planning once.
"""

from typing import Optional

from .constants import (
    GROWTH_RATIO,
    HINT_MARGIN,
    HINT_SIGMA_DIVISOR,
    MIN_MARGIN,
    SHRINK_RATIO,
)
from .errors import ArrayOutOfMemory
from .overflow import can_add_within_index, is_valid_slot_count


def _require_valid_len(element_size: int, new_len: int) -> None:
    if not is_valid_slot_count(new_len, element_size):
        raise ArrayOutOfMemory(
            f"Cannot address {new_len} slots of {element_size} bytes"
        )


def _within_hysteresis(old_capacity: int, new_len: int) -> bool:
    return old_capacity // SHRINK_RATIO <= new_len <= old_capacity


def _with_margin(element_size: int, new_len: int, margin: int) -> int:
    # If the margin overflows or makes the array unaddressable, don't use it
    if not can_add_within_index(new_len, margin):
        return new_len
    capacity = new_len + margin
    if not is_valid_slot_count(capacity, element_size):
        return new_len
    return capacity


def plan_capacity(element_size: int, old_capacity: int, new_len: int) -> int:
    """
    Compute the capacity for an array about to hold new_len elements.

    Outside the hysteresis window the capacity becomes
    new_len + new_len // GROWTH_RATIO + MIN_MARGIN, falling back to an exact
    fit when the margin cannot be represented.

    Raises:
        ArrayOutOfMemory: If new_len slots are not addressable at all
    """
    _require_valid_len(element_size, new_len)

    if _within_hysteresis(old_capacity, new_len):
        return old_capacity

    # can never overflow, new_len is a valid slot count
    margin = new_len // GROWTH_RATIO + MIN_MARGIN
    return _with_margin(element_size, new_len, margin)


def plan_capacity_with_hint(
    element_size: int, old_capacity: int, new_len: int, len_hint: int
) -> int:
    """
    Compute a capacity biased towards an expected steady-state length.

    The hint is treated as the mean of the array's length, with a standard
    deviation of len_hint // 3. Below two deviations under the hint the
    capacity is held at that lower bound. Between two and one deviations
    under, it grows linearly with slope 2 so that it reaches the hint at one
    deviation under. Within one deviation it snaps to the hint exactly. Above
    the hint, it tracks the length with a small fixed margin.

    Raises:
        ArrayOutOfMemory: If new_len slots are not addressable at all
    """
    _require_valid_len(element_size, new_len)

    if _within_hysteresis(old_capacity, new_len):
        return old_capacity

    if new_len > len_hint:
        return _with_margin(element_size, new_len, HINT_MARGIN)

    sigma = len_hint // HINT_SIGMA_DIVISOR
    two_under = len_hint - 2 * sigma
    one_under = len_hint - sigma

    if new_len < two_under:
        capacity = two_under
    elif new_len < one_under:
        capacity = two_under + 2 * (new_len - two_under)
    else:
        capacity = len_hint

    # a hint beyond what we can address is no use
    if not is_valid_slot_count(capacity, element_size):
        return new_len
    return capacity


def plan(
    element_size: int, old_capacity: int, new_len: int, len_hint: Optional[int]
) -> int:
    """Dispatch to the hinted planner when a hint is available."""
    if len_hint is None:
        return plan_capacity(element_size, old_capacity, new_len)
    return plan_capacity_with_hint(element_size, old_capacity, new_len, len_hint)
