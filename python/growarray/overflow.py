# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0
"""
Overflow-safe arithmetic over the platform's size and index types.

Python integers never overflow, so these predicates model the C types the
capacity planner reasons about: an unsigned size type bounded by SIZE_MAX and
a signed index type bounded by INDEX_MIN/INDEX_MAX. Every size computation
that reaches the backing store goes through here first.

All functions are total. They return booleans or clamped values and never
raise. Unsigned arguments are expected to be non-negative.

The module is public: callers that size their own buffers alongside an array
(for example, to precompute whether an extend can succeed) use the same
predicates the engine does. The engine itself relies on can_add,
can_add_within_index, is_valid_slot_count and max_slot_count.
"""

from .constants import INDEX_MAX, INDEX_MIN, SIZE_MAX


def can_add(x: int, y: int) -> bool:
    """Check whether two size values can be added without overflowing."""
    return x <= SIZE_MAX - y


def can_multiply(x: int, y: int) -> bool:
    """Check whether two size values can be multiplied without overflowing."""
    # trivial cases, and no division by zero
    return y <= 1 or x <= SIZE_MAX // y


def can_index_add(x: int, y: int) -> bool:
    """Check whether two signed index values can be added without overflowing."""
    return (y <= 0 or x <= INDEX_MAX - y) and (y >= 0 or x >= INDEX_MIN - y)


def can_index_multiply(x: int, y: int) -> bool:
    """Check whether two signed index values can be multiplied without overflowing."""
    return INDEX_MIN <= x * y <= INDEX_MAX


def fits_in_index(x: int) -> bool:
    """Check whether an unsigned value is representable in the signed index type."""
    return x <= INDEX_MAX


def can_add_within(x: int, y: int, cap: int) -> bool:
    """Check whether x + y stays within cap (and within the size type)."""
    return can_add(x, y) and x + y <= cap


def can_add_within_index(x: int, y: int) -> bool:
    return can_add_within(x, y, INDEX_MAX)


def add_capped(x: int, y: int, cap: int) -> int:
    """
    Add two size values, capping the result.

    Returns x + y if it is representable and does not exceed cap, otherwise
    returns cap.
    """
    if can_add_within(x, y, cap):
        return x + y
    return cap


def add_capped_index(x: int, y: int) -> int:
    return add_capped(x, y, INDEX_MAX)


def size_to_index(x: int) -> int:
    """Convert a size value to the index type, capping at INDEX_MAX."""
    return INDEX_MAX if x > INDEX_MAX else x


def is_valid_index(index: int, element_size: int) -> bool:
    """
    Check whether an element at `index` can be addressed.

    The index must fit in the index type, and the element's whole byte range
    [index * element_size, (index + 1) * element_size) must be representable
    in the size type.
    """
    return (
        fits_in_index(index)
        and can_multiply(index, element_size)
        and can_add(index * element_size, element_size)
    )


def is_valid_slot_count(n: int, element_size: int) -> bool:
    """
    Check whether a buffer of n slots of element_size bytes is addressable.

    n must fit in the index type and n * element_size must not overflow the
    size type. For n > 0 this also means the last element is a valid index.
    """
    return fits_in_index(n) and can_multiply(n, element_size)


def max_slot_count(element_size: int) -> int:
    """Largest n for which is_valid_slot_count(n, element_size) holds."""
    return min(INDEX_MAX, SIZE_MAX // element_size)
