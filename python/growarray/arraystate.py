# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
ArrayState and the resize engine for growarray.
"""

from typing import Generic, List, Optional

from loguru import logger

from .typedefs import Size, Count, ElemType, ElemSlot
from .constants import invariant_checks_enabled
from .errors import ArrayFreedError, ArrayInvariantError, ArrayOutOfMemory
from .overflow import is_valid_slot_count
from .planner import plan


# The backing store is a list of object references rather than a byte array.
# element_size is still tracked so that every capacity decision goes through
# the same addressability checks a raw buffer would need.
class ArrayState(Generic[ElemType]):
    __slots__ = (
        "items",
        "element_size",
        "capacity",
        "len",
        "len_hint",
        "freed",
    )

    def __init__(self, element_size: Size, len_hint: Optional[Count] = None):
        self.items: Optional[List[ElemSlot[ElemType]]] = None
        self.element_size: Size = element_size
        self.capacity: Count = 0
        self.len: Count = 0
        self.len_hint: Optional[Count] = len_hint
        self.freed = False

    def require_live(self) -> None:
        if self.freed:
            raise ArrayFreedError("Array has been freed; it may not be used")

    def check_bookkeeping(self) -> None:
        """Constant-time invariants over len, capacity and the backing store."""
        if self.len > self.capacity:
            raise ArrayInvariantError(
                f"len={self.len} exceeds capacity={self.capacity}"
            )
        if (self.items is None) != (self.capacity == 0):
            raise ArrayInvariantError(
                "Backing store must be absent if and only if capacity is 0"
            )
        if self.items is not None and len(self.items) != self.capacity:
            raise ArrayInvariantError(
                f"Backing store has {len(self.items)} slots, capacity={self.capacity}"
            )
        if not is_valid_slot_count(self.capacity, self.element_size):
            raise ArrayInvariantError(
                f"capacity={self.capacity} is not addressable for "
                f"element_size={self.element_size}"
            )

    def check_invariants(self) -> None:
        """All invariants, including the linear scan of the unused tail."""
        self.check_bookkeeping()
        if self.items is not None and any(
            slot is not None for slot in self.items[self.len :]
        ):
            raise ArrayInvariantError("Slots past len must be empty")

    def maybe_check_invariants(self) -> None:
        # The tail scan is linear and runs only when enabled
        if invariant_checks_enabled():
            self.check_invariants()
        else:
            self.check_bookkeeping()

    def resize(self, new_len: Count) -> None:
        """
        Set the array's length, reallocating the backing store if needed.

        The new capacity is chosen by the planner (hinted when len_hint is
        set). On failure nothing about the state changes.

        Raises:
            ArrayOutOfMemory: If new_len is not addressable or the backing
                store cannot be allocated
        """
        old_len = self.len
        if new_len == old_len:
            return

        # asking for more objects than we can address?
        if not is_valid_slot_count(new_len, self.element_size):
            raise ArrayOutOfMemory(
                f"Cannot address {new_len} slots of {self.element_size} bytes"
            )

        capacity = plan(self.element_size, self.capacity, new_len, self.len_hint)
        items = self.items

        if capacity != self.capacity:
            try:
                items = self._reallocate(capacity)
            except (MemoryError, OverflowError) as e:
                raise ArrayOutOfMemory(
                    f"Failed to allocate {capacity} slots of {self.element_size} bytes"
                ) from e
            logger.debug(
                f"Reallocated array from {self.capacity} to {capacity} slots "
                f"(len {old_len} -> {new_len})"
            )

        # Nothing can fail past this point
        if items is not None and new_len < old_len:
            items[new_len : min(old_len, capacity)] = [None] * (
                min(old_len, capacity) - new_len
            )
        self.items = items
        self.capacity = capacity
        self.len = new_len

    def _reallocate(self, capacity: Count) -> Optional[List[ElemSlot[ElemType]]]:
        # Build a fresh list so the current one survives an allocation failure
        if capacity == 0:
            return None
        if self.items is None:
            return [None] * capacity
        if capacity < self.capacity:
            return self.items[:capacity]
        return self.items + [None] * (capacity - self.capacity)

    def release(self) -> None:
        self.items = None
        self.capacity = 0
        self.len = 0
        self.freed = True
