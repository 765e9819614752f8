# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
growarray package: generic resizable arrays with overflow-safe capacity management.
"""

from .growable import GrowableArray, make_array_like
from .arrayapi import (
    ArrayStats,
    array_new,
    array_from_array,
    array_copy,
    array_len,
    array_append,
    array_extend,
    array_remove,
    array_truncate,
    array_slice,
    array_min,
    array_max,
    array_index_of_min,
    array_index_of_max,
    array_set_len_hint,
    array_stats,
    array_free,
)
from .arraystate import ArrayState
from .view import ItemsView
from .planner import plan_capacity, plan_capacity_with_hint
from . import overflow
from .typedefs import ErrorKind, Comparator
from .constants import INDEX_MAX, SIZE_MAX, DEFAULT_ELEMENT_SIZE
from .errors import (
    ArrayError,
    ArrayInvalidArgument,
    ArrayNotFound,
    ArrayOutOfMemory,
    ArrayOverflow,
    ArrayFreedError,
    ArrayInvariantError,
)

__all__ = [
    "GrowableArray",
    "make_array_like",
    "ArrayStats",
    "array_new",
    "array_from_array",
    "array_copy",
    "array_len",
    "array_append",
    "array_extend",
    "array_remove",
    "array_truncate",
    "array_slice",
    "array_min",
    "array_max",
    "array_index_of_min",
    "array_index_of_max",
    "array_set_len_hint",
    "array_stats",
    "array_free",
    "ArrayState",
    "ItemsView",
    "plan_capacity",
    "plan_capacity_with_hint",
    "overflow",
    "ErrorKind",
    "Comparator",
    "INDEX_MAX",
    "SIZE_MAX",
    "DEFAULT_ELEMENT_SIZE",
    "ArrayError",
    "ArrayInvalidArgument",
    "ArrayNotFound",
    "ArrayOutOfMemory",
    "ArrayOverflow",
    "ArrayFreedError",
    "ArrayInvariantError",
]
