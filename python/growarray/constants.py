# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Constants for the growarray package.
"""
import os
import struct
import sys

# Platform integer limits: signed index type and unsigned size type
INDEX_MAX = sys.maxsize
INDEX_MIN = -INDEX_MAX - 1
SIZE_MAX = 2 * INDEX_MAX + 1

# A list slot stores one object reference
DEFAULT_ELEMENT_SIZE = struct.calcsize("P")

# Capacity planning. On a resize outside the hysteresis window:
#   capacity = new_len + new_len // GROWTH_RATIO + MIN_MARGIN
# MIN_MARGIN must be <= SIZE_MAX - SIZE_MAX // GROWTH_RATIO.
GROWTH_RATIO = 8
MIN_MARGIN = 4
# Capacity is kept while new_len >= capacity // SHRINK_RATIO
SHRINK_RATIO = 2
# Fixed margin used by the hinted planner once the length exceeds the hint
HINT_MARGIN = 4
# The hint is treated as a mean with standard deviation hint // HINT_SIGMA_DIVISOR
HINT_SIGMA_DIVISOR = 3

CHECK_INVARIANTS_ENV = "GROWARRAY_CHECK_INVARIANTS"


def invariant_checks_enabled() -> bool:
    """Whether mutating operations also verify the invariants that need a linear scan."""
    return os.environ.get(CHECK_INVARIANTS_ENV, "0") == "1"
