# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Type aliases with Pydantic constraints for runtime validation.
"""

from enum import Enum, auto
from typing import Annotated, Any, Callable, Optional, TypeVar

from pydantic import Field

from .constants import INDEX_MAX

ElemType = TypeVar("ElemType")
# Type alias for backing-store slots; unoccupied slots hold None
ElemSlot = Optional[ElemType]


class ErrorKind(Enum):
    """
    Closed set of outcomes an array operation can report.

    Every exception raised by the engine carries one of these as its `kind`.
    """

    OK = auto()
    INVALID_ARGUMENT = auto()
    NOT_FOUND = auto()
    OUT_OF_MEMORY = auto()
    OVERFLOW = auto()


PositiveInt = Annotated[int, Field(gt=0)]
NaturalInt = Annotated[int, Field(ge=0)]
Size = PositiveInt
Index = NaturalInt
Count = NaturalInt
# Lengths and capacities must fit the platform index type
SlotCount = Annotated[NaturalInt, Field(ge=0, le=INDEX_MAX)]

# Three-way comparator: negative, zero or positive, plus an opaque context
Comparator = Callable[[Any, Any, Any], int]
