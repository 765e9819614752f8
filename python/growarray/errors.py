# SPDX-FileCopyrightText: (c) 2025 Tenstorrent AI ULC
#
# SPDX-License-Identifier: Apache-2.0

"""
Custom exception classes for growarray.
"""

from .typedefs import ErrorKind


class ArrayError(RuntimeError):
    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class ArrayInvalidArgument(ArrayError):
    kind = ErrorKind.INVALID_ARGUMENT


class ArrayNotFound(ArrayError):
    kind = ErrorKind.NOT_FOUND


class ArrayOutOfMemory(ArrayError):
    kind = ErrorKind.OUT_OF_MEMORY


class ArrayOverflow(ArrayError):
    kind = ErrorKind.OVERFLOW


class ArrayFreedError(ArrayError):
    kind = ErrorKind.INVALID_ARGUMENT


class ArrayInvariantError(ArrayError):
    """Internal bookkeeping is inconsistent. Indicates an engine bug."""
