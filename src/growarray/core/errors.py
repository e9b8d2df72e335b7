# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/growarray/core/errors.py
from __future__ import annotations

__all__ = [
    "GrowableArrayError",
    "AllocationFailure",
    "OutOfRange",
    "Underflow",
    "ContainerReleased",
]


class GrowableArrayError(Exception):
    """Base class for every error raised by growarray."""


class AllocationFailure(GrowableArrayError, MemoryError):
    """The allocator could not provide a buffer of the requested capacity."""

    def __init__(self, capacity: int, reason: str = "") -> None:
        self.capacity = capacity
        msg = f"cannot allocate buffer of {capacity} slots"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class OutOfRange(GrowableArrayError, IndexError):
    def __init__(self, index: int, size: int, op: str = "get") -> None:
        self.index = index
        self.size = size
        super().__init__(f"{op}: index {index} out of range for size {size}")


class Underflow(GrowableArrayError):
    """remove_last on an empty container (strict mode only)."""


class ContainerReleased(GrowableArrayError, RuntimeError):
    """Operation attempted on a container whose buffer was already released."""
