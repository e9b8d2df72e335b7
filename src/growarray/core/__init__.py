# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/growarray/core/__init__.py
from __future__ import annotations

from .allocator import BufferAllocator, default_allocator
from .errors import (
    AllocationFailure,
    ContainerReleased,
    GrowableArrayError,
    OutOfRange,
    Underflow,
)
from .growable_array import GROWTH_FACTOR, INITIAL_CAPACITY, GrowableArray

__all__ = [
    "GrowableArray",
    "BufferAllocator",
    "default_allocator",
    "GrowableArrayError",
    "AllocationFailure",
    "OutOfRange",
    "Underflow",
    "ContainerReleased",
    "INITIAL_CAPACITY",
    "GROWTH_FACTOR",
]
