# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/growarray/__init__.py
from __future__ import annotations

from .core import (
    AllocationFailure,
    BufferAllocator,
    ContainerReleased,
    GrowableArray,
    GrowableArrayError,
    OutOfRange,
    Underflow,
)

__version__ = "0.1.0"

__all__ = [
    "GrowableArray",
    "BufferAllocator",
    "GrowableArrayError",
    "AllocationFailure",
    "OutOfRange",
    "Underflow",
    "ContainerReleased",
]
