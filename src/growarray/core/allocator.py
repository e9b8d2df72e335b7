# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/growarray/core/allocator.py
from __future__ import annotations

import logging

import numpy as np

from .errors import AllocationFailure

__all__ = ["BufferAllocator", "default_allocator"]

logger = logging.getLogger(__name__)


class BufferAllocator:
    """
    Hands out fixed-size numpy buffers and keeps count of them.

    Parameters
    ----------
    max_slots : int | None
        Upper bound on the capacity of a single buffer. Requests above it
        fail with AllocationFailure. None means "whatever numpy can get".

    Counters
    --------
    allocated / freed : number of buffers handed out / given back.
    live : allocated - freed.
    """

    def __init__(self, max_slots: int | None = None) -> None:
        if max_slots is not None and max_slots < 1:
            raise ValueError(f"max_slots must be >= 1, got {max_slots}")
        self.max_slots = max_slots
        self.allocated = 0
        self.freed = 0

    @property
    def live(self) -> int:
        return self.allocated - self.freed

    def allocate(self, capacity: int, dtype) -> np.ndarray:
        if capacity < 1:
            raise AllocationFailure(capacity, "capacity must be >= 1")
        if self.max_slots is not None and capacity > self.max_slots:
            raise AllocationFailure(capacity, f"limit is {self.max_slots} slots")
        dt = np.dtype(dtype)
        try:
            if dt == np.dtype(object):
                buf = np.full(capacity, None, dtype=object)
            else:
                buf = np.empty(capacity, dtype=dt)
        except MemoryError as exc:
            raise AllocationFailure(capacity, str(exc)) from exc
        self.allocated += 1
        logger.debug("allocate capacity=%d dtype=%s live=%d", capacity, dt, self.live)
        return buf

    def free(self, buffer: np.ndarray) -> None:
        self.freed += 1
        logger.debug("free capacity=%d live=%d", buffer.shape[0], self.live)


_DEFAULT = BufferAllocator()


def default_allocator() -> BufferAllocator:
    """Process-wide allocator used when a container is built without one."""
    return _DEFAULT
