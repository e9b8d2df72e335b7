# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# src/growarray/core/growable_array.py
"""
Growable array backed by a fixed-capacity numpy buffer.

The buffer starts with one slot and doubles whenever an append finds it
full: a new buffer of twice the capacity is allocated, the live prefix is
copied over in order, and the old buffer goes back to the allocator.
"""

from __future__ import annotations

import logging
import operator
from typing import Callable, Generic, Iterator, TypeVar

import numpy as np

from .allocator import BufferAllocator, default_allocator
from .errors import ContainerReleased, OutOfRange, Underflow

__all__ = ["GrowableArray", "INITIAL_CAPACITY", "GROWTH_FACTOR"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

INITIAL_CAPACITY = 1
GROWTH_FACTOR = 2


class GrowableArray(Generic[T]):
    """
    Contiguous container of elements of one numpy dtype.

    Parameters
    ----------
    dtype : numpy dtype-like
        Element type, fixed for the lifetime of the container
        (``np.int64``, ``"U1"`` for characters, ``object`` for arbitrary values).
    allocator : BufferAllocator | None
        Source of buffers. Defaults to the process-wide allocator.
    strict_underflow : bool
        If True, ``remove_last`` on an empty container raises ``Underflow``
        instead of doing nothing.
    """

    def __init__(
        self,
        dtype=np.int64,
        allocator: BufferAllocator | None = None,
        strict_underflow: bool = False,
    ) -> None:
        self._buf: np.ndarray | None = None
        self._allocator = allocator if allocator is not None else default_allocator()
        self._dtype = np.dtype(dtype)
        self._strict_underflow = strict_underflow
        self._length = 0
        self._capacity = 0
        self._buf = self._allocator.allocate(INITIAL_CAPACITY, self._dtype)
        self._capacity = INITIAL_CAPACITY

    # ------------------------------------------------------------------ #
    #  Lifetime                                                          #
    # ------------------------------------------------------------------ #
    def release(self) -> None:
        """Give the buffer back to the allocator. Later calls are no-ops."""
        if self._buf is None:
            return
        buf, self._buf = self._buf, None
        self._length = 0
        self._capacity = 0
        self._allocator.free(buf)

    @property
    def released(self) -> bool:
        return self._buf is None

    def __enter__(self) -> "GrowableArray[T]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        # __init__ may have failed before the buffer was set
        if getattr(self, "_buf", None) is not None:
            self.release()

    def _alive(self) -> np.ndarray:
        if self._buf is None:
            raise ContainerReleased("container has been released")
        return self._buf

    # ------------------------------------------------------------------ #
    #  Growth                                                            #
    # ------------------------------------------------------------------ #
    def _grow(self) -> None:
        old = self._alive()
        new_capacity = self._capacity * GROWTH_FACTOR
        # allocation may raise; nothing has been touched yet
        new = self._allocator.allocate(new_capacity, self._dtype)
        new[: self._length] = old[: self._length]
        self._buf = new
        self._capacity = new_capacity
        self._allocator.free(old)
        logger.debug("grow capacity %d -> %d (size=%d)", old.shape[0], new_capacity, self._length)

    # ------------------------------------------------------------------ #
    #  Mutation                                                          #
    # ------------------------------------------------------------------ #
    def _coerce(self, value: T):
        # convert before any growth so a rejected value changes nothing
        if self._dtype == np.dtype(object):
            return value
        item = np.asarray(value, dtype=self._dtype)
        if item.ndim != 0:
            raise ValueError(f"expected a scalar for dtype {self._dtype}, got shape {item.shape}")
        return item

    def append(self, value: T) -> None:
        buf = self._alive()
        item = self._coerce(value)
        if self._length == self._capacity:
            self._grow()
            buf = self._buf
        buf[self._length] = item
        self._length += 1

    def append_at(self, value: T, index: int) -> None:
        """
        Set-or-append.

        ``index == size()`` appends; ``0 <= index < size()`` overwrites the
        element in place without shifting anything; any other index raises
        ``OutOfRange``.
        """
        buf = self._alive()
        index = operator.index(index)
        if index == self._length:
            self.append(value)
            return
        if index < 0 or index > self._length:
            raise OutOfRange(index, self._length, op="append_at")
        buf[index] = self._coerce(value)

    def remove_last(self) -> None:
        buf = self._alive()
        if self._length == 0:
            if self._strict_underflow:
                raise Underflow("remove_last on an empty container")
            return
        self._length -= 1
        if self._dtype == np.dtype(object):
            buf[self._length] = None

    # ------------------------------------------------------------------ #
    #  Access                                                            #
    # ------------------------------------------------------------------ #
    def size(self) -> int:
        self._alive()
        return self._length

    def capacity(self) -> int:
        self._alive()
        return self._capacity

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def get(self, index: int) -> T:
        buf = self._alive()
        index = operator.index(index)
        if index < 0 or index >= self._length:
            raise OutOfRange(index, self._length)
        if self._dtype == np.dtype(object):
            return buf[index]
        return buf[index].item()

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        self._alive()
        i = 0
        while i < self.size():
            yield self.get(i)
            i += 1

    def for_each(self, visitor: Callable[[T], object]) -> None:
        for value in self:
            visitor(value)

    def to_numpy(self) -> np.ndarray:
        """Copy of the live elements; the internal buffer is never exposed."""
        buf = self._alive()
        return buf[: self._length].copy()

    def render(self) -> str:
        return "".join(f"{value} ," for value in self)

    def __str__(self) -> str:
        if self._buf is None:
            return "<released>"
        return self.render()

    def __repr__(self) -> str:
        if self._buf is None:
            return f"GrowableArray(dtype={self._dtype}, released)"
        return f"GrowableArray(dtype={self._dtype}, size={self._length}, capacity={self._capacity})"
