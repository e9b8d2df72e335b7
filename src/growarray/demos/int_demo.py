# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/int_demo.py
import numpy as np

from growarray.core.errors import OutOfRange
from growarray.core.growable_array import GrowableArray


def main(values: list[int] | None = None, index: int | None = None) -> GrowableArray:
    values = values or [55, 50, 510]
    index = len(values) - 1 if index is None else index

    arr = GrowableArray(dtype=np.int64)
    for v in values:
        arr.append(v)

    try:
        print(f"At index {index} : {arr.get(index)}")
    except OutOfRange as exc:
        print(f"error: {exc}")
    print(f"{arr.size()} Size")
    print(f"{arr.capacity()} Capacity")
    print(arr.render())
    return arr


if __name__ == "__main__":
    main()
