# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/char_demo.py
from growarray.core.growable_array import GrowableArray


def main(chars: str = "ABC") -> GrowableArray:
    arr = GrowableArray(dtype="U1")
    for c in chars:
        arr.append(c)
    print(arr.render())  # A ,B ,C ,
    return arr


if __name__ == "__main__":
    main()
