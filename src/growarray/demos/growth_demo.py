# Copyright (c) 2025 growarray contributors
# SPDX-License-Identifier: MIT
#
# This file is part of the growarray project.
# Licensed under the MIT License – see LICENSE in the repo root.
# demos/growth_demo.py
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from growarray.core.allocator import BufferAllocator
from growarray.core.growable_array import GrowableArray


def capacity_trace(n: int, allocator: BufferAllocator | None = None) -> pd.DataFrame:
    """Append 0..n-1 and record size / capacity / buffer count after each append."""
    allocator = BufferAllocator() if allocator is None else allocator
    rows = []
    with GrowableArray(dtype=np.int64, allocator=allocator) as arr:
        rows.append({"appends": 0, "size": arr.size(), "capacity": arr.capacity(), "buffers": allocator.allocated})
        for i in range(n):
            arr.append(i)
            rows.append(
                {"appends": i + 1, "size": arr.size(), "capacity": arr.capacity(), "buffers": allocator.allocated}
            )
    return pd.DataFrame(rows)


def main(n: int = 64, outputs_dir: str = "outputs", plot: bool = True) -> pd.DataFrame:
    df = capacity_trace(n)

    growth_steps = int((df["capacity"].diff() > 0).sum())
    waste = float((df["capacity"] - df["size"]).iloc[-1])
    print(f"Appended {n} values: final size={df['size'].iloc[-1]}, capacity={df['capacity'].iloc[-1]}")
    print(f"  growth steps  = {growth_steps}")
    print(f"  unused slots  = {waste:.0f}")

    os.makedirs(outputs_dir, exist_ok=True)
    out_csv = os.path.join(outputs_dir, "capacity_trace.csv")
    df.to_csv(out_csv, index=False)
    print("Saved:", out_csv)

    if plot:
        plt.figure(figsize=(6, 4))
        plt.step(df["appends"], df["capacity"], where="post", label="capacity")
        plt.plot(df["appends"], df["size"], "k--", label="size")
        plt.xlabel("appends")
        plt.ylabel("slots")
        plt.legend()
        plt.tight_layout()
        out = os.path.join(outputs_dir, "capacity_trace.pdf")
        plt.savefig(out, format="pdf", bbox_inches="tight")
        plt.close()
        print("Saved:", out)

    return df


if __name__ == "__main__":
    main()
