# demos/demo_quickstart.py
import numpy as np

from growarray import GrowableArray


def main():
    arr = GrowableArray(dtype=np.float64)
    for x in np.random.randn(10):
        arr.append(x)
    print("size:", arr.size(), "capacity:", arr.capacity())
    print("mean:", arr.to_numpy().mean())


if __name__ == "__main__":
    main()
