from collections import namedtuple

import numpy as np

Point = namedtuple("Point", ["x", "y"])

class SampleSeries:
    """
    Ordered (x, y) samples on a grid.

    The backing arrays are private copies flagged read-only, so a series
    cannot be changed once built and never aliases caller buffers.
    """

    def __init__(self, x, y):
        x = np.array(x, dtype=float)
        y = np.array(y, dtype=float)
        if x.ndim != 1 or x.shape != y.shape:
            raise ValueError(f"x and y must be 1d arrays of equal length, got {x.shape} and {y.shape}")
        x.flags.writeable = False
        y.flags.writeable = False
        self.x = x
        self.y = y

    def __len__(self):
        return len(self.x)

    def __getitem__(self, i):
        """Return the i-th sample as an (x, y) pair."""
        return Point(float(self.x[i]), float(self.y[i]))

    def __iter__(self):
        for i in range(len(self)):
            yield self[i]

    def __eq__(self, other):
        if not isinstance(other, SampleSeries):
            return NotImplemented
        return np.array_equal(self.x, other.x) and np.array_equal(self.y, other.y)

    def __repr__(self):
        return f"SampleSeries(n={len(self)})"

    def pairs(self):
        """Samples as a list of (x, y) tuples."""
        return [(p.x, p.y) for p in self]
