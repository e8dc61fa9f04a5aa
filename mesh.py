import math
import numpy as np


class InvalidGridError(ValueError):
    """Raised when a grid cannot describe a uniform partition."""


class UniformGrid1D:
    """Uniform partition of [t0, t1] into n_steps steps of size h."""

    __slots__ = ("t0", "t1", "n_steps", "h")

    def __init__(self, t0, t1, n_steps):
        if isinstance(n_steps, bool) or not isinstance(n_steps, (int, np.integer)):
            raise InvalidGridError(f"step count must be an integer, got {n_steps!r}")
        if n_steps < 1:
            raise InvalidGridError(f"step count must be >= 1, got {n_steps}")
        t0, t1 = float(t0), float(t1)
        if not (math.isfinite(t0) and math.isfinite(t1)):
            raise InvalidGridError(f"interval bounds must be finite, got [{t0}, {t1}]")
        if t1 <= t0:
            raise InvalidGridError(f"t1 must be > t0, got [{t0}, {t1}]")

        object.__setattr__(self, "t0", t0)
        object.__setattr__(self, "t1", t1)
        object.__setattr__(self, "n_steps", int(n_steps))
        # uniform spacing
        object.__setattr__(self, "h", (t1 - t0) / n_steps)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other):
        if not isinstance(other, UniformGrid1D):
            return NotImplemented
        return (self.t0, self.t1, self.n_steps) == (other.t0, other.t1, other.n_steps)

    def __hash__(self):
        return hash((self.t0, self.t1, self.n_steps))

    def __repr__(self):
        return f"UniformGrid1D(t0={self.t0}, t1={self.t1}, n_steps={self.n_steps})"

    def __len__(self):
        """Number of sample points, n_steps + 1."""
        return self.n_steps + 1

    def point(self, i):
        """Return t_i = t0 + i * h."""
        return self.t0 + i * self.h

    def points(self):
        """All sample points as a fresh array."""
        return np.array([self.point(i) for i in range(self.n_steps + 1)])
