# vector.py
"""
Immutable 2D vector used for all particle state.

Every operation returns a new Vector2, so a trail segment can hold a
particle's position without ever observing later updates to it.
"""
import math
from dataclasses import dataclass

# --- Data Contracts ---
#
# class Vector2:
#   - Fields: x: float, y: float (frozen).
#   - add/subtract/scale/set_magnitude/clamp_magnitude -> Vector2 (new instance)
#   - magnitude() -> float
#   - Invariants: no operation mutates self; set_magnitude on a zero
#     vector returns a zero vector instead of dividing by zero.


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def set_magnitude(self, m: float) -> "Vector2":
        """Rescales to length m, keeping direction. A zero vector stays zero."""
        current = self.magnitude()
        if current == 0:
            return Vector2(0.0, 0.0)
        return self.scale(m / current)

    def clamp_magnitude(self, lo: float, hi: float) -> "Vector2":
        """Returns a vector in the same direction with length in [lo, hi]."""
        current = self.magnitude()
        if current < lo:
            return self.set_magnitude(lo)
        if current > hi:
            return self.set_magnitude(hi)
        return self

    def as_tuple(self):
        return (self.x, self.y)

    # Operator forms, for call sites that read better as arithmetic.
    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, k):
        return self.scale(k)

    def __rmul__(self, k):
        return self.scale(k)

    def __truediv__(self, k):
        return Vector2(self.x / k, self.y / k)

    def __neg__(self):
        return Vector2(-self.x, -self.y)
