"""Fixed-size real vectors and the arithmetic the walkthrough is built on.

Every vector in the package is a triple (x, y, z). Two-dimensional inputs
carry z = 0 so that the same arithmetic serves both modes.

Two operations have a degeneracy guard instead of raising:
- normalize() of a zero-length vector returns the zero vector
- project() onto a zero-length vector returns the zero vector

Downstream code treats an all-zero result as "undefined direction".
"""

from dataclasses import dataclass
from typing import Sequence, Tuple, Union
import math

import numpy as np


@dataclass(frozen=True)
class Vector:
    """An immutable 3-component real vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        # Normalise ints and numpy scalars so equality is structural
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def of(cls, components: Union["Vector", Sequence[float], np.ndarray]) -> "Vector":
        """Build from 2 or 3 components; a missing z is 0."""
        if isinstance(components, Vector):
            return components
        values = [float(c) for c in components]
        if len(values) == 2:
            values.append(0.0)
        if len(values) != 3:
            raise ValueError(
                f"Vector needs 2 or 3 components, got {len(values)}"
            )
        return cls(*values)

    @classmethod
    def zero(cls) -> "Vector":
        return cls(0.0, 0.0, 0.0)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_array(self) -> np.ndarray:
        """Convert to a float64 numpy array of shape (3,)."""
        return np.array(self.to_tuple(), dtype=np.float64)

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def __iter__(self):
        return iter(self.to_tuple())

    def __getitem__(self, index: int) -> float:
        return self.to_tuple()[index]

    def __len__(self) -> int:
        return 3

    def __add__(self, other: "Vector") -> "Vector":
        return add(self, other)

    def __sub__(self, other: "Vector") -> "Vector":
        return subtract(self, other)

    def __mul__(self, s: float) -> "Vector":
        return scale(self, s)

    def __rmul__(self, s: float) -> "Vector":
        return scale(self, s)

    def __neg__(self) -> "Vector":
        return scale(self, -1.0)


def add(a: Vector, b: Vector) -> Vector:
    return Vector(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Vector, b: Vector) -> Vector:
    return Vector(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(v: Vector, s: float) -> Vector:
    return Vector(v.x * s, v.y * s, v.z * s)


def dot(a: Vector, b: Vector) -> float:
    """Sum of component-wise products."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude(v: Vector) -> float:
    """Euclidean length, always >= 0."""
    return math.sqrt(dot(v, v))


def normalize(v: Vector) -> Vector:
    """Scale to unit length; the zero vector maps to itself."""
    m = magnitude(v)
    if m == 0:
        return Vector.zero()
    return scale(v, 1.0 / m)


def project(v: Vector, onto: Vector) -> Vector:
    """Component of v parallel to onto.

    Projecting onto a null direction contributes nothing, so the zero
    vector is returned when dot(onto, onto) == 0.
    """
    denom = dot(onto, onto)
    if denom == 0:
        return Vector.zero()
    return scale(onto, dot(v, onto) / denom)


def is_close(a: Vector, b: Vector, tol: float = 1e-9) -> bool:
    """Component-wise comparison within an absolute tolerance."""
    return bool(np.allclose(a.to_array(), b.to_array(), rtol=0.0, atol=tol))
