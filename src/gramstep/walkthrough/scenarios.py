"""Default input vectors loaded whenever the dimension changes."""

from typing import Tuple

from ..linalg import Vector
from .steps import Dimension

SCENARIO_2D: Tuple[Vector, ...] = (
    Vector(3, 1, 0),
    Vector(2, 4, 0),
)

# Already orthogonal in direction, so the result is the standard basis
SCENARIO_3D: Tuple[Vector, ...] = (
    Vector(2, 0, 0),
    Vector(2, 2, 0),
    Vector(2, 2, 2),
)


def default_vectors(dimension) -> Tuple[Vector, ...]:
    """Default scenario for a dimension (2 or 3)."""
    dim = Dimension.coerce(dimension)
    return SCENARIO_2D if dim is Dimension.TWO else SCENARIO_3D
