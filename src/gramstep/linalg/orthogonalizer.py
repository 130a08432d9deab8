"""Classical Gram-Schmidt over 2 or 3 input vectors.

compute() turns an ordered list of input vectors v1..vn into:
1. orthogonal vectors u1..un (each v with its components along the
   earlier u removed)
2. orthonormal vectors e1..en (each u scaled to unit length)
3. the projection trace, one record per projection, in the order the
   projections were computed

Presentation code keys its explanatory steps to the projection order,
so that order is part of the contract:

    2 inputs: (1, 0)
    3 inputs: (1, 0), (2, 0), (2, 1)

Linearly dependent input is not rejected. A dependent v produces a zero u
and a zero e (see vector.normalize).
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union
import logging

import numpy as np

from .vector import Vector, dot, normalize, project, subtract

logger = logging.getLogger(__name__)

VectorLike = Union[Vector, Sequence[float], np.ndarray]

MIN_VECTORS = 2
MAX_VECTORS = 3


class PreconditionError(ValueError):
    """compute() was called with an input it is not defined for."""


@dataclass(frozen=True)
class ProjectionRecord:
    """One projection computed during the process."""
    target: int     # index of the input vector being decomposed
    on: int         # index of the orthogonal vector projected onto
    vector: Vector  # the resulting projection

    @property
    def key(self) -> Tuple[int, int]:
        return (self.target, self.on)


@dataclass(frozen=True)
class CalculationResult:
    """Full Gram-Schmidt output for one input list."""
    orthogonal: Tuple[Vector, ...]
    orthonormal: Tuple[Vector, ...]
    projections: Tuple[ProjectionRecord, ...]

    def __len__(self) -> int:
        return len(self.orthogonal)

    @property
    def rank(self) -> int:
        """Number of non-degenerate orthogonal vectors."""
        return sum(1 for u in self.orthogonal if not u.is_zero())

    def projection(self, target: int, on: int) -> Vector:
        for record in self.projections:
            if record.key == (target, on):
                return record.vector
        raise KeyError((target, on))

    def residuals(self) -> np.ndarray:
        """Pairwise dot products of the orthogonal basis.

        Off-diagonal entries are zero up to floating error.
        """
        n = len(self.orthogonal)
        gram = np.zeros((n, n), dtype=np.float64)
        for i in range(n):
            for j in range(n):
                gram[i, j] = dot(self.orthogonal[i], self.orthogonal[j])
        return gram


def _coerce_inputs(vectors: Sequence[VectorLike]) -> List[Vector]:
    if vectors is None:
        raise PreconditionError("compute() needs a list of vectors, got None")

    count = len(vectors)
    if not MIN_VECTORS <= count <= MAX_VECTORS:
        raise PreconditionError(
            f"compute() needs {MIN_VECTORS} or {MAX_VECTORS} vectors, got {count}"
        )

    # Raw sequences must agree on their length; Vector values are always 3-long
    lengths = {len(v) for v in vectors if not isinstance(v, Vector)}
    if len(lengths) > 1:
        raise PreconditionError(
            f"Input vectors have inconsistent dimensions: {sorted(lengths)}"
        )

    try:
        return [Vector.of(v) for v in vectors]
    except ValueError as e:
        raise PreconditionError(str(e)) from e


def compute(vectors: Sequence[VectorLike]) -> CalculationResult:
    """Run classical Gram-Schmidt in input order.

    Args:
        vectors: 2 or 3 vectors of the same dimension. Vector values or
            plain sequences of 2 or 3 numbers.

    Returns:
        CalculationResult with one orthogonal and one orthonormal vector
        per input.

    Raises:
        PreconditionError: wrong vector count or mixed dimensions.
    """
    v = _coerce_inputs(vectors)

    u: List[Vector] = []
    e: List[Vector] = []
    projections: List[ProjectionRecord] = []

    # Step 1: u1 = v1
    u.append(v[0])
    e.append(normalize(v[0]))

    # Step 2: u2 = v2 - proj(v2, u1)
    p = project(v[1], u[0])
    projections.append(ProjectionRecord(target=1, on=0, vector=p))
    u.append(subtract(v[1], p))
    e.append(normalize(u[1]))

    # Step 3: u3 = v3 - proj(v3, u1) - proj(v3, u2)
    if len(v) > 2:
        p1 = project(v[2], u[0])
        p2 = project(v[2], u[1])
        projections.append(ProjectionRecord(target=2, on=0, vector=p1))
        projections.append(ProjectionRecord(target=2, on=1, vector=p2))
        u.append(subtract(subtract(v[2], p1), p2))
        e.append(normalize(u[2]))

    for i, ui in enumerate(u):
        if ui.is_zero():
            logger.debug("u%d is the zero vector (dependent input)", i + 1)

    return CalculationResult(
        orthogonal=tuple(u),
        orthonormal=tuple(e),
        projections=tuple(projections),
    )
