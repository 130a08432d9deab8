"""Vector arithmetic and the Gram-Schmidt engine."""

from .vector import (
    Vector,
    add,
    subtract,
    scale,
    dot,
    magnitude,
    normalize,
    project,
    is_close,
)
from .orthogonalizer import (
    CalculationResult,
    ProjectionRecord,
    PreconditionError,
    compute,
)

__all__ = [
    "Vector",
    "add",
    "subtract",
    "scale",
    "dot",
    "magnitude",
    "normalize",
    "project",
    "is_close",
    "CalculationResult",
    "ProjectionRecord",
    "PreconditionError",
    "compute",
]
