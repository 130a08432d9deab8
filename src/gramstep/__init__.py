"""Step-by-step Gram-Schmidt orthogonalization of 2 or 3 vectors.

    from gramstep import compute, Session

    result = compute([[3, 1], [2, 4]])
    result.orthonormal

Figures live in gramstep.geometry and need matplotlib.
"""

__version__ = "0.1.0"

from .linalg import (
    Vector,
    CalculationResult,
    ProjectionRecord,
    PreconditionError,
    compute,
)
from .walkthrough import (
    Dimension,
    Disclosure,
    StepState,
    StepModel,
    Session,
    WalkthroughConfig,
    disclosure,
    render_panel,
)

__all__ = [
    "Vector",
    "CalculationResult",
    "ProjectionRecord",
    "PreconditionError",
    "compute",
    "Dimension",
    "Disclosure",
    "StepState",
    "StepModel",
    "Session",
    "WalkthroughConfig",
    "disclosure",
    "render_panel",
]
