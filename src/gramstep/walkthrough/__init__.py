"""Step-by-step disclosure of the Gram-Schmidt process.

Key concepts:
- StepState / StepModel: bounded step counter, 0..4 (2-D) or 0..6 (3-D)
- disclosure(): what is revealed at a (step, dimension)
- Session: the mutable store of vectors, coordinate text and step
- render_panel(): the revealed derivation as text
"""

from .steps import (
    Dimension,
    Disclosure,
    StepState,
    StepModel,
    disclosure,
    step_title,
    next_step,
    prev_step,
    reset_step,
    change_dimension,
)
from .scenarios import SCENARIO_2D, SCENARIO_3D, default_vectors
from .config import WalkthroughConfig
from .parsing import parse_coordinate
from .session import Session
from .panel import format_vector, render_panel

__all__ = [
    "Dimension",
    "Disclosure",
    "StepState",
    "StepModel",
    "disclosure",
    "step_title",
    "next_step",
    "prev_step",
    "reset_step",
    "change_dimension",
    "SCENARIO_2D",
    "SCENARIO_3D",
    "default_vectors",
    "WalkthroughConfig",
    "parse_coordinate",
    "Session",
    "format_vector",
    "render_panel",
]
