"""Step disclosure model for the Gram-Schmidt walkthrough.

The walkthrough is a bounded counter. Each value denotes cumulative
disclosure of the derivation:

    step  dimension 2            dimension 3
    0     inputs only            inputs only
    1     + u1                   + u1
    2     + proj(v2,u1)          + proj(v2,u1)
    3     + u2                   + u2
    4     + e1,e2 (final)        + proj(v3,u1), proj(v3,u2)
    5                            + u3
    6                            + e1,e2,e3 (final)

Navigation saturates at both ends. There is no terminal state: a final
walkthrough can be stepped back, reset or re-dimensioned at any time.

The state itself is an immutable StepState; the transition functions
return new states. StepModel wraps them for callers that want to hold
one mutable reference.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Tuple

from ..linalg import Vector


class Dimension(Enum):
    """Working dimension of the walkthrough."""
    TWO = 2
    THREE = 3

    @classmethod
    def coerce(cls, value) -> "Dimension":
        """Accept a Dimension or the whole numbers 2 and 3."""
        if isinstance(value, cls):
            return value
        try:
            number = int(value)
            if number != float(value):
                raise ValueError(value)
            return cls(number)
        except (TypeError, ValueError):
            raise ValueError(f"Dimension must be 2 or 3, got {value!r}") from None

    @property
    def max_step(self) -> int:
        return MAX_STEPS[self]

    @property
    def vector_count(self) -> int:
        return self.value


MAX_STEPS: Dict[Dimension, int] = {
    Dimension.TWO: 4,
    Dimension.THREE: 6,
}


@dataclass(frozen=True)
class Disclosure:
    """What is revealed at one (step, dimension).

    Counts are prefixes: u=2 means u1 and u2 are shown, projections=1
    means the first projection record is shown.
    """
    step: int
    dimension: Dimension
    inputs: bool = True
    u: int = 0
    projections: int = 0
    orthonormal: bool = False

    @property
    def is_final(self) -> bool:
        return self.orthonormal


# (u revealed, projections revealed, orthonormal revealed) per step
_TABLE: Dict[Dimension, Tuple[Tuple[int, int, bool], ...]] = {
    Dimension.TWO: (
        (0, 0, False),
        (1, 0, False),
        (1, 1, False),
        (2, 1, False),
        (2, 1, True),
    ),
    Dimension.THREE: (
        (0, 0, False),
        (1, 0, False),
        (1, 1, False),
        (2, 1, False),
        (2, 3, False),
        (3, 3, False),
        (3, 3, True),
    ),
}

_TITLES: Dict[Dimension, Tuple[str, ...]] = {
    Dimension.TWO: (
        "Input",
        "First orthogonal vector",
        "Projection of v2 onto u1",
        "Second orthogonal vector",
        "Normalization",
    ),
    Dimension.THREE: (
        "Input",
        "First orthogonal vector",
        "Projection of v2 onto u1",
        "Second orthogonal vector",
        "Projections of v3 onto u1 and u2",
        "Third orthogonal vector",
        "Normalization",
    ),
}


def _check_step(step: int, dim: Dimension) -> None:
    if not 0 <= step <= dim.max_step:
        raise ValueError(
            f"step must be in [0, {dim.max_step}] for dimension {dim.value}, got {step}"
        )


def disclosure(step: int, dimension) -> Disclosure:
    """Pure lookup of what is revealed at step for dimension."""
    dim = Dimension.coerce(dimension)
    _check_step(step, dim)
    u, projections, orthonormal = _TABLE[dim][step]
    return Disclosure(
        step=step,
        dimension=dim,
        u=u,
        projections=projections,
        orthonormal=orthonormal,
    )


def step_title(step: int, dimension) -> str:
    dim = Dimension.coerce(dimension)
    _check_step(step, dim)
    return _TITLES[dim][step]


@dataclass(frozen=True)
class StepState:
    """Position in the walkthrough; 0 <= step <= max_step."""
    step: int = 0
    max_step: int = MAX_STEPS[Dimension.TWO]

    def __post_init__(self):
        if self.max_step not in MAX_STEPS.values():
            raise ValueError(f"max_step must be 4 or 6, got {self.max_step}")
        if not 0 <= self.step <= self.max_step:
            raise ValueError(
                f"step must be in [0, {self.max_step}], got {self.step}"
            )

    @classmethod
    def initial(cls, dimension) -> "StepState":
        return cls(step=0, max_step=Dimension.coerce(dimension).max_step)

    @property
    def dimension(self) -> Dimension:
        return Dimension.TWO if self.max_step == MAX_STEPS[Dimension.TWO] else Dimension.THREE

    @property
    def is_first(self) -> bool:
        return self.step == 0

    @property
    def is_final(self) -> bool:
        return self.step == self.max_step


def next_step(state: StepState) -> StepState:
    return replace(state, step=min(state.step + 1, state.max_step))


def prev_step(state: StepState) -> StepState:
    return replace(state, step=max(state.step - 1, 0))


def reset_step(state: StepState) -> StepState:
    return replace(state, step=0)


def change_dimension(dimension) -> StepState:
    """Fresh state for a dimension change; step always restarts at 0."""
    return StepState.initial(dimension)


class StepModel:
    """Holds the current StepState and applies transitions to it.

    Each operation returns the new state.

    Usage:
        model = StepModel(dimension=3)
        model.next()           # StepState(step=1, max_step=6)
        state, vectors = model.set_dimension(2)
    """

    def __init__(self, dimension=Dimension.TWO):
        self._state = StepState.initial(dimension)

    @property
    def state(self) -> StepState:
        return self._state

    @property
    def dimension(self) -> Dimension:
        return self._state.dimension

    def next(self) -> StepState:
        self._state = next_step(self._state)
        return self._state

    def prev(self) -> StepState:
        self._state = prev_step(self._state)
        return self._state

    def reset(self) -> StepState:
        self._state = reset_step(self._state)
        return self._state

    def set_dimension(self, dimension) -> Tuple[StepState, Tuple[Vector, ...]]:
        """Switch dimension and restart at step 0.

        Returns the new state together with the default input vectors
        the caller must install for the new dimension.
        """
        from .scenarios import default_vectors

        self._state = change_dimension(dimension)
        return self._state, default_vectors(dimension)

    def disclosure(self) -> Disclosure:
        return disclosure(self._state.step, self._state.dimension)
