"""Mutable walkthrough session owned by the presentation layer.

The core (compute, StepState transitions) is pure. A Session is the one
place that holds the current dimension, input vectors, the raw text of
every coordinate field and the step state, and keeps the calculation
result in sync with the vectors.

Rules:
- any vector change recomputes the full result
- editing a coordinate never moves the step
- reset() rewinds the step only; restore_defaults() also reloads the
  dimension's default vectors
- changing dimension loads the default vectors and rewinds the step
"""

from typing import List, Optional, Sequence, Tuple
import logging
import math

from ..linalg import CalculationResult, Vector, compute
from .config import WalkthroughConfig
from .parsing import parse_coordinate
from .scenarios import default_vectors
from .steps import (
    Dimension,
    Disclosure,
    StepState,
    change_dimension,
    disclosure,
    next_step,
    prev_step,
    reset_step,
)

logger = logging.getLogger(__name__)


def _format_raw(value: float) -> str:
    # 3.0 -> "3", 0.5 -> "0.5"
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _raw_strings(vectors: Sequence[Vector]) -> List[List[str]]:
    return [[_format_raw(c) for c in v] for v in vectors]


class Session:
    """Current vectors, coordinate text and step of one walkthrough.

    Usage:
        session = Session()
        session.edit_coordinate(0, 1, "1/2")
        session.next()
        session.result.orthonormal
    """

    def __init__(
        self,
        config: Optional[WalkthroughConfig] = None,
        vectors: Optional[Sequence[Vector]] = None,
    ):
        self.config = config or WalkthroughConfig()
        self._dimension = self.config.dimension
        self._state = StepState.initial(self._dimension)
        self._vectors: Tuple[Vector, ...] = ()
        self._raw: List[List[str]] = []
        self._result: Optional[CalculationResult] = None
        self._result_key: Optional[Tuple[Vector, ...]] = None

        if vectors is None:
            self._load(default_vectors(self._dimension))
        else:
            self.set_vectors(vectors)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> Dimension:
        return self._dimension

    @property
    def state(self) -> StepState:
        return self._state

    @property
    def step(self) -> int:
        return self._state.step

    @property
    def vectors(self) -> Tuple[Vector, ...]:
        return self._vectors

    @property
    def raw_inputs(self) -> List[List[str]]:
        """Text shown in each coordinate field (copy)."""
        return [list(row) for row in self._raw]

    @property
    def result(self) -> CalculationResult:
        # Recompute unless the vectors are structurally unchanged
        if self._result is None or self._result_key != self._vectors:
            self._result = compute(self._vectors)
            self._result_key = self._vectors
        return self._result

    def disclosure(self) -> Disclosure:
        return disclosure(self._state.step, self._dimension)

    # ------------------------------------------------------------------
    # Vector edits
    # ------------------------------------------------------------------

    def _load(self, vectors: Sequence[Vector]):
        self._vectors = tuple(vectors)
        self._raw = _raw_strings(self._vectors)

    def set_vectors(self, vectors: Sequence) -> Tuple[Vector, ...]:
        """Replace all input vectors at once.

        The count must match the current dimension. In 2-D mode z is
        forced to 0. The step is left unchanged.
        """
        new = [Vector.of(v) for v in vectors]
        if len(new) != self._dimension.vector_count:
            raise ValueError(
                f"Dimension {self._dimension.value} needs "
                f"{self._dimension.vector_count} vectors, got {len(new)}"
            )
        if self._dimension is Dimension.TWO:
            new = [Vector(v.x, v.y, 0.0) for v in new]
        self._load(new)
        return self._vectors

    def edit_coordinate(self, index: int, axis: int, text: str) -> bool:
        """Apply text typed into one coordinate field.

        The raw text is always kept. The numeric coordinate changes only
        if the text parses; otherwise the last good value stays.

        Returns:
            True if the numeric vector changed.

        Raises:
            IndexError: no such vector, or z edited in 2-D mode.
        """
        if not 0 <= index < len(self._vectors):
            raise IndexError(f"No input vector at index {index}")
        if not 0 <= axis < self._dimension.value:
            raise IndexError(
                f"Axis {axis} is not editable in dimension {self._dimension.value}"
            )

        self._raw[index][axis] = text

        value = parse_coordinate(text)
        if value is None:
            logger.debug("Ignoring unparsable coordinate %r at v%d[%d]", text, index + 1, axis)
            return False

        components = list(self._vectors[index])
        if components[axis] == value:
            return False
        components[axis] = value

        vectors = list(self._vectors)
        vectors[index] = Vector(*components)
        self._vectors = tuple(vectors)
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> StepState:
        self._state = next_step(self._state)
        return self._state

    def prev(self) -> StepState:
        self._state = prev_step(self._state)
        return self._state

    def reset(self) -> StepState:
        """Rewind to step 0; vectors are kept."""
        self._state = reset_step(self._state)
        return self._state

    def restore_defaults(self) -> StepState:
        """Reload the default vectors for this dimension and rewind."""
        self._load(default_vectors(self._dimension))
        self._state = reset_step(self._state)
        return self._state

    def set_dimension(self, dimension) -> StepState:
        """Switch dimension, load its default vectors and rewind."""
        self._dimension = Dimension.coerce(dimension)
        self._state = change_dimension(self._dimension)
        self._load(default_vectors(self._dimension))
        logger.info("Switched to %dD walkthrough", self._dimension.value)
        return self._state

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def is_orthogonal(self) -> bool:
        """Whether every pair of orthogonal vectors has a ~zero dot product.

        The tolerance is relative: |u_i . u_j| <= tol * |u_i| * |u_j|, so
        the answer does not change when the inputs are rescaled.
        """
        gram = self.result.residuals()
        tol = self.config.orthogonality_tolerance
        lengths = [math.sqrt(gram[i, i]) for i in range(gram.shape[0])]
        n = gram.shape[0]
        return all(
            abs(gram[i, j]) <= tol * lengths[i] * lengths[j]
            for i in range(n)
            for j in range(n)
            if i != j
        )
