"""Drawable scene for one step of the walkthrough.

A scene is a flat list of arrows from the origin (plus one guide
segment in 2-D) that a renderer can draw in order. Which arrows appear
follows the disclosure table:

1. inputs v1..vn, always
2. orthogonal vectors u1..un as they are revealed
3. projections as they are revealed, dashed
4. orthonormal vectors e1..en at the final step

In 2-D the step that reveals u2 also draws a guide from the head of
proj(v2,u1) to the head of v2, showing u2 as the difference.
"""

from dataclasses import dataclass
from typing import Dict, List, Sequence

from ..linalg import CalculationResult, Vector
from ..walkthrough.steps import Dimension, disclosure

PALETTE: Dict[str, str] = {
    "input": "#94a3b8",       # Slate 400
    "orthogonal": "#3b82f6",  # Blue 500
    "orthonormal": "#10b981", # Emerald 500
    "projection": "#f59e0b",  # Amber 500
    "guide": "#3b82f6",
}

WIDTHS: Dict[str, float] = {
    "input": 2.0,
    "orthogonal": 3.0,
    "orthonormal": 4.0,
    "projection": 2.0,
    "guide": 1.0,
}

_PROJECTION_LABELS = {
    (1, 0): "proj(v2,u1)",
    (2, 0): "proj(v3,u1)",
    (2, 1): "proj(v3,u2)",
}


@dataclass(frozen=True)
class Arrow:
    """One segment of the scene."""
    label: str
    kind: str                   # input, orthogonal, projection, orthonormal, guide
    head: Vector
    tail: Vector = Vector()
    dashed: bool = False

    @property
    def color(self) -> str:
        return PALETTE[self.kind]

    @property
    def width(self) -> float:
        return WIDTHS[self.kind]

    @property
    def delta(self) -> Vector:
        return self.head - self.tail


def build_scene(
    step: int,
    dimension,
    vectors: Sequence[Vector],
    result: CalculationResult,
) -> List[Arrow]:
    """Arrows revealed at step, in drawing order."""
    dim = Dimension.coerce(dimension)
    shown = disclosure(step, dim)

    arrows = [
        Arrow(label=f"v{i + 1}", kind="input", head=v)
        for i, v in enumerate(vectors)
    ]

    # Drawing order follows the walkthrough: u1, proj, u2, projs, u3
    u_drawn = 0
    for record in result.projections[:shown.projections]:
        while u_drawn < record.target and u_drawn < shown.u:
            arrows.append(_orthogonal(u_drawn, result))
            u_drawn += 1
        arrows.append(Arrow(
            label=_PROJECTION_LABELS[record.key],
            kind="projection",
            head=record.vector,
            dashed=True,
        ))
        if dim is Dimension.TWO and record.key == (1, 0) and shown.u >= 2:
            arrows.append(Arrow(
                label="v2 - proj(v2,u1)",
                kind="guide",
                tail=record.vector,
                head=vectors[1],
                dashed=True,
            ))
    while u_drawn < shown.u:
        arrows.append(_orthogonal(u_drawn, result))
        u_drawn += 1

    if shown.orthonormal:
        arrows.extend(
            Arrow(label=f"e{i + 1}", kind="orthonormal", head=e)
            for i, e in enumerate(result.orthonormal)
        )

    return arrows


def _orthogonal(index: int, result: CalculationResult) -> Arrow:
    return Arrow(label=f"u{index + 1}", kind="orthogonal", head=result.orthogonal[index])
