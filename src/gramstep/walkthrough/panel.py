"""Text rendering of the revealed part of the derivation."""

from typing import List, Optional, Sequence

from ..linalg import CalculationResult, Vector
from .steps import Dimension, disclosure


def format_vector(v: Optional[Vector], dimension=Dimension.THREE, precision: int = 1) -> str:
    """Format as "[x, y(, z)]"; z is omitted in 2-D mode."""
    if v is None:
        return "(?)"
    dim = Dimension.coerce(dimension)
    components = v.to_tuple()[:dim.value]
    # + 0.0 so that -0.0 prints as 0.0
    return "[" + ", ".join(f"{round(c, precision) + 0.0:.{precision}f}" for c in components) + "]"


def _format_unit(e: Vector, dimension: Dimension, precision: int) -> str:
    if e.is_zero():
        return "undefined (zero vector)"
    return format_vector(e, dimension, precision)


def render_panel(
    step: int,
    dimension,
    vectors: Sequence[Vector],
    result: CalculationResult,
    precision: int = 1,
) -> List[str]:
    """Lines of the math panel for one step.

    Sections appear cumulatively as the step advances, mirroring the
    disclosure table. An all-zero orthonormal vector is shown as
    undefined rather than as a unit vector.
    """
    dim = Dimension.coerce(dimension)
    shown = disclosure(step, dim)

    def fmt(v: Vector) -> str:
        return format_vector(v, dim, precision)

    lines = ["Input"]
    for i, v in enumerate(vectors):
        lines.append(f"  Let v{i + 1} = {fmt(v)}")

    if shown.u >= 1:
        lines.append("Step 1: First Orthogonal Vector")
        lines.append("  u1 = v1")
        lines.append(f"  u1 = {fmt(result.orthogonal[0])}")

    if shown.projections >= 1:
        lines.append("Step 2: Second Orthogonal Vector")
        lines.append("  proj_u1(v2) = (v2.u1 / u1.u1) u1")
        lines.append(f"  proj_u1(v2) = {fmt(result.projection(1, 0))}")
        if shown.u >= 2:
            lines.append("  u2 = v2 - proj_u1(v2)")
            lines.append(f"  u2 = {fmt(result.orthogonal[1])}")

    if dim is Dimension.THREE and shown.projections >= 3:
        lines.append("Step 3: Third Orthogonal Vector")
        lines.append(f"  proj_u1(v3) = {fmt(result.projection(2, 0))}")
        lines.append(f"  proj_u2(v3) = {fmt(result.projection(2, 1))}")
        if shown.u >= 3:
            lines.append("  u3 = v3 - proj_u1(v3) - proj_u2(v3)")
            lines.append(f"  u3 = {fmt(result.orthogonal[2])}")

    if shown.orthonormal:
        lines.append("Final Step: Normalization")
        lines.append("  ei = ui / ||ui||")
        for i, e in enumerate(result.orthonormal):
            lines.append(f"  e{i + 1} = {_format_unit(e, dim, precision)}")

    return lines
