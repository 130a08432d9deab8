"""Figure generation for walkthrough scenes.

Each step of a walkthrough can be written to an image file:
- 2-D scenes are drawn on a square grid with annotated arrows
- 3-D scenes are drawn on an mplot3d axes with quiver arrows

Figures use the scene palette, so inputs, projections, orthogonal and
orthonormal vectors keep the colours they have everywhere else.
Zero-length arrows (degenerate results) have no direction and are skipped.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
import logging

import matplotlib.pyplot as plt
import numpy as np

from ..linalg import CalculationResult, Vector
from ..walkthrough.steps import Dimension, StepState, step_title
from .scene import Arrow, build_scene

logger = logging.getLogger(__name__)


@dataclass
class FigureConfig:
    """Configuration for figure generation."""
    output_dir: Path = Path("figures")
    dpi: int = 150
    format: str = "png"  # or "pdf", "svg"

    figsize_2d: Tuple[float, float] = (6, 6)
    figsize_3d: Tuple[float, float] = (7, 7)

    min_axis_limit: float = 1.0   # Half-width of the smallest view
    axis_padding: float = 1.2     # Multiplier on the largest coordinate
    show_labels: bool = True

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    @classmethod
    def for_print(cls, output_dir: Path = Path("figures")) -> "FigureConfig":
        """Vector output at print resolution."""
        return cls(output_dir=output_dir, dpi=300, format="pdf")


def axis_limit(arrows: Sequence[Arrow], config: FigureConfig) -> float:
    """Symmetric half-width that fits every arrow end."""
    if not arrows:
        return config.min_axis_limit
    points = np.array([a.head.to_tuple() for a in arrows] + [a.tail.to_tuple() for a in arrows])
    largest = float(np.max(np.abs(points)))
    return max(config.min_axis_limit, largest * config.axis_padding)


class FigureRenderer:
    """Writes scenes to image files with matplotlib."""

    def __init__(self, config: Optional[FigureConfig] = None):
        self.config = config or FigureConfig()

    def render(
        self,
        arrows: Sequence[Arrow],
        dimension,
        filename: str,
        title: Optional[str] = None,
    ) -> Path:
        """Draw one scene and save it under output_dir.

        Returns:
            Path of the written file.
        """
        dim = Dimension.coerce(dimension)
        if dim is Dimension.TWO:
            fig = self._draw_2d(arrows)
        else:
            fig = self._draw_3d(arrows)

        if title:
            fig.suptitle(title)

        path = self.config.output_dir / f"{filename}.{self.config.format}"
        fig.savefig(path, dpi=self.config.dpi, bbox_inches="tight")
        plt.close(fig)

        logger.info("Wrote %s", path)
        return path

    def render_step(
        self,
        state: StepState,
        vectors: Sequence[Vector],
        result: CalculationResult,
    ) -> Path:
        """Draw the scene revealed at state.step."""
        dim = state.dimension
        arrows = build_scene(state.step, dim, vectors, result)
        title = f"Step {state.step}/{state.max_step}: {step_title(state.step, dim)}"
        return self.render(arrows, dim, f"step_{state.step}", title=title)

    def render_walkthrough(
        self,
        dimension,
        vectors: Sequence[Vector],
        result: CalculationResult,
    ) -> List[Path]:
        """Draw every step from 0 to the final one."""
        state = StepState.initial(dimension)
        paths = []
        for step in range(state.max_step + 1):
            paths.append(self.render_step(
                StepState(step=step, max_step=state.max_step), vectors, result
            ))
        return paths

    def _draw_2d(self, arrows: Sequence[Arrow]):
        fig, ax = plt.subplots(figsize=self.config.figsize_2d)
        limit = axis_limit(arrows, self.config)

        ax.axhline(0, color="#475569", linewidth=1)
        ax.axvline(0, color="#475569", linewidth=1)
        ax.grid(True, alpha=0.3)

        for arrow in arrows:
            if arrow.delta.is_zero():
                continue
            ax.annotate(
                "",
                xy=(arrow.head.x, arrow.head.y),
                xytext=(arrow.tail.x, arrow.tail.y),
                arrowprops=dict(
                    arrowstyle="-|>" if arrow.kind != "guide" else "-",
                    color=arrow.color,
                    linewidth=arrow.width,
                    linestyle="--" if arrow.dashed else "-",
                    shrinkA=0,
                    shrinkB=0,
                ),
            )
            if self.config.show_labels and arrow.kind != "guide":
                ax.text(arrow.head.x, arrow.head.y, f" {arrow.label}", color=arrow.color)

        ax.set_xlim(-limit, limit)
        ax.set_ylim(-limit, limit)
        ax.set_aspect("equal")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        fig.tight_layout()
        return fig

    def _draw_3d(self, arrows: Sequence[Arrow]):
        fig = plt.figure(figsize=self.config.figsize_3d)
        ax = fig.add_subplot(projection="3d")
        limit = axis_limit(arrows, self.config)

        # Axes in x/y/z colours
        for axis_end, color in (
            ((limit, 0, 0), "#ef4444"),
            ((0, limit, 0), "#22c55e"),
            ((0, 0, limit), "#3b82f6"),
        ):
            ax.plot(*zip((0, 0, 0), axis_end), color=color, linewidth=1)

        for arrow in arrows:
            delta = arrow.delta
            if delta.is_zero():
                continue
            ax.quiver(
                arrow.tail.x, arrow.tail.y, arrow.tail.z,
                delta.x, delta.y, delta.z,
                color=arrow.color,
                linewidth=arrow.width,
                linestyle="--" if arrow.dashed else "-",
                arrow_length_ratio=0.1,
            )
            if self.config.show_labels:
                ax.text(arrow.head.x, arrow.head.y, arrow.head.z, f" {arrow.label}", color=arrow.color)

        ax.set_xlim(-limit, limit)
        ax.set_ylim(-limit, limit)
        ax.set_zlim(-limit, limit)
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_zlabel("z")
        return fig
