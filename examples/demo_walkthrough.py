"""Demo: an interactive-style Gram-Schmidt walkthrough session.

Replays what a user does in the visualizer:
1. Steps through the 2-D default scenario
2. Edits coordinates, including a fraction and a typo
3. Switches to 3-D and jumps to the final step
4. Enters collinear vectors to show the zero-vector sentinel

Usage:
    python examples/demo_walkthrough.py
    python examples/demo_walkthrough.py --figures demo_figures
"""

import argparse
from pathlib import Path

from gramstep import Session
from gramstep.walkthrough import render_panel


def show(session: Session, heading: str):
    print("\n" + "-" * 70)
    print(f"{heading}  (step {session.step}/{session.state.max_step})")
    print("-" * 70)
    for line in render_panel(session.step, session.dimension, session.vectors, session.result):
        print(line)


def main():
    parser = argparse.ArgumentParser(description="Gram-Schmidt walkthrough demo")
    parser.add_argument("--figures", type=Path, default=None,
                        help="Write the final 3-D scene to this directory")
    args = parser.parse_args()

    print("=" * 70)
    print("Gram-Schmidt Walkthrough Demo")
    print("=" * 70)

    session = Session()
    show(session, "2-D default scenario")

    for _ in range(3):
        session.next()
    show(session, "After three steps")

    # Editing keeps the step; "5x" reads as 5, a lone "-" keeps the last good value
    session.edit_coordinate(1, 0, "5/2")
    session.edit_coordinate(1, 1, "5x")
    session.edit_coordinate(0, 1, "-")
    print(f"\nRaw fields: {session.raw_inputs}")
    show(session, "After editing v2")

    session.next()
    session.next()  # saturates at the final step
    show(session, "Final step")
    print(f"\nOrthogonal: {session.is_orthogonal()}")

    session.set_dimension(3)
    while not session.state.is_final:
        session.next()
    show(session, "3-D default scenario, final step")

    if args.figures is not None:
        from gramstep.geometry import FigureConfig, FigureRenderer

        renderer = FigureRenderer(FigureConfig(output_dir=args.figures))
        path = renderer.render_step(session.state, session.vectors, session.result)
        print(f"\nFigure written to {path}")

    session.set_dimension(2)
    session.set_vectors([[1, 0], [2, 0]])
    while not session.state.is_final:
        session.next()
    show(session, "Collinear inputs")
    print(f"\nRank: {session.result.rank} of {len(session.vectors)}")


if __name__ == "__main__":
    main()
