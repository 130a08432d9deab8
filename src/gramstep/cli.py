"""Command-line walkthrough of the Gram-Schmidt process.

Usage:
    gramstep                                   # 2-D default scenario, all steps
    gramstep --dimension 3 --step 4
    gramstep --vector 1,1/2 --vector 0,2 --figures out/
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from .linalg import PreconditionError, compute
from .logging_config import setup_logging
from .walkthrough import (
    Session,
    WalkthroughConfig,
    parse_coordinate,
    render_panel,
    step_title,
)

logger = logging.getLogger(__name__)


def parse_vector(text: str) -> List[float]:
    """Parse "x,y" or "x,y,z"; each part may be a fraction like 1/3."""
    values = []
    for part in text.split(","):
        value = parse_coordinate(part)
        if value is None:
            raise ValueError(f"not a number: {part.strip()!r}")
        values.append(value)
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gramstep",
        description="Step through Gram-Schmidt orthogonalization of 2 or 3 vectors.",
    )
    parser.add_argument("--dimension", type=int, choices=[2, 3], default=2,
                        help="Working dimension (default: 2)")
    parser.add_argument("--vector", action="append", default=None, metavar="X,Y[,Z]",
                        help="Input vector; repeat once per vector (default: built-in scenario)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--step", type=int, default=None,
                       help="Show only this step")
    group.add_argument("--all", action="store_true",
                       help="Show every step (default)")
    parser.add_argument("--precision", type=int, default=None,
                        help="Decimals shown for vector components")
    parser.add_argument("--figures", type=Path, default=None, metavar="DIR",
                        help="Also write one figure per shown step into DIR")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    return parser


def _print_step(session: Session, precision: int):
    state = session.state
    print("=" * 60)
    print(f"STEP {state.step}/{state.max_step}: {step_title(state.step, session.dimension).upper()}")
    print("=" * 60)
    for line in render_panel(state.step, session.dimension, session.vectors, session.result, precision):
        print(line)
    print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))

    config = WalkthroughConfig(default_dimension=args.dimension)
    if args.precision is not None:
        if args.precision < 0:
            parser.error("--precision must be >= 0")
        config.precision = args.precision

    if args.vector:
        try:
            vectors = [parse_vector(text) for text in args.vector]
            # Reject count or dimension mismatches before building a session
            compute(vectors)
            if any(len(v) != args.dimension for v in vectors):
                raise ValueError(f"vectors must have {args.dimension} components")
            session = Session(config, vectors=vectors)
        except (PreconditionError, ValueError) as e:
            parser.error(str(e))
    else:
        session = Session(config)

    max_step = session.state.max_step
    if args.step is not None:
        if not 0 <= args.step <= max_step:
            parser.error(f"--step must be between 0 and {max_step}")
        steps = [args.step]
    else:
        steps = list(range(max_step + 1))
    logger.info("Walkthrough in %dD, steps %s", session.dimension.value, steps)

    renderer = None
    if args.figures is not None:
        from .geometry import FigureConfig, FigureRenderer

        renderer = FigureRenderer(FigureConfig(output_dir=args.figures))

    session.reset()
    for step in steps:
        while session.step < step:
            session.next()
        _print_step(session, config.precision)
        if renderer is not None:
            renderer.render_step(session.state, session.vectors, session.result)

    if session.result.rank < len(session.vectors):
        print("Note: the inputs are linearly dependent; zero vectors mark undefined directions.")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
