"""Configuration for the Gram-Schmidt walkthrough."""

from dataclasses import dataclass

from .steps import Dimension


@dataclass
class WalkthroughConfig:
    """Settings shared by the session, the math panel and the CLI.

    Nothing here changes what compute() returns; the tolerance is only
    used when reporting whether a result is orthogonal.
    """

    default_dimension: int = 2            # Dimension the session starts in
    precision: int = 1                    # Decimals shown in the math panel
    orthogonality_tolerance: float = 1e-9 # Max |cos| between u_i and u_j

    def __post_init__(self):
        Dimension.coerce(self.default_dimension)
        if self.precision < 0:
            raise ValueError(f"precision must be >= 0, got {self.precision}")

    @property
    def dimension(self) -> Dimension:
        return Dimension.coerce(self.default_dimension)

    @classmethod
    def for_3d(cls) -> "WalkthroughConfig":
        """Start in three dimensions."""
        return cls(default_dimension=3)

    @classmethod
    def for_verification(cls) -> "WalkthroughConfig":
        """More decimals, for checking results by hand."""
        return cls(precision=4)
