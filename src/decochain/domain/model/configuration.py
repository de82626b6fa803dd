"""Chain configuration.

None = feature disabled, value = feature enabled with that config.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ChainConfig:
    """Configuration for building chains.

    Attributes:
        max_depth: Max decorator layers per chain. None = unlimited.
    """

    max_depth: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

    def has_depth_limit(self) -> bool:
        """Check if depth limit is configured."""
        return self.max_depth is not None
