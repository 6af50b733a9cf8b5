"""Configuration classes for pathgraph components."""

from dataclasses import dataclass

from pathgraph.types import MinSelect


@dataclass
class EngineConfig:
    """Configuration for :class:`~pathgraph.engine.ShortestPathEngine`."""

    # Next-node selection strategy used by analyze()
    min_select: MinSelect = MinSelect.SCAN

    # Log analysis duration at DEBUG level
    log_timing: bool = True


@dataclass
class ExampleGraphConfig:
    """Configuration for the bundled example graph."""

    # Significant digits kept when deriving edge weights from positions
    weight_precision: int = 2

    def round_weight(self, value: float) -> float:
        """Round ``value`` to ``weight_precision`` significant digits."""
        if value == 0:
            return 0.0
        return float(f"{value:.{self.weight_precision}g}")


# Global configuration instances
ENGINE_CONFIG = EngineConfig()
EXAMPLE_CONFIG = ExampleGraphConfig()
