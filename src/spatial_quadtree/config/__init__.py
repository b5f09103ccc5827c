from .config import (
    DISTRIBUTIONS,
    BenchmarkConfig,
    BoundsConfig,
    Config,
    TreeConfig,
)

__all__ = [
    "DISTRIBUTIONS",
    "BenchmarkConfig",
    "BoundsConfig",
    "Config",
    "TreeConfig",
]
