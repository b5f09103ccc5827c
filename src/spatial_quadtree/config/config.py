"""Configuration module for the spatial quadtree."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from numbers import Integral
from pathlib import Path
from typing import Any

import yaml

from spatial_quadtree.errors import InvalidConfiguration
from spatial_quadtree.geometry import Rect

DISTRIBUTIONS = ("uniform", "clustered")


def _is_int(value: Any) -> bool:
    """True for integers, excluding bools."""
    return isinstance(value, Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class TreeConfig:
    """Subdivision parameters of a quadtree.

    Attributes
    ----------
        max_depth: int
            Deepest level a node may be created at. Leaves at this depth
            never split and accept any number of entries.
        max_entries_per_leaf: int
            Entries a leaf holds before it splits into four children.

    Raises
    ------
        InvalidConfiguration: If max_depth or max_entries_per_leaf is not an
            integer or is below 1.
    """

    max_depth: int = 10
    max_entries_per_leaf: int = 10

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        for name in ("max_depth", "max_entries_per_leaf"):
            value = getattr(self, name)
            if not _is_int(value):
                msg = f"{name} must be an integer, got {value!r}"
                raise InvalidConfiguration(msg)
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise InvalidConfiguration(msg)
        if self.max_entries_per_leaf < 1:
            msg = f"max_entries_per_leaf must be >= 1, got {self.max_entries_per_leaf}"
            raise InvalidConfiguration(msg)


@dataclass(frozen=True)
class BoundsConfig:
    """Root bounds of the tree.

    Attributes
    ----------
        x, y: float
            Lower-left corner.
        width, height: float
            Size of the indexed area.

    Raises
    ------
        InvalidConfiguration: If width or height is negative.
    """

    x: float = 0.0
    y: float = 0.0
    width: float = 1.0
    height: float = 1.0

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        if self.width < 0 or self.height < 0:
            msg = f"bounds dimensions must be >= 0, got ({self.width}, {self.height})"
            raise InvalidConfiguration(msg)

    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class BenchmarkConfig:
    """Workload used by the benchmark runner.

    Attributes
    ----------
        num_items: int
            Points inserted before querying.
        num_queries: int
            Random rectangle queries to run.
        query_size: float
            Upper limit for the width and height of each query rectangle.
        distribution: str
            Point distribution, one of 'uniform' or 'clustered'.
        seed: int | None
            Seed for the random generator. None draws fresh entropy.
    """

    num_items: int = 100_000
    num_queries: int = 1_000
    query_size: float = 0.02
    distribution: str = "uniform"
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate values after initialization."""
        for name in ("num_items", "num_queries"):
            value = getattr(self, name)
            if not _is_int(value):
                msg = f"{name} must be an integer, got {value!r}"
                raise InvalidConfiguration(msg)
        if self.num_items <= 0:
            msg = f"num_items must be > 0, got {self.num_items}"
            raise InvalidConfiguration(msg)
        if self.num_queries <= 0:
            msg = f"num_queries must be > 0, got {self.num_queries}"
            raise InvalidConfiguration(msg)
        if self.query_size < 0:
            msg = f"query_size must be >= 0, got {self.query_size}"
            raise InvalidConfiguration(msg)
        if self.distribution not in DISTRIBUTIONS:
            msg = f"distribution must be one of {DISTRIBUTIONS}, got {self.distribution!r}"
            raise InvalidConfiguration(msg)


@dataclass(frozen=True)
class Config:
    """
    Top-level configuration.

    Groups
    ----------
        tree: TreeConfig
            Subdivision parameters.
        bounds: BoundsConfig
            Root bounds of the tree.
        benchmark: BenchmarkConfig
            Benchmark workload.
        verbose: bool
            Flag to enable debug logging.

    Raises
    ------
        InvalidConfiguration: If any of the sub-configs contain invalid values.
    """

    tree: TreeConfig = field(default_factory=TreeConfig)
    bounds: BoundsConfig = field(default_factory=BoundsConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    verbose: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Recursively convert to plain dict (for logging, serialization)."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Dump entire config as a YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build Config by unpacking each sub-dict into its sub-config."""
        return cls(
            tree=TreeConfig(**(data.get("tree") or {})),
            bounds=BoundsConfig(**(data.get("bounds") or {})),
            benchmark=BenchmarkConfig(**(data.get("benchmark") or {})),
            verbose=bool(data.get("verbose")),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load a YAML file and return a Config."""
        path = Path(path)
        with path.open() as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})
