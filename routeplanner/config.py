"""Configuration defaults for the route planner driver."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Union

import yaml

HEURISTIC_CHOICES = ("index", "zero")


@dataclass(frozen=True)
class PlannerConfig:
    """Defaults used by the CLI, the generator and the benchmark."""

    # Upper bound for random edge weights (lower bound is always 1)
    max_weight: int = 20

    # Timed repetitions per algorithm in the benchmark report
    benchmark_runs: int = 5

    # File offered by the interactive TXT loader when none is typed
    default_txt: str = "graph.txt"

    # A* heuristic name, see routeplanner.algorithms.heuristics
    heuristic: str = "index"

    # Whether loaded and generated edges are directed by default
    directed: bool = False

    def __post_init__(self) -> None:
        if self.max_weight < 1:
            raise ValueError(f"max_weight must be >= 1, got {self.max_weight}")
        if self.benchmark_runs < 1:
            raise ValueError(
                f"benchmark_runs must be >= 1, got {self.benchmark_runs}"
            )
        if self.heuristic not in HEURISTIC_CHOICES:
            raise ValueError(
                f"heuristic must be one of {HEURISTIC_CHOICES}, got '{self.heuristic}'"
            )


# Global configuration instance
DEFAULT_CONFIG = PlannerConfig()


def _normalize_keys(data: Dict[Any, Any]) -> Dict[str, Any]:
    """Convert YAML keys to strings.

    YAML 1.1 turns keys such as ``yes``/``no`` into booleans; they come back as
    "True"/"False" and are then rejected as unknown options.
    """
    return {str(key): value for key, value in data.items()}


def config_from_dict(
    data: Dict[Any, Any], base: PlannerConfig = DEFAULT_CONFIG
) -> PlannerConfig:
    """Build a config from a mapping, starting from ``base``.

    Args:
        data: Mapping of option name to value.
        base: Config providing values for options missing from ``data``.

    Returns:
        New PlannerConfig.

    Raises:
        ValueError: On unknown options or values of the wrong type.
    """
    known = {f.name: f for f in fields(PlannerConfig)}
    normalized = _normalize_keys(data)

    unknown = sorted(set(normalized) - set(known))
    if unknown:
        raise ValueError(f"Unknown config option(s): {', '.join(unknown)}")

    updates: Dict[str, Any] = {}
    for name, value in normalized.items():
        expected = type(getattr(base, name))
        # bool is a subclass of int; keep them apart
        if isinstance(value, bool) != (expected is bool) or not isinstance(
            value, expected
        ):
            raise ValueError(
                f"Config option '{name}' must be {expected.__name__}, "
                f"got {type(value).__name__}"
            )
        updates[name] = value

    return replace(base, **updates)


def load_config(path: Union[str, Path]) -> PlannerConfig:
    """Load a YAML config file.

    An empty file yields the defaults.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not a mapping or holds bad options.
    """
    text = Path(path).read_text()
    data = yaml.safe_load(text)
    if data is None:
        return DEFAULT_CONFIG
    if not isinstance(data, dict):
        raise ValueError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}"
        )
    return config_from_dict(data)
