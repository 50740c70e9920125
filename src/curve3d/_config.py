"""Configuration for curve generation and the aggregation pipeline."""

from __future__ import annotations

import math
from enum import Enum

import jax_dataclasses as jdc


class CollectionMode(Enum):
    """How the curve collection is built.

    RANDOM: ``n_curves`` calls to the random factory, variant chosen uniformly.

    REFERENCE: ``per_kind`` circles, then ``per_kind`` ellipses, then
               ``per_kind`` helices, each with random parameters.
    """

    RANDOM = "random"
    REFERENCE = "reference"


@jdc.pytree_dataclass
class FactoryParams:
    """Parameters for random curve construction."""

    min_param: float = 0.1
    """Lower bound (inclusive) for every drawn shape parameter. Must be > 0."""

    max_param: float = 10.0
    """Upper bound for every drawn shape parameter."""


@jdc.pytree_dataclass
class PipelineConfig:
    """Settings for one run of the aggregation pipeline.

    Usage:
        config = PipelineConfig(n_curves=30, seed=0)
        config = jdc.replace(config, factory=FactoryParams(min_param=1.0))
    """

    n_curves: int = 15
    """Collection size in RANDOM mode."""

    t: float = math.pi / 4
    """Shared evaluation parameter (radians)."""

    mode: CollectionMode = CollectionMode.RANDOM
    """How the collection is built."""

    per_kind: int = 5
    """Curves of each variant in REFERENCE mode."""

    seed: int | None = None
    """Seed for the random source. None draws fresh entropy each run."""

    factory: FactoryParams = jdc.field(default_factory=FactoryParams)
    """Parameter ranges for the random factory."""
