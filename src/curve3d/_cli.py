"""Command-line entry point: build a curve collection and print the report."""

from __future__ import annotations

import math
import sys

import tyro
from loguru import logger

from ._config import CollectionMode, FactoryParams, PipelineConfig
from ._curves import Curve
from ._factory import parse_curve
from ._pipeline import build_curves, format_report, run_pipeline
from .metrics import derivative_error


def main(
    n_curves: int = 15,
    t: float = math.pi / 4,
    mode: CollectionMode = CollectionMode.RANDOM,
    per_kind: int = 5,
    curves: tuple[str, ...] = (),
    seed: int | None = None,
    min_param: float = 0.1,
    max_param: float = 10.0,
    check_derivatives: bool = False,
    verbose: bool = False,
) -> int:
    """Evaluate 3D curves at a shared parameter and sum the circle radii.

    Args:
        n_curves: Number of random curves (random mode).
        t: Evaluation parameter in radians.
        mode: RANDOM (n_curves of any kind) or REFERENCE (per_kind of each kind).
        per_kind: Curves of each kind in reference mode.
        curves: Explicit curves such as circle:3 ellipse:2,4 helix:5,2.
            When given, no random curves are generated.
        seed: Random seed. Omit for a different collection every run.
        min_param: Lower bound for random shape parameters.
        max_param: Upper bound for random shape parameters.
        check_derivatives: Log the finite-difference derivative error per curve.
        verbose: Enable debug logging.

    Returns:
        Process exit code: 0 on success, 1 if a curve could not be constructed.

    Examples:
        python -m curve3d
        python -m curve3d --seed 0 --n-curves 30
        python -m curve3d --curves circle:3 ellipse:2,4 circle:1 helix:5,2 circle:2
    """
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")

    config = PipelineConfig(
        n_curves=n_curves,
        t=t,
        mode=mode,
        per_kind=per_kind,
        seed=seed,
        factory=FactoryParams(min_param=min_param, max_param=max_param),
    )

    try:
        collection: list[Curve]
        if curves:
            collection = [parse_curve(text) for text in curves]
            logger.info(f"Using {len(collection)} explicit curves")
        else:
            collection = build_curves(config)
    except ValueError as e:
        logger.error(f"Curve construction failed: {e}")
        return 1

    if check_derivatives:
        for i, curve in enumerate(collection):
            logger.debug(
                f"  [{i}] {curve.describe()} derivative error="
                f"{derivative_error(curve, config.t):.2e}"
            )

    result = run_pipeline(collection, config.t)
    for line in format_report(result):
        print(line)
    return 0


def entrypoint() -> None:
    """Console script wrapper around :func:`main`."""
    raise SystemExit(tyro.cli(main))
