"""Curve collection evaluation and circle radius aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from loguru import logger

from ._config import CollectionMode, PipelineConfig
from ._curves import Circle, Curve, CurveKind
from ._factory import build_random_curves, build_reference_curves
from ._point import Point3D


@dataclass(frozen=True)
class CurveEvaluation:
    """Position and derivative of one curve at the shared parameter."""

    curve: Curve
    position: Point3D
    derivative: Point3D


@dataclass(frozen=True)
class PipelineResult:
    """Result of one pipeline run."""

    t: float
    evaluations: list[CurveEvaluation]
    circles: list[Circle]  # sorted by radius, same objects as in the collection
    total_radius: float

    @property
    def radii(self) -> list[float]:
        """Circle radii in ascending order."""
        return [c.radius for c in self.circles]


def build_curves(config: PipelineConfig) -> list[Curve]:
    """Build the curve collection described by ``config``."""
    rng = np.random.default_rng(config.seed)
    if config.mode is CollectionMode.REFERENCE:
        curves = build_reference_curves(config.per_kind, rng, config.factory)
    else:
        curves = build_random_curves(config.n_curves, rng, config.factory)
    logger.info(f"Built {len(curves)} curves ({config.mode.value} mode)")
    return curves


def evaluate_curves(curves: Sequence[Curve], t: float) -> list[CurveEvaluation]:
    """Evaluate every curve at ``t``, preserving collection order."""
    return [
        CurveEvaluation(curve=c, position=c.position(t), derivative=c.derivative(t))
        for c in curves
    ]


def filter_circles(curves: Sequence[Curve]) -> list[Circle]:
    """Return the circles in ``curves`` in their original relative order.

    The returned list shares the curve objects with ``curves``.
    """
    return [c for c in curves if c.kind is CurveKind.CIRCLE]  # type: ignore[misc]


def sort_by_radius(circles: Sequence[Circle]) -> list[Circle]:
    """Sort circles by radius ascending. Equal radii keep their relative order."""
    return sorted(circles, key=lambda c: c.radius)


def total_radius(circles: Sequence[Circle]) -> float:
    """Sum of radii, accumulated left to right."""
    total = 0.0
    for c in circles:
        total += c.radius
    return total


def run_pipeline(curves: Sequence[Curve], t: float = np.pi / 4) -> PipelineResult:
    """
    Evaluate, filter, sort and sum.

    Args:
        curves: The curve collection, read only.
        t: Shared evaluation parameter in radians.

    Returns:
        PipelineResult with per-curve evaluations, the sorted circles and the
        total of their radii.
    """
    evaluations = evaluate_curves(curves, t)
    circles = sort_by_radius(filter_circles(curves))
    total = total_radius(circles)
    logger.info(f"{len(circles)} of {len(curves)} curves are circles, total radius {total:.2f}")
    return PipelineResult(
        t=float(t),
        evaluations=evaluations,
        circles=circles,
        total_radius=total,
    )


def format_report(result: PipelineResult) -> list[str]:
    """Render the report as output lines."""
    lines: list[str] = []
    for ev in result.evaluations:
        lines.append(ev.curve.describe())
        lines.append(f"  position:   {ev.position}")
        lines.append(f"  derivative: {ev.derivative}")
    radii = " ".join(f"{r:.2f}" for r in result.radii)
    lines.append(f"Sorted circle radii: {radii}".rstrip())
    lines.append(f"Total Radius of Circles: {result.total_radius:.2f}")
    return lines
