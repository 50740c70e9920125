"""Random and explicit curve construction."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from loguru import logger

from ._config import FactoryParams
from ._curves import Circle, Curve, CurveKind, Ellipse, Helix

# Variants in draw order, with the number of shape parameters each needs.
_VARIANTS: tuple[tuple[CurveKind, Callable[..., Curve], int], ...] = (
    (CurveKind.CIRCLE, Circle, 1),
    (CurveKind.ELLIPSE, Ellipse, 2),
    (CurveKind.HELIX, Helix, 2),
)

_KIND_NAMES: dict[str, tuple[Callable[..., Curve], int]] = {
    kind.name.lower(): (ctor, n_params) for kind, ctor, n_params in _VARIANTS
}


def _check_range(params: FactoryParams) -> None:
    if not (0 < params.min_param <= params.max_param):
        raise ValueError(
            f"Parameter range must satisfy 0 < min_param <= max_param, "
            f"got [{params.min_param}, {params.max_param}]"
        )


def _draw(rng: np.random.Generator, params: FactoryParams, n: int) -> list[float]:
    # uniform() is half-open on the right, so every value is >= min_param > 0.
    return rng.uniform(params.min_param, params.max_param, size=n).tolist()


def create_random_curve(
    rng: np.random.Generator | None = None,
    params: FactoryParams | None = None,
) -> Curve:
    """
    Create a curve of uniformly chosen variant with random parameters.

    Args:
        rng: Random source. If None, a freshly seeded generator is used.
        params: Parameter range. If None, uses defaults ([0.1, 10.0)).

    Returns:
        A Circle, Ellipse or Helix. Never fails construction for a valid range.
    """
    p = params or FactoryParams()
    _check_range(p)
    rng = rng if rng is not None else np.random.default_rng()

    _, ctor, n_params = _VARIANTS[int(rng.integers(len(_VARIANTS)))]
    return ctor(*_draw(rng, p, n_params))


def build_random_curves(
    n: int,
    rng: np.random.Generator | None = None,
    params: FactoryParams | None = None,
) -> list[Curve]:
    """Build ``n`` curves by calling :func:`create_random_curve` repeatedly."""
    if n < 0:
        raise ValueError(f"Curve count must be non-negative, got {n}")
    rng = rng if rng is not None else np.random.default_rng()
    return [create_random_curve(rng, params) for _ in range(n)]


def build_reference_curves(
    per_kind: int = 5,
    rng: np.random.Generator | None = None,
    params: FactoryParams | None = None,
) -> list[Curve]:
    """Build ``per_kind`` circles, then ellipses, then helices with random parameters."""
    if per_kind < 0:
        raise ValueError(f"Curves per kind must be non-negative, got {per_kind}")
    p = params or FactoryParams()
    _check_range(p)
    rng = rng if rng is not None else np.random.default_rng()

    curves: list[Curve] = []
    for _, ctor, n_params in _VARIANTS:
        curves.extend(ctor(*_draw(rng, p, n_params)) for _ in range(per_kind))
    return curves


def parse_curve(text: str) -> Curve:
    """
    Construct a curve from a ``kind:p1[,p2]`` string.

    Accepted forms: ``circle:R``, ``ellipse:RX,RY``, ``helix:R,STEP``.

    Raises:
        ValueError: If the text is malformed.
        InvalidParameter: If a parameter is not strictly positive.
    """
    kind, sep, args = text.strip().partition(":")
    entry = _KIND_NAMES.get(kind.strip().lower())
    if not sep or entry is None:
        raise ValueError(
            f"Cannot parse curve '{text}': expected one of "
            f"circle:R, ellipse:RX,RY, helix:R,STEP"
        )
    ctor, n_params = entry

    try:
        values = [float(v) for v in args.split(",")]
    except ValueError:
        raise ValueError(f"Cannot parse curve '{text}': parameters must be numbers") from None
    if len(values) != n_params:
        raise ValueError(
            f"Cannot parse curve '{text}': {kind.strip().lower()} takes "
            f"{n_params} parameter(s), got {len(values)}"
        )

    curve = ctor(*values)
    logger.debug(f"Parsed '{text}' as {curve.describe()}")
    return curve
