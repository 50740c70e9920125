#!/usr/bin/env python3
"""Visualize a curve collection in the browser.

Usage:
    python scripts/visualize_curves.py
    python scripts/visualize_curves.py --seed 0 --n-curves 30
    python scripts/visualize_curves.py --curves circle:3 helix:2,1
"""

from __future__ import annotations

import math
import time

import numpy as np
import tyro
import viser
from loguru import logger

from curve3d import CURVE_COLORS, PipelineConfig, build_curves, parse_curve


def main(
    n_curves: int = 15,
    seed: int | None = None,
    curves: tuple[str, ...] = (),
    t: float = math.pi / 4,
    turns: float = 2.0,
    n_samples: int = 200,
    port: int = 8080,
) -> None:
    """Draw each curve and mark its position at ``t``.

    Args:
        n_curves: Number of random curves when no explicit curves are given.
        seed: Random seed.
        curves: Explicit curves such as circle:3 ellipse:2,4 helix:5,2.
        t: Parameter at which a marker is drawn.
        turns: Parameter span to draw, in full turns starting from 0.
        n_samples: Samples per curve.
        port: Port for the viser web server.
    """
    if curves:
        collection = [parse_curve(text) for text in curves]
    else:
        collection = build_curves(PipelineConfig(n_curves=n_curves, seed=seed))

    ts = np.linspace(0.0, 2 * np.pi * turns, n_samples)

    server = viser.ViserServer(port=port)
    server.scene.add_grid("/ground", width=20, height=20, cell_size=1.0)

    for i, curve in enumerate(collection):
        color = CURVE_COLORS[curve.kind]
        rgb = (color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)
        server.scene.add_spline_catmull_rom(
            f"/curves/{i}",
            positions=tuple(map(tuple, curve.sample(ts).tolist())),
            color=rgb,
            line_width=2.0,
        )
        p = curve.position(t)
        server.scene.add_icosphere(
            f"/markers/{i}",
            radius=0.1,
            position=(p.x, p.y, p.z),
            color=rgb,
        )
        logger.debug(f"  [{i}] {curve.describe()} at t={t:.3f}: {p}")

    logger.info(f"Visualization ready at http://localhost:{port}")
    while True:
        time.sleep(1)


if __name__ == "__main__":
    tyro.cli(main)
