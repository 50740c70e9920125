"""Tests for evaluation, filtering, sorting and summation."""

from __future__ import annotations

import math

import jax_dataclasses as jdc
import pytest

from curve3d import (
    Circle,
    CollectionMode,
    CurveKind,
    Ellipse,
    Helix,
    PipelineConfig,
    build_curves,
    evaluate_curves,
    filter_circles,
    format_report,
    run_pipeline,
    sort_by_radius,
    total_radius,
)


class TestEvaluate:
    """evaluate_curves preserves order and matches direct evaluation."""

    def test_order_and_values(self, mixed_curves):
        t = math.pi / 4
        evaluations = evaluate_curves(mixed_curves, t)
        assert [ev.curve for ev in evaluations] == mixed_curves
        for ev in evaluations:
            assert ev.position == ev.curve.position(t)
            assert ev.derivative == ev.curve.derivative(t)

    def test_empty(self):
        assert evaluate_curves([], 1.0) == []


class TestFilterSortSum:
    """Circle extraction and aggregation."""

    def test_filter_keeps_only_circles_in_order(self, mixed_curves):
        circles = filter_circles(mixed_curves)
        assert [c.radius for c in circles] == [3, 1, 2]
        assert all(c.kind is CurveKind.CIRCLE for c in circles)

    def test_filter_shares_objects(self, mixed_curves):
        circles = filter_circles(mixed_curves)
        assert circles[0] is mixed_curves[0]
        assert circles[1] is mixed_curves[2]
        assert circles[2] is mixed_curves[4]

    def test_helix_with_circle_like_shape_is_not_a_circle(self):
        assert filter_circles([Helix(2, 1), Ellipse(2, 2)]) == []

    def test_sort_and_sum(self):
        circles = sort_by_radius([Circle(5), Circle(2), Circle(8)])
        assert [c.radius for c in circles] == [2, 5, 8]
        assert f"{total_radius(circles):.2f}" == "15.00"

    def test_sort_is_stable(self):
        a, b, c = Circle(2.0), Circle(1.0), Circle(2.0)
        result = sort_by_radius([a, b, c])
        assert result[0] is b
        assert result[1] is a
        assert result[2] is c

    def test_sum_is_left_to_right(self):
        circles = [Circle(0.1), Circle(0.2), Circle(0.3)]
        assert total_radius(circles) == (0.1 + 0.2) + 0.3

    def test_empty_total(self):
        assert total_radius([]) == 0.0


class TestRunPipeline:
    """End-to-end pipeline behaviour."""

    def test_reference_example(self, mixed_curves):
        result = run_pipeline(mixed_curves, math.pi / 4)
        assert result.radii == [1, 2, 3]
        assert f"{result.total_radius:.2f}" == "6.00"
        assert len(result.evaluations) == 5

    def test_does_not_modify_collection(self, mixed_curves):
        before = list(mixed_curves)
        run_pipeline(mixed_curves)
        assert mixed_curves == before

    def test_no_circles(self):
        result = run_pipeline([Ellipse(1, 2), Helix(1, 1)])
        assert result.circles == []
        assert result.total_radius == 0.0

    def test_report_lines(self, mixed_curves):
        lines = format_report(run_pipeline(mixed_curves, math.pi / 4))
        assert lines[0] == "Circle (r=3.00)"
        assert lines[1].startswith("  position:   (2.121, 2.121, 0.000)")
        assert lines[2].startswith("  derivative: (-2.121, 2.121, 0.000)")
        assert lines[3] == "Ellipse (rx=2.00, ry=4.00)"
        assert lines[-2] == "Sorted circle radii: 1.00 2.00 3.00"
        assert lines[-1] == "Total Radius of Circles: 6.00"
        assert len(lines) == 5 * 3 + 2

    def test_report_without_circles(self):
        lines = format_report(run_pipeline([Helix(1, 1)]))
        assert lines[-2] == "Sorted circle radii:"
        assert lines[-1] == "Total Radius of Circles: 0.00"


class TestBuildCurves:
    """Collection construction from PipelineConfig."""

    def test_random_mode(self):
        curves = build_curves(PipelineConfig(n_curves=15, seed=3))
        assert len(curves) == 15
        assert curves == build_curves(PipelineConfig(n_curves=15, seed=3))

    def test_reference_mode(self):
        config = jdc.replace(PipelineConfig(seed=0), mode=CollectionMode.REFERENCE, per_kind=5)
        curves = build_curves(config)
        assert len(curves) == 15
        assert len(filter_circles(curves)) == 5

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_random_collection_total(self, seed: int):
        curves = build_curves(PipelineConfig(seed=seed))
        result = run_pipeline(curves)
        assert result.radii == sorted(result.radii)
        assert result.total_radius == pytest.approx(sum(c.radius for c in filter_circles(curves)))
