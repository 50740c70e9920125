"""Parametric 3D curves and circle radius aggregation."""

from ._config import CollectionMode as CollectionMode
from ._config import FactoryParams as FactoryParams
from ._config import PipelineConfig as PipelineConfig
from ._curves import Circle as Circle
from ._curves import Curve as Curve
from ._curves import CurveKind as CurveKind
from ._curves import Ellipse as Ellipse
from ._curves import Helix as Helix
from ._curves import InvalidParameter as InvalidParameter
from ._factory import build_random_curves as build_random_curves
from ._factory import build_reference_curves as build_reference_curves
from ._factory import create_random_curve as create_random_curve
from ._factory import parse_curve as parse_curve
from ._pipeline import CurveEvaluation as CurveEvaluation
from ._pipeline import PipelineResult as PipelineResult
from ._pipeline import build_curves as build_curves
from ._pipeline import evaluate_curves as evaluate_curves
from ._pipeline import filter_circles as filter_circles
from ._pipeline import format_report as format_report
from ._pipeline import run_pipeline as run_pipeline
from ._pipeline import sort_by_radius as sort_by_radius
from ._pipeline import total_radius as total_radius
from ._point import Point3D as Point3D

__version__ = "0.0.0"

# Colors for curve visualization (RGB tuples, 0-255), indexed by CurveKind
CURVE_COLORS: dict[CurveKind, tuple[int, int, int]] = {
    CurveKind.CIRCLE: (255, 100, 100),
    CurveKind.ELLIPSE: (100, 255, 100),
    CurveKind.HELIX: (100, 100, 255),
}
