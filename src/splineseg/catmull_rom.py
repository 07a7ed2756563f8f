"""Uniform cubic Catmull-Rom segments and their direct conversions to other bases."""

from __future__ import annotations

from splineseg.bezier import BezierCubic
from splineseg.bspline import UBSCubic
from splineseg.common import CurveFamily, PointLike
from splineseg.hermite import HermiteCubic
from splineseg.segment import ControlPoint, SplineSegment


class CatRomCubic(SplineSegment):
    """
    A uniform 2D or 3D cubic Catmull-Rom segment, with 4 control points.

    The curve runs from p1 to p2; p0 and p3 only shape the tangents at those points.
    The to_* methods convert with closed-form combinations of the control points,
    without going through the polynomial form.
    """

    FAMILY = CurveFamily.CUBIC_CATMULL_ROM

    p0 = ControlPoint(0, "The first control point, not part of the curve itself")
    p1 = ControlPoint(1, "The second control point, and the start of the curve")
    p2 = ControlPoint(2, "The third control point, and the end of the curve")
    p3 = ControlPoint(3, "The last control point, not part of the curve itself")

    def __init__(self, p0: PointLike, p1: PointLike, p2: PointLike, p3: PointLike):
        super().__init__(p0, p1, p2, p3)

    def to_bezier(self) -> BezierCubic:
        """Return the cubic Bezier segment tracing the same curve."""
        p0, p1, p2, p3 = self._points
        return BezierCubic(
            p1,
            p1 + (p2 - p0) / 6.0,
            p2 + (p1 - p3) / 6.0,
            p2,
        )

    def to_hermite(self) -> HermiteCubic:
        """Return the cubic Hermite segment tracing the same curve."""
        p0, p1, p2, p3 = self._points
        return HermiteCubic(
            p1,
            (p2 - p0) / 2.0,
            p2,
            (p3 - p1) / 2.0,
        )

    def to_bspline(self) -> UBSCubic:
        """Return the uniform cubic B-spline segment tracing the same curve."""
        p0, p1, p2, p3 = self._points
        return UBSCubic(
            (7.0 * p0 - 4.0 * p1 + 5.0 * p2 - 2.0 * p3) / 6.0,
            (-2.0 * p0 + 11.0 * p1 - 4.0 * p2 + p3) / 6.0,
            (p0 - 4.0 * p1 + 11.0 * p2 - 2.0 * p3) / 6.0,
            (-2.0 * p0 + 5.0 * p1 - 4.0 * p2 + 7.0 * p3) / 6.0,
        )
