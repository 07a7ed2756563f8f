"""Uniform cubic B-spline segments."""

from __future__ import annotations

from splineseg.common import CurveFamily, PointLike
from splineseg.segment import ControlPoint, SplineSegment


class UBSCubic(SplineSegment):
    """
    A uniform 2D or 3D cubic B-spline segment, with 4 control points.

    None of the control points lie on the curve in general. The curve starts at
    (p0 + 4*p1 + p2) / 6 and ends at (p1 + 4*p2 + p3) / 6.
    """

    FAMILY = CurveFamily.UNIFORM_CUBIC_BSPLINE

    p0 = ControlPoint(0, "The first control point of the B-spline segment")
    p1 = ControlPoint(1, "The second control point of the B-spline segment")
    p2 = ControlPoint(2, "The third control point of the B-spline segment")
    p3 = ControlPoint(3, "The last control point of the B-spline segment")

    def __init__(self, p0: PointLike, p1: PointLike, p2: PointLike, p3: PointLike):
        super().__init__(p0, p1, p2, p3)
