"""Cubic Hermite segments defined by end points and end velocities."""

from __future__ import annotations

from splineseg.bezier import BezierCubic
from splineseg.common import CurveFamily, PointLike
from splineseg.segment import ControlPoint, SplineSegment


class HermiteCubic(SplineSegment):
    """
    A uniform 2D or 3D cubic Hermite segment.

    The four control points are stored in the order (p0, v0, p1, v1): start position,
    start velocity, end position and end velocity. Index access follows that order.
    """

    FAMILY = CurveFamily.CUBIC_HERMITE

    p0 = ControlPoint(0, "The starting point of the curve")
    v0 = ControlPoint(1, "The rate of change (velocity) at the start of the curve")
    p1 = ControlPoint(2, "The end point of the curve")
    v1 = ControlPoint(3, "The rate of change (velocity) at the end of the curve")

    def __init__(self, p0: PointLike, v0: PointLike, p1: PointLike, v1: PointLike):
        super().__init__(p0, v0, p1, v1)

    def to_bezier(self) -> BezierCubic:
        """Return the cubic Bezier segment tracing the same curve."""
        p0, v0, p1, v1 = self._points
        return BezierCubic(p0, p0 + v0 / 3.0, p1 - v1 / 3.0, p1)
