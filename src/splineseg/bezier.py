"""Bezier segments (quadratic and cubic) with de Casteljau subdivision and blending."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from splineseg.common import CurveFamily, PointLike
from splineseg.geom import GeomMath
from splineseg.segment import ControlPoint, SplineSegment


def de_casteljau_split(
    points: NDArray[np.float64], t: float
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Split a Bezier control polygon at parameter _t_ using de Casteljau's algorithm.

    Each round linearly interpolates neighbouring points at _t_, collapsing
    n points to n-1 until a single point (the curve point at _t_) remains.
    The first points of all rounds form the control polygon of the part before _t_,
    the last points (in reverse) the control polygon of the part after _t_.
    _t_ is not clamped; values outside [0, 1] extrapolate.

    Args:
        points: Control points of shape (n, dimension)
        t: Split parameter

    Returns:
        (pre, post) control points, both of shape (n, dimension)
    """
    level = points
    pre: List[NDArray[np.float64]] = [level[0]]
    post: List[NDArray[np.float64]] = [level[-1]]
    while level.shape[0] > 1:
        level = GeomMath.lerp(level[:-1], level[1:], t)
        pre.append(level[0])
        post.append(level[-1])
    return np.array(pre), np.array(post[::-1])


###############################################################################
# BezierCubic
###############################################################################


class BezierCubic(SplineSegment):
    """A uniform 2D or 3D cubic Bezier segment, with 4 control points."""

    FAMILY = CurveFamily.CUBIC_BEZIER

    p0 = ControlPoint(0, "The starting point of the curve")
    p1 = ControlPoint(1, "The second control point of the curve, sometimes called the start tangent point")
    p2 = ControlPoint(2, "The third control point of the curve, sometimes called the end tangent point")
    p3 = ControlPoint(3, "The end point of the curve")

    def __init__(self, p0: PointLike, p1: PointLike, p2: PointLike, p3: PointLike):
        """
        Initialize a cubic Bezier segment.

        Args:
            p0: The starting point of the curve
            p1: The start tangent point
            p2: The end tangent point
            p3: The end point of the curve
        """
        super().__init__(p0, p1, p2, p3)

    def split(self, t: float) -> Tuple[BezierCubic, BezierCubic]:
        """
        Split the curve at parameter _t_ into two segments tracing the same curve.

        Returns:
            (pre, post) where pre covers [0, t] and post covers [t, 1] of this curve
        """
        pre, post = de_casteljau_split(self._points, t)
        return BezierCubic(*pre), BezierCubic(*post)

    @classmethod
    def slerp(cls, a: BezierCubic, b: BezierCubic, t: float) -> BezierCubic:
        """
        Blend between two cubic Bezier segments with spherically interpolated tangents.

        The end points are interpolated linearly. The tangent vectors p1-p0 and p2-p3
        are interpolated spherically (see GeomMath.slerp) and re-attached to the
        interpolated end points. Zero-length tangents are interpolated linearly.

        Args:
            a: The first spline segment
            b: The second spline segment
            t: Blend parameter, 0 yields _a_ and 1 yields _b_ (not clamped)
        """
        cls._check_compatible(a, b)
        pa = a._points
        pb = b._points
        p0 = GeomMath.lerp(pa[0], pb[0], t)
        p3 = GeomMath.lerp(pa[3], pb[3], t)
        return BezierCubic(
            p0,
            p0 + GeomMath.slerp(pa[1] - pa[0], pb[1] - pb[0], t),
            p3 + GeomMath.slerp(pa[2] - pa[3], pb[2] - pb[3], t),
            p3,
        )


###############################################################################
# BezierQuad
###############################################################################


class BezierQuad(SplineSegment):
    """A uniform 2D or 3D quadratic Bezier segment, with 3 control points."""

    FAMILY = CurveFamily.QUADRATIC_BEZIER

    p0 = ControlPoint(0, "The starting point of the curve")
    p1 = ControlPoint(1, "The middle control point of the curve, sometimes called a tangent point")
    p2 = ControlPoint(2, "The end point of the curve")

    def __init__(self, p0: PointLike, p1: PointLike, p2: PointLike):
        super().__init__(p0, p1, p2)

    def split(self, t: float) -> Tuple[BezierQuad, BezierQuad]:
        """Split the curve at parameter _t_, returning (pre, post)."""
        pre, post = de_casteljau_split(self._points, t)
        return BezierQuad(*pre), BezierQuad(*post)

    def elevate(self) -> BezierCubic:
        """Return the cubic Bezier segment tracing exactly this curve."""
        p0, p1, p2 = self._points
        return BezierCubic(
            p0,
            p0 + (p1 - p0) * (2.0 / 3.0),
            p2 + (p1 - p2) * (2.0 / 3.0),
            p2,
        )
