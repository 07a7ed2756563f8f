"""Vector helpers for 2D and 3D control points"""

from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from splineseg.common import DimensionError, PointLike, PointsLike
from splineseg.consts import SLERP_DEGENERATE_EPS

logger = logging.getLogger(__name__)


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to point and vector handling."""

    @staticmethod
    def as_point(point: PointLike, dimension: Optional[int] = None) -> NDArray[np.float64]:
        """
        Convert the given point into a new float64 array of shape (2,) or (3,).

        Args:
            point (PointLike): 2D point (x, y) or 3D point (x, y, z)
            dimension (Optional[int]): required dimension, None accepts 2 and 3

        Returns:
            NDArray[np.float64]: a copy of the point

        Raises:
            DimensionError: if the point is not 2D/3D or does not match _dimension_
        """
        arr = np.array(point, dtype=np.float64)
        if arr.ndim != 1 or arr.shape[0] not in (2, 3):
            raise DimensionError(f"point must have shape (2,) or (3,), got {arr.shape}")
        if dimension is not None and arr.shape[0] != dimension:
            raise DimensionError(f"point must be {dimension}D, got {arr.shape[0]}D")
        return arr

    @staticmethod
    def as_points(points: PointsLike, count: int) -> NDArray[np.float64]:
        """
        Convert the given points into a new float64 array of shape (count, 2) or (count, 3).

        Args:
            points (PointsLike): sequence of 2D or 3D points, all of the same dimension
            count (int): required number of points

        Returns:
            NDArray[np.float64]: a copy of the stacked points

        Raises:
            ValueError: if the number of points differs from _count_
            DimensionError: if the points are not 2D/3D or mix dimensions
        """
        if len(points) != count:
            raise ValueError(f"Expected {count} control points, got {len(points)}")
        rows = [GeomMath.as_point(point) for point in points]
        dimension = rows[0].shape[0]
        for row in rows:
            if row.shape[0] != dimension:
                raise DimensionError(f"All points must share one dimension, got {dimension}D and {row.shape[0]}D")
        return np.vstack(rows)

    @staticmethod
    def lerp(a: NDArray[np.float64], b: NDArray[np.float64], t: float) -> NDArray[np.float64]:
        """
        Unclamped linear interpolation between _a_ and _b_.

        Evaluated as (1-t)*a + t*b so that t=0 returns exactly _a_ and t=1 returns exactly _b_.
        """
        return (1.0 - t) * a + t * b

    @staticmethod
    def perpendicular(unit: NDArray[np.float64]) -> NDArray[np.float64]:
        """
        Return a unit vector perpendicular to the given unit vector.

        2D vectors are rotated by +90 degrees. For 3D vectors the result is the
        cross product with the coordinate axis least aligned with _unit_.
        """
        if unit.shape[0] == 2:
            return np.array([-unit[1], unit[0]], dtype=np.float64)
        axis = np.zeros(3, dtype=np.float64)
        axis[int(np.argmin(np.abs(unit)))] = 1.0
        ortho = np.cross(unit, axis)
        return ortho / np.linalg.norm(ortho)

    @staticmethod
    def slerp(a: NDArray[np.float64], b: NDArray[np.float64], t: float) -> NDArray[np.float64]:
        """
        Unclamped spherical interpolation between the vectors _a_ and _b_.

        The direction rotates along the great arc from _a_ to _b_ by the fraction _t_
        of the angle between them, while the length is interpolated linearly.
        Vectors shorter than SLERP_DEGENERATE_EPS have no direction; in that case
        (and for parallel vectors, where both methods agree) the vectors are
        interpolated linearly. Antiparallel vectors rotate through
        GeomMath.perpendicular(a).

        Args:
            a (NDArray[np.float64]): start vector, 2D or 3D
            b (NDArray[np.float64]): end vector, same dimension as _a_
            t (float): interpolation parameter, not clamped

        Returns:
            NDArray[np.float64]: the interpolated vector
        """
        len_a = float(np.linalg.norm(a))
        len_b = float(np.linalg.norm(b))
        if len_a < SLERP_DEGENERATE_EPS or len_b < SLERP_DEGENERATE_EPS:
            logger.debug("slerp of degenerate vectors %s, %s falls back to lerp", a, b)
            return GeomMath.lerp(a, b, t)

        unit_a = a / len_a
        unit_b = b / len_b
        cos_angle = float(np.clip(np.dot(unit_a, unit_b), -1.0, 1.0))
        if cos_angle > 1.0 - SLERP_DEGENERATE_EPS:
            return GeomMath.lerp(a, b, t)
        angle = math.acos(cos_angle)

        ortho = unit_b - unit_a * cos_angle
        ortho_len = float(np.linalg.norm(ortho))
        if ortho_len < SLERP_DEGENERATE_EPS:
            ortho = GeomMath.perpendicular(unit_a)
        else:
            ortho = ortho / ortho_len

        direction = unit_a * math.cos(angle * t) + ortho * math.sin(angle * t)
        return direction * ((1.0 - t) * len_a + t * len_b)
