"""Characteristic matrices mapping control points to polynomial coefficients."""

from __future__ import annotations

from typing import Dict, Sequence

import numpy as np
from numpy.typing import NDArray

from splineseg.common import CurveFamily, PointsLike
from splineseg.polynomial import Polynomial

###############################################################################
# CharMatrix
###############################################################################


class CharMatrix:
    """
    Fixed characteristic matrix of a curve family.

    The matrix M maps stacked control points P (one row per point) to the
    polynomial coefficients C = M @ P (one row per power of t, constant first).
    Entries are stored as integer numerators over a common denominator so the
    rational coefficients are applied with a single final division.
    """

    def __init__(self, family: CurveFamily, numerators: Sequence[Sequence[int]], denominator: int = 1):
        """
        Initialize a characteristic matrix of _family_.

        Only the module constants below are used by the segments; creating
        further instances does not affect CharMatrix.for_family.

        Args:
            family: The curve family this matrix belongs to
            numerators: Square integer matrix of size family.arity
            denominator: Common denominator of all entries
        """
        num = np.array(numerators, dtype=np.float64)
        if num.shape != (family.arity, family.arity):
            raise ValueError(f"{family.name} needs a {family.arity}x{family.arity} matrix, got {num.shape}")
        num.setflags(write=False)
        self._family = family
        self._numerators = num
        self._denominator = float(denominator)
        matrix = num / self._denominator
        matrix.setflags(write=False)
        self._matrix = matrix

    @property
    def family(self) -> CurveFamily:
        """CurveFamily: The curve family of this matrix."""
        return self._family

    @property
    def matrix(self) -> NDArray[np.float64]:
        """Read-only float matrix of shape (arity, arity)."""
        return self._matrix

    @classmethod
    def for_family(cls, family: CurveFamily) -> CharMatrix:
        """Return the shared characteristic matrix of _family_."""
        return _FAMILY_MATRICES[family]

    def get_curve(self, points: PointsLike) -> Polynomial:
        """
        Transform control points into the polynomial form.

        Args:
            points: Control points of shape (arity, 2) or (arity, 3)

        Returns:
            Polynomial: the curve with coefficients M @ points
        """
        pts = np.asarray(points, dtype=np.float64)
        return Polynomial((self._numerators @ pts) / self._denominator)

    def get_points(self, curve: Polynomial) -> NDArray[np.float64]:
        """
        Inverse of get_curve: solve M @ P = C for the control points P.

        Args:
            curve: Polynomial of degree <= arity-1

        Returns:
            NDArray[np.float64]: control points of shape (arity, dimension)

        Raises:
            ValueError: if the polynomial has more coefficients than this family has points
        """
        coeffs = curve.coefficients
        arity = self._family.arity
        if coeffs.shape[0] > arity:
            raise ValueError(f"{self._family.name} cannot represent a polynomial of degree {curve.degree}")
        padded = np.zeros((arity, curve.dimension), dtype=np.float64)
        padded[: coeffs.shape[0]] = coeffs
        return np.linalg.solve(self._numerators, padded * self._denominator)


###############################################################################
# Family matrices
###############################################################################

# (1-t)^3*P0 + 3*(1-t)^2*t*P1 + 3*(1-t)*t^2*P2 + t^3*P3
CUBIC_BEZIER = CharMatrix(
    CurveFamily.CUBIC_BEZIER,
    [
        [1, 0, 0, 0],
        [-3, 3, 0, 0],
        [3, -6, 3, 0],
        [-1, 3, -3, 1],
    ],
)

# Control points ordered (P0, V0, P1, V1)
CUBIC_HERMITE = CharMatrix(
    CurveFamily.CUBIC_HERMITE,
    [
        [1, 0, 0, 0],
        [0, 1, 0, 0],
        [-3, -2, 3, -1],
        [2, 1, -2, 1],
    ],
)

# Passes through P1 (t=0) and P2 (t=1)
CUBIC_CATMULL_ROM = CharMatrix(
    CurveFamily.CUBIC_CATMULL_ROM,
    [
        [0, 2, 0, 0],
        [-1, 0, 1, 0],
        [2, -5, 4, -1],
        [-1, 3, -3, 1],
    ],
    denominator=2,
)

UNIFORM_CUBIC_BSPLINE = CharMatrix(
    CurveFamily.UNIFORM_CUBIC_BSPLINE,
    [
        [1, 4, 1, 0],
        [-3, 0, 3, 0],
        [3, -6, 3, 0],
        [-1, 3, -3, 1],
    ],
    denominator=6,
)

# (1-t)^2*P0 + 2*(1-t)*t*P1 + t^2*P2
QUADRATIC_BEZIER = CharMatrix(
    CurveFamily.QUADRATIC_BEZIER,
    [
        [1, 0, 0],
        [-2, 2, 0],
        [1, -2, 1],
    ],
)

_FAMILY_MATRICES: Dict[CurveFamily, CharMatrix] = {
    char_matrix.family: char_matrix
    for char_matrix in (CUBIC_BEZIER, CUBIC_HERMITE, CUBIC_CATMULL_ROM, UNIFORM_CUBIC_BSPLINE, QUADRATIC_BEZIER)
}
