"""Polynomial curves of degree up to three in 2D or 3D"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import NDArray

from splineseg.common import DimensionError, PointsLike
from splineseg.consts import APPROX_EQUAL_ATOL, APPROX_EQUAL_RTOL, POLYGONIZE_NUMPY_THRESHOLD

###############################################################################
# Polynomial
###############################################################################


class Polynomial:
    """
    Parametric polynomial curve P(t) = c0 + c1*t + c2*t^2 + c3*t^3.

    The coefficients are stored as an immutable array of shape (degree+1, dimension)
    ordered from the constant term upwards, i.e. row k holds the coefficient vector
    of t^k and column i holds the per-axis coefficients of axis i.
    """

    def __init__(self, coefficients: PointsLike):
        """
        Initialize a Polynomial from its coefficient vectors.

        Args:
            coefficients: sequence of 1 to 4 coefficient vectors (constant term first),
                each of them 2D or 3D

        Raises:
            DimensionError: if the coefficient vectors are not 2D/3D
            ValueError: if the degree is above 3
        """
        arr = np.array(coefficients, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] not in (2, 3):
            raise DimensionError(f"coefficients must have shape (n, 2) or (n, 3), got {arr.shape}")
        if not 1 <= arr.shape[0] <= 4:
            raise ValueError(f"Polynomial needs 1 to 4 coefficient vectors, got {arr.shape[0]}")
        arr.setflags(write=False)
        self._coefficients = arr

    @property
    def coefficients(self) -> NDArray[np.float64]:
        """Read-only coefficient array of shape (degree+1, dimension), constant term first."""
        return self._coefficients

    @property
    def degree(self) -> int:
        """int: The (nominal) degree, i.e. the number of coefficient vectors minus one."""
        return self._coefficients.shape[0] - 1

    @property
    def dimension(self) -> int:
        """int: 2 for planar curves, 3 for spatial curves."""
        return self._coefficients.shape[1]

    def axis(self, index: int) -> NDArray[np.float64]:
        """Return the 1D polynomial coefficients of the given axis (0=x, 1=y, 2=z)."""
        return self._coefficients[:, index]

    def eval(self, t: Union[float, NDArray[np.float64]]) -> NDArray[np.float64]:
        """
        Evaluate the polynomial using Horner's method.

        Args:
            t: parameter value or array of parameter values (not clamped)

        Returns:
            NDArray[np.float64]: point of shape (dimension,) for a scalar _t_,
            otherwise an array of shape t.shape + (dimension,)
        """
        t_arr = np.asarray(t, dtype=np.float64)
        t_col = t_arr[..., np.newaxis]
        result = np.zeros(t_arr.shape + (self.dimension,), dtype=np.float64)
        for coeff in self._coefficients[::-1]:
            result = result * t_col + coeff
        return result

    def __call__(self, t: Union[float, NDArray[np.float64]]) -> NDArray[np.float64]:
        return self.eval(t)

    def differentiate(self, order: int = 1) -> Polynomial:
        """Return the derivative polynomial of the given order."""
        if order < 0:
            raise ValueError(f"Derivative order must not be negative, got {order}")
        coeffs = self._coefficients
        for _ in range(order):
            if coeffs.shape[0] == 1:
                coeffs = np.zeros_like(coeffs)
            else:
                powers = np.arange(1, coeffs.shape[0], dtype=np.float64)
                coeffs = coeffs[1:] * powers[:, np.newaxis]
        return Polynomial(coeffs)

    def eval_derivative(self, t: Union[float, NDArray[np.float64]], order: int = 1) -> NDArray[np.float64]:
        """Evaluate the derivative of the given order at _t_."""
        return self.differentiate(order).eval(t)

    def curvature(self, t: Union[float, NDArray[np.float64]]) -> Union[float, NDArray[np.float64]]:
        """
        Unsigned curvature |P' x P''| / |P'|^3 at _t_.

        Points where the velocity vanishes (degenerate curves, cusps) report zero curvature.
        """
        velocity = self.eval_derivative(t, 1)
        acceleration = self.eval_derivative(t, 2)
        speed_sq = np.sum(velocity * velocity, axis=-1)
        dot = np.sum(velocity * acceleration, axis=-1)
        cross_sq = np.maximum(speed_sq * np.sum(acceleration * acceleration, axis=-1) - dot * dot, 0.0)
        denom = speed_sq**1.5
        with np.errstate(divide="ignore", invalid="ignore"):
            kappa = np.where(denom > 0.0, np.sqrt(cross_sq) / denom, 0.0)
        if np.ndim(t) == 0:
            return float(kappa)
        return kappa

    def polygonize(self, steps: int) -> NDArray[np.float64]:
        """
        Sample the polynomial at steps+1 uniformly spaced parameters in [0, 1].

        Small step counts use forward differencing (O(1) per point), larger ones
        use vectorized Horner evaluation.

        Args:
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, dimension)
        """
        if steps < 1:
            raise ValueError(f"steps must be at least 1, got {steps}")
        if steps < POLYGONIZE_NUMPY_THRESHOLD:
            return self._polygonize_forward_differencing(steps)
        return self.eval(np.linspace(0.0, 1.0, steps + 1, dtype=np.float64))

    def _polygonize_forward_differencing(self, steps: int) -> NDArray[np.float64]:
        h = 1.0 / steps
        # Derive discrete differences from the first four curve points, exact for degree <= 3
        b0, b1, b2, b3 = self.eval(np.array([0.0, h, 2.0 * h, 3.0 * h], dtype=np.float64))
        d_first = b1 - b0
        d_second = b2 - 2.0 * b1 + b0
        d_third = b3 - 3.0 * b2 + 3.0 * b1 - b0  # constant for cubics

        result = np.empty((steps + 1, self.dimension), dtype=np.float64)
        point = b0
        result[0] = point
        for i in range(1, steps + 1):
            point = point + d_first
            d_first = d_first + d_second
            d_second = d_second + d_third
            result[i] = point
        return result

    def approx_equal(
        self, other: Polynomial, rtol: float = APPROX_EQUAL_RTOL, atol: float = APPROX_EQUAL_ATOL
    ) -> bool:
        """
        Check whether both polynomials describe the same curve within tolerance.

        Polynomials of different nominal degree compare equal if the surplus
        coefficients are (approximately) zero.
        """
        if not isinstance(other, Polynomial) or self.dimension != other.dimension:
            return False
        rows = max(self._coefficients.shape[0], other.coefficients.shape[0])
        return bool(np.allclose(self._padded(rows), other._padded(rows), rtol=rtol, atol=atol))

    def _padded(self, rows: int) -> NDArray[np.float64]:
        padded = np.zeros((rows, self.dimension), dtype=np.float64)
        padded[: self._coefficients.shape[0]] = self._coefficients
        return padded

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return bool(np.array_equal(self._coefficients, other.coefficients))

    def __hash__(self) -> int:
        return hash(tuple(tuple(row) for row in self._coefficients.tolist()))

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()})"
