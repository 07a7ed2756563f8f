"""Base class shared by all uniform spline segments: control points and the lazy polynomial cache."""

from __future__ import annotations

import logging
import operator
from enum import Enum, auto
from typing import Any, ClassVar, Dict, Iterator, Optional, Type, TypeVar

import numpy as np
from numpy.typing import NDArray

from splineseg.char_matrix import CharMatrix
from splineseg.common import ConversionError, CurveFamily, DimensionError, InvalidIndexError, PointLike, PointsLike
from splineseg.consts import APPROX_EQUAL_ATOL, APPROX_EQUAL_RTOL, CONVERSION_DEGREE_ATOL
from splineseg.geom import GeomMath
from splineseg.polynomial import Polynomial

logger = logging.getLogger(__name__)

S = TypeVar("S", bound="SplineSegment")


class CacheState(Enum):
    """State of the polynomial cache of a segment."""

    STALE = auto()
    FRESH = auto()


###############################################################################
# ControlPoint
###############################################################################


class ControlPoint:
    """Descriptor exposing one control point of a SplineSegment by name."""

    def __init__(self, index: int, doc: str = ""):
        self._index = index
        self.__doc__ = doc

    def __get__(self, obj: Optional[SplineSegment], objtype: Optional[type] = None) -> Any:
        if obj is None:
            return self
        return obj[self._index]

    def __set__(self, obj: SplineSegment, value: PointLike) -> None:
        obj[self._index] = value


###############################################################################
# SplineSegment
###############################################################################


class SplineSegment:
    """
    A single uniform spline segment of a fixed curve family in 2D or 3D.

    The segment holds family.arity control points. Its polynomial form is derived
    lazily through the family's characteristic matrix: every control point change
    marks the cache STALE, the next read of `curve` recomputes it and marks it FRESH.
    A segment is owned by one caller at a time; copies carry independent caches.

    Attributes:
        FAMILY: The curve family, defined by each subclass
        _points: Control points (shape: arity, dimension)
        _curve: Cached polynomial, valid while _cache_state is FRESH
        _cache_state: CacheState of _curve
    """

    FAMILY: ClassVar[CurveFamily]

    _points: NDArray[np.float64]
    _curve: Optional[Polynomial]
    _cache_state: CacheState

    def __init__(self, *points: PointLike):
        """
        Initialize a segment from its control points.

        Subclasses take their control points as named positional parameters,
        so a wrong number of points fails at the call with a TypeError;
        use from_points for stacked input of unchecked length.

        Args:
            points: family.arity control points, all 2D or all 3D

        Raises:
            ValueError: if the number of points differs from the family arity
            DimensionError: if the points are not 2D/3D or mix dimensions
        """
        self._points = GeomMath.as_points(points, self.FAMILY.arity)
        self._curve = None
        self._cache_state = CacheState.STALE

    @classmethod
    def from_points(cls: Type[S], points: PointsLike) -> S:
        """
        Create a segment from stacked control points of shape (arity, 2) or (arity, 3).

        Raises:
            ValueError: if the number of points differs from the family arity
            DimensionError: if the points are not 2D/3D or mix dimensions
        """
        if len(points) != cls.FAMILY.arity:
            raise ValueError(f"Expected {cls.FAMILY.arity} control points, got {len(points)}")
        return cls(*points)

    ###########################################################################
    # Properties
    ###########################################################################

    @property
    def arity(self) -> int:
        """int: Number of control points."""
        return self.FAMILY.arity

    @property
    def dimension(self) -> int:
        """int: 2 for planar segments, 3 for spatial segments."""
        return self._points.shape[1]

    @property
    def points(self) -> NDArray[np.float64]:
        """A copy of the control points as a numpy array of shape (arity, dimension)."""
        return self._points.copy()

    @property
    def cache_state(self) -> CacheState:
        """CacheState: Whether the polynomial form is up to date."""
        return self._cache_state

    @property
    def curve(self) -> Polynomial:
        """The polynomial form of this segment, recomputed only after control point changes."""
        if self._cache_state is CacheState.STALE:
            logger.debug("Recomputing %s coefficients", type(self).__name__)
            self._curve = CharMatrix.for_family(self.FAMILY).get_curve(self._points)
            self._cache_state = CacheState.FRESH
        return self._curve

    def _invalidate(self) -> None:
        self._cache_state = CacheState.STALE

    ###########################################################################
    # Control point access
    ###########################################################################

    def _check_index(self, index: int) -> int:
        idx = operator.index(index)
        if not 0 <= idx < self.arity:
            raise InvalidIndexError(f"Index has to be in the 0 to {self.arity - 1} range, got {index}")
        return idx

    def __getitem__(self, index: int) -> NDArray[np.float64]:
        return self._points[self._check_index(index)].copy()

    def __setitem__(self, index: int, value: PointLike) -> None:
        idx = self._check_index(index)
        self._points[idx] = GeomMath.as_point(value, self.dimension)
        self._invalidate()

    def __len__(self) -> int:
        return self.arity

    def __iter__(self) -> Iterator[NDArray[np.float64]]:
        for row in self._points:
            yield row.copy()

    ###########################################################################
    # Evaluation
    ###########################################################################

    def eval(self, t: Any) -> NDArray[np.float64]:
        """Evaluate the segment at parameter _t_ (scalar or array, not clamped)."""
        return self.curve.eval(t)

    def polygonize(self, steps: int) -> NDArray[np.float64]:
        """Sample the segment into steps+1 points, see Polynomial.polygonize."""
        return self.curve.polygonize(steps)

    ###########################################################################
    # Comparison, copying and string representation
    ###########################################################################

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplineSegment):
            return NotImplemented
        return type(self) is type(other) and bool(np.array_equal(self._points, other._points))

    def __hash__(self) -> int:
        return hash((self.FAMILY, tuple(tuple(row) for row in self._points.tolist())))

    def approx_equal(
        self, other: SplineSegment, rtol: float = APPROX_EQUAL_RTOL, atol: float = APPROX_EQUAL_ATOL
    ) -> bool:
        """Check whether _other_ is of the same family with control points equal within tolerance."""
        if type(self) is not type(other) or self.dimension != other.dimension:
            return False
        return bool(np.allclose(self._points, other._points, rtol=rtol, atol=atol))

    def copy(self: S) -> S:
        """Return an independent copy with its own (stale) cache."""
        return type(self)(*self._points)

    def __copy__(self: S) -> S:
        return self.copy()

    def __deepcopy__(self: S, memo: Dict[int, Any]) -> S:
        return self.copy()

    def __str__(self) -> str:
        return str(tuple(tuple(row) for row in self._points.tolist()))

    def __repr__(self) -> str:
        args = ", ".join(repr(tuple(row)) for row in self._points.tolist())
        return f"{type(self).__name__}({args})"

    ###########################################################################
    # Blending and conversion
    ###########################################################################

    @classmethod
    def _check_compatible(cls, a: SplineSegment, b: SplineSegment) -> None:
        if not isinstance(a, cls) or type(a) is not type(b):
            raise TypeError(
                f"Cannot blend {type(a).__name__} and {type(b).__name__} as {cls.__name__}"
            )
        if a.dimension != b.dimension:
            raise DimensionError(f"Cannot blend {a.dimension}D and {b.dimension}D segments")

    @classmethod
    def lerp(cls: Type[S], a: S, b: S, t: float) -> S:
        """
        Linear blend between two segments of the same family.

        Every control point is interpolated linearly without clamping _t_,
        so lerp(a, b, 0) == a and lerp(a, b, 1) == b.

        Args:
            a: The first spline segment
            b: The second spline segment
            t: Blend parameter, 0 yields _a_ and 1 yields _b_

        Returns:
            A new segment of the same family
        """
        cls._check_compatible(a, b)
        return type(a)(*GeomMath.lerp(a._points, b._points, t))

    def to_family(self, target: Type[S]) -> S:
        """
        Convert this segment into the family of _target_ describing the same curve.

        The conversion goes through the polynomial form, i.e. it solves
        M_target @ P_target = M_self @ P_self. Raising the degree is always exact.
        Lowering it is only possible if the highest coefficients vanish.

        Args:
            target: SplineSegment subclass to convert into

        Returns:
            A new segment of class _target_

        Raises:
            ConversionError: if the curve has a higher degree than _target_ supports
        """
        if type(self) is target:
            return self.copy()
        curve = self.curve
        target_arity = target.FAMILY.arity
        if curve.degree >= target_arity:
            surplus = curve.coefficients[target_arity:]
            if not np.allclose(surplus, 0.0, rtol=0.0, atol=CONVERSION_DEGREE_ATOL):
                raise ConversionError(
                    f"{type(self).__name__} of degree {curve.degree} cannot be represented as {target.__name__}"
                )
            curve = Polynomial(curve.coefficients[:target_arity])
        return target(*CharMatrix.for_family(target.FAMILY).get_points(curve))

    def flatten(self: S) -> S:
        """Return this segment projected onto the XY plane (z dropped), as a 2D segment."""
        return type(self)(*self._points[:, :2])
