"""Central module containing types, enums and exceptions shared by all spline segments."""

from __future__ import annotations

from enum import Enum, auto
from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

###############################################################################
# Types
###############################################################################


# A 2D or 3D point given as (x, y), (x, y, z) or as a numpy array of that length
PointLike = Union[Sequence[float], NDArray[np.float64]]

# Stacked control points of shape (n_points, 2) or (n_points, 3)
PointsLike = Union[Sequence[PointLike], NDArray[np.float64]]


###############################################################################
# Enums
###############################################################################


class CurveFamily(Enum):
    """Enum to define the supported curve bases."""

    CUBIC_BEZIER = auto()
    CUBIC_HERMITE = auto()
    CUBIC_CATMULL_ROM = auto()
    UNIFORM_CUBIC_BSPLINE = auto()
    QUADRATIC_BEZIER = auto()

    @property
    def arity(self) -> int:
        """int: Number of control points of a segment of this family."""
        if self is CurveFamily.QUADRATIC_BEZIER:
            return 3
        return 4

    @property
    def degree(self) -> int:
        """int: Polynomial degree of a segment of this family."""
        return self.arity - 1


###############################################################################
# Exceptions
###############################################################################


class SplineSegmentError(Exception):
    """Base exception for spline segment errors."""


class InvalidIndexError(SplineSegmentError, IndexError):
    """Raised when a control point index lies outside [0, arity)."""


class DimensionError(SplineSegmentError, ValueError):
    """Raised when points are not 2D/3D or do not share one dimension."""


class ConversionError(SplineSegmentError, ValueError):
    """Raised when a segment cannot be represented exactly in the target family."""


###############################################################################
# Functions
###############################################################################


def main() -> None:
    """Display the supported curve families with their arity and degree."""
    for family in CurveFamily:
        print(f"{family.name:<24} arity={family.arity} degree={family.degree}")


if __name__ == "__main__":
    main()
