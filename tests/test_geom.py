"""Test module for splineseg.geom

The tests are run using pytest.
"""

import numpy as np
import pytest

from splineseg.common import DimensionError
from splineseg.geom import GeomMath

###############################################################################
# Point coercion
###############################################################################


class TestGeomMathPoints:
    """Test conversion of point-like inputs."""

    def test_as_point_tuple(self):
        """Tuples become float64 arrays."""
        point = GeomMath.as_point((1, 2))
        assert point.dtype == np.float64
        assert np.array_equal(point, [1.0, 2.0])

    def test_as_point_copies(self):
        """The returned point does not alias the input array."""
        source = np.array([1.0, 2.0, 3.0])
        point = GeomMath.as_point(source)
        point[0] = 5.0
        assert source[0] == 1.0

    def test_as_point_dimension(self):
        """A required dimension is enforced."""
        with pytest.raises(DimensionError):
            GeomMath.as_point((1.0, 2.0), dimension=3)
        with pytest.raises(DimensionError):
            GeomMath.as_point((1.0, 2.0, 3.0, 4.0))
        with pytest.raises(DimensionError):
            GeomMath.as_point([[1.0, 2.0]])

    def test_as_points_count(self):
        """The number of points is enforced."""
        with pytest.raises(ValueError):
            GeomMath.as_points([(0.0, 0.0)], 2)


###############################################################################
# Interpolation
###############################################################################


class TestGeomMathInterpolation:
    """Test linear and spherical interpolation."""

    def test_lerp_exact_ends(self):
        """lerp returns the inputs exactly at 0 and 1."""
        a = np.array([0.1, 0.7, -3.3])
        b = np.array([0.3, -0.2, 9.1])
        assert np.array_equal(GeomMath.lerp(a, b, 0.0), a)
        assert np.array_equal(GeomMath.lerp(a, b, 1.0), b)

    def test_lerp_unclamped(self):
        """lerp extrapolates beyond [0, 1]."""
        assert np.allclose(GeomMath.lerp(np.array([0.0, 0.0]), np.array([1.0, 2.0]), 3.0), [3.0, 6.0])

    def test_slerp_quarter_turn_2d(self):
        """Halfway between x and y axis lies the diagonal."""
        result = GeomMath.slerp(np.array([2.0, 0.0]), np.array([0.0, 2.0]), 0.5)
        assert np.allclose(result, [np.sqrt(2.0), np.sqrt(2.0)])

    def test_slerp_ends(self):
        """slerp returns (approximately) the inputs at 0 and 1."""
        a = np.array([1.0, 2.0, 3.0])
        b = np.array([-2.0, 0.5, 1.0])
        assert np.allclose(GeomMath.slerp(a, b, 0.0), a)
        assert np.allclose(GeomMath.slerp(a, b, 1.0), b)

    def test_slerp_constant_angle_steps(self):
        """Equal parameter steps rotate by equal angles."""
        a = np.array([1.0, 0.0, 0.0])
        b = np.array([0.0, 0.0, 1.0])
        angles = [np.arctan2(v[2], v[0]) for v in (GeomMath.slerp(a, b, t) for t in (0.0, 0.25, 0.5, 0.75, 1.0))]
        assert np.allclose(np.diff(angles), np.pi / 8.0)

    def test_slerp_unclamped(self):
        """t beyond 1 keeps rotating."""
        result = GeomMath.slerp(np.array([1.0, 0.0]), np.array([0.0, 1.0]), 2.0)
        assert np.allclose(result, [-1.0, 0.0])

    def test_slerp_magnitude(self):
        """The length is interpolated linearly."""
        result = GeomMath.slerp(np.array([1.0, 0.0]), np.array([0.0, 3.0]), 0.5)
        assert np.linalg.norm(result) == pytest.approx(2.0)

    def test_slerp_nearly_parallel(self):
        """Vectors whose directions differ below the tolerance are interpolated linearly."""
        a = np.array([1.0, 0.0, 0.0])
        b = np.array([2.0, 2e-7, 0.0])
        assert np.array_equal(GeomMath.slerp(a, b, 0.3), GeomMath.lerp(a, b, 0.3))

    def test_slerp_small_angle(self):
        """Small but resolvable angles still rotate smoothly."""
        a = np.array([1.0, 0.0])
        b = np.array([np.cos(1e-3), np.sin(1e-3)])
        result = GeomMath.slerp(a, b, 0.5)
        assert np.allclose(result, [np.cos(5e-4), np.sin(5e-4)], atol=1e-12)

    def test_slerp_zero_vector(self):
        """A zero-length vector falls back to linear interpolation."""
        a = np.array([0.0, 0.0, 0.0])
        b = np.array([0.0, 4.0, 0.0])
        assert np.allclose(GeomMath.slerp(a, b, 0.25), [0.0, 1.0, 0.0])

    @pytest.mark.parametrize("a", [np.array([1.0, 0.0]), np.array([0.0, 0.0, 2.0]), np.array([1.0, 1.0, 1.0])])
    def test_slerp_antiparallel(self, a):
        """Opposite vectors rotate through a perpendicular direction."""
        middle = GeomMath.slerp(a, -a, 0.5)
        assert np.linalg.norm(middle) == pytest.approx(np.linalg.norm(a))
        assert np.dot(middle, a) == pytest.approx(0.0, abs=1e-12)
        assert np.allclose(GeomMath.slerp(a, -a, 1.0), -a)

    @pytest.mark.parametrize("unit", [np.array([0.0, 1.0]), np.array([1.0, 0.0, 0.0]), np.array([0.6, 0.0, 0.8])])
    def test_perpendicular(self, unit):
        """perpendicular returns an orthogonal unit vector."""
        ortho = GeomMath.perpendicular(unit)
        assert np.dot(ortho, unit) == pytest.approx(0.0, abs=1e-12)
        assert np.linalg.norm(ortho) == pytest.approx(1.0)
