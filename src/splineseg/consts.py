"""Central module containing numeric tolerances and tuning constants"""

from __future__ import annotations

# Tangent vectors shorter than this have no usable direction for slerp
SLERP_DEGENERATE_EPS: float = 1.0e-12

# Highest-order coefficient magnitude still considered zero when lowering the degree
CONVERSION_DEGREE_ATOL: float = 1.0e-9

# Step count from which polygonize switches from forward differencing to vectorized evaluation
POLYGONIZE_NUMPY_THRESHOLD: int = 70

# Default tolerances of the approx_equal methods
APPROX_EQUAL_RTOL: float = 1.0e-9
APPROX_EQUAL_ATOL: float = 1.0e-9
