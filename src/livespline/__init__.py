"""livespline: monotone cubic interpolation for scrubbing time series curves.

The curve through a sequence of time-ordered ``(time, value)`` samples is a
Fritsch-Carlson monotone cubic Hermite spline. The same construction drives
both the drawn path and the value under a scrub cursor, so the two agree.

Scalar Interface
----------------
interpolate_at_time
    Value of the spline at one time, or None for no samples.

Tensor Interface
----------------
monotone_cubic
    Create an interpolator from samples (fit + callable).
monotone_cubic_fit
    Compute Fritsch-Carlson tangents for samples.
monotone_cubic_evaluate
    Evaluate a fitted spline at query times.
monotone_cubic_locate
    Find the segment containing each query time.
monotone_cubic_path
    Sample a fitted spline as a polyline for drawing.

Data Types
----------
Sample
    A ``(time, value)`` knot.
MonotoneCubicSpline
    Knots, values, interval widths and limited tangents.

Exceptions
----------
SplineError
    Base exception for spline operations.
KnotError
    Invalid knot vector.
CoincidentKnotsWarning
    Adjacent samples share a time.
"""

from ._check_knots import check_knots
from ._coincident_knots_warning import CoincidentKnotsWarning
from ._interpolate_at_time import interpolate_at_time
from ._knot_error import KnotError
from ._monotone_cubic import (
    MonotoneCubicSpline,
    monotone_cubic,
    monotone_cubic_evaluate,
    monotone_cubic_fit,
    monotone_cubic_locate,
    monotone_cubic_path,
)
from ._sample import Sample, as_knots
from ._spline_error import SplineError

__all__ = [
    "CoincidentKnotsWarning",
    "KnotError",
    "MonotoneCubicSpline",
    "Sample",
    "SplineError",
    "as_knots",
    "check_knots",
    "interpolate_at_time",
    "monotone_cubic",
    "monotone_cubic_evaluate",
    "monotone_cubic_fit",
    "monotone_cubic_locate",
    "monotone_cubic_path",
]

__version__ = "0.1.0"
