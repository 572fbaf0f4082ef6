"""Monotone cubic (Fritsch-Carlson) spline module."""

from ._monotone_cubic import MonotoneCubicSpline, monotone_cubic
from ._monotone_cubic_evaluate import (
    monotone_cubic_evaluate,
    monotone_cubic_locate,
)
from ._monotone_cubic_fit import monotone_cubic_fit
from ._monotone_cubic_path import monotone_cubic_path

__all__ = [
    "MonotoneCubicSpline",
    "monotone_cubic",
    "monotone_cubic_evaluate",
    "monotone_cubic_fit",
    "monotone_cubic_locate",
    "monotone_cubic_path",
]
