"""Testing helpers for livespline."""

from . import strategies
from .reference_utils import (
    reference_interpolate_at_time,
    reference_tangents,
)

__all__ = [
    "reference_interpolate_at_time",
    "reference_tangents",
    "strategies",
]
