"""Hypothesis strategies for sample sequences."""

from ._monotone_samples import monotone_samples
from ._real_numbers import real_numbers
from ._sorted_samples import sorted_samples
from ._steep_samples import steep_samples

__all__ = [
    "monotone_samples",
    "real_numbers",
    "sorted_samples",
    "steep_samples",
]
