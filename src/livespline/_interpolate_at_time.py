"""Scrub-cursor interpolation at a single time."""

from typing import Optional, Sequence

import torch

from ._check_knots import check_knots
from ._monotone_cubic import monotone_cubic_evaluate, monotone_cubic_fit
from ._sample import SampleLike, as_knots


def interpolate_at_time(
    samples: Sequence[SampleLike],
    time: float,
    *,
    validate: bool = False,
) -> Optional[float]:
    """Value of the monotone cubic spline through ``samples`` at ``time``.

    Uses the same construction as ``monotone_cubic_path``, so the returned
    value lies on the drawn curve.

    Parameters
    ----------
    samples : Sequence[Sample or (float, float)]
        Samples sorted by non-decreasing time. The sequence is not modified.
    time : float
        Query time.
    validate : bool, optional
        Check the sample order first. Default is False, which trusts the
        caller; unsorted samples then give an unspecified curve.

    Returns
    -------
    value : float or None
        Interpolated value, the first or last sample value for queries
        outside the sample range, or None if there are no samples.

    Raises
    ------
    KnotError
        If ``validate`` is set and sample times decrease.

    Warns
    -----
    CoincidentKnotsWarning
        If ``validate`` is set and adjacent samples share a time.

    Examples
    --------
    >>> interpolate_at_time([(0.0, 0.0), (10.0, 100.0)], 5.0)
    50.0
    >>> interpolate_at_time([], 5.0) is None
    True
    """
    if len(samples) == 0:
        return None

    times, values = as_knots(samples, dtype=torch.float64)

    if validate:
        check_knots(times, stacklevel=3)

    spline = monotone_cubic_fit(times, values)

    t = torch.tensor(float(time), dtype=torch.float64)

    return monotone_cubic_evaluate(spline, t).item()
