"""Monotone cubic (Fritsch-Carlson) spline."""

from typing import Callable

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._monotone_cubic_evaluate import monotone_cubic_evaluate
from ._monotone_cubic_fit import monotone_cubic_fit


@tensorclass
class MonotoneCubicSpline:
    """Monotone piecewise cubic Hermite spline through time-ordered samples.

    The spline preserves the local monotonic trend of the samples and never
    overshoots them. Queries outside the sample range clamp to the boundary
    values. With exactly two samples the curve is a straight line.

    Attributes
    ----------
    knots : Tensor
        Sample times, shape (n,). Non-decreasing.
    y : Tensor
        Sample values, shape (n,).
    widths : Tensor
        Interval widths knots[i+1] - knots[i], shape (n-1,). May be zero.
    dydx : Tensor
        Fritsch-Carlson limited tangents at the knots, shape (n,).
    """

    knots: Tensor
    y: Tensor
    widths: Tensor
    dydx: Tensor


def monotone_cubic(
    times: torch.Tensor,
    values: torch.Tensor,
) -> Callable[[torch.Tensor], torch.Tensor]:
    """Create a monotone cubic interpolator from samples.

    The tangents are computed once; the returned function only locates
    segments and evaluates the Hermite basis, so it can be called every
    frame while the samples stay the same.

    Parameters
    ----------
    times : Tensor
        Sample times, shape (n,). Expected to be non-decreasing.
    values : Tensor
        Sample values, shape (n,).

    Returns
    -------
    spline : Callable[[Tensor], Tensor]
        Function that evaluates the spline at given times.

    Examples
    --------
    >>> import torch
    >>> times = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
    >>> values = torch.tensor([0.0, 1.0, 1.0, 0.0], dtype=torch.float64)
    >>> f = monotone_cubic(times, values)
    >>> f(torch.tensor(1.5, dtype=torch.float64))
    tensor(1., dtype=torch.float64)
    """
    fitted = monotone_cubic_fit(times, values)
    return lambda t: monotone_cubic_evaluate(fitted, t)
