"""Monotone cubic fitting using the Fritsch-Carlson algorithm."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Tuple

import torch
from torch import Tensor

from .._constants import FRITSCH_CARLSON_RADIUS
from .._knot_error import KnotError

if TYPE_CHECKING:
    from ._monotone_cubic import MonotoneCubicSpline


def monotone_cubic_fit(
    times: Tensor,
    values: Tensor,
) -> MonotoneCubicSpline:
    """
    Fit a monotone cubic spline to samples using the Fritsch-Carlson algorithm.

    Parameters
    ----------
    times : Tensor
        Sample times, shape (n,). Expected to be non-decreasing; this is not
        checked (see ``check_knots``).
    values : Tensor
        Sample values, shape (n,).

    Returns
    -------
    MonotoneCubicSpline
        Fitted spline.

    Raises
    ------
    KnotError
        If there are no samples.
    ValueError
        If ``times`` and ``values`` are not 1-D tensors of equal length.

    Notes
    -----
    1. Compute interval widths h[i] and secants delta[i] = dv / h[i], with
       delta[i] = 0 for zero-width intervals
    2. Endpoint tangents take their adjacent secant; interior tangents
       average the two adjacent secants, or are 0 where the secants differ
       in sign or either is 0
    3. Limit tangents so that alpha^2 + beta^2 <= 9 on every interval,
       visiting intervals left to right

    Two samples keep the secant at both ends; they are evaluated as a line.

    References
    ----------
    Fritsch, F. N. and Carlson, R. E. (1980). "Monotone Piecewise Cubic
    Interpolation". SIAM Journal on Numerical Analysis. 17 (2): 238-246.
    """
    if times.dim() != 1 or values.dim() != 1:
        raise ValueError(
            f"times and values must be 1-D, got shapes "
            f"{tuple(times.shape)} and {tuple(values.shape)}"
        )
    if times.shape[0] != values.shape[0]:
        raise ValueError(
            f"times and values must have the same length, got "
            f"{times.shape[0]} and {values.shape[0]}"
        )

    n = times.shape[0]

    if n < 1:
        raise KnotError("Need at least 1 sample, got 0")

    widths, secants = _secants(times, values)

    if n == 1:
        tangents = torch.zeros_like(values)
    elif n == 2:
        tangents = torch.cat([secants, secants])
    else:
        tangents = _initial_tangents(secants)
        tangents = _limit_tangents(tangents, secants)

    from ._monotone_cubic import MonotoneCubicSpline

    return MonotoneCubicSpline(
        knots=times,
        y=values,
        widths=widths,
        dydx=tangents,
        batch_size=[],
    )


def _secants(times: Tensor, values: Tensor) -> Tuple[Tensor, Tensor]:
    """
    Compute interval widths and secant slopes.

    Returns
    -------
    widths : Tensor
        h[i] = times[i+1] - times[i], shape (n-1,)
    secants : Tensor
        delta[i] = (values[i+1] - values[i]) / h[i], 0 where h[i] == 0
    """
    widths = times[1:] - times[:-1]

    zero_width = widths == 0
    safe_widths = torch.where(zero_width, torch.ones_like(widths), widths)

    secants = torch.where(
        zero_width,
        torch.zeros_like(widths),
        (values[1:] - values[:-1]) / safe_widths,
    )

    return widths, secants


def _initial_tangents(secants: Tensor) -> Tensor:
    """
    Initial tangent estimates from adjacent secants.

    Parameters
    ----------
    secants : Tensor
        Secants, shape (n-1,) with n >= 3

    Returns
    -------
    tangents : Tensor
        Tangents, shape (n,)
    """
    left = secants[:-1]
    right = secants[1:]

    # A sign change or a flat neighbour forces a flat tangent
    interior = torch.where(
        left * right <= 0,
        torch.zeros_like(left),
        (left + right) / 2,
    )

    return torch.cat([secants[:1], interior, secants[-1:]])


def _limit_tangents(tangents: Tensor, secants: Tensor) -> Tensor:
    """
    Limit tangents to ensure monotonicity (Fritsch-Carlson condition).

    The condition alpha^2 + beta^2 <= 9 must hold where:
    alpha = m[i] / delta[i]
    beta = m[i+1] / delta[i]

    Intervals are processed in increasing order. An interval rewrites the
    tangent it shares with its predecessor, so the last write wins.

    Parameters
    ----------
    tangents : Tensor
        Tangents, shape (n,)
    secants : Tensor
        Secants, shape (n-1,)

    Returns
    -------
    tangents : Tensor
        Limited tangents
    """
    # Without autograd the pass runs on Python floats, which round exactly
    # like float64 tensors but need no host sync per interval
    if tangents.dtype == torch.float64 and not tangents.requires_grad:
        return tangents.new_tensor(
            _limit_slopes(tangents.tolist(), secants.tolist())
        )

    # No in-place writes: the divisions below save m[i] for backward
    m = list(tangents.unbind(0))
    radius = tangents.new_tensor(FRITSCH_CARLSON_RADIUS)
    flat = (secants == 0).tolist()

    for i, delta in enumerate(secants.unbind(0)):
        if flat[i]:
            m[i] = torch.zeros_like(delta)
            m[i + 1] = torch.zeros_like(delta)
            continue

        alpha = m[i] / delta
        beta = m[i + 1] / delta
        tau = alpha * alpha + beta * beta

        if tau > radius * radius:
            # A Python number over a tensor is computed as a reciprocal
            # times that number, which is not correctly rounded
            scale = torch.div(radius, torch.sqrt(tau))
            m[i] = scale * alpha * delta
            m[i + 1] = scale * beta * delta

    return torch.stack(m)


def _limit_slopes(m: List[float], secants: List[float]) -> List[float]:
    radius_squared = FRITSCH_CARLSON_RADIUS * FRITSCH_CARLSON_RADIUS

    for i, delta in enumerate(secants):
        if delta == 0:
            m[i] = 0.0
            m[i + 1] = 0.0
            continue

        alpha = m[i] / delta
        beta = m[i + 1] / delta
        tau = alpha * alpha + beta * beta

        if tau > radius_squared:
            scale = FRITSCH_CARLSON_RADIUS / math.sqrt(tau)
            m[i] = scale * alpha * delta
            m[i + 1] = scale * beta * delta

    return m
