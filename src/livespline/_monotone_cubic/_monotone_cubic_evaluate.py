"""Monotone cubic spline evaluation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

if TYPE_CHECKING:
    from ._monotone_cubic import MonotoneCubicSpline


def monotone_cubic_evaluate(
    spline: MonotoneCubicSpline,
    t: Tensor,
) -> Tensor:
    """
    Evaluate a monotone cubic spline at query times.

    Parameters
    ----------
    spline : MonotoneCubicSpline
        Fitted spline from monotone_cubic_fit
    t : Tensor
        Query times, shape (*query_shape) or scalar

    Returns
    -------
    y : Tensor
        Interpolated values, shape (*query_shape)

    Notes
    -----
    Queries at or before the first knot return the first value; otherwise
    queries at or after the last knot return the last value. Two knots are
    joined by a straight line. Three or more knots are evaluated with the
    cubic Hermite basis on the segment [knots[lo], knots[lo+1]] that
    contains the query.
    """
    knots = spline.knots
    values = spline.y
    n = knots.shape[0]

    # Check if t is scalar (0-d tensor)
    is_scalar = t.dim() == 0
    if is_scalar:
        t = t.unsqueeze(0)

    query_shape = t.shape
    t_flat = t.flatten().to(dtype=knots.dtype)

    if n == 1:
        y = values[0].expand_as(t_flat)
    elif n == 2:
        y = _linear(knots, values, t_flat)
    else:
        y = _hermite(spline, t_flat)

    # Boundary clamps, the first knot taking precedence
    y = torch.where(t_flat >= knots[-1], values[-1], y)
    y = torch.where(t_flat <= knots[0], values[0], y)

    y = y.view(*query_shape)

    if is_scalar:
        y = y.squeeze(0)

    return y


def monotone_cubic_locate(knots: Tensor, t: Tensor) -> Tensor:
    """
    Find the segment containing each query time.

    Parameters
    ----------
    knots : Tensor
        Sample times, shape (n,) with n >= 2
    t : Tensor
        Query times, shape (m,)

    Returns
    -------
    lo : Tensor
        Index of the left knot, shape (m,), in [0, n-2], such that
        knots[lo] <= t < knots[lo+1] for queries inside the domain.
        Among equal knots the rightmost one is chosen.
    """
    lo = torch.searchsorted(knots, t, right=True) - 1
    lo = torch.clamp(lo, 0, knots.shape[0] - 2)

    # NaN queries fall into the first segment
    return torch.where(torch.isnan(t), torch.zeros_like(lo), lo)


def hermite_segment(
    u: Tensor,
    y_lo: Tensor,
    y_hi: Tensor,
    m_lo: Tensor,
    m_hi: Tensor,
    h: Tensor,
) -> Tensor:
    """
    Evaluate one cubic Hermite segment at normalized parameters u in [0, 1].

    p(u) = H_00*y_lo + H_10*h*m_lo + H_01*y_hi + H_11*h*m_hi
    """
    u2 = u * u
    u3 = u2 * u

    # H_00(u) = (1 + 2u)(1-u)^2 = 2u^3 - 3u^2 + 1
    # H_10(u) = u(1-u)^2 = u^3 - 2u^2 + u
    # H_01(u) = u^2(3-2u) = -2u^3 + 3u^2
    # H_11(u) = u^2(u-1) = u^3 - u^2
    h_00 = 2 * u3 - 3 * u2 + 1
    h_10 = u3 - 2 * u2 + u
    h_01 = -2 * u3 + 3 * u2
    h_11 = u3 - u2

    return h_00 * y_lo + h_10 * h * m_lo + h_01 * y_hi + h_11 * h * m_hi


def _linear(knots: Tensor, values: Tensor, t: Tensor) -> Tensor:
    dt = knots[1] - knots[0]

    if dt == 0:
        return values[0].expand_as(t)

    u = (t - knots[0]) / dt

    return values[0] + (values[1] - values[0]) * u


def _hermite(spline: MonotoneCubicSpline, t: Tensor) -> Tensor:
    knots = spline.knots
    values = spline.y
    tangents = spline.dydx

    lo = monotone_cubic_locate(knots, t)
    hi = lo + 1

    h = spline.widths[lo]
    zero_width = h == 0
    safe_h = torch.where(zero_width, torch.ones_like(h), h)

    u = (t - knots[lo]) / safe_h

    y = hermite_segment(
        u, values[lo], values[hi], tangents[lo], tangents[hi], h
    )

    # Coincident knots: the left value
    return torch.where(zero_width, values[lo], y)
