"""Polyline sampling of a monotone cubic spline for drawing."""

from typing import Tuple

import torch
from torch import Tensor

from .._constants import DEFAULT_POINTS_PER_SEGMENT
from ._monotone_cubic import MonotoneCubicSpline
from ._monotone_cubic_evaluate import hermite_segment


def monotone_cubic_path(
    spline: MonotoneCubicSpline,
    points_per_segment: int = DEFAULT_POINTS_PER_SEGMENT,
) -> Tuple[Tensor, Tensor]:
    """
    Sample a monotone cubic spline as the polyline a renderer draws.

    Parameters
    ----------
    spline : MonotoneCubicSpline
        Fitted spline from monotone_cubic_fit
    points_per_segment : int, optional
        Number of points per segment, starting at the segment's left knot.
        Default is 16.

    Returns
    -------
    times : Tensor
        Path times, shape (n_points,)
    values : Tensor
        Path values, shape (n_points,)

    Raises
    ------
    ValueError
        If points_per_segment < 1.

    Notes
    -----
    One knot yields a single point and two knots yield the two endpoints of
    a straight line. Otherwise each segment is sampled at
    u = 0, 1/k, ..., (k-1)/k through the same Hermite basis used by
    monotone_cubic_evaluate, and the last knot closes the path, so every
    knot lies on the path with its exact value.
    """
    if points_per_segment < 1:
        raise ValueError(
            f"points_per_segment must be at least 1, got {points_per_segment}"
        )

    knots = spline.knots
    values = spline.y
    tangents = spline.dydx
    n = knots.shape[0]

    if n <= 2:
        return knots.clone(), values.clone()

    n_segments = n - 1

    u = (
        torch.arange(points_per_segment, dtype=knots.dtype, device=knots.device)
        / points_per_segment
    )

    # (n_segments, points_per_segment)
    h = spline.widths.unsqueeze(-1)
    u = u.unsqueeze(0).expand(n_segments, -1)

    path_times = knots[:-1].unsqueeze(-1) + u * h
    path_values = hermite_segment(
        u,
        values[:-1].unsqueeze(-1),
        values[1:].unsqueeze(-1),
        tangents[:-1].unsqueeze(-1),
        tangents[1:].unsqueeze(-1),
        h,
    )

    # A zero-width segment contributes its left value only
    path_values = torch.where(
        h == 0, values[:-1].unsqueeze(-1), path_values
    )

    path_times = torch.cat([path_times.flatten(), knots[-1:]])
    path_values = torch.cat([path_values.flatten(), values[-1:]])

    return path_times, path_values
