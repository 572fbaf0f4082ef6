import warnings

import torch
from torch import Tensor

from ._coincident_knots_warning import CoincidentKnotsWarning
from ._knot_error import KnotError


def check_knots(knots: Tensor, *, stacklevel: int = 2) -> None:
    """
    Check that knots are sorted by non-decreasing time.

    Parameters
    ----------
    knots : Tensor
        Sample times, shape (n,).
    stacklevel : int, optional
        Passed to ``warnings.warn``. Default is 2, the caller of this
        function.

    Raises
    ------
    KnotError
        If any knot is smaller than its predecessor.

    Warns
    -----
    CoincidentKnotsWarning
        If two adjacent knots are equal.
    """
    if knots.shape[0] < 2:
        return

    widths = knots[1:] - knots[:-1]

    if torch.any(widths < 0):
        index = int(torch.nonzero(widths < 0)[0].item())
        raise KnotError(
            f"Knots must be non-decreasing, got {knots[index].item()} "
            f"followed by {knots[index + 1].item()} at index {index + 1}"
        )

    if torch.any(widths == 0):
        warnings.warn(
            f"{int((widths == 0).sum().item())} zero-width interval(s); "
            f"samples sharing a time are interpolated as a step.",
            CoincidentKnotsWarning,
            stacklevel=stacklevel,
        )
