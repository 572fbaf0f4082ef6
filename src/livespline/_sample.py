"""Time-ordered samples and their conversion to knot tensors."""

from typing import NamedTuple, Optional, Sequence, Tuple, Union

import torch
from torch import Tensor


class Sample(NamedTuple):
    """A single knot of the spline.

    Attributes
    ----------
    time : float
        Sample time. Sequences of samples are sorted by non-decreasing time.
    value : float
        Sample value at ``time``.
    """

    time: float
    value: float


SampleLike = Union[Sample, Tuple[float, float]]


def as_knots(
    samples: Sequence[SampleLike],
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Convert a sequence of samples to knot tensors.

    The samples are taken in the order given; nothing is sorted or dropped.

    Parameters
    ----------
    samples : Sequence[Sample or (float, float)]
        Samples in time order.
    dtype : torch.dtype, optional
        Floating point type of the result. Default is ``torch.float64``.
    device : torch.device, optional
        Device of the result.

    Returns
    -------
    times : Tensor
        Sample times, shape (n,).
    values : Tensor
        Sample values, shape (n,).
    """
    times = torch.tensor(
        [float(sample[0]) for sample in samples], dtype=dtype, device=device
    )
    values = torch.tensor(
        [float(sample[1]) for sample in samples], dtype=dtype, device=device
    )

    return times, values
