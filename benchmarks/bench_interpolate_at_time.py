"""Benchmarks for scrub interpolation.

This module times one scrub query per frame, the way a cursor drag calls
interpolate_at_time, against fitting once and evaluating the memoized spline.
"""

from __future__ import annotations

import math
import time
from typing import Any, Callable

import numpy as np
import torch

from livespline import (
    Sample,
    interpolate_at_time,
    monotone_cubic_evaluate,
    monotone_cubic_fit,
    monotone_cubic_path,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(name: str, result: dict[str, float]) -> None:
    """Print benchmark result."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  Time: {format_time(result['mean'])} +/- {format_time(result['std'])}"
    )


def generate_samples(num_samples: int) -> list[Sample]:
    """Noisy, slowly rising series sampled once per second."""
    generator = torch.Generator().manual_seed(0)
    noise = torch.randn(num_samples, generator=generator, dtype=torch.float64)

    return [
        Sample(float(i), math.sin(i / 10) + 0.01 * i + 0.1 * noise[i].item())
        for i in range(num_samples)
    ]


def main() -> None:
    for num_samples in [10, 100, 1000]:
        samples = generate_samples(num_samples)
        query = num_samples / 2 + 0.25

        print_result(
            f"interpolate_at_time, {num_samples} samples",
            benchmark(interpolate_at_time, samples, query),
        )

        times = torch.tensor([s.time for s in samples], dtype=torch.float64)
        values = torch.tensor([s.value for s in samples], dtype=torch.float64)
        spline = monotone_cubic_fit(times, values)

        print_result(
            f"monotone_cubic_evaluate (fitted once), {num_samples} samples",
            benchmark(
                monotone_cubic_evaluate,
                spline,
                torch.tensor(query, dtype=torch.float64),
            ),
        )

        print_result(
            f"monotone_cubic_path, {num_samples} samples",
            benchmark(monotone_cubic_path, spline),
        )


if __name__ == "__main__":
    main()
