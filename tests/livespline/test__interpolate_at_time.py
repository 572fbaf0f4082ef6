"""Tests for scalar scrub interpolation."""

import math

import hypothesis
import hypothesis.strategies
import pytest
import torch

from livespline.testing.strategies import (
    monotone_samples,
    real_numbers,
    sorted_samples,
    steep_samples,
)


class TestInterpolateAtTimeDegenerate:
    def test_empty_returns_none(self):
        """Test that no samples gives None rather than a number."""
        from livespline import interpolate_at_time

        assert interpolate_at_time([], 0.0) is None
        assert interpolate_at_time([], 1e9) is None

    def test_single_sample(self):
        """Test that a single sample clamps every query to its value."""
        from livespline import interpolate_at_time

        samples = [(0.0, 5.0)]

        for time in [-10.0, 0.0, 0.5, 10.0]:
            assert interpolate_at_time(samples, time) == 5.0

    def test_two_samples_midpoint(self):
        """Test that two samples are joined by a straight line."""
        from livespline import interpolate_at_time

        samples = [(0.0, 0.0), (10.0, 100.0)]

        assert interpolate_at_time(samples, 5.0) == 50.0
        assert interpolate_at_time(samples, 2.5) == 25.0

    def test_two_coincident_samples(self):
        """Test that coincident samples never divide by zero."""
        from livespline import interpolate_at_time

        samples = [(5.0, 1.0), (5.0, 2.0)]

        assert interpolate_at_time(samples, 4.0) == 1.0
        assert interpolate_at_time(samples, 5.0) == 1.0
        assert interpolate_at_time(samples, 6.0) == 2.0
        assert interpolate_at_time(samples, math.nan) == 1.0

    def test_coincident_interior_samples(self):
        """Test a step between two samples sharing a time."""
        from livespline import interpolate_at_time

        samples = [(0.0, 0.0), (1.0, 1.0), (1.0, 3.0), (2.0, 4.0)]

        assert interpolate_at_time(samples, 1.0) == 3.0
        assert math.isfinite(interpolate_at_time(samples, 0.5))
        assert math.isfinite(interpolate_at_time(samples, 1.5))

    def test_accepts_sample_tuples(self):
        """Test that Sample and plain tuples are interchangeable."""
        from livespline import Sample, interpolate_at_time

        plain = [(0.0, 0.0), (1.0, 2.0), (3.0, 1.0)]
        named = [Sample(time, value) for time, value in plain]

        assert interpolate_at_time(plain, 1.7) == interpolate_at_time(
            named, 1.7
        )

    def test_does_not_mutate_samples(self):
        """Test that the sample sequence is left untouched."""
        from livespline import interpolate_at_time

        samples = [(2.0, 1.0), (0.0, 0.0), (1.0, 4.0)]
        copy = list(samples)

        interpolate_at_time(samples, 0.5)

        assert samples == copy


class TestInterpolateAtTimeSpline:
    def test_plateau_then_descent(self):
        """Test that a plateau forces flat tangents and no overshoot."""
        from livespline import interpolate_at_time

        samples = [(0.0, 0.0), (1.0, 1.0), (2.0, 1.0), (3.0, 0.0)]

        # m = [1, 0, 0, -1]; Hermite basis at u = 0.5
        assert interpolate_at_time(samples, 0.5) == 0.625
        assert interpolate_at_time(samples, 1.5) == 1.0
        assert interpolate_at_time(samples, 2.5) == 0.625

        for i in range(301):
            value = interpolate_at_time(samples, i / 100)
            assert 0.0 <= value <= 1.0

    def test_at_knots(self):
        """Test that querying at a sample time returns its value."""
        from livespline import interpolate_at_time

        samples = [(0.0, 3.0), (0.5, -1.0), (2.0, 2.0), (3.5, 2.5)]

        for time, value in samples:
            assert interpolate_at_time(samples, time) == value

    def test_idempotent(self):
        """Test that repeated calls give bit-identical results."""
        from livespline import interpolate_at_time

        samples = [(0.0, 0.1), (0.3, 0.7), (1.1, 0.2), (2.0, 0.9)]

        first = interpolate_at_time(samples, 0.77)
        second = interpolate_at_time(samples, 0.77)

        assert first == second

    def test_matches_tensor_evaluation(self):
        """Test agreement with the vectorized evaluation, bit for bit."""
        from livespline import (
            as_knots,
            interpolate_at_time,
            monotone_cubic_evaluate,
            monotone_cubic_fit,
        )

        samples = [(0.0, 0.0), (1.0, 0.1), (1.5, 4.0), (4.0, 4.5), (5.0, 1.0)]
        times, values = as_knots(samples)
        spline = monotone_cubic_fit(times, values)

        query = torch.linspace(-1.0, 6.0, 141, dtype=torch.float64)
        batched = monotone_cubic_evaluate(spline, query)

        for t, expected in zip(query.tolist(), batched.tolist()):
            assert interpolate_at_time(samples, t) == expected

    def test_infinite_queries_clamp(self):
        """Test that infinite queries clamp to the boundary values."""
        from livespline import interpolate_at_time

        samples = [(0.0, 1.0), (1.0, 2.0), (2.0, 0.5)]

        assert interpolate_at_time(samples, -math.inf) == 1.0
        assert interpolate_at_time(samples, math.inf) == 0.5

    def test_nan_query_propagates(self):
        """Test that a NaN query gives NaN on a proper segment."""
        from livespline import interpolate_at_time

        samples = [(0.0, 1.0), (1.0, 2.0), (2.0, 0.5)]

        assert math.isnan(interpolate_at_time(samples, math.nan))


class TestInterpolateAtTimeValidate:
    def test_validate_rejects_decreasing_times(self):
        """Test that validate=True raises KnotError for unsorted samples."""
        from livespline import KnotError, interpolate_at_time

        samples = [(0.0, 0.0), (2.0, 1.0), (1.0, 2.0)]

        with pytest.raises(KnotError):
            interpolate_at_time(samples, 0.5, validate=True)

    def test_validate_warns_on_coincident_times(self):
        """Test that validate=True warns at the calling line."""
        from livespline import CoincidentKnotsWarning, interpolate_at_time

        samples = [(0.0, 0.0), (1.0, 1.0), (1.0, 2.0)]

        with pytest.warns(CoincidentKnotsWarning) as record:
            interpolate_at_time(samples, 0.5, validate=True)

        (warning,) = [
            w for w in record if w.category is CoincidentKnotsWarning
        ]
        assert warning.filename == __file__

    def test_trusts_caller_by_default(self):
        """Test that unsorted samples are not rejected without validate."""
        from livespline import interpolate_at_time

        samples = [(0.0, 0.0), (2.0, 1.0), (1.0, 2.0)]

        assert interpolate_at_time(samples, -1.0) == 0.0


class TestInterpolateAtTimeProperties:
    @hypothesis.settings(deadline=None)
    @hypothesis.given(samples=sorted_samples(min_size=1))
    def test_endpoints_exact(self, samples):
        """Test that the first and last sample times return their values."""
        from livespline import interpolate_at_time

        first, last = samples[0], samples[-1]

        assert interpolate_at_time(samples, first.time) == first.value
        if len(samples) > 1:
            assert interpolate_at_time(samples, last.time) == last.value

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        samples=sorted_samples(min_size=1),
        offset=real_numbers(0.0, 1e6),
    )
    def test_clamp_law(self, samples, offset):
        """Test that queries outside the sample range clamp."""
        from livespline import interpolate_at_time

        first, last = samples[0], samples[-1]

        assert interpolate_at_time(samples, first.time - offset) == first.value
        if len(samples) > 1:
            assert (
                interpolate_at_time(samples, last.time + offset) == last.value
            )

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        samples=sorted_samples(min_size=2, max_size=2),
        fraction=real_numbers(0.0, 1.0),
    )
    def test_linear_law(self, samples, fraction):
        """Test the exact linear law for two samples."""
        from livespline import interpolate_at_time

        (t0, v0), (t1, v1) = samples
        time = t0 + (t1 - t0) * fraction
        hypothesis.assume(t0 < time < t1)

        expected = v0 + (v1 - v0) * ((time - t0) / (t1 - t0))

        assert interpolate_at_time(samples, time) == expected

    @hypothesis.settings(deadline=None)
    @hypothesis.given(samples=sorted_samples(min_size=3))
    def test_interior_knots_exact(self, samples):
        """Test that the curve passes through every interior sample."""
        from livespline import interpolate_at_time

        for time, value in samples[1:-1]:
            assert interpolate_at_time(samples, time) == value

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        samples=monotone_samples(increasing=True),
        fractions=hypothesis.strategies.lists(
            real_numbers(0.0, 1.0), min_size=2, max_size=20
        ),
    )
    def test_monotone_increasing(self, samples, fractions):
        """Test that non-decreasing samples give a non-decreasing curve."""
        from livespline import interpolate_at_time

        t0, t1 = samples[0].time, samples[-1].time
        times = sorted(t0 + (t1 - t0) * f for f in fractions)
        values = [interpolate_at_time(samples, t) for t in times]

        scale = 1.0 + max(abs(sample.value) for sample in samples)
        for a, b in zip(values[:-1], values[1:]):
            assert b >= a - 1e-9 * scale

        for value in values:
            assert samples[0].value - 1e-9 * scale <= value
            assert value <= samples[-1].value + 1e-9 * scale

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        samples=monotone_samples(increasing=False),
        fractions=hypothesis.strategies.lists(
            real_numbers(0.0, 1.0), min_size=2, max_size=20
        ),
    )
    def test_monotone_decreasing(self, samples, fractions):
        """Test that non-increasing samples give a non-increasing curve."""
        from livespline import interpolate_at_time

        t0, t1 = samples[0].time, samples[-1].time
        times = sorted(t0 + (t1 - t0) * f for f in fractions)
        values = [interpolate_at_time(samples, t) for t in times]

        scale = 1.0 + max(abs(sample.value) for sample in samples)
        for a, b in zip(values[:-1], values[1:]):
            assert b <= a + 1e-9 * scale

    @hypothesis.settings(deadline=None)
    @hypothesis.given(
        samples=steep_samples(),
        fractions=hypothesis.strategies.lists(
            real_numbers(0.0, 1.0), min_size=1, max_size=10
        ),
    )
    def test_matches_float_reference(self, samples, fractions):
        """Test bit-for-bit agreement with the float construction."""
        from livespline import interpolate_at_time
        from livespline.testing import reference_interpolate_at_time

        t0, t1 = samples[0].time, samples[-1].time
        times = [t0 + (t1 - t0) * f for f in fractions]
        times += [sample.time for sample in samples]

        for time in times:
            assert interpolate_at_time(
                samples, time
            ) == reference_interpolate_at_time(samples, time)
