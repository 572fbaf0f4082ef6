class SplineError(Exception):
    """Base exception for monotone cubic spline operations."""

    pass
