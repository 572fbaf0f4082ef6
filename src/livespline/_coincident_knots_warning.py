class CoincidentKnotsWarning(UserWarning):
    """Adjacent samples share a time; their interval has zero width."""

    pass
