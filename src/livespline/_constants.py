"""Constants for the monotone cubic construction."""

# Fritsch-Carlson monotonicity region: alpha^2 + beta^2 <= radius^2
FRITSCH_CARLSON_RADIUS: float = 3.0

# Polyline resolution used when sampling a spline for drawing
DEFAULT_POINTS_PER_SEGMENT: int = 16
