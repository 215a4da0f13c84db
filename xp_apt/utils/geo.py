"""
Geometry helpers shared by the binders.

Unit conversions and course arithmetic. Position based calculations live
on NavPoint and BoundingRect.
"""

EARTH_RADIUS_METER = 6371000.0

# Roughly 100 meters expressed in degrees of latitude
POS_EPSILON_100M = 0.0009

# One arc minute, used to inflate single point bounding rectangles
MIN_RECT_MARGIN_DEG = 1.0 / 60.0


def meter_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters / 0.3048


def normalize_course(course: float) -> float:
    """
    Normalize a course into the range [0, 360).

    Args:
        course: Course in degrees, any value

    Returns:
        Equivalent course between 0 (inclusive) and 360 (exclusive)
    """
    course = course % 360.0
    # -0.0 % 360 and tiny negative values can round up to 360.0
    if course >= 360.0:
        course -= 360.0
    return course


def opposed_course(course: float) -> float:
    """Return the reciprocal course, normalized into [0, 360)."""
    return normalize_course(course + 180.0)
