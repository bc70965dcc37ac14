"""Vector and distance helpers for galactic coordinates."""

import math

Vector = tuple[float, float, float]


def euclidean_distance(a: Vector, b: Vector) -> float:
    """Calculate straight-line distance between two 3D points.

    Args:
        a: First point (x, y, z)
        b: Second point (x, y, z)

    Returns:
        Euclidean distance between the two points

    Examples:
        >>> euclidean_distance((0, 0, 0), (3, 4, 0))
        5.0
    """
    return math.sqrt((b[0] - a[0]) ** 2 + (b[1] - a[1]) ** 2 + (b[2] - a[2]) ** 2)


def add(a: Vector, b: Vector) -> Vector:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def subtract(a: Vector, b: Vector) -> Vector:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(v: Vector, factor: float) -> Vector:
    return (v[0] * factor, v[1] * factor, v[2] * factor)


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def norm(v: Vector) -> float:
    return math.sqrt(dot(v, v))


def quadratic_bezier(start: Vector, control: Vector, end: Vector, t: float) -> Vector:
    """Evaluate a quadratic Bézier curve at parameter t in [0, 1].

    Examples:
        >>> quadratic_bezier((0, 0, 0), (1, 2, 0), (2, 0, 0), 0.5)
        (1.0, 1.0, 0.0)
    """
    u = 1.0 - t
    return (
        u * u * start[0] + 2 * u * t * control[0] + t * t * end[0],
        u * u * start[1] + 2 * u * t * control[1] + t * t * end[1],
        u * u * start[2] + 2 * u * t * control[2] + t * t * end[2],
    )


def project_onto_segment(point: Vector, a: Vector, b: Vector) -> tuple[float, float]:
    """Project a point onto the line through segment a→b.

    Args:
        point: Point to project
        a: Segment start
        b: Segment end

    Returns:
        Tuple of (along, deviation): signed distance from ``a`` along the
        segment direction, and perpendicular distance from the line.
        A degenerate segment returns (0.0, distance from a).
    """
    direction = subtract(b, a)
    length = norm(direction)
    offset = subtract(point, a)
    if length == 0:
        return 0.0, norm(offset)

    along = dot(offset, direction) / length
    foot = scale(direction, along / length)
    return along, norm(subtract(offset, foot))
