"""
Planar intersection of two circles
"""

__all__ = ['average_points', 'intersect_circles']

import math
from typing import Tuple

from pydantic import FiniteFloat

from geotriangulation._const import DOMAIN_TOLERANCE
from geotriangulation.coordinates import LocalPoint, PlanarPoint
from geotriangulation.exceptions import Coincident, Contained, MalformedInput, NoIntersection
from geotriangulation.utils.validation import validate_finite


@validate_finite
def intersect_circles(
    x1: FiniteFloat,
    y1: FiniteFloat,
    x2: FiniteFloat,
    y2: FiniteFloat,
    r1: FiniteFloat,
    r2: FiniteFloat,
    height: FiniteFloat = 0.0,
) -> Tuple[LocalPoint, LocalPoint]:
    """
    Find the two points where two circles cross.

    The order of the result is fixed: the first point lies to the left of the
    direction from the first center to the second (the direction rotated by +90°),
    the second point to its right. Tangent circles, including circles that miss or
    nest by no more than round-off, return the same point twice.

    Args:
        x1, y1:
            Center of the first circle

        x2, y2:
            Center of the second circle

        r1, r2:
            The radii of the first and second circle

        height:
            The z value assigned to both returned points

    Returns:
        Tuple of two LocalPoints

    Raises:
        NoIntersection if the circles are too far apart
        Contained if one circle lies inside the other
        Coincident if the circles share a center and radius
    """
    if r1 < 0 or r2 < 0:
        raise MalformedInput(f'Circle radii must be non-negative, got {r1!r} and {r2!r}')

    dx = x2 - x1
    dy = y2 - y1
    distance = math.sqrt(dx * dx + dy * dy)

    # Circles that touch within round-off are treated as tangent
    slack = DOMAIN_TOLERANCE * max(r1 + r2, 1.0)

    if distance > r1 + r2 + slack:
        raise NoIntersection(
            f'Circles do not intersect: centers are {distance} apart, radii sum to {r1 + r2}'
        )

    if distance < abs(r1 - r2) - slack:
        raise Contained(
            f'Circles do not intersect: one lies inside the other '
            f'(centers {distance} apart, radii {r1} and {r2})'
        )

    if distance == 0:
        raise Coincident('Circles coincide: infinitely many intersection points')

    a = (r1 ** 2 - r2 ** 2 + distance ** 2) / (2 * distance)
    a = max(-r1, min(r1, a))
    h = math.sqrt(r1 ** 2 - a ** 2)

    x_mid = x1 + a * dx / distance
    y_mid = y1 + a * dy / distance

    return (
        LocalPoint(x_mid - h * dy / distance, y_mid + h * dx / distance, height),
        LocalPoint(x_mid + h * dy / distance, y_mid - h * dx / distance, height),
    )


def average_points(point1: LocalPoint, point2: LocalPoint) -> Tuple[PlanarPoint, float]:
    """
    The horizontal midpoint of two points and the horizontal distance between them.

    Args:
        point1:
            A point

        point2:
            A second point

    Returns:
        (PlanarPoint midpoint, float separation)
    """
    return (
        PlanarPoint((point1.x + point2.x) / 2, (point1.y + point2.y) / 2),
        point1.horizontal_distance_to(point2),
    )
