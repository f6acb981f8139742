"""
Conversion between geodetic (latitude, longitude, height) and geocentric Cartesian
coordinates on the supported reference ellipsoids
"""

__all__ = ['cartesian_to_geodetic', 'geodetic_to_cartesian']

import math
from typing import Union

from geotriangulation._const import (
    GEODETIC_TOLERANCE, MAX_GEODETIC_ITERATIONS, POLAR_AXIS_TOLERANCE
)
from geotriangulation.angles import AngleLike, to_radians
from geotriangulation.coordinates import CartesianPoint, GeodeticPoint
from geotriangulation.datums import Datum, ellipsoid_params
from geotriangulation.exceptions import ConvergenceFailure
from geotriangulation.utils.functions import checked_asin
from geotriangulation.utils.validation import finite_float


def geodetic_to_cartesian(
    latitude: AngleLike,
    longitude: AngleLike,
    datum: Union[Datum, str],
    height: float = 0.0,
) -> CartesianPoint:
    """
    Convert geodetic coordinates to geocentric Cartesian coordinates (closed form).

    Args:
        latitude:
            Geodetic latitude, in radians (or a Degrees value)

        longitude:
            Geodetic longitude, in radians (or a Degrees value)

        datum:
            The datum whose ellipsoid the coordinates refer to

        height:
            Height above the ellipsoid, in meters

    Returns:
        CartesianPoint in the same datum
    """
    datum = Datum.resolve(datum)
    lat = to_radians(latitude, 'latitude')
    lon = to_radians(longitude, 'longitude')
    height = finite_float(height, 'height')

    a, f = ellipsoid_params(datum)
    e2 = 2 * f - f * f
    sin_lat = math.sin(lat)
    N = a / math.sqrt(1 - e2 * sin_lat * sin_lat)

    return CartesianPoint(
        (N + height) * math.cos(lat) * math.cos(lon),
        (N + height) * math.cos(lat) * math.sin(lon),
        ((1 - e2) * N + height) * sin_lat,
        datum,
    )


def cartesian_to_geodetic(
    x: float,
    y: float,
    z: float,
    datum: Union[Datum, str],
) -> GeodeticPoint:
    """
    Convert geocentric Cartesian coordinates to geodetic coordinates.

    Latitude is found by fixed-point iteration on the angle between the geocentric
    radius vector and the ellipsoid normal (GOST 32453-2017, algorithm 5.1.2). Points
    on the rotation axis are resolved directly to a pole with longitude 0.

    Args:
        x:
            Geocentric X, in meters

        y:
            Geocentric Y, in meters

        z:
            Geocentric Z, in meters

        datum:
            The datum whose ellipsoid the result should refer to

    Returns:
        GeodeticPoint, longitude normalized to [0, 2pi)

    Raises:
        ConvergenceFailure if the iteration exceeds MAX_GEODETIC_ITERATIONS
    """
    datum = Datum.resolve(datum)
    x, y, z = finite_float(x, 'x'), finite_float(y, 'y'), finite_float(z, 'z')

    a, f = ellipsoid_params(datum)
    e2 = 2 * f - f * f
    p = math.sqrt(x * x + y * y)

    if p < POLAR_AXIS_TOLERANCE:
        lat = math.pi / 2 if z >= 0 else -math.pi / 2
        sin_lat = math.sin(lat)
        N = a / math.sqrt(1 - e2 * sin_lat * sin_lat)
        return GeodeticPoint(lat, 0.0, z * sin_lat - N * (1 - e2 * sin_lat * sin_lat), datum)

    lon = math.atan2(y, x)
    if lon < 0:
        lon += 2 * math.pi

    r = math.sqrt(p * p + z * z)
    c = checked_asin(z / r)
    p1 = e2 * a / (2 * r)

    s1 = 0.0
    for _ in range(MAX_GEODETIC_ITERATIONS):
        lat = c + s1
        s2 = checked_asin(p1 * math.sin(2 * lat) / math.sqrt(1 - e2 * math.sin(lat) ** 2))
        if abs(s2 - s1) < GEODETIC_TOLERANCE:
            break
        s1 = s2
    else:
        raise ConvergenceFailure(
            f'Latitude did not converge within {MAX_GEODETIC_ITERATIONS} iterations '
            f'for ({x}, {y}, {z}) in {datum}'
        )

    sin_lat = math.sin(lat)
    N = a / math.sqrt(1 - e2 * sin_lat * sin_lat)
    height = p * math.cos(lat) + z * sin_lat - N * (1 - e2 * sin_lat * sin_lat)

    return GeodeticPoint(lat, lon, height, datum)
