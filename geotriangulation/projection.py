"""
Zonal Gauss-Krueger projection on the Krasovsky ellipsoid (SK-42/95).

Input and output geodetic coordinates are WGS-84; the datum chain
WGS-84 <-> PZ-90.11 <-> SK-42/95 is applied internally. The series below are the
truncated expansions of GOST 51794 (formulas 24-26 forward, 29-36 inverse), and their
coefficients must be kept exactly as listed.
"""

__all__ = [
    'central_meridian', 'gauss_krueger_zone',
    'project_to_gauss_krueger', 'unproject_from_gauss_krueger',
]

import math

from geotriangulation._const import (
    GK_FALSE_EASTING, GK_KRASOVSKY_A, GK_MERIDIAN_ARC_SCALE, GK_ZONE_PREFIX,
    GK_ZONE_WIDTH_DEGREES
)
from geotriangulation.angles import AngleLike, to_radians
from geotriangulation.coordinates import GeodeticPoint, PlanarPoint
from geotriangulation.datum_shift import (
    shift_pz90_to_sk, shift_pz90_to_wgs84, shift_sk_to_pz90, shift_wgs84_to_pz90
)
from geotriangulation.datums import Datum
from geotriangulation.exceptions import MalformedInput
from geotriangulation.geodesy import cartesian_to_geodetic, geodetic_to_cartesian
from geotriangulation.utils.functions import positive_mod
from geotriangulation.utils.validation import finite_float

_MAX_ZONE = 360 // GK_ZONE_WIDTH_DEGREES


def gauss_krueger_zone(longitude: AngleLike) -> int:
    """
    The 6° zone containing a longitude.

    Args:
        longitude:
            Longitude in radians (or a Degrees value); negative values are taken east
            of Greenwich, i.e. -3° falls in zone 60

    Returns:
        int in [1, 60]
    """
    lon_deg = math.degrees(positive_mod(to_radians(longitude, 'longitude'), 2 * math.pi))
    return min(math.floor((GK_ZONE_WIDTH_DEGREES + lon_deg) / GK_ZONE_WIDTH_DEGREES), _MAX_ZONE)


def central_meridian(zone: int) -> float:
    """Longitude of a zone's axial meridian, in radians"""
    if not 1 <= zone <= _MAX_ZONE:
        raise MalformedInput(f'Gauss-Krueger zone must be in [1, {_MAX_ZONE}], got {zone}')

    return math.radians(GK_ZONE_WIDTH_DEGREES / 2 + GK_ZONE_WIDTH_DEGREES * (zone - 1))


def project_to_gauss_krueger(latitude: AngleLike, longitude: AngleLike) -> PlanarPoint:
    """
    Project a WGS-84 position onto the Gauss-Krueger plane.

    Args:
        latitude:
            WGS-84 latitude, in radians (or a Degrees value)

        longitude:
            WGS-84 longitude, in radians (or a Degrees value)

    Returns:
        PlanarPoint where x is the northing and y the easting prefixed with the zone
        number, i.e. y = zone * 1e6 + 500000 + offset from the axial meridian
    """
    wgs = geodetic_to_cartesian(latitude, longitude, Datum.WGS84)
    pz = shift_wgs84_to_pz90(wgs.x, wgs.y, wgs.z)
    sk = shift_pz90_to_sk(pz.x, pz.y, pz.z)
    sk_geo = cartesian_to_geodetic(sk.x, sk.y, sk.z, Datum.SK)
    B, L = sk_geo.latitude, sk_geo.longitude

    n = gauss_krueger_zone(L)
    l = L - central_meridian(n)  # noqa: E741

    sin2_b = math.sin(B) ** 2
    sin4_b = sin2_b * sin2_b
    sin6_b = sin4_b * sin2_b
    l2 = l * l

    # Formula (24)
    term1 = 16002.8900 + 66.9607 * sin2_b + 0.3515 * sin4_b
    term2 = 1594561.25 + 5336.535 * sin2_b + 26.790 * sin4_b + 0.149 * sin6_b
    term3 = 672483.4 - 811219.9 * sin2_b + 5420.0 * sin4_b - 10.6 * sin6_b
    term4 = 278194 - 830174 * sin2_b + 572434 * sin4_b - 16010 * sin6_b
    term5 = 109500 - 574700 * sin2_b + 863700 * sin4_b - 398600 * sin6_b

    x = GK_MERIDIAN_ARC_SCALE * B - math.sin(2 * B) * (
        term1 - l2 * (term2 + l2 * (term3 + l2 * (term4 + l2 * term5)))
    )

    # Formula (25)
    y = (5 + 10 * n) * 100000 + l * math.cos(B) * (
        6378245 + 21346.1415 * sin2_b + 107.1590 * sin4_b + 0.5977 * sin6_b
        + l2 * (
            1070204.16 - 2136826.66 * sin2_b + 17.98 * sin4_b - 11.99 * sin6_b
            + l2 * (
                270806 - 1523417 * sin2_b + 1327645 * sin4_b - 21701 * sin6_b
                + l2 * (79690 - 866190 * sin2_b + 1730360 * sin4_b - 945460 * sin6_b)
            )
        )
    )

    return PlanarPoint(x, y)


def unproject_from_gauss_krueger(x: float, y: float) -> GeodeticPoint:
    """
    Convert zonal Gauss-Krueger coordinates back to a WGS-84 position.

    The SK-42/95 point is placed on the Krasovsky ellipsoid (height 0) before the
    datum chain is applied, so the returned height is that of the ellipsoid surface
    expressed in WGS-84.

    Args:
        x:
            Northing, in meters

        y:
            Easting, in meters, with the zone number in its leading digits

    Returns:
        GeodeticPoint in WGS-84
    """
    x, y = finite_float(x, 'x'), finite_float(y, 'y')
    n = math.floor(y * 1e-6)
    if not 1 <= n <= _MAX_ZONE:
        raise MalformedInput(f'Easting {y!r} does not encode a Gauss-Krueger zone')

    beta = x / GK_MERIDIAN_ARC_SCALE

    # Formula (32): footpoint latitude
    sin2_beta = math.sin(beta) ** 2
    sin4_beta = sin2_beta * sin2_beta
    B0 = beta + math.sin(2 * beta) * (
        0.00252588685 - 0.00001491860 * sin2_beta + 0.00000011904 * sin4_beta
    )

    sin2_b0 = math.sin(B0) ** 2
    sin4_b0 = sin2_b0 * sin2_b0
    sin6_b0 = sin4_b0 * sin2_b0

    z0 = (y - (n * GK_ZONE_PREFIX + GK_FALSE_EASTING)) / (GK_KRASOVSKY_A * math.cos(B0))
    z02 = z0 * z0

    # Formula (33): latitude correction
    dB = -z02 * math.sin(2 * B0) * (
        0.251684631 - 0.003369263 * sin2_b0 + 0.00001127 * sin4_b0
        - z02 * (
            0.10500614 - 0.04559916 * sin2_b0 + 0.00228901 * sin4_b0 - 0.00002987 * sin6_b0
            - z02 * (
                0.042858 - 0.025318 * sin2_b0 + 0.014346 * sin4_b0 - 0.001264 * sin6_b0
                - z02 * (0.01672 - 0.00630 * sin2_b0 + 0.01188 * sin4_b0 - 0.00328 * sin6_b0)
            )
        )
    )

    # Formula (34): longitude offset from the axial meridian
    l = z0 * (  # noqa: E741
        1 - 0.0033467108 * sin2_b0 - 0.0000056002 * sin4_b0 - 0.0000000187 * sin6_b0
        - z02 * (
            0.16778975 + 0.16273586 * sin2_b0 - 0.00052490 * sin4_b0 - 0.00000846 * sin6_b0
            - z02 * (
                0.0420025 + 0.1487407 * sin2_b0 + 0.0059420 * sin4_b0 - 0.0000150 * sin6_b0
                - z02 * (
                    0.01225 + 0.09477 * sin2_b0 + 0.03282 * sin4_b0 - 0.00034 * sin6_b0
                    - z02 * (0.0038 + 0.0524 * sin2_b0 + 0.0482 * sin4_b0 - 0.0032 * sin6_b0)
                )
            )
        )
    )

    sk = geodetic_to_cartesian(B0 + dB, central_meridian(n) + l, Datum.SK)
    pz = shift_sk_to_pz90(sk.x, sk.y, sk.z)
    wgs = shift_pz90_to_wgs84(pz.x, pz.y, pz.z)
    return cartesian_to_geodetic(wgs.x, wgs.y, wgs.z, Datum.WGS84)
