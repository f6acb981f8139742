"""
Immutable point types for the geodetic, geocentric and planar frames
"""

__all__ = ['CartesianPoint', 'GeodeticPoint', 'LocalPoint', 'Observer', 'PlanarPoint']

import math
from typing import Any, Tuple, Union

import numpy as np
from pydantic import FiniteFloat

from geotriangulation.angles import AngleLike, Degrees, to_radians
from geotriangulation.datums import Datum
from geotriangulation.exceptions import MalformedInput
from geotriangulation.utils.functions import round_half_up
from geotriangulation.utils.mixins import FrozenMixin
from geotriangulation.utils.validation import finite_float, validate_finite

_DMS = Tuple[int, int, float, str]


class GeodeticPoint(FrozenMixin):
    """
    A point given by latitude, longitude (radians) and height above the ellipsoid
    (meters) in a specific datum.

    Angles may be passed as Degrees to have them converted; bare numbers are radians.
    """

    def __init__(
        self,
        latitude: AngleLike,
        longitude: AngleLike,
        height: Union[float, int, str] = 0.0,
        datum: Union[Datum, str] = Datum.WGS84,
    ):
        lat = to_radians(latitude, 'latitude')
        if not -math.pi / 2 <= lat <= math.pi / 2:
            raise MalformedInput(f'Latitude {lat!r} rad is outside [-pi/2, pi/2]')

        self.latitude = lat
        self.longitude = to_radians(longitude, 'longitude')
        self.height = finite_float(height, 'height')
        self.datum = Datum.resolve(datum)
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, GeodeticPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude and
            self.height == other.height and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude, self.height, self.datum))

    def __repr__(self):
        return (
            f'<GeodeticPoint({self.latitude_degrees}°, {self.longitude_degrees}°, '
            f'{self.height}m, {self.datum})>'
        )

    @property
    def latitude_degrees(self) -> float:
        return math.degrees(self.latitude)

    @property
    def longitude_degrees(self) -> float:
        return math.degrees(self.longitude)

    @classmethod
    def from_degrees(
        cls,
        latitude: float,
        longitude: float,
        height: float = 0.0,
        datum: Union[Datum, str] = Datum.WGS84,
    ) -> 'GeodeticPoint':
        """Creates a GeodeticPoint from decimal degrees"""
        return cls(Degrees(latitude), Degrees(longitude), height, datum)

    @classmethod
    def from_dms(
        cls,
        lat: _DMS,
        lon: _DMS,
        height: float = 0.0,
        datum: Union[Datum, str] = Datum.WGS84,
    ) -> 'GeodeticPoint':
        """
        Creates a GeodeticPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W' (longitude)

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (int),  <minutes> (int), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (int),  <minutes> (int), <seconds> (float), <quadrant> (str) )
            height:
                Height above the ellipsoid, in meters
            datum:
                The datum of the coordinates

        Returns:
            GeodeticPoint
        """
        def convert(dms: _DMS):
            mult = -1 if dms[3] in ('S', 'W') else 1
            return mult * (dms[0] + (dms[1] / 60) + (dms[2] / 3600))

        return cls.from_degrees(convert(lat), convert(lon), height, datum)

    def to_dms(self) -> Tuple[_DMS, _DMS]:
        """
        Convert the latitude and longitude to tuples of degrees, minutes, seconds,
        hemisphere. Longitudes past 180° are reported as western.

        Returns:
            converted value as ((lat dms), (lon dms))
        """
        def convert(dd: float) -> Tuple[int, int, float]:
            """Converts a Decimal Degree to Degrees Minutes Seconds"""
            minutes, seconds = divmod(abs(dd) * 3600, 60)
            degrees, minutes = divmod(minutes, 60)
            return int(degrees), int(minutes), round_half_up(seconds, 5)

        lat = self.latitude_degrees
        lon = (self.longitude_degrees + 180) % 360 - 180
        return (
            (*convert(lat), 'N' if lat >= 0 else 'S'),
            (*convert(lon), 'E' if lon >= 0 else 'W'),
        )

    def to_cartesian(self) -> 'CartesianPoint':
        """Converts to geocentric coordinates in the same datum"""
        from geotriangulation.geodesy import geodetic_to_cartesian  # pylint: disable=import-outside-toplevel
        return geodetic_to_cartesian(self.latitude, self.longitude, self.datum, self.height)


class CartesianPoint(FrozenMixin):
    """Geocentric, right-handed X/Y/Z coordinates (meters) in a specific datum"""

    @validate_finite
    def __init__(
        self,
        x: FiniteFloat,
        y: FiniteFloat,
        z: FiniteFloat,
        datum: Any = Datum.WGS84,  # checked by Datum.resolve()
    ):
        self.x = x
        self.y = y
        self.z = z
        self.datum = Datum.resolve(datum)
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, CartesianPoint):
            return False

        return (
            self.x == other.x and
            self.y == other.y and
            self.z == other.z and
            self.datum == other.datum
        )

    def __hash__(self):
        return hash((self.x, self.y, self.z, self.datum))

    def __repr__(self):
        return f'<CartesianPoint({self.x}, {self.y}, {self.z}, {self.datum})>'

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def to_geodetic(self) -> GeodeticPoint:
        """Converts to geodetic coordinates in the same datum"""
        from geotriangulation.geodesy import cartesian_to_geodetic  # pylint: disable=import-outside-toplevel
        return cartesian_to_geodetic(self.x, self.y, self.z, self.datum)

    def shift(self, datum: Union[Datum, str]) -> 'CartesianPoint':
        """Re-expresses this point in another datum"""
        from geotriangulation.datum_shift import shift_datum  # pylint: disable=import-outside-toplevel
        return shift_datum(self, Datum.resolve(datum))


class PlanarPoint(FrozenMixin):
    """
    A point on the Gauss-Krueger plane: x is the northing, y the easting. For zonal
    coordinates the leading digits of y carry the zone number.
    """

    @validate_finite
    def __init__(self, x: FiniteFloat, y: FiniteFloat):
        self.x = x
        self.y = y
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, PlanarPoint):
            return False

        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f'<PlanarPoint({self.x}, {self.y})>'

    @property
    def zone(self) -> int:
        """The projection zone encoded in the easting"""
        return math.floor(self.y * 1e-6)

    def distance_to(self, other: 'PlanarPoint') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)


class LocalPoint(FrozenMixin):
    """A planar position with a height (meters)"""

    @validate_finite
    def __init__(self, x: FiniteFloat, y: FiniteFloat, z: FiniteFloat = 0.0):
        self.x = x
        self.y = y
        self.z = z
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, LocalPoint):
            return False

        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.x}, {self.y}, {self.z})>'

    @property
    def planar(self) -> PlanarPoint:
        return PlanarPoint(self.x, self.y)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z])

    def horizontal_distance_to(self, other: 'LocalPoint') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def distance_to(self, other: 'LocalPoint') -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )


class Observer(LocalPoint):
    """A ground observer station: planar position plus station height"""

    @classmethod
    def at(cls, position: PlanarPoint, height: float) -> 'Observer':
        return cls(position.x, position.y, height)

    @property
    def position(self) -> PlanarPoint:
        return self.planar

    @property
    def height(self) -> float:
        return self.z
