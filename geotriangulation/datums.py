"""
Reference systems and the ellipsoids they are defined on
"""

__all__ = ['Datum', 'Ellipsoid', 'ellipsoid_params']

from enum import Enum
import re
from typing import Dict, NamedTuple, Union

from geotriangulation.exceptions import UnknownDatum


class Datum(Enum):
    """The supported geodetic reference systems"""
    WGS84 = 'WGS-84'
    GSK2011 = 'GSK-2011'
    PZ90 = 'PZ-90.11'
    SK = 'SK-42/95'

    def __str__(self):
        return self.value

    @classmethod
    def from_str(cls, name: str) -> 'Datum':
        """
        Resolves a datum from its common spellings, e.g. 'WGS-84', 'wgs84',
        'PZ-90.11', 'SK-42' or 'SK-95'.

        Args:
            name:
                The datum name

        Returns:
            Datum
        """
        key = re.sub(r'[\s\-_./]', '', name).upper()
        if key not in _ALIASES:
            raise UnknownDatum(f'Unknown datum {name!r}')

        return _ALIASES[key]

    @classmethod
    def resolve(cls, datum: Union['Datum', str]) -> 'Datum':
        """Returns datum as a Datum member, parsing it if given as a string"""
        if isinstance(datum, Datum):
            return datum

        if isinstance(datum, str):
            return cls.from_str(datum)

        raise UnknownDatum(f'Unknown datum {datum!r}')


_ALIASES: Dict[str, Datum] = {
    'WGS84': Datum.WGS84,
    'GSK2011': Datum.GSK2011,
    'PZ90': Datum.PZ90,
    'PZ9011': Datum.PZ90,
    'SK': Datum.SK,
    'SK42': Datum.SK,
    'SK95': Datum.SK,
    'SK4295': Datum.SK,
}


class Ellipsoid(NamedTuple):
    """Defining parameters of a reference ellipsoid"""
    a: float  # Semi-major axis (meters)
    f: float  # Flattening

    @property
    def e2(self) -> float:
        """Square of the first eccentricity"""
        return 2 * self.f - self.f * self.f

    @property
    def b(self) -> float:
        """Semi-minor axis (meters)"""
        return (1 - self.f) * self.a


_ELLIPSOIDS: Dict[Datum, Ellipsoid] = {
    Datum.WGS84: Ellipsoid(6378137.0, 1 / 298.257223563),
    Datum.GSK2011: Ellipsoid(6378136.5, 1 / 298.2564151),
    Datum.PZ90: Ellipsoid(6378136.0, 1 / 298.25784),
    Datum.SK: Ellipsoid(6378245.0, 1 / 298.3),  # Krasovsky
}


def ellipsoid_params(datum: Union[Datum, str]) -> Ellipsoid:
    """
    Look up the reference ellipsoid of a datum.

    Args:
        datum:
            A Datum, or a string accepted by Datum.from_str()

    Returns:
        Ellipsoid, unpackable as (a, f)
    """
    return _ELLIPSOIDS[Datum.resolve(datum)]
