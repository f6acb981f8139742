"""
Tagged angle types.

Geodetic functions work in radians while the triangulation measurements are recorded
in degrees. Wrapping a value in Degrees or Radians lets every public function convert
it to the unit it expects; a bare float is taken to already be in that unit.
"""

__all__ = ['Degrees', 'Radians', 'to_degrees', 'to_radians']

import math
from typing import Union

from geotriangulation.utils.validation import finite_float


class Degrees(float):
    """An angle measured in degrees"""

    def __repr__(self):
        return f'Degrees({float(self)!r})'

    def to_radians(self) -> 'Radians':
        return Radians(math.radians(self))


class Radians(float):
    """An angle measured in radians"""

    def __repr__(self):
        return f'Radians({float(self)!r})'

    def to_degrees(self) -> Degrees:
        return Degrees(math.degrees(self))


AngleLike = Union[Degrees, Radians, float, int, str]


def to_radians(angle: AngleLike, name: str = 'angle') -> float:
    """
    Normalizes an angle argument of a radian-based function.

    Args:
        angle:
            A Degrees value (converted), or a Radians / plain number (used as-is)

        name:
            The argument name, used in error messages

    Returns:
        float, in radians
    """
    if isinstance(angle, Degrees):
        return finite_float(math.radians(angle), name)

    return finite_float(angle, name)


def to_degrees(angle: AngleLike, name: str = 'angle') -> float:
    """
    Normalizes an angle argument of a degree-based function.

    Args:
        angle:
            A Radians value (converted), or a Degrees / plain number (used as-is)

        name:
            The argument name, used in error messages

    Returns:
        float, in degrees
    """
    if isinstance(angle, Radians):
        return finite_float(math.degrees(angle), name)

    return finite_float(angle, name)
