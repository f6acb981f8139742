"""Module for miscellaneous multi-use functions"""

__all__ = [
    'checked_acos', 'checked_asin', 'checked_sqrt', 'positive_mod', 'round_half_up',
]

import math

from geotriangulation._const import DOMAIN_TOLERANCE
from geotriangulation.exceptions import MalformedInput


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def positive_mod(value: float, modulus: float) -> float:
    """
    Remainder of value / modulus that always carries the sign of the modulus.

    Args:
        value:
            The dividend

        modulus:
            The (positive) divisor

    Returns:
        float in [0, modulus)
    """
    result = math.fmod(value, modulus)
    return result + modulus if result < 0 else result


def _clamp_unit(value: float, name: str) -> float:
    """Clamps round-off just outside [-1, 1]; anything further out is an error"""
    if not math.isfinite(value) or abs(value) > 1 + DOMAIN_TOLERANCE:
        raise MalformedInput(
            f'{name} argument {value!r} is outside [-1, 1]; the measurements are inconsistent'
        )
    return max(-1.0, min(1.0, value))


def checked_acos(value: float) -> float:
    """math.acos that reports inconsistent input instead of failing on round-off"""
    return math.acos(_clamp_unit(value, 'acos'))


def checked_asin(value: float) -> float:
    """math.asin that reports inconsistent input instead of failing on round-off"""
    return math.asin(_clamp_unit(value, 'asin'))


def checked_sqrt(value: float, scale: float = 1.0) -> float:
    """
    Square root of a quantity that is non-negative in exact arithmetic.

    Args:
        value:
            The radicand

        scale:
            Magnitude of the terms the radicand was computed from; negative results
            smaller than DOMAIN_TOLERANCE * scale are treated as round-off.

    Returns:
        float
    """
    if not math.isfinite(value) or value < -DOMAIN_TOLERANCE * max(scale, 1.0):
        raise MalformedInput(
            f'sqrt argument {value!r} is negative; the measurements are inconsistent'
        )
    return math.sqrt(max(value, 0.0))
