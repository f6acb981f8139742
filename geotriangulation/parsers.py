"""Module for parsing and formatting sexagesimal coordinate text"""

__all__ = ['format_dms', 'parse_angle', 'parse_dms']

import re
from typing import Union

from geotriangulation.exceptions import MalformedInput
from geotriangulation.utils.functions import round_half_up
from geotriangulation.utils.validation import finite_float

# 53°12'05.41", 53°12′5,41″, 53 12 5.41, -53 12 5.41, 53°12'05.41"S
_RE_DMS = re.compile(
    r"""^\s*(?P<sign>[-+])?\s*
    (?P<deg>\d+)\s*[°º\s]\s*
    (?P<min>\d+)\s*['′\s]\s*
    (?P<sec>\d+(?:[.,]\d*)?)\s*(?:["″]|'')?\s*
    (?P<hemi>[NSEWnsew])?\s*$""",
    re.VERBOSE
)
_RE_DECIMAL = re.compile(r'^\s*[-+]?\d+(?:[.,]\d*)?\s*$')


def parse_dms(text: str) -> float:
    """
    Parses a degrees-minutes-seconds string into decimal degrees.

    Seconds may use either '.' or ',' as the decimal separator. A leading '-' or a
    trailing 'S' / 'W' makes the result negative.

    Args:
        text:
            The DMS string, e.g. 53°12'05.41"

    Returns:
        float, decimal degrees rounded to 6 places
    """
    match = _RE_DMS.match(text)
    if match is None:
        raise MalformedInput(f'Invalid DMS coordinate {text!r}; expected e.g. 53°12\'05.41"')

    degrees = int(match.group('deg'))
    minutes = int(match.group('min'))
    seconds = float(match.group('sec').replace(',', '.'))
    if minutes >= 60 or seconds >= 60:
        raise MalformedInput(f'Minutes and seconds must be below 60 in {text!r}')

    value = round_half_up(degrees + minutes / 60 + seconds / 3600, 6)
    hemisphere = (match.group('hemi') or '').upper()
    if match.group('sign') == '-' or hemisphere in ('S', 'W'):
        return -value

    return value


def parse_angle(text: Union[str, float, int]) -> float:
    """
    Parses an angle given either as a plain decimal ('.' or ',' separator) or as
    a DMS string.

    Args:
        text:
            The angle text, or an already numeric value

    Returns:
        float, decimal degrees
    """
    if not isinstance(text, str):
        return finite_float(text, 'angle')

    if _RE_DECIMAL.match(text):
        return finite_float(text.strip().replace(',', '.'), 'angle')

    return parse_dms(text)


def format_dms(value: float) -> str:
    """
    Formats decimal degrees as a DMS string with two-decimal seconds, e.g.
    -53°12'05.41"

    Args:
        value:
            Decimal degrees

    Returns:
        str
    """
    value = finite_float(value, 'value')
    sign = '-' if value < 0 else ''
    hundredths = int(round_half_up(abs(value) * 360000, 0))
    degrees, hundredths = divmod(hundredths, 360000)
    minutes, hundredths = divmod(hundredths, 6000)
    seconds = hundredths / 100

    return f'{sign}{degrees}°{minutes:02d}\'{seconds:05.2f}"'
