import pytest
from pytest import approx

from geotriangulation import MalformedInput
from geotriangulation.parsers import *


@pytest.mark.parametrize('text, expected', [
    ('53°12\'05.41"', 53.201503),
    ('53°12′5,41″', 53.201503),
    ('53 12 5.41', 53.201503),
    ('53º12\'05.41\'\'', 53.201503),
    ('  53° 12\' 05.41"  ', 53.201503),
    ('-53 12 5.41', -53.201503),
    ('+53 12 5.41', 53.201503),
    ('53°12\'05.41"S', -53.201503),
    ('53°12\'05.41"n', 53.201503),
    ('37°37\'12"E', 37.62),
    ('122°25\'09"W', -122.419167),
    ('0°0\'0"', 0.),
])
def test_parse_dms(text, expected):
    assert parse_dms(text) == approx(expected, abs=1e-9)


@pytest.mark.parametrize('text', [
    '',
    'abc',
    '53.2015',
    '53°60\'00"',
    '53°12\'60"',
    '53°12\'05.41"X',
    '53°-12\'05.41"',
])
def test_parse_dms_invalid(text):
    with pytest.raises(MalformedInput):
        parse_dms(text)


def test_parse_angle():
    assert parse_angle('37.62') == 37.62
    assert parse_angle(' 37,62 ') == 37.62
    assert parse_angle('-12,5') == -12.5
    assert parse_angle('12') == 12.
    assert parse_angle(12) == 12.
    assert parse_angle(-0.5) == -0.5
    assert parse_angle('53 12 5.41') == approx(53.201503)
    assert parse_angle('53°12\'05.41"S') == approx(-53.201503)


def test_parse_angle_invalid():
    with pytest.raises(MalformedInput):
        parse_angle(float('nan'))

    with pytest.raises(MalformedInput):
        parse_angle('twelve')


def test_format_dms():
    assert format_dms(53.201503) == '53°12\'05.41"'
    assert format_dms(37.62) == '37°37\'12.00"'
    assert format_dms(-0.5) == '-0°30\'00.00"'
    assert format_dms(0.) == '0°00\'00.00"'

    # Rounding carries into minutes and degrees
    assert format_dms(59.999999999) == '60°00\'00.00"'


def test_format_dms_parses_back():
    for value in (53.201503, -33.9, 179.25, 0.0125):
        assert parse_dms(format_dms(value)) == approx(value, abs=1 / 360000)


def test_format_dms_invalid():
    with pytest.raises(MalformedInput):
        format_dms(float('inf'))
