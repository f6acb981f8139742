import math

import numpy as np
import pytest
from pytest import approx

from geotriangulation import (
    CartesianPoint, Datum, Degrees, GeodeticPoint, LocalPoint, MalformedInput, Observer,
    PlanarPoint, UnknownDatum,
)
from tests.functions import assert_geodetic_points_equal


def test_geodetic_point_init():
    p = GeodeticPoint(0.5, 1.0, 10., Datum.PZ90)
    assert p.latitude == 0.5
    assert p.longitude == 1.0
    assert p.height == 10.
    assert p.datum is Datum.PZ90

    # Defaults
    p = GeodeticPoint(0.5, 1.0)
    assert p.height == 0.
    assert p.datum is Datum.WGS84

    # Datum by name
    assert GeodeticPoint(0.5, 1.0, datum='SK-42').datum is Datum.SK


def test_geodetic_point_degrees():
    p = GeodeticPoint.from_degrees(55.75, 37.62, 150.)
    assert p.latitude == approx(math.radians(55.75))
    assert p.longitude == approx(math.radians(37.62))
    assert p.latitude_degrees == approx(55.75)
    assert p.longitude_degrees == approx(37.62)
    assert p == GeodeticPoint(Degrees(55.75), Degrees(37.62), 150.)


def test_geodetic_point_invalid():
    with pytest.raises(MalformedInput):
        GeodeticPoint(2.0, 0.)

    with pytest.raises(MalformedInput):
        GeodeticPoint.from_degrees(-90.5, 0.)

    with pytest.raises(MalformedInput):
        GeodeticPoint(0., float('nan'))

    with pytest.raises(MalformedInput):
        GeodeticPoint(0., 0., float('inf'))

    with pytest.raises(UnknownDatum):
        GeodeticPoint(0., 0., 0., 'NAD27')


def test_geodetic_point_immutable():
    p = GeodeticPoint(0.5, 1.0)
    with pytest.raises(AttributeError):
        p.latitude = 0.

    with pytest.raises(AttributeError):
        del p.height


def test_geodetic_point_eq_hash():
    points = [
        GeodeticPoint(0.5, 1.0),
        GeodeticPoint(0.5, 1.0),
        GeodeticPoint(0.5, 1.0, datum=Datum.SK),
    ]
    assert len(set(points)) == 2
    assert GeodeticPoint(0.5, 1.0) != GeodeticPoint(0.5, 1.0, 1.)
    assert GeodeticPoint(0.5, 1.0) != (0.5, 1.0)


def test_geodetic_point_to_dms():
    p = GeodeticPoint.from_degrees(51.509865, -0.118092)
    assert p.to_dms() == ((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W'))


def test_geodetic_point_from_dms():
    p = GeodeticPoint.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W'))
    assert p.latitude_degrees == approx(51.509865)
    assert p.longitude_degrees == approx(-0.118092)

    p = GeodeticPoint.from_dms((0, 0, 0.0, 'N'), (0, 0, 0.0, 'E'))
    assert p == GeodeticPoint(0., 0.)


def test_geodetic_point_cartesian_round_trip():
    p = GeodeticPoint.from_degrees(55.75, 37.62, 150., Datum.GSK2011)
    xyz = p.to_cartesian()
    assert xyz.datum is Datum.GSK2011
    assert_geodetic_points_equal(xyz.to_geodetic(), p, angle_tol=1e-9)


def test_cartesian_point_init():
    p = CartesianPoint('1', 2, 3.5)
    assert (p.x, p.y, p.z) == (1., 2., 3.5)
    assert p.datum is Datum.WGS84
    assert CartesianPoint(1., 2., 3., 'PZ-90.11').datum is Datum.PZ90

    with pytest.raises(MalformedInput):
        CartesianPoint(float('nan'), 0., 0.)

    with pytest.raises(MalformedInput):
        CartesianPoint('x', 0., 0.)

    with pytest.raises(UnknownDatum):
        CartesianPoint(0., 0., 0., 'ITRF2014')

    # Non-string datums are unknown, not malformed
    for datum in (5, None, 1.5):
        with pytest.raises(UnknownDatum):
            CartesianPoint(0., 0., 0., datum)


def test_cartesian_point_to_array():
    assert np.array_equal(CartesianPoint(1., 2., 3.).to_array(), np.array([1., 2., 3.]))


def test_cartesian_point_repr():
    assert repr(CartesianPoint(1., 2., 3.)) == '<CartesianPoint(1.0, 2.0, 3.0, WGS-84)>'


def test_planar_point_zone():
    assert PlanarPoint(6_181_000., 7_413_320.5).zone == 7
    assert PlanarPoint(0., 1_500_000.).zone == 1
    assert PlanarPoint(0., 60_499_999.).zone == 60


def test_planar_point_distance():
    assert PlanarPoint(0., 0.).distance_to(PlanarPoint(3., 4.)) == 5.


def test_local_point():
    p = LocalPoint(1., 2., 3.)
    assert p.planar == PlanarPoint(1., 2.)
    assert LocalPoint(1., 2.).z == 0.
    assert p.horizontal_distance_to(LocalPoint(4., 6., 100.)) == 5.
    assert p.distance_to(LocalPoint(3., 5., 9.)) == 7.
    assert repr(p) == '<LocalPoint(1.0, 2.0, 3.0)>'

    with pytest.raises(AttributeError):
        p.z = 0.


def test_observer():
    o = Observer.at(PlanarPoint(10., 20.), 150.)
    assert o == Observer(10., 20., 150.)
    assert o.position == PlanarPoint(10., 20.)
    assert o.height == 150.
    assert repr(o) == '<Observer(10.0, 20.0, 150.0)>'
