import math

import pytest
from pytest import approx

from geotriangulation import (
    LocalPoint, MalformedInput, MeasurementBundle, NoIntersection, Observer, Radians,
    TriangulationResult,
)
from geotriangulation.triangulation import *
from tests.functions import assert_local_points_equal


O1 = Observer(0., 0., 100.)
O2 = Observer(1000., 0., 100.)

SCENES = [
    # drone on the left of O1 -> O2, target beyond it
    (O1, O2, LocalPoint(500., 800., 600.), LocalPoint(600., 1500., 0.)),
    # mirrored onto the right side
    (O1, O2, LocalPoint(500., -800., 600.), LocalPoint(600., -1500., 0.)),
    # drone outside the baseline, target at a different height
    (O1, O2, LocalPoint(1300., 400., 450.), LocalPoint(900., 1100., 20.)),
    # arbitrary offsets, target between drone and baseline
    (
        Observer(6181250., 7413500., 150.),
        Observer(6181400., 7416000., 160.),
        LocalPoint(6183000., 7414800., 650.),
        LocalPoint(6182100., 7415600., 140.),
    ),
]


@pytest.mark.parametrize('observer1, observer2, drone, target', SCENES)
def test_triangulate_recovers_scene(observer1, observer2, drone, target):
    measurements = derive_measurements(observer1, observer2, drone, target)
    result = triangulate(observer1, observer2, measurements)

    assert isinstance(result, TriangulationResult)
    assert_local_points_equal(result.drone, drone)
    assert_local_points_equal(result.target, target)


@pytest.mark.parametrize('observer1, observer2, drone, target', SCENES)
def test_rotation_agrees_with_triangulate(observer1, observer2, drone, target):
    measurements = derive_measurements(observer1, observer2, drone, target)
    expected = triangulate(observer1, observer2, measurements)
    result = locate_target_by_rotation(observer1, observer2, measurements)

    assert result.drone == expected.drone
    assert_local_points_equal(result.target, expected.target)


def test_triangulate_exact_scene():
    observer1 = Observer(100., 0., 50.)
    observer2 = Observer(-100., 0., 50.)
    drone = LocalPoint(0., 0., 50.)
    target = LocalPoint(0., 100., 50.)

    measurements = derive_measurements(observer1, observer2, drone, target)
    assert measurements.to_tuple() == approx((100., 100., 100., -90., 90., 0., 0., 0.))

    drone_result, target_result = triangulate(observer1, observer2, measurements)
    assert_local_points_equal(drone_result, drone, abs_tol=1e-9)
    assert_local_points_equal(target_result, target, abs_tol=1e-9)

    _, target_result = locate_target_by_rotation(observer1, observer2, measurements)
    assert_local_points_equal(target_result, target, abs_tol=1e-9)


def test_locate_drone_and_target():
    observer1, observer2, drone, target = SCENES[0]
    m = derive_measurements(observer1, observer2, drone, target)

    result = locate_drone_and_target(
        observer1, observer2, m.L1, m.L2, m.L3, m.a, m.b, m.aa, m.bb, m.cc
    )
    assert result == triangulate(observer1, observer2, m)


def test_triangulate_no_intersection():
    measurements = MeasurementBundle(100., 100., 100., 90., -90., 0., 0., 0.)
    with pytest.raises(NoIntersection):
        triangulate(O1, O2, measurements)


@pytest.mark.parametrize('t', [0.2, 0.5, 0.8, -0.5])
def test_triangulate_target_in_line_with_observer(t):
    # Target on the line through the drone and observer 1, so a is 0 or 180
    # and the target circles only touch
    observer1, observer2, drone, _ = SCENES[0]
    target = LocalPoint(
        drone.x + t * (observer1.x - drone.x),
        drone.y + t * (observer1.y - drone.y),
        0.,
    )

    measurements = derive_measurements(observer1, observer2, drone, target)
    assert measurements.a == approx(0. if t > 0 else 180., abs=1e-5)

    result = triangulate(observer1, observer2, measurements)
    assert_local_points_equal(result.drone, drone)
    assert_local_points_equal(result.target, target, abs_tol=1e-3)


def test_locate_target_by_rotation_drone_over_observer():
    observer1 = Observer(0., 0., 0.)
    observer2 = Observer(1000., 0., 0.)
    measurements = MeasurementBundle(0., 1000., 100., 10., 10., 0., 0., 0.)

    with pytest.raises(MalformedInput):
        locate_target_by_rotation(observer1, observer2, measurements)


def test_derive_measurements():
    observer1, observer2, drone, target = SCENES[0]
    m = derive_measurements(observer1, observer2, drone, target)

    assert m.L1 == approx(math.sqrt(500. ** 2 + 800. ** 2 + 500. ** 2))
    assert m.L2 == approx(m.L1)
    assert m.L3 == approx(math.sqrt(100. ** 2 + 700. ** 2 + 600. ** 2))

    # Observer 1 lies clockwise of the target, observer 2 counter-clockwise
    cos_a = (100. * -500. + 700. * -800.) / (math.hypot(100., 700.) * math.hypot(500., 800.))
    cos_b = (100. * 500. + 700. * -800.) / (math.hypot(100., 700.) * math.hypot(500., 800.))
    assert m.a == approx(math.degrees(math.acos(cos_a)))
    assert m.b == approx(-math.degrees(math.acos(cos_b)))

    # Observers and target are below the drone
    assert m.aa == approx(math.degrees(math.atan2(-500., math.hypot(500., 800.))))
    assert m.bb == approx(m.aa)
    assert m.cc == approx(math.degrees(math.atan2(-600., math.hypot(100., 700.))))


def test_derive_measurements_coincident_points():
    drone = LocalPoint(0., 0., 100.)
    with pytest.raises(MalformedInput):
        derive_measurements(O1, O2, drone, LocalPoint(0., 0., 0.))


def test_measurement_bundle():
    m = MeasurementBundle(1, '2', 3., 10., -20., 5., 6., -7.)

    assert m.to_dict() == {
        'L1': 1., 'L2': 2., 'L3': 3., 'a': 10., 'b': -20., 'aa': 5., 'bb': 6., 'cc': -7.,
    }
    assert m.to_tuple() == (1., 2., 3., 10., -20., 5., 6., -7.)
    assert m == MeasurementBundle(1., 2., 3., 10., -20., 5., 6., -7.)
    assert m != MeasurementBundle(1., 2., 3., 10., -20., 5., 6., -8.)
    assert hash(m) == hash(MeasurementBundle(1., 2., 3., 10., -20., 5., 6., -7.))
    assert repr(m) == (
        '<MeasurementBundle(L1=1.0, L2=2.0, L3=3.0, a=10.0, b=-20.0, aa=5.0, bb=6.0, cc=-7.0)>'
    )

    with pytest.raises(AttributeError):
        m.L1 = 5.


def test_measurement_bundle_radians():
    m = MeasurementBundle(1., 1., 1., Radians(math.pi / 2), Radians(-math.pi), 0., 0., 0.)
    assert m.a == approx(90.)
    assert m.b == approx(-180.)


def test_measurement_bundle_invalid():
    with pytest.raises(MalformedInput):
        MeasurementBundle(-1., 1., 1., 0., 0., 0., 0., 0.)

    with pytest.raises(MalformedInput):
        MeasurementBundle(1., 1., 1., float('nan'), 0., 0., 0., 0.)

    with pytest.raises(MalformedInput):
        MeasurementBundle(1., 1., float('inf'), 0., 0., 0., 0., 0.)


def test_triangulation_result():
    drone, target = LocalPoint(1., 2., 3.), LocalPoint(4., 5., 6.)
    result = TriangulationResult(drone, target)

    assert tuple(result) == (drone, target)
    assert result == TriangulationResult(LocalPoint(1., 2., 3.), LocalPoint(4., 5., 6.))
    assert result != TriangulationResult(target, drone)
    assert hash(result) == hash(TriangulationResult(drone, target))
