"""
Geodetic workflow around the planar triangulation.

The forward pass projects a known scene (two observers, drone, target) onto the
Gauss-Krueger plane and derives the measurements it would produce. The inverse pass
takes geodetic observers plus measurements, triangulates on the plane and returns
the drone and target as WGS-84 positions.
"""

__all__ = [
    'GeodeticTriangulationResult', 'Scene', 'compute_measurements', 'project_point',
    'project_scene', 'resolve_geodetic',
]

from typing import Iterator, Set

from geotriangulation.coordinates import GeodeticPoint, LocalPoint, Observer
from geotriangulation.datums import Datum
from geotriangulation.projection import project_to_gauss_krueger, unproject_from_gauss_krueger
from geotriangulation.triangulation import MeasurementBundle, derive_measurements, triangulate
from geotriangulation.utils.logging import LOGGER, warn_once
from geotriangulation.utils.mixins import FrozenMixin


class Scene(FrozenMixin):
    """The four points of a triangulation, in Gauss-Krueger coordinates"""

    def __init__(self, observer1: Observer, observer2: Observer, drone: LocalPoint, target: LocalPoint):
        self.observer1 = observer1
        self.observer2 = observer2
        self.drone = drone
        self.target = target
        self._freeze()

    def __iter__(self) -> Iterator[LocalPoint]:
        return iter((self.observer1, self.observer2, self.drone, self.target))

    def __repr__(self):
        return (
            f'<Scene(observer1={self.observer1!r}, observer2={self.observer2!r}, '
            f'drone={self.drone!r}, target={self.target!r})>'
        )

    @property
    def zones(self) -> Set[int]:
        return {point.planar.zone for point in self}


class GeodeticTriangulationResult(FrozenMixin):
    """Solved drone and target positions in WGS-84; unpacks as (drone, target)"""

    def __init__(self, drone: GeodeticPoint, target: GeodeticPoint):
        self.drone = drone
        self.target = target
        self._freeze()

    def __iter__(self) -> Iterator[GeodeticPoint]:
        return iter((self.drone, self.target))

    def __repr__(self):
        return f'<GeodeticTriangulationResult(drone={self.drone!r}, target={self.target!r})>'


def project_point(point: GeodeticPoint) -> LocalPoint:
    """
    Project a geodetic point onto the Gauss-Krueger plane, keeping its height.
    Points in datums other than WGS-84 are shifted to WGS-84 first.
    """
    if point.datum != Datum.WGS84:
        wgs = point.to_cartesian().shift(Datum.WGS84).to_geodetic()
        point = GeodeticPoint(wgs.latitude, wgs.longitude, point.height, Datum.WGS84)

    planar = project_to_gauss_krueger(point.latitude, point.longitude)
    return LocalPoint(planar.x, planar.y, point.height)


def _warn_if_multizone(zones: Set[int]):
    if len(zones) > 1:
        warn_once(
            f'Points fall into Gauss-Krueger zones {sorted(zones)}; planar triangulation '
            'across zone boundaries is unreliable'
        )


def project_scene(
    observer1: GeodeticPoint,
    observer2: GeodeticPoint,
    drone: GeodeticPoint,
    target: GeodeticPoint,
) -> Scene:
    """
    Project the four points of a known scene onto the Gauss-Krueger plane.

    Args:
        observer1, observer2:
            The observer stations

        drone:
            The drone position

        target:
            The target position

    Returns:
        Scene
    """
    o1, o2 = project_point(observer1), project_point(observer2)
    scene = Scene(
        Observer(o1.x, o1.y, o1.z),
        Observer(o2.x, o2.y, o2.z),
        project_point(drone),
        project_point(target),
    )
    LOGGER.debug('Projected %r', scene)
    _warn_if_multizone(scene.zones)
    return scene


def compute_measurements(
    observer1: GeodeticPoint,
    observer2: GeodeticPoint,
    drone: GeodeticPoint,
    target: GeodeticPoint,
) -> MeasurementBundle:
    """
    Forward pass: the ranges and angles that a known geodetic scene would produce.

    Args:
        observer1, observer2:
            The observer stations

        drone:
            The drone position

        target:
            The target position

    Returns:
        MeasurementBundle
    """
    return derive_measurements(*project_scene(observer1, observer2, drone, target))


def resolve_geodetic(
    observer1: GeodeticPoint,
    observer2: GeodeticPoint,
    measurements: MeasurementBundle,
) -> GeodeticTriangulationResult:
    """
    Inverse pass: solve the drone and target from geodetic observers and the
    recorded measurements.

    Heights of the returned points are the solved local heights, i.e. they share
    the reference of the observer heights.

    Args:
        observer1, observer2:
            The observer stations

        measurements:
            The recorded ranges and angles

    Returns:
        GeodeticTriangulationResult in WGS-84
    """
    o1, o2 = project_point(observer1), project_point(observer2)
    result = triangulate(Observer(o1.x, o1.y, o1.z), Observer(o2.x, o2.y, o2.z), measurements)
    LOGGER.debug('Triangulated %r', result)
    _warn_if_multizone({o1.planar.zone, o2.planar.zone})

    def to_geodetic(point: LocalPoint) -> GeodeticPoint:
        geo = unproject_from_gauss_krueger(point.x, point.y)
        return GeodeticPoint(geo.latitude, geo.longitude, point.z, Datum.WGS84)

    return GeodeticTriangulationResult(to_geodetic(result.drone), to_geodetic(result.target))
