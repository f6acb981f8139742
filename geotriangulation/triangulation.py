"""
Two-station triangulation of a drone and the ground target it observes.

Two observers with known planar positions and heights each measure the slant range
to the drone (L1, L2) and its position angle (aa, bb). The drone measures the slant
range (L3) and position angle (cc) to the target, and the horizontal angles a and b
between the target and each observer. All angles are in degrees.

Position angles follow the field convention: aa is positive when observer 1 sits
above the drone, cc is positive when the target sits above the drone. Horizontal
angles are signed, positive when the observer lies counter-clockwise of the target
as seen from the drone.
"""

__all__ = [
    'MeasurementBundle', 'TriangulationResult', 'derive_measurements',
    'locate_drone_and_target', 'locate_target_by_rotation', 'triangulate',
]

import math
from typing import Iterator, Tuple

import numpy as np

from geotriangulation.angles import AngleLike, to_degrees
from geotriangulation.coordinates import LocalPoint, Observer
from geotriangulation.exceptions import MalformedInput
from geotriangulation.intersection import average_points, intersect_circles
from geotriangulation.utils.functions import checked_acos, checked_sqrt, positive_mod
from geotriangulation.utils.mixins import FrozenMixin
from geotriangulation.utils.validation import finite_float


class MeasurementBundle(FrozenMixin):  # pylint: disable=invalid-name,too-many-instance-attributes
    """
    The ranges (meters) and angles (degrees) recorded for one triangulation.

    Angles given as Radians are converted; bare numbers are degrees.
    """

    _RANGES = ('L1', 'L2', 'L3')
    _ANGLES = ('a', 'b', 'aa', 'bb', 'cc')

    def __init__(  # pylint: disable=too-many-arguments
        self,
        L1: float,
        L2: float,
        L3: float,
        a: AngleLike,
        b: AngleLike,
        aa: AngleLike,
        bb: AngleLike,
        cc: AngleLike,
    ):
        for name, value in zip(self._RANGES, (L1, L2, L3)):
            value = finite_float(value, name)
            if value < 0:
                raise MalformedInput(f'Range {name} must be non-negative, got {value!r}')
            setattr(self, name, value)

        for name, value in zip(self._ANGLES, (a, b, aa, bb, cc)):
            setattr(self, name, to_degrees(value, name))

        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, MeasurementBundle):
            return False

        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.to_dict().items())
        return f'<MeasurementBundle({fields})>'

    def to_dict(self):
        return {name: getattr(self, name) for name in self._RANGES + self._ANGLES}

    def to_tuple(self) -> Tuple[float, ...]:
        return tuple(self.to_dict().values())


class TriangulationResult(FrozenMixin):
    """Solved drone and target positions; unpacks as (drone, target)"""

    def __init__(self, drone: LocalPoint, target: LocalPoint):
        self.drone = drone
        self.target = target
        self._freeze()

    def __eq__(self, other):
        if not isinstance(other, TriangulationResult):
            return False

        return self.drone == other.drone and self.target == other.target

    def __hash__(self):
        return hash((self.drone, self.target))

    def __iter__(self) -> Iterator[LocalPoint]:
        return iter((self.drone, self.target))

    def __repr__(self):
        return f'<TriangulationResult(drone={self.drone!r}, target={self.target!r})>'


def _drone_index(a: float, b: float) -> int:
    """
    Chooses between the two drone candidates. The wrapped difference a - b is the
    angle from observer 2 to observer 1 as seen from the drone; its sign tells which
    side of the observer baseline the drone is on.
    """
    return 1 if positive_mod(math.pi + math.pi * (a - b) / 180, 2 * math.pi) - math.pi > 0 else 0


def _locate_drone(
    observer1: Observer,
    observer2: Observer,
    measurements: MeasurementBundle,
) -> Tuple[LocalPoint, float, float]:
    """Returns the drone position and the horizontal ranges l1, l2 to it"""
    aa = math.radians(measurements.aa)
    bb = math.radians(measurements.bb)

    height = (
        (observer1.z - math.sin(aa) * measurements.L1) +
        (observer2.z - math.sin(bb) * measurements.L2)
    ) / 2

    l1 = measurements.L1 * math.cos(aa)
    l2 = measurements.L2 * math.cos(bb)

    candidates = intersect_circles(
        observer1.x, observer1.y, observer2.x, observer2.y, l1, l2, height
    )
    return candidates[_drone_index(measurements.a, measurements.b)], l1, l2


def _law_of_cosines(side1: float, side2: float, angle_degrees: float) -> float:
    radicand = (
        side1 * side1 + side2 * side2 -
        2 * side1 * side2 * math.cos(math.radians(abs(angle_degrees)))
    )
    return checked_sqrt(radicand, scale=side1 * side1 + side2 * side2)


def triangulate(
    observer1: Observer,
    observer2: Observer,
    measurements: MeasurementBundle,
) -> TriangulationResult:
    """
    Solve the drone and target positions.

    The drone lies where the horizontal range circles around both observers meet,
    on the side selected by the horizontal angles. The horizontal distance from each
    observer to the target follows from the law of cosines; intersecting those
    circles with the drone's range circle gives two candidate pairs, and the pair
    whose points agree most closely is taken as the target.

    Args:
        observer1:
            The first observer station

        observer2:
            The second observer station

        measurements:
            The ranges and angles recorded for this solve

    Returns:
        TriangulationResult

    Raises:
        NoIntersection, Contained, Coincident if the measurements describe no real
        configuration
    """
    drone, l1, l2 = _locate_drone(observer1, observer2, measurements)

    cc = math.radians(measurements.cc)
    l3 = measurements.L3 * math.cos(cc)
    r1 = _law_of_cosines(l1, l3, measurements.a)
    r2 = _law_of_cosines(l2, l3, measurements.b)

    candidates1 = intersect_circles(drone.x, drone.y, observer1.x, observer1.y, l3, r1)
    candidates2 = intersect_circles(drone.x, drone.y, observer2.x, observer2.y, l3, r2)

    # min() keeps the first of equally separated pairs
    midpoint, _ = min(
        (average_points(p, q) for p in candidates1 for q in candidates2),
        key=lambda pair: pair[1],
    )

    return TriangulationResult(
        drone,
        LocalPoint(midpoint.x, midpoint.y, drone.z + measurements.L3 * math.sin(cc)),
    )


def locate_drone_and_target(  # pylint: disable=invalid-name,too-many-arguments
    observer1: Observer,
    observer2: Observer,
    L1: float,
    L2: float,
    L3: float,
    a: AngleLike,
    b: AngleLike,
    aa: AngleLike,
    bb: AngleLike,
    cc: AngleLike,
) -> TriangulationResult:
    """
    Convenience wrapper around triangulate() taking the measurements individually.
    Angles are in degrees.
    """
    return triangulate(observer1, observer2, MeasurementBundle(L1, L2, L3, a, b, aa, bb, cc))


def _rotate(vector: np.ndarray, degrees: float) -> np.ndarray:
    angle = np.deg2rad(degrees)
    R = np.array([
        [np.cos(angle), -np.sin(angle)],
        [np.sin(angle), np.cos(angle)]
    ])
    return R @ vector


def locate_target_by_rotation(
    observer1: Observer,
    observer2: Observer,
    measurements: MeasurementBundle,
) -> TriangulationResult:
    """
    Alternative target solve: rotate the horizontal drone -> observer vectors by the
    measured angles, scale them to the horizontal target range and average the two
    estimates. Used to cross-check triangulate(); the drone is solved identically.

    Args:
        observer1:
            The first observer station

        observer2:
            The second observer station

        measurements:
            The ranges and angles recorded for this solve

    Returns:
        TriangulationResult
    """
    drone, l1, l2 = _locate_drone(observer1, observer2, measurements)
    if l1 == 0 or l2 == 0:
        raise MalformedInput('Drone is directly above an observer; bearings are undefined')

    cc = math.radians(measurements.cc)
    l3 = measurements.L3 * math.cos(cc)

    origin = np.array([drone.x, drone.y])
    to_observer1 = np.array([observer1.x, observer1.y]) - origin
    to_observer2 = np.array([observer2.x, observer2.y]) - origin

    estimate1 = origin + l3 * _rotate(to_observer1, -measurements.a) / l1
    estimate2 = origin + l3 * _rotate(to_observer2, -measurements.b) / l2
    target_x, target_y = ((estimate1 + estimate2) / 2).tolist()

    return TriangulationResult(
        drone,
        LocalPoint(target_x, target_y, drone.z + measurements.L3 * math.sin(cc)),
    )


def _horizontal_angle(observer: LocalPoint, drone: LocalPoint, target: LocalPoint) -> float:
    """Signed angle at the drone from the target to the observer, in degrees"""
    side_a = observer.horizontal_distance_to(target)
    side_b = drone.horizontal_distance_to(target)
    side_c = drone.horizontal_distance_to(observer)
    if side_b == 0 or side_c == 0:
        raise MalformedInput('Horizontal angle is undefined when points share a position')

    cross = (
        (observer.x - drone.x) * (target.y - drone.y) -
        (observer.y - drone.y) * (target.x - drone.x)
    )
    angle = checked_acos((side_b ** 2 + side_c ** 2 - side_a ** 2) / (2 * side_b * side_c))
    # Collinear points (cross == 0) give 0 or +180
    sign = -1.0 if cross > 0 else 1.0
    return sign * math.degrees(angle)


def _position_angle(origin: LocalPoint, point: LocalPoint) -> float:
    """Angle of point above (positive) or below the horizontal at origin, in degrees"""
    return math.degrees(math.atan2(point.z - origin.z, origin.horizontal_distance_to(point)))


def derive_measurements(
    observer1: LocalPoint,
    observer2: LocalPoint,
    drone: LocalPoint,
    target: LocalPoint,
) -> MeasurementBundle:
    """
    Compute the measurements a field crew would record for a known scene; the
    inverse of triangulate().

    Args:
        observer1:
            The first observer station

        observer2:
            The second observer station

        drone:
            The drone position

        target:
            The target position

    Returns:
        MeasurementBundle
    """
    return MeasurementBundle(
        observer1.distance_to(drone),
        observer2.distance_to(drone),
        drone.distance_to(target),
        _horizontal_angle(observer1, drone, target),
        _horizontal_angle(observer2, drone, target),
        _position_angle(drone, observer1),
        _position_angle(drone, observer2),
        _position_angle(drone, target),
    )
