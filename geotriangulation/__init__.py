
from geotriangulation._version import __version__  # noqa: F401
from geotriangulation.utils.logging import LOGGER
from geotriangulation.angles import Degrees, Radians
from geotriangulation.datums import Datum, Ellipsoid, ellipsoid_params
from geotriangulation.coordinates import (
    CartesianPoint, GeodeticPoint, LocalPoint, Observer, PlanarPoint
)
from geotriangulation.exceptions import (
    Coincident, Contained, ConvergenceFailure, GeoTriangulationError, IntersectionError,
    MalformedInput, NoIntersection, UnknownDatum
)
from geotriangulation.geodesy import cartesian_to_geodetic, geodetic_to_cartesian
from geotriangulation.datum_shift import (
    shift_datum, shift_gsk2011_to_pz90, shift_pz90_to_gsk2011, shift_pz90_to_sk,
    shift_pz90_to_wgs84, shift_sk_to_pz90, shift_wgs84_to_pz90
)
from geotriangulation.projection import project_to_gauss_krueger, unproject_from_gauss_krueger
from geotriangulation.intersection import intersect_circles
from geotriangulation.triangulation import (
    MeasurementBundle, TriangulationResult, derive_measurements, locate_drone_and_target,
    locate_target_by_rotation, triangulate
)
from geotriangulation.pipeline import compute_measurements, resolve_geodetic

__all__ = [
    'CartesianPoint',
    'Coincident',
    'Contained',
    'ConvergenceFailure',
    'Datum',
    'Degrees',
    'Ellipsoid',
    'GeoTriangulationError',
    'GeodeticPoint',
    'IntersectionError',
    'LOGGER',
    'LocalPoint',
    'MalformedInput',
    'MeasurementBundle',
    'NoIntersection',
    'Observer',
    'PlanarPoint',
    'Radians',
    'TriangulationResult',
    'UnknownDatum',
    'cartesian_to_geodetic',
    'compute_measurements',
    'derive_measurements',
    'ellipsoid_params',
    'geodetic_to_cartesian',
    'intersect_circles',
    'locate_drone_and_target',
    'locate_target_by_rotation',
    'project_to_gauss_krueger',
    'resolve_geodetic',
    'shift_datum',
    'shift_gsk2011_to_pz90',
    'shift_pz90_to_gsk2011',
    'shift_pz90_to_sk',
    'shift_pz90_to_wgs84',
    'shift_sk_to_pz90',
    'shift_wgs84_to_pz90',
    'triangulate',
    'unproject_from_gauss_krueger',
]
