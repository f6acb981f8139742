"""
Empirical shifts of geocentric coordinates between reference systems (GOST 32453-2017).

Each direction carries its own published constants; the reverse of a transform is
NOT the matrix inverse of the forward one, and chaining a pair only returns to the
starting point within the empirical residual of the constants.
"""

__all__ = [
    'DatumTransform', 'shift_datum',
    'shift_gsk2011_to_pz90', 'shift_pz90_to_gsk2011',
    'shift_pz90_to_sk', 'shift_sk_to_pz90',
    'shift_pz90_to_wgs84', 'shift_wgs84_to_pz90',
]

from typing import Dict, Tuple

import numpy as np

from geotriangulation.coordinates import CartesianPoint
from geotriangulation.datums import Datum
from geotriangulation.exceptions import UnknownDatum


class DatumTransform:
    """
    An affine transform v' = M @ v + t from one datum to another, where M is a
    near-identity matrix of small rotations.
    """

    def __init__(self, source: Datum, target: Datum, matrix, translation):
        self.source = source
        self.target = target
        self.matrix = np.array(matrix, dtype=float)
        self.translation = np.array(translation, dtype=float)

    def __repr__(self):
        return f'<DatumTransform({self.source} -> {self.target})>'

    def __call__(self, x: float, y: float, z: float) -> CartesianPoint:
        shifted = self.matrix @ np.array([x, y, z], dtype=float) + self.translation
        return CartesianPoint(*shifted.tolist(), self.target)


_WGS84_TO_PZ90 = DatumTransform(
    Datum.WGS84, Datum.PZ90,
    [[1.0, -2.041066e-8, -1.716240e-8],
     [+2.041066e-8, 1.0, -1.115071e-8],
     [+1.716240e-8, +1.115071e-8, 1.0]],
    [-0.003, +0.001, 0.000],
)

_PZ90_TO_WGS84 = DatumTransform(
    Datum.PZ90, Datum.WGS84,
    [[1.0, +2.041066e-8, +1.716240e-8],
     [-2.041066e-8, 1.0, +1.115071e-8],
     [-1.716240e-8, -1.115071e-8, 1.0]],
    [+0.003, +0.001, 0.000],
)

_PZ90_TO_GSK2011 = DatumTransform(
    Datum.PZ90, Datum.GSK2011,
    [[1.0, -2.56951e-10, -9.21146e-11],
     [+2.569513e-10, 1.0, -2.72465e-9],
     [+9.211460e-11, -2.72465e-9, 1.0]],
    [0.000, -0.014, +0.008],
)

_GSK2011_TO_PZ90 = DatumTransform(
    Datum.GSK2011, Datum.PZ90,
    [[1.0, +2.569513e-10, +9.211460e-11],
     [-2.569513e-10, 1.0, +2.724653e-9],
     [-9.211460e-11, -2.724653e-9, 1.0]],
    [0.000, +0.014, -0.008],
)

_PZ90_TO_SK = DatumTransform(
    Datum.PZ90, Datum.SK,
    [[1.0, +6.506684e-7, +1.716240e-8],
     [-6.506684e-7, 1.0, +1.115071e-8],
     [-1.716240e-8, -1.115071e-8, 1.0]],
    [-24.457, +130.784, +81.538],
)

_SK_TO_PZ90 = DatumTransform(
    Datum.SK, Datum.PZ90,
    [[1.0, -6.506684e-7, -1.716240e-8],
     [+6.506684e-7, 1.0, -1.115071e-8],
     [+1.716240e-8, +1.115071e-8, 1.0]],
    [+24.457, -130.784, -81.538],
)

_TRANSFORMS: Dict[Tuple[Datum, Datum], DatumTransform] = {
    (t.source, t.target): t
    for t in (
        _WGS84_TO_PZ90, _PZ90_TO_WGS84,
        _PZ90_TO_GSK2011, _GSK2011_TO_PZ90,
        _PZ90_TO_SK, _SK_TO_PZ90,
    )
}


def shift_wgs84_to_pz90(x: float, y: float, z: float) -> CartesianPoint:
    """WGS-84 (G1150) -> PZ-90.11"""
    return _WGS84_TO_PZ90(x, y, z)


def shift_pz90_to_wgs84(x: float, y: float, z: float) -> CartesianPoint:
    """PZ-90.11 -> WGS-84 (G1150)"""
    return _PZ90_TO_WGS84(x, y, z)


def shift_pz90_to_gsk2011(x: float, y: float, z: float) -> CartesianPoint:
    """PZ-90.11 -> GSK-2011"""
    return _PZ90_TO_GSK2011(x, y, z)


def shift_gsk2011_to_pz90(x: float, y: float, z: float) -> CartesianPoint:
    """GSK-2011 -> PZ-90.11"""
    return _GSK2011_TO_PZ90(x, y, z)


def shift_pz90_to_sk(x: float, y: float, z: float) -> CartesianPoint:
    """PZ-90.11 -> SK-42/95 (Krasovsky ellipsoid)"""
    return _PZ90_TO_SK(x, y, z)


def shift_sk_to_pz90(x: float, y: float, z: float) -> CartesianPoint:
    """SK-42/95 (Krasovsky ellipsoid) -> PZ-90.11"""
    return _SK_TO_PZ90(x, y, z)


def shift_datum(point: CartesianPoint, target: Datum) -> CartesianPoint:
    """
    Re-express a geocentric point in another datum.

    Pairs without a published transform are routed through PZ-90.11, e.g.
    WGS-84 -> SK-42/95 is applied as WGS-84 -> PZ-90.11 -> SK-42/95.

    Args:
        point:
            The point to shift

        target:
            The datum to shift into

    Returns:
        CartesianPoint in the target datum
    """
    if not isinstance(target, Datum):
        raise UnknownDatum(f'Unknown datum {target!r}')

    if point.datum == target:
        return point

    if (point.datum, target) in _TRANSFORMS:
        return _TRANSFORMS[(point.datum, target)](point.x, point.y, point.z)

    hub = _TRANSFORMS[(point.datum, Datum.PZ90)](point.x, point.y, point.z)
    return _TRANSFORMS[(Datum.PZ90, target)](hub.x, hub.y, hub.z)
