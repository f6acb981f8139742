"""
Exceptions raised by geotriangulation.

Every error derives from GeoTriangulationError, and additionally from the builtin
exception a caller would naturally catch (ValueError for bad input, ArithmeticError
for geometric or numeric infeasibility).
"""

__all__ = [
    'Coincident', 'Contained', 'ConvergenceFailure', 'GeoTriangulationError',
    'IntersectionError', 'MalformedInput', 'NoIntersection', 'UnknownDatum',
]


class GeoTriangulationError(Exception):
    """Base class for all geotriangulation errors"""


class UnknownDatum(GeoTriangulationError, ValueError):
    """The datum identifier is not one of the supported reference systems"""


class MalformedInput(GeoTriangulationError, ValueError):
    """A numeric or textual argument is non-finite or outside its domain"""


class ConvergenceFailure(GeoTriangulationError, ArithmeticError):
    """An iterative procedure did not converge within its iteration bound"""


class IntersectionError(GeoTriangulationError, ArithmeticError):
    """Two circles do not meet in exactly two points"""


class NoIntersection(IntersectionError):
    """The circles are too far apart to meet"""


class Contained(IntersectionError):
    """One circle lies entirely inside the other"""


class Coincident(IntersectionError):
    """The circles are identical, yielding infinitely many intersections"""
