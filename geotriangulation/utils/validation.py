"""Numeric input validation built on pydantic"""

__all__ = ['finite_float', 'validate_finite']

import functools
from typing import Any, Callable, TypeVar

from pydantic import FiniteFloat, TypeAdapter, ValidationError, validate_call

from geotriangulation.exceptions import MalformedInput

_FUNC = TypeVar('_FUNC', bound=Callable[..., Any])
_FINITE_FLOAT = TypeAdapter(FiniteFloat)


def finite_float(value: Any, name: str = 'value') -> float:
    """
    Coerces a value to a finite float.

    Args:
        value:
            A float, int, or numeric string

        name:
            The argument name, used in the error message

    Returns:
        float
    """
    try:
        return float(_FINITE_FLOAT.validate_python(value))
    except ValidationError as err:
        raise MalformedInput(f'{name} must be a finite number, got {value!r}') from err


def validate_finite(func: _FUNC) -> _FUNC:
    """
    Decorator that validates (and coerces) annotated arguments with pydantic, reporting
    failures as MalformedInput. Annotate numeric arguments as FiniteFloat to reject
    NaN and infinities.
    """
    validated = validate_call(func, config=dict(arbitrary_types_allowed=True))

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return validated(*args, **kwargs)
        except ValidationError as err:
            raise MalformedInput(
                f'Invalid arguments to {func.__qualname__}: {err}'
            ) from err

    return wrapper  # type: ignore
