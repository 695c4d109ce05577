"""Argument validation decorators.

Checks run eagerly, before the wrapped function computes anything, so an
operation either receives well-formed input or fails without partial work.

Example:
    >>> @validate_dimensions(matrix=16, point=4)
    ... def apply(matrix, point):
    ...     ...
"""

from __future__ import annotations

import functools
import inspect
import numbers
from collections.abc import Callable
from typing import Any

from hxform.types import coerce

# Element counts that may also arrive as a square 2-D array
_SQUARE_SIDES = {16: 4, 9: 3}


def _bind(func: Callable) -> Callable[..., inspect.BoundArguments]:
    signature = inspect.signature(func)
    return signature.bind


def validate_dimensions(**sizes: int) -> Callable:
    """Coerce named array arguments to flat float64 arrays of fixed size.

    :param sizes: Mapping of parameter name to required element count
    :returns: Decorator
    :raises DimensionError: At call time, if an argument has the wrong size
    """

    def decorator(func: Callable) -> Callable:
        bind = _bind(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = bind(*args, **kwargs)
            for name, size in sizes.items():
                if name not in bound.arguments:
                    continue
                bound.arguments[name] = coerce(
                    bound.arguments[name], size, name, square=_SQUARE_SIDES.get(size)
                )
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator


def validate_number(*names: str) -> Callable:
    """Require named scalar arguments to be real numbers, converted to float.

    Booleans are rejected even though ``bool`` is an ``int`` subclass.

    :param names: Parameter names to check
    :returns: Decorator
    :raises TypeError: At call time, if an argument is not a real number
    """

    def decorator(func: Callable) -> Callable:
        bind = _bind(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = bind(*args, **kwargs)
            for name in names:
                if name not in bound.arguments:
                    continue
                value = bound.arguments[name]
                if isinstance(value, bool) or not isinstance(value, numbers.Real):
                    raise TypeError(f"{name} must be a number, got {type(value).__name__}")
                bound.arguments[name] = float(value)
            return func(*bound.args, **bound.kwargs)

        return wrapper

    return decorator
