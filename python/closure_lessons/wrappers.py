"""Closures that add behaviour to another function.

Both factories capture the wrapped callable and hand back a new function that
forwards its arguments, so callers can swap the wrapper in wherever the
original was used.
"""

from __future__ import annotations

import functools
import threading
from typing import Any, Callable, TypeVar

T = TypeVar('T')


def make_function_with_logging(fn: Callable[..., T]) -> Callable[..., T]:
    """Wrap `fn` so every call is announced on stdout before delegating.

    Example::

        logged_add = make_function_with_logging(add)
        logged_add(1, 2)
        # Calling add with arguments 1, 2
        # 3
    """

    @functools.wraps(fn)
    def function_with_logging(*args: Any, **kwargs: Any) -> T:
        name = getattr(fn, '__name__', repr(fn))
        print(f'Calling {name} with arguments {format_arguments(args, kwargs)}')
        return fn(*args, **kwargs)

    return function_with_logging


def make_single_call_function(fn: Callable[..., T]) -> Callable[..., T | None]:
    """Wrap `fn` so that only the first call ever reaches it.

    The returned closure keeps a private ``called`` flag. The first invocation
    flips it and delegates; every later invocation does nothing and returns
    ``None``. If the first call raises, that still counts as the one call.
    """
    called = False
    lock = threading.Lock()

    @functools.wraps(fn)
    def single_call_function(*args: Any, **kwargs: Any) -> T | None:
        nonlocal called
        with lock:
            if called:
                return None
            called = True
        return fn(*args, **kwargs)

    return single_call_function


def format_arguments(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    """Render call arguments the way they would be written at the call site."""
    parts = [repr(arg) for arg in args]
    parts.extend(f'{key}={value!r}' for key, value in kwargs.items())
    return ', '.join(parts)


def add(a: Any, b: Any) -> Any:
    result = a + b
    print(result)
    return result


def make_person(first_name: str, last_name: str) -> str:
    name = f'{first_name} {last_name}'
    print(name)
    return name
