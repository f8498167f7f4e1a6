"""Lexical capture primitives.

When a function is defined and references names outside its own body, it
keeps access to those names when it is called later, wherever it is called
from. Functions that keep access to bindings outside their local scope are
called closures.

Each function below is one self-contained example: an outer function that sets
up a scope, an inner function that reads from it, and (in
:mod:`closure_lessons.tour`) a call site that observes what was captured.
"""

from __future__ import annotations

from typing import Callable

value_outside_function = 'outside of function'

one = 1


def log_value_outside_lexical_scope() -> None:
    print(value_outside_function)


# -- Functions as values ------------------------------------------------------


def return_logger() -> Callable[[], None]:
    """Return a function definition that can be called later like any other."""

    def logger() -> None:
        print('logger')

    return logger


def return_function(fn: Callable[..., object]) -> Callable[..., object]:
    """Hand a function value straight back, unchanged."""
    return fn


def printer() -> None:
    print('printer')


# -- Capturing outer bindings ---------------------------------------------------


def return_print_one() -> Callable[[], None]:
    """The captured binding can live outside the outer function entirely.

    ``one`` is a module global, looked up when ``print_one`` runs, so rebinding
    it before the call changes what is printed.
    """

    def print_one() -> None:
        print(one)

    return print_one


def return_print_two() -> Callable[[], None]:
    """The captured binding can be a local of the immediately enclosing function."""
    two = 2

    def print_two() -> None:
        print(two)

    return print_two


def broken_return_print_two() -> Callable[..., None]:
    """Does not behave as expected.

    The inner parameter ``two`` shadows the outer local, so the inner function
    never sees ``2``. Called without an argument it prints ``None``.
    """
    two = 2  # noqa: F841

    def broken_print_two(two: object = None) -> None:
        print(two)

    return broken_print_two


def return_print_num(num: object) -> Callable[[], None]:
    """Arguments of the outer function are captured just like its locals."""

    def print_num() -> None:
        print(num)

    return print_num


def concise_return_print_num(num: object) -> Callable[[], None]:
    """Return the inner function without binding it to a name first."""
    return lambda: print(num)


# Same capture, one expression. Shorter is not always clearer.
more_concise_return_print_num: Callable[[object], Callable[[], None]] = lambda num: lambda: print(num)  # noqa: E731


def make_subject(subject: str) -> Callable[[str], None]:
    """Compose a captured value with one supplied at call time."""

    def act(verb: str) -> None:
        print(f'{subject} {verb}')

    return act
