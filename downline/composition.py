from typing import Any, Callable

from logbook import Logger
from toolz import compose, compose_left

from .flattening import flatten

log = Logger("composition")


def _functions(funcs: Any) -> list:
    # Lists of functions may be passed in place of functions
    chain = flatten(funcs)
    for func in chain:
        if not callable(func):
            raise TypeError(f"Expected a function, got {func!r}")
    log.trace("Composing {} function(s)", len(chain))
    return chain


def flow(*funcs: Any) -> Callable[..., Any]:
    """
    Compose `funcs` left to right. The leftmost function receives the
    original arguments, every later one the result of its predecessor.
    """
    return compose_left(*_functions(funcs))


def flow_right(*funcs: Any) -> Callable[..., Any]:
    """
    Compose `funcs` right to left, so `flow_right(f, g)(x) == f(g(x))`.

    The rightmost function receives every original argument; the rest
    receive exactly one value, the result of the function to their
    right. With no functions the result is the identity on a single
    argument.
    """
    return compose(*_functions(funcs))
