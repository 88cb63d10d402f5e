from typing import Any, Iterable, Iterator, List, Optional, Sequence

from logbook import Logger

from .iteratee import TEXT_TYPES

log = Logger("flattening")


def is_flattenable(value: Any) -> bool:
    """Sequences are descended into. Text and everything else is atomic."""
    return isinstance(value, Sequence) and not isinstance(value, TEXT_TYPES)


def walk(nested: Iterable[Any], depth: Optional[int] = None) -> Iterator[Any]:
    """
    Yields the elements of `nested` in depth-first pre-order, descending
    into at most `depth` levels of sub-sequences. A depth of None
    descends without limit.
    """
    for value in nested:
        if is_flattenable(value) and (depth is None or depth > 0):
            yield from walk(value, None if depth is None else depth - 1)
        else:
            yield value


def flatten_depth(nested: Iterable[Any], depth: int = 1) -> List[Any]:
    if depth <= 0:
        log.debug("Depth {} leaves nesting untouched", depth)
        return list(nested)
    return list(walk(nested, depth))


def flatten(nested: Iterable[Any]) -> List[Any]:
    return flatten_depth(nested, 1)


def flatten_deep(nested: Iterable[Any]) -> List[Any]:
    """
    Collapses any amount of nesting into a single flat list.

    >>> flatten_deep([1, [2, 3], [[4], [5, [6]]]])
    [1, 2, 3, 4, 5, 6]
    """
    return list(walk(nested))
