from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Sequence,
    Tuple,
)

from logbook import Logger
from toolz import groupby, valmap

from .iteratee import iteratee

log = Logger("grouping")


def entries(collection: Iterable[Any]) -> Iterator[Tuple[Any, Any]]:
    """Pair each element with its index, or with its key for a mapping."""
    if isinstance(collection, Mapping):
        return iter(collection.items())
    return enumerate(collection)


def group_by(collection: Iterable[Any], selector: Any) -> Dict[Hashable, List[Any]]:
    """Partition `collection` into buckets keyed by `selector`.

    `selector` is either a callable or a field name. Keys appear in the
    order they were first produced and every bucket keeps the relative
    order of its elements. A selector that yields nothing, or a field
    that is missing, puts the element under the `None` key. Keys that
    compare equal share a bucket, so `1`, `True` and `1.0` all land
    under whichever of them was seen first.

    >>> group_by(["Liz", "Ceren", "Shanna", "Charlotte"], lambda s: s[0])
    {'L': ['Liz'], 'C': ['Ceren', 'Charlotte'], 'S': ['Shanna']}
    """
    if not isinstance(collection, (Mapping, Sequence)):
        # Selectors see the whole collection, so one-shot iterables are kept
        collection = list(collection)
    key = iteratee(selector)
    pairs = list(entries(collection))
    log.debug("Grouping {} element(s) by {!r}", len(pairs), selector)
    buckets = groupby(lambda pair: key(pair[1], pair[0], collection), pairs)
    return valmap(lambda group: [element for _, element in group], buckets)
