import inspect
from typing import Any, Callable, Hashable, Mapping, Sequence

from logbook import Logger

log = Logger("iteratee")

Iteratee = Callable[[Any, Any, Any], Any]

TEXT_TYPES = (str, bytes, bytearray)
POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(func: Callable[..., Any]) -> int:
    """Count how many of `(element, index, collection)` to pass to `func`.

    Only required positional parameters are counted, so a parameter
    with a default keeps its default. Anything accepting positional
    arguments gets at least the element; a function taking no
    positional arguments at all gets nothing.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        log.debug("No signature for {}, passing the element only", func)
        return 1
    params = signature.parameters.values()
    positional = [p for p in params if p.kind in POSITIONAL]
    variadic = any(p.kind == inspect.Parameter.VAR_POSITIONAL for p in params)
    if not positional and not variadic:
        return 0
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    return max(1, min(len(required), 3))


def _lookup(element: Any, key: Hashable) -> Any:
    if isinstance(element, Mapping):
        return element.get(key)
    if isinstance(element, Sequence) and not isinstance(element, TEXT_TYPES):
        if isinstance(key, str) and key.isdigit():
            key = int(key)
        if isinstance(key, int) and not isinstance(key, bool) and key >= 0:
            try:
                return element[key]
            except IndexError:
                return None
    if isinstance(key, str):
        return getattr(element, key, None)
    return None


def _has(element: Any, key: Hashable) -> bool:
    if isinstance(element, Mapping):
        return key in element
    return isinstance(key, str) and hasattr(element, key)


def property_of(path: Hashable) -> Callable[..., Any]:
    """Build a getter reading `path` off an element.

    A string path containing dots is walked one segment at a time,
    unless the element has the whole dotted string as a key. Missing
    values come back as None.
    """
    segments = path.split(".") if isinstance(path, str) and "." in path else None

    def _property(element: Any, *_: Any) -> Any:
        if segments is None or _has(element, path):
            return _lookup(element, path)
        value = element
        for segment in segments:
            if value is None:
                return None
            value = _lookup(value, segment)
        return value

    return _property


def iteratee(selector: Any) -> Iteratee:
    """Normalize a selector into a function of `(element, index, collection)`."""
    if not callable(selector):
        log.trace("Reading field {!r} off each element", selector)
        return property_of(selector)

    arity = positional_arity(selector)
    log.trace("Calling {} with {} argument(s)", selector, arity)

    def _iteratee(element: Any, index: Any, collection: Any) -> Any:
        return selector(*(element, index, collection)[:arity])

    return _iteratee
