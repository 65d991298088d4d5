import inspect
from collections.abc import Mapping
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, NamedTuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Sequence_ = Union[List[T], Tuple[T, ...]]
Container = Union[Sequence_[T], Mapping]
Iteratee = Callable[..., Any]
Predicate = Callable[..., bool]
Criteria = Union[Callable[..., Any], str, None]


class InvalidArgument(TypeError):
    """raised when a function receives an argument of the wrong kind"""
    pass


class _Criteria(NamedTuple):
    """sort record pairing an element with its position and computed criterion"""
    value: Any
    index: int
    criteria: Any

    def sort_key(self) -> Tuple:
        # none criteria sort after everything else, ties fall back to position
        if self.criteria is None:
            return (1, 0, self.index)
        return (0, self.criteria, self.index)


_MISSING = object()


class Membership:
    """
    order-agnostic membership by equality.
    hashable values go through a set, unhashable ones (dicts, lists) fall back to a list scan.
    """
    def __init__(self, items: Iterable[Any] = ()):
        self._hashed = set()
        self._unhashable = []
        for item in items:
            self.add(item)

    def __contains__(self, item: Any) -> bool:
        try:
            return item in self._hashed
        except TypeError:
            return item in self._unhashable

    def add(self, item: Any) -> None:
        try:
            self._hashed.add(item)
        except TypeError:
            self._unhashable.append(item)



# --- container dispatch ---

def is_sequence_like(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_mapping_like(value: Any) -> bool:
    return isinstance(value, Mapping)


def entries(container: Any, func_name: str) -> List[Tuple[Any, Any]]:
    """
    resolves the container kind once and returns its (key, value) pairs.
    sequences yield (index, value), mappings yield (key, value), none is empty.
    """
    if container is None:
        return []
    if is_sequence_like(container):
        return list(enumerate(container))
    if is_mapping_like(container):
        return list(container.items())
    raise InvalidArgument(f"{func_name}() expects a sequence or mapping, got {type(container).__name__}")


def require_sequence(value: Any, func_name: str) -> Sequence_:
    if value is None:
        return []
    if not is_sequence_like(value):
        raise InvalidArgument(f"{func_name}() expects a sequence, got {type(value).__name__}")
    return value


def require_mapping(value: Any, func_name: str) -> Mapping:
    if not is_mapping_like(value):
        raise InvalidArgument(f"{func_name}() expects a mapping, got {type(value).__name__}")
    return value


# --- callback adaptation ---

def _positional_arity(func: Callable) -> int:
    """
    number of required positional arguments a callable takes, or -1 for *args.
    optional positional parameters never receive the index or container,
    so str.strip, sum or round see the value alone.
    """
    if isinstance(func, type):
        # constructors such as str or int are converters of the value alone
        return 1
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        # builtins without an introspectable signature get the value only
        return 1
    required, optional = 0, 0
    for param in params:
        if param.kind == param.VAR_POSITIONAL:
            return -1
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            if param.default is param.empty:
                required += 1
            else:
                optional += 1
    if required == 0 and optional:
        return 1
    return required


def iteratee(func: Optional[Callable], context: Any = None, func_name: str = 'iteratee') -> Callable[..., Any]:
    """
    adapts a user callback so it can always be called with the full argument list.
    the callback receives as many leading arguments as its signature accepts.
    a context, when given, is bound as the first positional argument.
    """
    if func is None:
        return lambda value, *_: value
    if not callable(func):
        raise InvalidArgument(f"{func_name}() expects a callable, got {type(func).__name__}")

    arity = _positional_arity(func)
    if context is not None:
        arity = arity - 1 if arity > 0 else arity
        bound = lambda *args: func(context, *args)
    else:
        bound = func

    if arity < 0:
        return bound
    return lambda *args: bound(*args[:arity])


def criteria_lookup(criteria: Criteria, context: Any = None, func_name: str = 'criteria') -> Callable[..., Any]:
    """turns a callable, a slot name or none into a criterion function"""
    if isinstance(criteria, str):
        name = criteria

        def by_slot(value, *_):
            if is_mapping_like(value):
                return value.get(name)
            return getattr(value, name, None)
        return by_slot
    return iteratee(criteria, context, func_name)
