from __future__ import annotations
import builtins
import logging
from ..types import *
from ..types import _Criteria, _MISSING

logger = logging.getLogger(__name__)


# --- iteration ---

def each(container: Container[T], fn: Iteratee, context: Any = None) -> None:
    """calls fn(value, index_or_key, container) for every element, for side-effects only"""
    call = iteratee(fn, context, 'each')
    for key, value in entries(container, 'each'):
        call(value, key, container)


def map(container: Container[T], fn: Iteratee, context: Any = None) -> List[U]:
    """project each element to a new form, returned as a list in iteration order"""
    call = iteratee(fn, context, 'map')
    return [call(value, key, container) for key, value in entries(container, 'map')]


def reduce(container: Container[T], fn: Callable[..., U], initial: Any = _MISSING, context: Any = None) -> U:
    """
    left fold calling fn(memo, value, index_or_key, container).
    without an initial value the first element seeds the fold; an empty
    container then reduces to none.
    """
    return _fold(entries(container, 'reduce'), container, fn, initial, context, 'reduce')


def reduce_right(container: Container[T], fn: Callable[..., U], initial: Any = _MISSING, context: Any = None) -> U:
    """right fold, the mirror of reduce()"""
    return _fold(entries(container, 'reduce_right')[::-1], container, fn, initial, context, 'reduce_right')


def _fold(pairs, container, fn, initial, context, func_name):
    if not callable(fn):
        raise InvalidArgument(f"{func_name}() expects a callable, got {type(fn).__name__}")
    call = iteratee(fn, context, func_name)
    if initial is _MISSING:
        if not pairs:
            return None
        memo, pairs = pairs[0][1], pairs[1:]
    else:
        memo = initial
    for key, value in pairs:
        memo = call(memo, value, key, container)
    return memo


# --- search ---

def find(container: Container[T], predicate: Predicate, context: Any = None) -> Optional[T]:
    """first element satisfying the predicate, or none"""
    test = iteratee(predicate, context, 'find')
    for key, value in entries(container, 'find'):
        if test(value, key, container):
            return value
    return None


def filter(container: Container[T], predicate: Predicate, context: Any = None) -> List[T]:
    """elements satisfying the predicate"""
    test = iteratee(predicate, context, 'filter')
    return [value for key, value in entries(container, 'filter') if test(value, key, container)]


def reject(container: Container[T], predicate: Predicate, context: Any = None) -> List[T]:
    """elements failing the predicate, the complement of filter()"""
    test = iteratee(predicate, context, 'reject')
    return [value for key, value in entries(container, 'reject') if not test(value, key, container)]


def _matches(item: Any, criteria: Mapping) -> bool:
    # only keys present in both and unequal disqualify an element
    if not is_mapping_like(item):
        return False
    return builtins.all(item[key] == expected for key, expected in criteria.items() if key in item)


def where(container: Container[Mapping], criteria: Mapping) -> List[Mapping]:
    """keeps mapping elements whose slots agree with every criteria key they share"""
    criteria = require_mapping(criteria, 'where')
    return [value for _, value in entries(container, 'where') if _matches(value, criteria)]


def find_where(container: Container[Mapping], criteria: Mapping) -> Optional[Mapping]:
    """first element matching like where(), or none"""
    criteria = require_mapping(criteria, 'find_where')
    for _, value in entries(container, 'find_where'):
        if _matches(value, criteria):
            return value
    return None


def every(container: Container[T], predicate: Optional[Predicate] = None, context: Any = None) -> bool:
    """true if all elements satisfy the predicate; vacuously true when empty"""
    test = iteratee(predicate, context, 'every')
    for key, value in entries(container, 'every'):
        if not test(value, key, container):
            return False
    return True


def some(container: Container[T], predicate: Optional[Predicate] = None, context: Any = None) -> bool:
    """true if any element satisfies the predicate"""
    test = iteratee(predicate, context, 'some')
    for key, value in entries(container, 'some'):
        if test(value, key, container):
            return True
    return False


def contains(container: Container[T], value: Any) -> bool:
    """equality search; mappings are searched by value, not key"""
    return builtins.any(item == value for _, item in entries(container, 'contains'))


def invoke(container: Container[T], method: Union[str, Callable], *args) -> Container[T]:
    """
    calls a method on every element with the element as receiver.
    the method may be a name or a callable. mapping elements holding a callable
    slot of that name are called with themselves as the first argument.
    elements without the method are skipped. returns the container itself.
    """
    for key, item in entries(container, 'invoke'):
        if callable(method):
            method(item, *args)
        elif is_mapping_like(item) and callable(item.get(method)):
            item[method](item, *args)
        elif callable(getattr(item, method, None)):
            getattr(item, method)(*args)
        else:
            logger.debug(f"invoke: element at {key!r} has no method {method!r}")
    return container


def pluck(container: Container[Any], name: str) -> List[Any]:
    """collects a slot from each element that has it, skipping the rest"""
    result = []
    for _, item in entries(container, 'pluck'):
        if is_mapping_like(item):
            if name in item:
                result.append(item[name])
        elif hasattr(item, name):
            result.append(getattr(item, name))
    return result


def _extreme(container, transform, context, pick, func_name):
    pairs = entries(container, func_name)
    if not pairs:
        return None
    call = iteratee(transform, context, func_name)
    scored = [_Criteria(value, index, call(value, key, container)) for index, (key, value) in enumerate(pairs)]
    return pick(scored, key=lambda record: record.criteria).value


def max(container: Container[T], transform: Optional[Iteratee] = None, context: Any = None) -> Optional[T]:
    """element with the greatest (optionally transformed) value, or none when empty"""
    return _extreme(container, transform, context, builtins.max, 'max')


def min(container: Container[T], transform: Optional[Iteratee] = None, context: Any = None) -> Optional[T]:
    """element with the smallest (optionally transformed) value, or none when empty"""
    return _extreme(container, transform, context, builtins.min, 'min')


def size(container: Container[T]) -> int:
    """element count for sequences, slot count for mappings"""
    return len(entries(container, 'size'))
