from __future__ import annotations
import builtins
import math
from bisect import bisect_left
from itertools import zip_longest
from ..types import *
from .predicates import is_falsy


def _clamp(n: int, length: int) -> int:
    return builtins.max(0, builtins.min(n, length))


# --- slicing ---

def first(sequence: Sequence_[T], n: int = 1) -> List[T]:
    """the first n elements, n clamped to [0, length]"""
    data = require_sequence(sequence, 'first')
    return list(data[:_clamp(n, len(data))])


def last(sequence: Sequence_[T], n: int = 1) -> List[T]:
    """the last n elements, n clamped to [0, length]"""
    data = require_sequence(sequence, 'last')
    n = _clamp(n, len(data))
    return list(data[len(data) - n:])


def initial(sequence: Sequence_[T], n: int = 1) -> List[T]:
    """
    everything but the last n elements.
    when n reaches the length it resets to zero, so the whole sequence comes back.
    """
    data = require_sequence(sequence, 'initial')
    if n >= len(data) or n < 0:
        n = 0
    return list(data[:len(data) - n])


def rest(sequence: Sequence_[T], index: int = 1) -> List[T]:
    """the elements from index onward, index clamped to [0, length]"""
    data = require_sequence(sequence, 'rest')
    return list(data[_clamp(index, len(data)):])


# --- reshaping ---

def compact(sequence: Sequence_[T]) -> List[T]:
    """drops none, numeric zero and false"""
    return [item for item in require_sequence(sequence, 'compact') if not is_falsy(item)]


def flatten(sequence: Sequence_[Any], shallow: bool = False) -> List[Any]:
    """flattens nested lists and tuples one level deep, or all the way down"""

    def flatten_recursive(items, result):
        for item in items:
            if is_sequence_like(item):
                if shallow:
                    result.extend(item)
                else:
                    flatten_recursive(item, result)
            else:
                result.append(item)
        return result

    return flatten_recursive(require_sequence(sequence, 'flatten'), [])


def zip(*sequences: Sequence_[Any]) -> List[List[Any]]:
    """transposes sequences into rows, padding the short ones with none"""
    columns = [require_sequence(seq, 'zip') for seq in sequences]
    return [list(row) for row in zip_longest(*columns)]


def table(keys_or_pairs: Sequence_[Any], values: Optional[Sequence_[Any]] = None) -> Dict[Any, Any]:
    """builds a mapping from [key, value] pairs, or from parallel keys and values"""
    keys_or_pairs = require_sequence(keys_or_pairs, 'table')
    if values is None:
        result = {}
        for pair in keys_or_pairs:
            key, value = require_sequence(pair, 'table')[:2]
            result[key] = value
        return result
    values = require_sequence(values, 'table')
    # keys without a parallel value get no slot
    return {key: value for key, value in builtins.zip(keys_or_pairs, values)}


# --- searching ---

def index_of(sequence: Sequence_[T], item: T) -> int:
    """index of the first element equal to item, or -1"""
    for index, value in enumerate(require_sequence(sequence, 'index_of')):
        if value == item:
            return index
    return -1


def last_index_of(sequence: Sequence_[T], item: T, from_index: int = 0) -> int:
    """
    index of the last element equal to item at or before from_index, or -1.
    from_index 0 searches the whole sequence, negative values count from the end.
    """
    data = require_sequence(sequence, 'last_index_of')
    start = len(data) - 1
    if from_index > 0:
        start = builtins.min(from_index, start)
    elif from_index < 0:
        start = len(data) + from_index
    for index in builtins.range(start, -1, -1):
        if data[index] == item:
            return index
    return -1


def sorted_index(sequence: Sequence_[T], item: T, criteria: Criteria = None, context: Any = None) -> int:
    """
    binary search for the leftmost insertion point that keeps the sequence sorted.
    the sequence must already be sorted by the same criterion.
    """
    data = require_sequence(sequence, 'sorted_index')
    lookup = criteria_lookup(criteria, context, 'sorted_index')
    return bisect_left(data, lookup(item), key=lookup)


# --- generation ---

def range(start: Union[int, float], stop: Optional[Union[int, float]] = None,
          step: Optional[Union[int, float]] = None) -> List[Union[int, float]]:
    """
    arithmetic sequence. range(n) is [0, n), range(a, b) is [a, b) and
    range(a, b, step) walks from a toward b by step, which may be negative.
    """
    if stop is None:
        start, stop = 0, start
    if step is None:
        step = 1
    if step == 0:
        raise InvalidArgument("range() step must not be zero")
    length = builtins.max(math.ceil((stop - start) / step), 0)
    return [start + i * step for i in builtins.range(length)]
