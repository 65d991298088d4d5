from __future__ import annotations
from ..types import *
from .array import flatten


def uniq(sequence: Sequence_[T], is_sorted: bool = False, transform: Optional[Iteratee] = None,
         context: Any = None) -> List[T]:
    """
    removes duplicates, keeping the first occurrence of each.
    with is_sorted, only neighbours are compared, which requires the sequence to be
    sorted by the transform. duplicates are judged on transformed values but the
    original values are returned.
    """
    data = require_sequence(sequence, 'uniq')
    call = iteratee(transform, context, 'uniq')
    result = []
    if is_sorted:
        previous = object()
        for index, item in enumerate(data):
            computed = call(item, index, data)
            if not result or computed != previous:
                result.append(item)
            previous = computed
        return result

    seen = Membership()
    for index, item in enumerate(data):
        computed = call(item, index, data)
        if computed not in seen:
            seen.add(computed)
            result.append(item)
    return result


def without(sequence: Sequence_[T], *values: Any) -> List[T]:
    """the sequence minus every occurrence of the given values"""
    excluded = Membership(values)
    return [item for item in require_sequence(sequence, 'without') if item not in excluded]


def union(*sequences: Sequence_[T]) -> List[T]:
    """distinct elements of all sequences in first-seen order"""
    return uniq(flatten([require_sequence(seq, 'union') for seq in sequences], shallow=True))


def intersection(*sequences: Sequence_[T]) -> List[T]:
    """distinct elements of the first sequence present in every other one"""
    if not sequences:
        return []
    head, *others = [require_sequence(seq, 'intersection') for seq in sequences]
    lookups = [Membership(other) for other in others]
    return [item for item in uniq(head) if all(item in lookup for lookup in lookups)]


def difference(sequence: Sequence_[T], *others: Sequence_[T]) -> List[T]:
    """elements of the sequence found in none of the others"""
    excluded = Membership()
    for other in others:
        for item in require_sequence(other, 'difference'):
            excluded.add(item)
    return [item for item in require_sequence(sequence, 'difference') if item not in excluded]
