from __future__ import annotations
from collections import defaultdict
from ..types import *
from ..types import _Criteria


def sort_by(container: Container[T], criteria: Criteria = None, context: Any = None) -> List[T]:
    """
    stable ascending sort by a computed criterion.
    the criterion may be a function, a slot name or none (the values themselves).
    elements whose criterion is none sort last; ties keep their original order.
    """
    lookup = criteria_lookup(criteria, context, 'sort_by')
    records = [
        _Criteria(value, index, lookup(value, key, container))
        for index, (key, value) in enumerate(entries(container, 'sort_by'))
    ]
    records.sort(key=_Criteria.sort_key)
    return [record.value for record in records]


def _group(container, criteria, context, func_name, default_factory, behavior):
    lookup = criteria_lookup(criteria, context, func_name)
    groups = defaultdict(default_factory)
    for key, value in entries(container, func_name):
        behavior(groups, lookup(value, key, container), value)
    return dict(groups)


def _append(groups, group_key, value):
    groups[group_key].append(value)


def _increment(groups, group_key, _value):
    groups[group_key] += 1


def group_by(container: Container[T], criteria: Criteria = None, context: Any = None) -> Dict[Any, List[T]]:
    """buckets elements by criterion; each bucket keeps encounter order"""
    return _group(container, criteria, context, 'group_by', list, _append)


def count_by(container: Container[T], criteria: Criteria = None, context: Any = None) -> Dict[Any, int]:
    """like group_by() but each bucket holds a count"""
    return _group(container, criteria, context, 'count_by', int, _increment)
