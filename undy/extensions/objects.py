from __future__ import annotations
from copy import copy as shallow_copy
from ..types import *
from .array import flatten


# --- projections ---

def slots(mapping: Mapping) -> List[Any]:
    """keys in iteration order"""
    return list(require_mapping(mapping, 'slots').keys())


def values(mapping: Mapping) -> List[Any]:
    """values in iteration order"""
    return list(require_mapping(mapping, 'values').values())


def pairs(mapping: Mapping) -> List[List[Any]]:
    """[key, value] pairs in iteration order"""
    return [[key, value] for key, value in require_mapping(mapping, 'pairs').items()]


def invert(mapping: Mapping) -> Dict[Any, Any]:
    """swaps keys and values; on duplicate values the last key wins"""
    return {value: key for key, value in require_mapping(mapping, 'invert').items()}


def functions(mapping: Any) -> List[str]:
    """sorted names of the callable slots of a mapping, or the public methods of an object"""
    if is_mapping_like(mapping):
        return sorted(key for key, value in mapping.items() if callable(value))
    if mapping is None:
        raise InvalidArgument("functions() expects a mapping or object, got NoneType")
    return sorted(name for name in dir(mapping) if not name.startswith('_') and callable(getattr(mapping, name)))


# --- merging ---

def extend(destination: Dict, *sources: Optional[Mapping]) -> Dict:
    """copies every slot of each source into destination, later sources winning"""
    require_mapping(destination, 'extend')
    for source in sources:
        if source is None:
            continue
        destination.update(require_mapping(source, 'extend'))
    return destination


def defaults(destination: Dict, *sources: Optional[Mapping]) -> Dict:
    """fills absent or none slots of destination; the first source to supply one wins"""
    require_mapping(destination, 'defaults')
    for source in sources:
        if source is None:
            continue
        for key, value in require_mapping(source, 'defaults').items():
            if destination.get(key) is None:
                destination[key] = value
    return destination


def _key_list(keys: Tuple[Any, ...]) -> List[Any]:
    # pick('a', 'b') and pick(['a', 'b']) are equivalent
    return flatten(list(keys), shallow=True)


def pick(mapping: Mapping, *keys: Any) -> Dict[Any, Any]:
    """a new mapping holding only the given keys"""
    source = require_mapping(mapping, 'pick')
    return {key: source[key] for key in _key_list(keys) if key in source}


def omit(mapping: Mapping, *keys: Any) -> Dict[Any, Any]:
    """a new mapping without the given keys"""
    source = require_mapping(mapping, 'omit')
    excluded = Membership(_key_list(keys))
    return {key: value for key, value in source.items() if key not in excluded}


# --- inspection ---

def copy(value: T) -> T:
    """
    shallow copy of a sequence or mapping that keeps its type, so a defaultdict
    stays a defaultdict. anything else is returned as-is.
    """
    if is_sequence_like(value) or is_mapping_like(value):
        return shallow_copy(value)
    return value


def tap(value: T, interceptor: Callable[[T], Any]) -> T:
    """calls interceptor(value) for its side effect and returns value"""
    iteratee(interceptor, func_name='tap')(value)
    return value


def has(mapping: Mapping, key: Any) -> bool:
    """true if the key is present, whatever its value"""
    return key in require_mapping(mapping, 'has')


def is_empty(value: Any) -> bool:
    """true for a sequence or mapping without elements; false for anything else"""
    if is_sequence_like(value) or is_mapping_like(value):
        return len(value) == 0
    return False
