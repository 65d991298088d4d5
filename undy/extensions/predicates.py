from __future__ import annotations
import numbers
import numpy as np
from ..types import *


def is_array(value: Any) -> bool:
    return is_sequence_like(value)


def is_table(value: Any) -> bool:
    return is_mapping_like(value)


def is_function(value: Any) -> bool:
    return callable(value)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, (bool, np.bool_))


def is_integer(value: Any) -> bool:
    """python and numpy integers; booleans are not integers here"""
    return isinstance(value, (numbers.Integral, np.integer)) and not is_boolean(value)


def is_float(value: Any) -> bool:
    return isinstance(value, (float, np.floating))


def is_number(value: Any) -> bool:
    return is_integer(value) or is_float(value)


def is_null(value: Any) -> bool:
    return value is None


def is_falsy(value: Any) -> bool:
    """none, numeric zero and false; empty strings and containers are not falsy"""
    if value is None or (is_boolean(value) and not value):
        return True
    return is_number(value) and value == 0
