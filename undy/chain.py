from __future__ import annotations

import logging
import numpy as np
import pandas as pd
from .types import *

logger = logging.getLogger(__name__)


class Chain(Generic[T]):
    """
    wraps a value so library functions can be chained as methods.
    each step is lazy: it records a data function and only runs when the
    result is requested, caching it afterwards.
    example: chain([3, 1, 2]).sort_by().map(lambda x: x * 2).value()
    """

    def __init__(self, data_func: Callable[[], T]):
        self._data_func = data_func
        self._cached_result: Optional[T] = None
        self._is_cached = False

    def _get_data(self) -> T:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def __getattr__(self, name: str) -> Callable[..., 'Chain[Any]']:
        from . import extensions
        func = getattr(extensions, name, None) if not name.startswith('_') else None
        if func is None or not callable(func) or isinstance(func, type):
            raise AttributeError(f"'{type(self).__name__}' has no operation '{name}'")

        def step(*args, **kwargs) -> 'Chain[Any]':
            def data_func():
                logger.debug(f"chain: evaluating {name}()")
                return func(self._get_data(), *args, **kwargs)
            return Chain(data_func)

        return step

    # --- terminals ---

    def value(self) -> T:
        """unwrap the current value"""
        return self._get_data()

    def to_array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._get_data())

    def to_series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._get_data())

    def to_frame(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._get_data())

    def __iter__(self) -> Iterator[Any]:
        data = self._get_data()
        if is_mapping_like(data):
            return iter(data.items())
        return iter(data)

    def __len__(self) -> int:
        from .extensions import size
        return size(self._get_data())

    def __repr__(self) -> str:
        state = repr(self._cached_result) if self._is_cached else 'pending'
        return f"Chain({state})"


def chain(value: T) -> Chain[T]:
    """start a chain over a value"""
    return Chain(lambda: value)
