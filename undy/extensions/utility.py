from __future__ import annotations
import builtins
from ..types import *


def times(n: int, fn: Callable[..., T], context: Any = None) -> List[T]:
    """calls fn(i) for i in [0, n) and collects the results in order"""
    call = iteratee(fn, context, 'times')
    return [call(i) for i in builtins.range(builtins.max(n, 0))]
