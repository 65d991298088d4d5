from __future__ import annotations
import logging
from functools import wraps
from ..types import *

logger = logging.getLogger(__name__)


def identity(value: T, *_) -> T:
    """returns its first argument"""
    return value


def once(fn: Callable[..., T]) -> Callable[..., T]:
    """
    wraps fn so it runs at most once. later calls return the first result.
    the wrapped function is released after it has been called.
    """
    if not callable(fn):
        raise InvalidArgument(f"once() expects a callable, got {type(fn).__name__}")
    target = fn
    result = None

    @wraps(fn)
    def wrapper(*args, **kwargs):
        nonlocal target, result
        if target is not None:
            call, target = target, None
            result = call(*args, **kwargs)
        return result

    # the closure is the only holder of fn, until the first call
    del wrapper.__wrapped__
    return wrapper


def after(times: int, fn: Callable[..., T]) -> Union[Callable[..., Optional[T]], T]:
    """
    wraps fn so it only runs once it has been called `times` times.
    earlier calls return none. when times <= 0, fn is called right away
    and its result returned.
    """
    if not callable(fn):
        raise InvalidArgument(f"after() expects a callable, got {type(fn).__name__}")
    if times <= 0:
        logger.debug(f"after: times={times}, calling {getattr(fn, '__name__', fn)!r} immediately")
        return fn()
    calls = 0

    @wraps(fn)
    def wrapper(*args, **kwargs):
        nonlocal calls
        calls += 1
        if calls >= times:
            return fn(*args, **kwargs)
        return None

    return wrapper


def memoize(fn: Callable[..., T], hasher: Optional[Callable[..., Any]] = None) -> Callable[..., T]:
    """caches results keyed by the first argument, or by hasher(*args)"""
    if not callable(fn):
        raise InvalidArgument(f"memoize() expects a callable, got {type(fn).__name__}")
    cache = {}

    @wraps(fn)
    def wrapper(*args):
        key = hasher(*args) if hasher else args[0]
        if key not in cache:
            cache[key] = fn(*args)
        return cache[key]

    wrapper.cache = cache
    return wrapper


def compose(*functions: Callable[..., Any]) -> Callable[..., Any]:
    """composes right to left: compose(f, g)(x) == f(g(x))"""
    for fn in functions:
        if not callable(fn):
            raise InvalidArgument(f"compose() expects callables, got {type(fn).__name__}")

    def composed(*args, **kwargs):
        if not functions:
            return args[0] if args else None
        result = functions[-1](*args, **kwargs)
        for fn in reversed(functions[:-1]):
            result = fn(result)
        return result

    return composed


def wrap(fn: Callable[..., T], wrapper: Callable[..., U]) -> Callable[..., U]:
    """passes fn as the first argument to wrapper"""
    @wraps(fn)
    def wrapped(*args, **kwargs):
        return wrapper(fn, *args, **kwargs)
    return wrapped
