import sys
import time
import logging
from contextlib import contextmanager
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type, Iterator

logger = logging.getLogger(__name__)

_registry: Dict[str, List[Dict[str, Any]]] = {
    'cases': [],
    'results': []
}

PASS_MARK = '(^_^)'
FAIL_MARK = '(x_x)'


class _c:
    """ansi color codes for the report."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class CaseFailure(AssertionError):
    """assertion failure raised by assert_that and raises."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """decorator registering a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _registry['cases'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise CaseFailure(message)


@contextmanager
def raises(expected: Type[BaseException], match: Optional[str] = None) -> Iterator[None]:
    """expects the block to raise `expected`, optionally with `match` in its message."""
    try:
        yield
    except expected as e:
        if match is not None and match not in str(e):
            raise CaseFailure(f"expected '{match}' in error message, got '{e}'")
        return
    raise CaseFailure(f"expected {expected.__name__} to be raised")


def run(title: str = "test run", pattern: Optional[str] = None) -> int:
    """
    runs every registered case whose description contains `pattern`
    (defaults to the first command line argument) and prints a report.
    returns the number of failures.
    """
    if pattern is None and len(sys.argv) > 1:
        pattern = sys.argv[1]

    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start_time = time.perf_counter()

    cases = [case for case in _registry['cases'] if pattern is None or pattern in case['description']]
    _registry['results'] = [_run_case(case) for case in cases]

    failures = _print_summary(start_time)
    # registry is cleared so several suites can run in one script
    _registry['cases'] = []

    return failures


def _run_case(case: Dict[str, Any]) -> Dict[str, Any]:
    description = case['description']
    error = None
    try:
        case['func']()
    except CaseFailure as e:
        error = f"assertion failed: {e}"
    except Exception as e:
        error = f"{type(e).__name__}: {e}"
        logger.debug(f"unexpected error in '{description}'", exc_info=True)

    if error is None:
        print(f"  {_c.ok}pass{_c.reset}  {PASS_MARK}  {description}")
    else:
        print(f"  {_c.fail}fail{_c.reset}  {FAIL_MARK}  {description}")
        print(f"    {_c.grey}-> {error}{_c.reset}")
    return {'passed': error is None, 'description': description, 'error': error}


def _print_summary(start_time: float) -> int:
    duration = (time.perf_counter() - start_time) * 1000
    results = _registry['results']

    passed_count = sum(1 for r in results if r['passed'])
    failed_count = len(results) - passed_count
    color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{color}--- summary ---{_c.reset}")
    print(f"  ran {_c.info}{len(results)}{_c.reset} cases in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}\n")
    return failed_count
