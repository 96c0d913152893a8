import sys
import time
from functools import wraps
from typing import List, Dict, Any, Callable, Type

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class TestAssertionError(AssertionError):
    """raised by assert_that and assert_raises so failures read differently from crashes."""
    pass


# --- public api ---

def test(description: str) -> Callable:
    """register a function as a test case. the function stays callable, so pytest can collect it too."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, **kwargs) -> BaseException:
    """call func and require it to raise error_type; the caught error is returned for inspection."""
    try:
        func(*args, **kwargs)
    except error_type as e:
        return e
    raise TestAssertionError(f"expected {error_type.__name__} from {getattr(func, '__name__', func)!r}")


def run(title: str = "test run") -> bool:
    """run every registered test, print a report, and return whether all passed."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    results = []
    for item in _suite_state['tests']:
        error = None
        try:
            item['func']()
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        results.append({'passed': error is None, 'description': item['description'], 'error': error})

        if error is None:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {item['description']}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {item['description']}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _suite_state['results'] = results
    _print_summary(start_time)

    # clear so several suites can run from one script
    _suite_state['tests'] = []
    return all(r['passed'] for r in results)


def main(title: str) -> None:
    """run the registered tests and exit non-zero on any failure"""
    sys.exit(0 if run(title) else 1)


def _print_summary(start_time: float) -> None:
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
