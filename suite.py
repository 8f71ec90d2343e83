import time
from typing import List, Any, Callable, Tuple, Type

_registered: List[Tuple[str, Callable[[], Any]]] = []

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'


class _c:
    ok = '\033[92m'
    fail = '\033[91m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


class SuiteAssertionError(AssertionError):
    """failed check inside a test, as opposed to an unexpected error"""


def test(description: str) -> Callable:
    """register the decorated function under description; the function itself is returned unchanged"""

    def decorator(func: Callable) -> Callable:
        _registered.append((description, func))
        return func

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    if not condition:
        raise SuiteAssertionError(message)


def assert_raises(error_type: Type[BaseException], action: Callable[[], Any], message: str = "") -> BaseException:
    """
    call action and require it to raise error_type, returning the error so its fields
    can be checked. any other exception propagates untouched.
    """
    try:
        action()
    except error_type as e:
        return e
    raise SuiteAssertionError(message or f"expected {error_type.__name__} to be raised")


def run(title: str = "test run") -> None:
    """run and report every registered test, then forget them"""
    print(f"\n{_c.info}--- {title} ---{_c.reset}")
    start = time.perf_counter()
    failed = 0

    for description, func in _registered:
        try:
            func()
        except SuiteAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"
        else:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
            continue
        failed += 1
        print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
        print(f"    {_c.grey}└─> {error}{_c.reset}")

    total = len(_registered)
    duration = (time.perf_counter() - start) * 1000
    colour = _c.ok if failed == 0 else _c.fail
    print(f"{colour}ran {total} tests in {duration:.2f}ms: {total - failed} passed, {failed} failed{_c.reset}\n")
    _registered.clear()
