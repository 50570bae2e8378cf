import time
from functools import wraps
from typing import List, Dict, Any, Callable, Sequence, Type

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


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    pass

# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], action: Callable[[], Any],
                  message: str = "expected an error") -> BaseException:
    """runs action and asserts it raises error_type. returns the caught error."""
    try:
        action()
    except error_type as e:
        return e
    raise TestAssertionError(f"{message}: {error_type.__name__} was not raised")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def assert_ordered_by(comparator: Callable[[Any, Any], int], *values: Any) -> None:
    """
    asserts that values are listed in strictly increasing order under comparator,
    and that the comparator is consistent over them: every value ties with itself,
    and swapping the arguments of any pair flips the sign of the result.
    """
    for i, left in enumerate(values):
        assert_that(comparator(left, left) == 0, f"{left!r} should compare equal to itself")
        for right in values[i + 1:]:
            forward, backward = _sign(comparator(left, right)), _sign(comparator(right, left))
            assert_that(forward == -1, f"{left!r} should sort before {right!r}")
            assert_that(backward == 1, f"{right!r} should sort after {left!r}")


def assert_equality_groups(*groups: Sequence[Any]) -> None:
    """
    asserts value equality: members of one group are equal with equal hashes,
    members of different groups are unequal.
    """
    for index, group in enumerate(groups):
        for item in group:
            for peer in group:
                assert_that(item == peer, f"{item!r} should equal {peer!r}")
                assert_that(hash(item) == hash(peer), f"{item!r} and {peer!r} should hash alike")
            for other_group in groups[index + 1:]:
                for other in other_group:
                    assert_that(item != other, f"{item!r} should not equal {other!r}")
                    assert_that(other != item, f"{other!r} should not equal {item!r}")


def run(title: str = "test run") -> None:
    """executes all registered tests and prints a report."""
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    tests_to_run = _suite_state['tests']

    for test_item in tests_to_run:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = f"assertion failed: {e}"
        except Exception as e:
            error = f"{type(e).__name__}: {e}"

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []


def _print_summary(start_time: float) -> None:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
