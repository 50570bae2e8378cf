import logging
from .types import *
from .comparator import (
    Comparator,
    NATURAL,
    _FunctionComparator,
    _KeyComparator,
    LexicographicalComparator,
    EmptiesComparator,
)

logger = logging.getLogger(__name__)

_NO_DEFAULT = object()

def as_comparator(comparator: Any = None) -> Comparator[Any]:
    """normalize none (natural order), a comparator, or a plain cmp callable"""
    if comparator is None: return NATURAL
    if isinstance(comparator, Comparator): return comparator
    if callable(comparator):
        logger.debug("wrapping bare callable %r as a comparator", comparator)
        return _FunctionComparator(comparator)
    raise TypeError(f"expected a comparator or a two-argument callable, got {type(comparator).__name__}")

def natural() -> Comparator[Any]:
    """ordering by the values' own < operator"""
    return NATURAL

def reverse_order(comparator: Any = None) -> Comparator[Any]:
    """the reverse of comparator, or of natural order"""
    return as_comparator(comparator).reversed()

def from_function(function: Comparer[T]) -> Comparator[T]:
    """comparator from a plain cmp(a, b) -> int function"""
    return as_comparator(function)

def comparing(key_selector: KeySelector[T, K], comparator: Any = None) -> Comparator[T]:
    """order by the result of key_selector, compared naturally unless told otherwise"""
    return _KeyComparator(key_selector, as_comparator(comparator))

def case_insensitive() -> Comparator[str]:
    """string ordering that ignores case"""
    return comparing(str.casefold)

# --- combinators ---

def lexicographical(comparator: Any = None) -> LexicographicalComparator[Any]:
    """comparator over sequences, ordered by their first differing element"""
    return LexicographicalComparator(as_comparator(comparator))

def empties_first(comparator: Any = None) -> EmptiesComparator[Any]:
    """comparator over optional values with empty values before present ones"""
    return EmptiesComparator(as_comparator(comparator), empties_first=True)

def empties_last(comparator: Any = None) -> EmptiesComparator[Any]:
    """comparator over optional values with empty values after present ones"""
    return EmptiesComparator(as_comparator(comparator), empties_first=False)

# --- order checks ---

def is_in_order(sequence: Iterable[T], comparator: Any = None,
                options: Optional[CheckOptions] = None) -> bool:
    """true if each element is <= the next under comparator"""
    return as_comparator(comparator).check.in_order(sequence, options)

def is_in_strict_order(sequence: Iterable[T], comparator: Any = None,
                       options: Optional[CheckOptions] = None) -> bool:
    """true if each element is < the next under comparator"""
    return as_comparator(comparator).check.in_strict_order(sequence, options)

# --- extremum selection ---

def min(a: T, b: T, comparator: Any = None) -> T:
    """lesser of a and b. returns a itself when they compare equal"""
    return as_comparator(comparator).pick.min(a, b)

def max(a: T, b: T, comparator: Any = None) -> T:
    """greater of a and b. returns a itself when they compare equal"""
    return as_comparator(comparator).pick.max(a, b)

def min_of(values: Iterable[T], comparator: Any = None, default: Any = _NO_DEFAULT) -> T:
    picker = as_comparator(comparator).pick
    return picker.min_of(values) if default is _NO_DEFAULT else picker.min_of(values, default)

def max_of(values: Iterable[T], comparator: Any = None, default: Any = _NO_DEFAULT) -> T:
    picker = as_comparator(comparator).pick
    return picker.max_of(values) if default is _NO_DEFAULT else picker.max_of(values, default)

def least(values: Iterable[T], k: int, comparator: Any = None) -> List[T]:
    return as_comparator(comparator).pick.least(values, k)

def greatest(values: Iterable[T], k: int, comparator: Any = None) -> List[T]:
    return as_comparator(comparator).pick.greatest(values, k)
