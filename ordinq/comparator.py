from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cmp_to_key
from .types import *

# --- chaining operations ---
from .extensions.chain import _ChainOperations

# --- accessors ---
from .extensions.order import OrderCheckAccessor
from .extensions.extremum import ExtremumAccessor

# marks the end of a sequence during lockstep iteration
_EXHAUSTED = object()

# --- abstract base class ---

class Comparator(_ChainOperations[T_contra], ABC):
    """
    a three-way comparison over values, usable anywhere a plain cmp function is.
    comparators are immutable values: two built the same way from equal parts are equal.
    """

    # --- accessors ---
    @property
    def check(self) -> OrderCheckAccessor[T_contra]:
        return OrderCheckAccessor(self)

    @property
    def pick(self) -> ExtremumAccessor[T_contra]:
        return ExtremumAccessor(self)

    def __setattr__(self, name, value):
        # public attributes are read-only, subclasses keep their parts in private ones
        if not name.startswith("_"): raise AttributeError("comparators are immutable")
        object.__setattr__(self, name, value)

    @abstractmethod
    def compare(self, left: T_contra, right: T_contra) -> int:
        """negative if left sorts first, positive if right does, zero for a tie"""
        pass

    @abstractmethod
    def _parts(self) -> Tuple:
        """the components that define this comparator's identity"""
        pass

    def __call__(self, left: T_contra, right: T_contra) -> int:
        return self.compare(left, right)

    def key(self) -> Callable[[Any], Any]:
        """sort key wrapper for sorted(), list.sort(), heapq and bisect"""
        return cmp_to_key(self.compare)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Comparator): return NotImplemented
        return type(self) is type(other) and self._parts() == other._parts()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._parts()))

# --- natural and derived orderings ---

class _NaturalOrdering(Comparator[Any]):
    """orders values by their own < operator"""

    def compare(self, left, right) -> int:
        # only __lt__ is required, same as python's own sort
        if left < right: return -1
        if right < left: return 1
        return 0

    def _parts(self) -> Tuple:
        return ()

    def __repr__(self) -> str:
        return "natural()"


class _ReverseOrdering(Comparator[T_contra]):
    def __init__(self, forward: Comparator[T_contra]):
        super().__init__()
        self._forward = forward

    def compare(self, left, right) -> int:
        return self._forward.compare(right, left)

    def reversed(self) -> Comparator[T_contra]:
        return self._forward

    def _parts(self) -> Tuple:
        return (self._forward,)

    def __repr__(self) -> str:
        return f"{self._forward!r}.reversed()"


class _FunctionComparator(Comparator[T_contra]):
    """adapts a plain cmp(a, b) -> int callable"""

    def __init__(self, function: Comparer[T_contra]):
        super().__init__()
        self._function = function

    def compare(self, left, right) -> int:
        return self._function(left, right)

    def _parts(self) -> Tuple:
        return (self._function,)

    def __repr__(self) -> str:
        name = getattr(self._function, '__qualname__', repr(self._function))
        return f"from_function({name})"


class _KeyComparator(Comparator[T]):
    """orders values by comparing the result of a key function"""

    def __init__(self, key_selector: KeySelector[T, K], comparator: Comparator[K]):
        super().__init__()
        self._key_selector = key_selector
        self._comparator = comparator

    def compare(self, left, right) -> int:
        return self._comparator.compare(self._key_selector(left), self._key_selector(right))

    def _parts(self) -> Tuple:
        return (self._key_selector, self._comparator)

    def __repr__(self) -> str:
        name = getattr(self._key_selector, '__qualname__', repr(self._key_selector))
        return f"{self._comparator!r}.on_result_of({name})"


class _CompoundComparator(Comparator[T_contra]):
    """consults each comparator in turn until one breaks the tie"""

    def __init__(self, comparators: Tuple[Comparator[T_contra], ...]):
        super().__init__()
        self._comparators = comparators

    def compare(self, left, right) -> int:
        for comparator in self._comparators:
            result = comparator.compare(left, right)
            if result != 0: return result
        return 0

    def _parts(self) -> Tuple:
        return self._comparators

    def __repr__(self) -> str:
        head, *rest = self._comparators
        return repr(head) + "".join(f".then_comparing({c!r})" for c in rest)

# --- combinators over containers ---

class LexicographicalComparator(Comparator[Iterable[T]]):
    """
    orders sequences by their first differing element.
    a sequence that runs out first is a prefix of the other and sorts before it.
    """

    def __init__(self, element_comparator: Comparator[T]):
        super().__init__()
        self._element_comparator = element_comparator

    def compare(self, left: Iterable[T], right: Iterable[T]) -> int:
        right_iterator = iter(right)
        for left_item in left:
            right_item = next(right_iterator, _EXHAUSTED)
            if right_item is _EXHAUSTED: return 1
            result = self._element_comparator.compare(left_item, right_item)
            # elements past the first difference are never examined
            if result != 0: return result
        return 0 if next(right_iterator, _EXHAUSTED) is _EXHAUSTED else -1

    def _parts(self) -> Tuple:
        return (self._element_comparator,)

    def __repr__(self) -> str:
        return f"{self._element_comparator!r}.lexicographical()"


class EmptiesComparator(Comparator[Union[Maybe[T], None]]):
    """
    orders optional values, placing every empty value before (or after) every present one.
    accepts Maybe instances, and None as the empty value.
    """

    def __init__(self, value_comparator: Comparator[T], empties_first: bool):
        super().__init__()
        self._value_comparator = value_comparator
        self._empties_first = empties_first

    @staticmethod
    def _unwrap(optional: Union[Maybe[T], None]) -> Tuple[bool, Optional[T]]:
        if isinstance(optional, Maybe):
            return optional.is_present, optional.or_else(None)
        return optional is not None, optional

    def compare(self, left, right) -> int:
        left_present, left_value = self._unwrap(left)
        right_present, right_value = self._unwrap(right)
        if left_present and right_present:
            return self._value_comparator.compare(left_value, right_value)
        if left_present == right_present: return 0
        # exactly one side is empty
        empty_sign = -1 if self._empties_first else 1
        return -empty_sign if left_present else empty_sign

    def _parts(self) -> Tuple:
        return (self._value_comparator, self._empties_first)

    def __repr__(self) -> str:
        name = "empties_first" if self._empties_first else "empties_last"
        return f"{name}({self._value_comparator!r})"


# natural ordering has no state, so one instance serves every caller
NATURAL = _NaturalOrdering()
NATURAL_REVERSED = NATURAL.reversed()
