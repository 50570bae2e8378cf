from __future__ import annotations
import typing
import heapq
from functools import reduce
from ..types import *

if typing.TYPE_CHECKING:
    from ..comparator import Comparator

_NO_DEFAULT = object()


class ExtremumAccessor(Generic[T]):
    def __init__(self, comparator_instance: 'Comparator[T]'):
        self._comparator = comparator_instance

    def min(self, a: T, b: T) -> T:
        """
        the lesser of two values. on a tie the first argument itself is returned,
        so callers relying on identity always get the same instance back.
        """
        return a if self._comparator.compare(a, b) <= 0 else b

    def max(self, a: T, b: T) -> T:
        """the greater of two values, first argument on a tie"""
        return a if self._comparator.compare(a, b) >= 0 else b

    def min_of(self, values: Iterable[T], default: Any = _NO_DEFAULT) -> T:
        """least value of an iterable. the earliest one wins ties"""
        iterator = iter(values)
        first = next(iterator, _NO_DEFAULT)
        if first is _NO_DEFAULT:
            if default is _NO_DEFAULT: raise ValueError("cannot find minimum of empty sequence")
            return default
        return reduce(self.min, iterator, first)

    def max_of(self, values: Iterable[T], default: Any = _NO_DEFAULT) -> T:
        """greatest value of an iterable. the earliest one wins ties"""
        iterator = iter(values)
        first = next(iterator, _NO_DEFAULT)
        if first is _NO_DEFAULT:
            if default is _NO_DEFAULT: raise ValueError("cannot find maximum of empty sequence")
            return default
        return reduce(self.max, iterator, first)

    def least(self, values: Iterable[T], k: int) -> List[T]:
        """the k least values in ascending order, stable on ties"""
        if k < 0: raise ValueError("k must be non-negative")
        # nsmallest is equivalent to sorted(...)[:k], which keeps ties in encounter order
        return heapq.nsmallest(k, values, key=self._comparator.key())

    def greatest(self, values: Iterable[T], k: int) -> List[T]:
        """the k greatest values in descending order, stable on ties"""
        if k < 0: raise ValueError("k must be non-negative")
        return heapq.nsmallest(k, values, key=self._comparator.reversed().key())
