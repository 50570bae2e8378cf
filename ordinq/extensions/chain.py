from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..comparator import Comparator, LexicographicalComparator, EmptiesComparator

class _ChainOperations(Generic[T_contra]):
    def reversed(self: 'Comparator[T_contra]') -> 'Comparator[T_contra]':
        """the same ordering, back to front"""
        from ..comparator import _ReverseOrdering
        return _ReverseOrdering(self)

    def on_result_of(self: 'Comparator[K]', key_selector: KeySelector[T, K]) -> 'Comparator[T]':
        """order values by applying this comparator to the result of key_selector"""
        from ..comparator import _KeyComparator
        return _KeyComparator(key_selector, self)

    def then_comparing(self: 'Comparator[T_contra]', other: Any) -> 'Comparator[T_contra]':
        """break ties with another comparator (or plain cmp callable)"""
        from ..comparator import _CompoundComparator
        from ..factories import as_comparator
        # flatten so long chains stay a single level deep
        head = self._parts() if isinstance(self, _CompoundComparator) else (self,)
        tail_comparator = as_comparator(other)
        tail = tail_comparator._parts() if isinstance(tail_comparator, _CompoundComparator) else (tail_comparator,)
        return _CompoundComparator(head + tail)

    def then_comparing_by(self: 'Comparator[T_contra]', key_selector: KeySelector[T, K],
                          comparator: Optional[Any] = None) -> 'Comparator[T_contra]':
        """break ties by comparing the result of key_selector"""
        from ..factories import comparing
        return self.then_comparing(comparing(key_selector, comparator))

    def lexicographical(self: 'Comparator[T]') -> 'LexicographicalComparator[T]':
        """lift this comparator to sequences, compared element by element"""
        from ..comparator import LexicographicalComparator
        return LexicographicalComparator(self)

    def empties_first(self: 'Comparator[T]') -> 'EmptiesComparator[T]':
        """lift this comparator to optional values, empty values first"""
        from ..comparator import EmptiesComparator
        return EmptiesComparator(self, empties_first=True)

    def empties_last(self: 'Comparator[T]') -> 'EmptiesComparator[T]':
        """lift this comparator to optional values, empty values last"""
        from ..comparator import EmptiesComparator
        return EmptiesComparator(self, empties_first=False)
