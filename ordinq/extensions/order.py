from __future__ import annotations
import typing
import logging
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..comparator import Comparator

logger = logging.getLogger(__name__)

_DEFAULT_OPTIONS = CheckOptions()
_EXHAUSTED = object()

# dtype kinds whose natural order numpy compares exactly like python does
_VECTORIZABLE_KINDS = frozenset('iubf')


class OrderCheckAccessor(Generic[T]):
    def __init__(self, comparator_instance: 'Comparator[T]'):
        self._comparator = comparator_instance

    def in_order(self, sequence: Iterable[T], options: Optional[CheckOptions] = None) -> bool:
        """true if every element is less than or equal to the one after it"""
        return self._scan(sequence, strict=False, options=options)

    def in_strict_order(self, sequence: Iterable[T], options: Optional[CheckOptions] = None) -> bool:
        """true if every element is strictly less than the one after it"""
        return self._scan(sequence, strict=True, options=options)

    def _scan(self, sequence: Iterable[T], strict: bool, options: Optional[CheckOptions]) -> bool:
        optimized = self._try_numpy_optimization(sequence, strict, options or _DEFAULT_OPTIONS)
        if optimized is not None: return optimized

        # single forward pass, so generators and other one-shot sources work
        iterator = iter(sequence)
        previous = next(iterator, _EXHAUSTED)
        if previous is _EXHAUSTED: return True
        compare = self._comparator.compare
        for current in iterator:
            result = compare(previous, current)
            if result > 0 or (strict and result == 0): return False
            previous = current
        return True

    def _try_numpy_optimization(self, sequence: Any, strict: bool, options: CheckOptions) -> Optional[bool]:
        """vectorized check for numeric arrays under natural order. none means use the scan."""
        if not options.vectorize: return None
        if not isinstance(sequence, (np.ndarray, pd.Series, pd.Index)): return None

        from ..comparator import NATURAL, NATURAL_REVERSED
        if self._comparator == NATURAL:
            descending = False
        elif self._comparator == NATURAL_REVERSED:
            descending = True
        else:
            return None

        try:
            arr = sequence if isinstance(sequence, np.ndarray) else sequence.to_numpy()
            if arr.ndim != 1 or arr.dtype.kind not in _VECTORIZABLE_KINDS: return None
            if len(arr) < options.vectorize_min_size: return None
            # nan compares unlike python's scalar scan, so leave it to the scan
            if arr.dtype.kind == 'f' and np.isnan(arr).any():
                logger.debug("nan present, falling back to scalar order check")
                return None
            head, tail = arr[:-1], arr[1:]
            if descending: head, tail = tail, head
            ok = head < tail if strict else head <= tail
            logger.debug("vectorized order check over %d %s values", len(arr), arr.dtype)
            return bool(ok.all())
        except (TypeError, ValueError, AttributeError) as e: # catch specific errors
            logger.debug("vectorized order check failed (%s), falling back to scan", e)
            return None
