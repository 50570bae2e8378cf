from dataclasses import dataclass
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    List, Tuple
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
T_contra = TypeVar('T_contra', contravariant=True)

KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]


@dataclass(frozen=True)
class CheckOptions:
    """tuning for order checks. defaults apply when no options are given"""
    vectorize: bool = True
    vectorize_min_size: int = 2


class Maybe(Generic[T]):
    """an optional value: either present holding a value, or empty"""

    __slots__ = ('_value', '_present')

    def __init__(self, value: Optional[T], present: bool):
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_present', present)

    @classmethod
    def of(cls, value: T) -> 'Maybe[T]':
        return cls(value, True)

    @classmethod
    def empty(cls) -> 'Maybe[Any]':
        return cls(None, False)

    @classmethod
    def of_nullable(cls, value: Optional[T]) -> 'Maybe[T]':
        """none becomes empty, anything else becomes present"""
        return cls.empty() if value is None else cls.of(value)

    @property
    def is_present(self) -> bool: return self._present

    @property
    def is_empty(self) -> bool: return not self._present

    def get(self) -> T:
        if not self._present: raise ValueError("no value present")
        return self._value

    def or_else(self, default: T) -> T:
        return self._value if self._present else default

    def __setattr__(self, name, value):
        raise AttributeError("maybe is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Maybe): return NotImplemented
        return self._present == other._present and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, self._value))

    def __repr__(self) -> str:
        return f"Maybe.of({self._value!r})" if self._present else "Maybe.empty()"
