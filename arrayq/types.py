from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Mapping, Sequence
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Number = Union[int, float, complex]
Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]


class InvalidArgumentError(ValueError):
    """raised when a length or input can't produce a meaningful result"""
    pass


class ArrayDiff(Generic[T]):
    """the result of diffing two arrays. `added` is what b has that a lacks, `removed` the reverse"""

    def __init__(self, added: List[T], removed: List[T]):
        self.added = added
        self.removed = removed

    @property
    def has_changes(self) -> bool: return bool(self.added or self.removed)

    @property
    def added_count(self) -> int: return len(self.added)

    @property
    def removed_count(self) -> int: return len(self.removed)

    def __iter__(self) -> Iterator[List[T]]:
        # allows `added, removed = diff(a, b)`
        yield self.added
        yield self.removed

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ArrayDiff):
            return NotImplemented
        return self.added == other.added and self.removed == other.removed

    def __repr__(self) -> str:
        return f"ArrayDiff(added={self.added_count}, removed={self.removed_count})"
