from __future__ import annotations

import numpy as np
from abc import ABC, abstractmethod
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.sequence import SequenceAccessor
from .extensions.set import SetAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IArray(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        pass

# --- base array implementation ---

class _BaseArray(IArray[T]):
    def __init__(self, data_func: Callable[[], List[T]]):
        """init with a function that returns data when called"""
        self._data_func = data_func
        self._cached_result: Optional[List[T]] = None
        self._is_cached = False

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._cached_result = self._data_func()
            self._is_cached = True
        return self._cached_result

    def _try_numpy_optimization(self, data: List[T], operation: str, amount: int) -> Optional[List[T]]:
        """try to run the stride/spread step of a resample through numpy."""
        try:
            if data and all(isinstance(x, (int, float, complex)) for x in data):
                # numpy only computes the indices, samples stay the original objects
                if operation == 'stride':
                    return [data[i] for i in np.arange(0, len(data), amount)]
                elif operation == 'spread':
                    return [data[i] for i in np.repeat(np.arange(len(data)), amount)]
            return None
        except (TypeError, ValueError): # catch specific errors
            return None

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return self.to.count()

# --- main array helper ---

class ArrayUtil(
    _BaseArray[T],
    _CoreOperations[T]
):
    """linq-like helper over a list. the list is produced lazily and cached."""
    def __init__(self, data_func: Callable[[], List[T]]):
        super().__init__(data_func)
        # --- initialize accessors ---
        self.seq = SequenceAccessor(self)
        self.set = SetAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    @property
    def value(self) -> List[T]:
        """the value of this array, after all alterations"""
        return self._get_data()

    def __repr__(self) -> str:
        return f"ArrayUtil({self._get_data()!r})"

# --- grouped array helper ---

class GroupedArray(Generic[K, T]):
    """linq-like helper over a grouping (an insertion-ordered key -> bucket dict)."""

    def __init__(self, groups: Dict[K, List[T]]):
        self._groups = groups

    @property
    def value(self) -> Dict[K, List[T]]:
        """the value of this group, after all alterations"""
        return self._groups

    def keys(self) -> List[K]:
        return list(self._groups.keys())

    def order_by(self, key_order: Iterable[K]) -> 'ArrayUtil[T]':
        """
        flattens the grouping into an array, bucket by bucket, following key_order.
        keys missing from key_order are dropped and unknown keys in key_order are skipped.
        """
        def order_data():
            result = []
            for key in key_order:
                if key not in self._groups: continue
                result.extend(self._groups[key])
            return result
        return ArrayUtil(order_data)

    def __getitem__(self, key: K) -> List[T]:
        return self._groups[key]

    def __contains__(self, key: Any) -> bool:
        return key in self._groups

    def __iter__(self) -> Iterator[K]:
        return iter(self._groups)

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"GroupedArray(keys={len(self._groups)}, items={sum(len(v) for v in self._groups.values())})"
