from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ArrayUtil

class _CoreOperations(Generic[T]):
    def where(self: 'ArrayUtil[T]', predicate: Predicate[T]) -> 'ArrayUtil[T]':
        """filter elements based on a predicate"""
        from ..enumerable import ArrayUtil
        return ArrayUtil(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self: 'ArrayUtil[T]', selector: Selector[T, U]) -> 'ArrayUtil[U]':
        """project each element to a new form"""
        from ..enumerable import ArrayUtil
        return ArrayUtil(lambda: [selector(x) for x in self._get_data()])

    def take(self: 'ArrayUtil[T]', count: int) -> 'ArrayUtil[T]':
        """take the first 'count' elements"""
        from ..enumerable import ArrayUtil
        return ArrayUtil(lambda: self._get_data()[:count])

    def skip(self: 'ArrayUtil[T]', count: int) -> 'ArrayUtil[T]':
        """skip the first 'count' elements"""
        from ..enumerable import ArrayUtil
        return ArrayUtil(lambda: self._get_data()[count:])
