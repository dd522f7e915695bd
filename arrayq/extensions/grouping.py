from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ArrayUtil, GroupedArray

class GroupingAccessor(Generic[T]):
    def __init__(self, array_instance: 'ArrayUtil[T]'):
        self._array = array_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> 'GroupedArray[K, T]':
        """group elements by a key. keys keep first-seen order, buckets keep source order"""
        from ..enumerable import GroupedArray
        groups = defaultdict(list)
        for item in self._array._get_data():
            groups[key_selector(item)].append(item)
        # plain dicts keep insertion order, which is the first-seen key order
        return GroupedArray(dict(groups))
