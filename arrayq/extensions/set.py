from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ArrayUtil


def _lookup(items: List[T]) -> Union[set, List[T]]:
    """membership container for items. a set when everything hashes, else the list itself."""
    try:
        return set(items)
    except TypeError:
        # unhashable elements (dicts, lists) fall back to a linear scan
        return items


class SetAccessor(Generic[T]):
    """
    membership based comparisons between this array and another one.
    equality is `==`. duplicates and order are ignored by everything but has_order_change.
    """
    def __init__(self, array_instance: 'ArrayUtil[T]'):
        self._array = array_instance

    def has_order_change(self, other: Iterable[T]) -> bool:
        """true when the arrays differ in length, contents, or order of contents."""
        data = self._array._get_data()
        other_data = list(other)
        if len(data) != len(other_data):
            return True
        return any(x != y for x, y in zip(data, other_data))

    def has_diff(self, other: Iterable[T]) -> bool:
        """true when the arrays differ in length or either holds an element the other lacks."""
        data = self._array._get_data()
        other_data = list(other)
        # a difference in length is a natural change
        if len(data) != len(other_data):
            return True
        data_lookup, other_lookup = _lookup(data), _lookup(other_data)
        if any(x not in data_lookup for x in other_data): return True
        return any(x not in other_lookup for x in data)

    def diff(self, other: Iterable[T]) -> ArrayDiff[T]:
        """
        diff against other. `added` holds elements of other that aren't in this array,
        `removed` holds elements of this array that aren't in other. not a multiset diff.
        """
        data = self._array._get_data()
        other_data = list(other)
        data_lookup, other_lookup = _lookup(data), _lookup(other_data)
        return ArrayDiff(
            added=[x for x in other_data if x not in data_lookup],
            removed=[x for x in data if x not in other_lookup],
        )

    def union(self, other: Iterable[T]) -> 'ArrayUtil[T]':
        """
        elements of this array that are also in other, in this array's order.

        note: despite the name this is a membership intersection. callers depend on it
        behaving that way, so it stays as is.
        """
        from ..enumerable import ArrayUtil
        def union_data():
            other_lookup = _lookup(list(other))
            return [x for x in self._array._get_data() if x in other_lookup]
        return ArrayUtil(union_data)

    def merge(self, *others: Iterable[T]) -> 'ArrayUtil[T]':
        """deduplicated concatenation of this array and others, in first-seen order."""
        from ..enumerable import ArrayUtil
        def merge_data():
            sources = [self._array._get_data()] + [list(o) for o in others]
            try:
                # dicts are ordered, so fromkeys is an order-preserving unique filter
                return list(dict.fromkeys(chain(*sources)))
            except TypeError:
                # unhashable elements
                seen = []
                for item in chain(*sources):
                    if item not in seen: seen.append(item)
                return seen
        return ArrayUtil(merge_data)
