"""
flat function api over the array helpers.

every function here materializes its result right away, so errors surface at the call
instead of at the end of a lazy chain. lists are wrapped without copying, which means
resample() and trim_or_fill() hand back the very list they were given when it is already
the requested length. don't mutate a result in place if its source is still in use.
"""
from .types import *
from .enumerable import ArrayUtil, GroupedArray
from .factories import from_iterable, seed as _seed


def _wrap(a: Iterable[T]) -> ArrayUtil[T]:
    if isinstance(a, list):
        return ArrayUtil(lambda: a)
    return from_iterable(a)


# --- sequence operations ---

def resample(numbers: Iterable[Number], points: int) -> List[Number]:
    """resample an array of numbers to exactly `points` samples (stride-sampling, no interpolation)"""
    return _wrap(numbers).seq.resample(points).to.list()

def seed(value: T, length: int) -> List[T]:
    """an array of `length` copies of value"""
    return _seed(value, length).to.list()

def trim_or_fill(a: Iterable[T], length: int, fill_source: Iterable[T]) -> List[T]:
    """trim a to length, or fill it from the front of fill_source"""
    return _wrap(a).seq.trim_or_fill(length, fill_source).to.list()

def fast_clone(a: Iterable[T]) -> List[T]:
    return _wrap(a).seq.fast_clone().to.list()

# --- set operations ---

def has_order_change(a: Iterable[T], b: Iterable[T]) -> bool:
    return _wrap(a).set.has_order_change(b)

def has_diff(a: Iterable[T], b: Iterable[T]) -> bool:
    return _wrap(a).set.has_diff(b)

def diff(a: Iterable[T], b: Iterable[T]) -> ArrayDiff[T]:
    return _wrap(a).set.diff(b)

def union(a: Iterable[T], b: Iterable[T]) -> List[T]:
    """elements of a that are also in b. an intersection, kept under its historical name"""
    return _wrap(a).set.union(b).to.list()

def merge(*arrays: Iterable[T]) -> List[T]:
    """merge arrays, dropping duplicates, in first-seen order"""
    if not arrays:
        return []
    first, *rest = arrays
    return _wrap(first).set.merge(*rest).to.list()

# --- grouping operations ---

def group_by(source: Iterable[T], key_selector: KeySelector[T, K]) -> GroupedArray[K, T]:
    return _wrap(source).group.group_by(key_selector)

def order_by(grouping: Union[GroupedArray[K, T], Mapping[K, List[T]]], key_order: Iterable[K]) -> List[T]:
    """flatten a grouping following key_order. accepts a GroupedArray or any key -> list mapping"""
    if not isinstance(grouping, GroupedArray):
        grouping = GroupedArray(dict(grouping))
    return grouping.order_by(key_order).to.list()
