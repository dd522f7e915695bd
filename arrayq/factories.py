import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import ArrayUtil

def from_iterable(data: Iterable[T]) -> 'ArrayUtil[T]':
    """create array helper from iterable"""
    from .enumerable import ArrayUtil
    return ArrayUtil(lambda: list(data))

def seed(value: T, length: int) -> 'ArrayUtil[T]':
    """create array helper holding `length` copies of value"""
    from .enumerable import ArrayUtil
    def seed_data():
        if length < 0:
            raise InvalidArgumentError(f"cannot seed an array of negative length ({length})")
        return [value] * length
    return ArrayUtil(seed_data)

def empty() -> 'ArrayUtil[Any]':
    """create empty array helper"""
    from .enumerable import ArrayUtil
    return ArrayUtil(lambda: [])

# --- aliases ---
arrayq = from_iterable
A = from_iterable
