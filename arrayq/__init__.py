"""
'      _____                                  ________
'     /  _  \_______________________  ___.__. \_____  \
'    /  /_\  \_  __ \_  __ \__  \  <   |  |  /  / \  \
'   /    |    \  | \/|  | \// __ \_ \___  | /   \_/.  \
'   \____|__  /__|   |__|  (____  / / ____| \_____\ \_/
'           \/                  \/  \/             \__>
"""

# expose the main classes
from .enumerable import ArrayUtil, GroupedArray

# expose the factory functions
from .factories import (
    from_iterable,
    empty,
    arrayq,
    A
)

# expose the flat function api
from .arrays import (
    resample,
    seed,
    trim_or_fill,
    fast_clone,
    has_order_change,
    has_diff,
    diff,
    union,
    merge,
    group_by,
    order_by
)

# expose supporting data classes
from .types import (
    ArrayDiff,
    InvalidArgumentError
)

# define what `import *` does
__all__ = [
    "ArrayUtil",
    "GroupedArray",
    "from_iterable",
    "empty",
    "arrayq",
    "A",
    "resample",
    "seed",
    "trim_or_fill",
    "fast_clone",
    "has_order_change",
    "has_diff",
    "diff",
    "union",
    "merge",
    "group_by",
    "order_by",
    "ArrayDiff",
    "InvalidArgumentError"
]
