from __future__ import annotations
import typing
import math
import logging
from itertools import islice
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import ArrayUtil

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # python's round() is banker's rounding, 2.5 must become 3 here
    return math.floor(value + 0.5)


class SequenceAccessor(Generic[T]):
    """
    length normalization for fixed-length sample sequences.
    resample() fits an array of amplitudes (or any numbers) into a number of points by
    stride-sampling or value replication. it is not a filter: no averaging, no windowing.
    """
    def __init__(self, array_instance: 'ArrayUtil[T]'):
        self._array = array_instance

    def resample(self, points: int) -> 'ArrayUtil[T]':
        """
        downsample or upsample to exactly `points` samples.

        longer inputs keep every nth element (n = len / points, rounded half up).
        shorter inputs repeat each element ceil(points / len) times. either way the
        result is then padded with the input's last element or trimmed from the end.
        an input already `points` long is passed through as is.
        """
        from ..enumerable import ArrayUtil
        def resample_data():
            data = self._array._get_data()
            if points < 0:
                raise InvalidArgumentError(f"cannot resample to a negative length ({points})")
            if len(data) == points: return data
            if points == 0: return []
            if not data:
                raise InvalidArgumentError(f"cannot resample an empty sequence to {points} points")

            if len(data) > points:
                every_nth = max(1, _round_half_up(len(data) / points))
                samples = self._array._try_numpy_optimization(data, 'stride', every_nth)
                if samples is None:
                    samples = data[::every_nth]
                logger.debug(f"downsampling {len(data)} -> {points} with stride {every_nth}")
            else:
                # overshoots on purpose, the trim below takes care of it
                spread_factor = math.ceil(points / len(data))
                samples = self._array._try_numpy_optimization(data, 'spread', spread_factor)
                if samples is None:
                    samples = [val for val in data for _ in range(spread_factor)]
                logger.debug(f"upsampling {len(data)} -> {points} with spread {spread_factor}")

            if len(samples) < points:
                logger.debug(f"padding {points - len(samples)} samples with the last input value")
                samples.extend([data[-1]] * (points - len(samples)))
            elif len(samples) > points:
                logger.debug(f"trimming {len(samples) - points} overshooting samples")
                samples = samples[:points]
            return samples
        return ArrayUtil(resample_data)

    def trim_or_fill(self, length: int, fill_source: Iterable[T]) -> 'ArrayUtil[T]':
        """
        trims or fills the array to `length`. missing slots are pulled from the front of
        fill_source, so it should be at least `length` long or the result stays short.
        """
        from ..enumerable import ArrayUtil
        def trim_or_fill_data():
            data = self._array._get_data()
            if length < 0:
                raise InvalidArgumentError(f"cannot trim or fill to a negative length ({length})")
            # length checks first, the common case is an array that already fits
            if len(data) == length: return data
            if len(data) > length: return data[:length]
            # islice so an endless fill source is only read as far as needed
            return data + list(islice(fill_source, length - len(data)))
        return ArrayUtil(trim_or_fill_data)

    def fast_clone(self) -> 'ArrayUtil[T]':
        """shallow copy. the values themselves are shared, the list is not."""
        from ..enumerable import ArrayUtil
        return ArrayUtil(lambda: self._array._get_data()[:])
