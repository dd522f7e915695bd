import suite
from dgen import from_schema
from arrayq import (
    resample, seed, trim_or_fill, fast_clone, has_order_change, has_diff,
    diff, union, merge, group_by, order_by, GroupedArray, InvalidArgumentError
)

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal
assert_raises = suite.assert_raises

voice_message_schema = {
    'event_id': 'uuid4',
    'duration_ms': ('pyint', {'min_value': 500, 'max_value': 60000}),
    'waveform': {'_qen_provider': 'waveform', 'length': (1, 1024)}
}


# --- flat sequence api ---

@test("resample fits waveforms into a fixed number of bars")
def test_resample_flat():
    assert_equal(resample(list(range(1, 11)), 3), [1, 4, 7], "documented downsample example")
    assert_equal(resample([5], 4), [5, 5, 5, 5], "documented upsample example")
    for message in from_schema(voice_message_schema, seed=99).take(15):
        assert_equal(len(resample(message['waveform'], 24)), 24, "every message should fit the bar count")


@test("resample accepts tuples and other iterables")
def test_resample_iterables():
    assert_equal(resample((1, 2, 3, 4), 2), [1, 3], "tuples should be accepted")
    assert_equal(resample(range(6), 3), [0, 2, 4], "ranges should be accepted")


@test("resample passes a same-length list straight through")
def test_resample_flat_passthrough():
    data = [0.2, 0.4]
    assert_that(resample(data, 2) is data, "same length should hand back the list itself")
    assert_that(resample(data, 3) is not data, "a real resample should build a new list")


@test("resample raises right away for invalid arguments")
def test_resample_flat_invalid():
    assert_raises(InvalidArgumentError, resample, [], 1)
    assert_raises(InvalidArgumentError, resample, [1, 2, 3], -1)
    assert_equal(resample([], 0), [], "empty to zero is fine")
    assert_equal(resample([1, 2, 3], 0), [], "zero points is fine")


@test("seed, trim_or_fill and fast_clone")
def test_sequence_helpers_flat():
    assert_equal(seed(None, 2), [None, None], "seed should repeat the value")
    assert_raises(InvalidArgumentError, seed, 'x', -3)
    assert_equal(trim_or_fill([1, 2], 5, [9, 9, 9, 9, 9]), [1, 2, 9, 9, 9], "documented fill example")
    assert_equal(trim_or_fill([1, 2, 3], 2, []), [1, 2], "trim should keep the head")
    assert_raises(InvalidArgumentError, trim_or_fill, [1], -1, [])

    original = [1, 2, 3]
    clone = fast_clone(original)
    assert_that(clone == original and clone is not original, "clone should be equal but separate")
    clone[0] = 100
    assert_equal(original, [1, 2, 3], "mutating the clone should not affect the original")


@test("trim_or_fill passes a same-length list straight through")
def test_trim_or_fill_passthrough():
    data = ['a', 'b']
    assert_that(trim_or_fill(data, 2, ['z']) is data, "same length should hand back the list itself")


# --- flat set api ---

@test("flat set api matches the documented examples")
def test_set_flat():
    assert_that(has_order_change([1, 2, 3], [1, 3, 2]), "reordering is an order change")
    assert_that(not has_diff([1, 2, 3], [3, 2, 1]), "reordering is not a diff")
    result = diff([1, 2, 3], [2, 3, 4])
    assert_equal((result.added, result.removed), ([4], [1]), "documented diff example")
    assert_equal(union([1, 2, 3], [2, 3, 4]), [2, 3], "union keeps common members")
    assert_equal(merge([1, 2], [2, 3], [3, 4]), [1, 2, 3, 4], "documented merge example")


@test("merge of nothing is empty")
def test_merge_flat_edges():
    assert_equal(merge(), [], "no arrays should merge to nothing")
    assert_equal(merge([], []), [], "empty arrays should merge to nothing")
    assert_equal(merge((1, 1), {2}), [1, 2], "any iterables should merge")


# --- flat grouping api ---

@test("group_by then order_by linearizes by category")
def test_grouping_flat():
    items = [{'t': 'a', 'v': 1}, {'t': 'b', 'v': 2}, {'t': 'a', 'v': 3}]
    grouped = group_by(items, lambda x: x['t'])
    assert_that(isinstance(grouped, GroupedArray), "group_by should return a GroupedArray")
    assert_equal(order_by(grouped, ['b', 'a']), [{'t': 'b', 'v': 2}, {'t': 'a', 'v': 1}, {'t': 'a', 'v': 3}],
                 "documented grouping example")


@test("order_by accepts a plain mapping")
def test_order_by_mapping():
    assert_equal(order_by({'x': [1, 2], 'y': [3]}, ['y', 'q', 'x']), [3, 1, 2], "plain dicts should work")
    assert_equal(order_by({}, ['a']), [], "empty grouping flattens to nothing")


if __name__ == "__main__":
    suite.main(title="arrayq flat api test")
