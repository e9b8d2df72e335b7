import gc
import weakref

import numpy as np
import pytest

from growarray import (
    AllocationFailure,
    BufferAllocator,
    ContainerReleased,
    GrowableArray,
    OutOfRange,
    Underflow,
)


def test_new_container_is_empty_with_capacity_one(allocator):
    arr = GrowableArray(allocator=allocator)
    assert arr.size() == 0
    assert len(arr) == 0
    assert arr.capacity() == 1
    assert allocator.live == 1


def test_int_scenario():
    arr = GrowableArray(dtype=np.int64)
    for v in (55, 50, 510):
        arr.append(v)
    assert arr.size() == 3
    assert arr.get(2) == 510
    assert isinstance(arr.get(2), int)
    assert arr.capacity() == 4
    assert arr.render() == "55 ,50 ,510 ,"


def test_char_scenario_iterates_in_order():
    arr = GrowableArray(dtype="U1")
    for c in "ABC":
        arr.append(c)
    assert list(arr) == ["A", "B", "C"]
    assert str(arr) == "A ,B ,C ,"


def test_capacity_sequence_during_appends():
    arr = GrowableArray()
    seen = [arr.capacity()]
    for i in range(5):
        arr.append(i)
        seen.append(arr.capacity())
    assert seen == [1, 1, 2, 4, 4, 8]


def test_order_preserved_across_growth():
    rng = np.random.default_rng(0)
    values = rng.integers(-1000, 1000, size=257)
    arr = GrowableArray(dtype=np.int64)
    for v in values:
        arr.append(v)
    assert arr.capacity() == 512
    np.testing.assert_array_equal(arr.to_numpy(), values)
    assert [arr.get(i) for i in range(len(values))] == values.tolist()


def test_get_out_of_range_does_not_mutate():
    arr = GrowableArray()
    for v in (1, 2, 3):
        arr.append(v)
    for bad in (10, 3, -1):
        with pytest.raises(OutOfRange) as exc_info:
            arr.get(bad)
        assert exc_info.value.index == bad
        assert exc_info.value.size == 3
    assert arr.size() == 3
    assert arr.capacity() == 4
    assert list(arr) == [1, 2, 3]


def test_out_of_range_is_an_index_error():
    arr = GrowableArray()
    with pytest.raises(IndexError):
        arr[0]


def test_minus_one_is_a_regular_value():
    arr = GrowableArray()
    arr.append(-1)
    assert arr.get(0) == -1


def test_append_at_end_appends():
    arr = GrowableArray()
    arr.append(1)
    arr.append_at(2, 1)
    assert list(arr) == [1, 2]
    assert arr.capacity() == 2


def test_append_at_overwrites_without_shifting():
    arr = GrowableArray()
    for v in (10, 20, 30):
        arr.append(v)
    arr.append_at(99, 1)
    assert list(arr) == [10, 99, 30]
    assert arr.size() == 3


def test_append_at_rejects_bad_index():
    arr = GrowableArray()
    arr.append(1)
    with pytest.raises(OutOfRange):
        arr.append_at(5, 2)
    with pytest.raises(OutOfRange):
        arr.append_at(5, -1)
    assert list(arr) == [1]


def test_remove_last_on_empty_is_noop():
    arr = GrowableArray()
    arr.remove_last()
    assert arr.size() == 0
    for _ in range(5):
        arr.remove_last()
    assert arr.size() == 0


def test_remove_last_strict_raises_underflow():
    arr = GrowableArray(strict_underflow=True)
    arr.append(1)
    arr.remove_last()
    with pytest.raises(Underflow):
        arr.remove_last()
    assert arr.size() == 0


def test_remove_last_keeps_capacity_and_prefix():
    arr = GrowableArray()
    for v in range(5):
        arr.append(v)
    arr.remove_last()
    arr.remove_last()
    assert list(arr) == [0, 1, 2]
    assert arr.capacity() == 8
    with pytest.raises(OutOfRange):
        arr.get(3)
class _Payload:
    pass


def test_remove_last_drops_object_reference():
    arr = GrowableArray(dtype=object)
    payload = _Payload()
    ref = weakref.ref(payload)
    arr.append(payload)
    del payload
    arr.remove_last()
    gc.collect()
    assert ref() is None


def test_object_dtype_holds_arbitrary_values():
    arr = GrowableArray(dtype=object)
    items = [{"a": 1}, (1, 2), "text", None]
    for it in items:
        arr.append(it)
    assert arr.get(0) is items[0]
    assert list(arr) == items


def test_size_never_exceeds_capacity_under_mixed_ops():
    rng = np.random.default_rng(1)
    arr = GrowableArray()
    for op in rng.integers(0, 3, size=500):
        if op == 0:
            arr.remove_last()
        else:
            arr.append(int(op))
        assert 0 <= arr.size() <= arr.capacity()


def test_iteration_is_restartable_and_lazy():
    arr = GrowableArray()
    for v in (1, 2, 3):
        arr.append(v)
    assert list(arr) == list(arr) == [1, 2, 3]
    it = iter(arr)
    assert next(it) == 1
    arr.remove_last()
    assert list(it) == [2]


def test_for_each_visits_live_elements():
    arr = GrowableArray()
    for v in (4, 5, 6):
        arr.append(v)
    seen = []
    arr.for_each(seen.append)
    assert seen == [4, 5, 6]


def test_to_numpy_is_a_copy():
    arr = GrowableArray()
    arr.append(7)
    out = arr.to_numpy()
    out[0] = 0
    assert arr.get(0) == 7


def test_growth_failure_leaves_container_intact():
    allocator = BufferAllocator(max_slots=4)
    arr = GrowableArray(allocator=allocator)
    for v in range(4):
        arr.append(v)
    with pytest.raises(AllocationFailure):
        arr.append(4)
    assert arr.size() == 4
    assert arr.capacity() == 4
    assert list(arr) == [0, 1, 2, 3]
    assert allocator.live == 1


def test_growth_frees_old_buffers(allocator):
    arr = GrowableArray(allocator=allocator)
    for v in range(9):
        arr.append(v)
    # 1 -> 2 -> 4 -> 8 -> 16
    assert allocator.allocated == 5
    assert allocator.freed == 4
    assert allocator.live == 1


def test_release_frees_buffer_exactly_once(allocator):
    arr = GrowableArray(allocator=allocator)
    for v in range(3):
        arr.append(v)
    arr.release()
    arr.release()
    assert allocator.live == 0
    assert allocator.allocated == allocator.freed == 3
    assert arr.released


def test_context_manager_releases(allocator):
    with GrowableArray(allocator=allocator) as arr:
        arr.append(1)
    assert allocator.live == 0
    with pytest.raises(ContainerReleased):
        arr.size()


def test_garbage_collection_releases(allocator):
    arr = GrowableArray(allocator=allocator)
    arr.append(1)
    del arr
    gc.collect()
    assert allocator.live == 0


def test_use_after_release_raises(allocator):
    arr = GrowableArray(allocator=allocator)
    arr.release()
    with pytest.raises(ContainerReleased):
        arr.append(1)
    with pytest.raises(ContainerReleased):
        arr.get(0)
    with pytest.raises(ContainerReleased):
        list(arr)
    assert repr(arr) == "GrowableArray(dtype=int64, released)"


def test_repr():
    arr = GrowableArray()
    arr.append(1)
    arr.append(2)
    arr.append(3)
    assert repr(arr) == "GrowableArray(dtype=int64, size=3, capacity=4)"


def test_non_integer_index_is_a_type_error():
    arr = GrowableArray()
    arr.append(1)
    with pytest.raises(TypeError):
        arr.get(0.5)


def test_rejected_append_on_full_buffer_changes_nothing(allocator):
    arr = GrowableArray(dtype=np.int64, allocator=allocator)
    arr.append(1)
    with pytest.raises(ValueError):
        arr.append("abc")
    assert arr.size() == 1
    assert arr.capacity() == 1
    assert allocator.allocated == 1
    assert list(arr) == [1]


def test_rejected_append_at_overwrite_keeps_old_value():
    arr = GrowableArray(dtype=np.int64)
    arr.append(5)
    arr.append(6)
    with pytest.raises(ValueError):
        arr.append_at("abc", 0)
    assert list(arr) == [5, 6]


def test_sequence_value_rejected_for_scalar_dtype(allocator):
    arr = GrowableArray(dtype=np.int64, allocator=allocator)
    arr.append(1)
    with pytest.raises(ValueError):
        arr.append([2, 3])
    assert arr.capacity() == 1
    assert allocator.allocated == 1


def test_values_are_narrowed_to_dtype():
    ints = GrowableArray(dtype=np.int64)
    ints.append(3.7)
    assert ints.get(0) == 3
    chars = GrowableArray(dtype="U1")
    chars.append("AB")
    assert chars.get(0) == "A"
