import functools
import random

import pytest

from algolab.sorting import format_items, heap_sort, merge_sort, quicksort, selectsort


def _sort_all(data, *bounds):
    """Return copies of data sorted by heap, merge, quick and select sort."""
    heap = list(data)
    heap_sort(heap, *bounds)
    merge = list(data)
    merge_sort(merge, *bounds)
    quick = list(data)
    quicksort(quick, *bounds)
    select = list(data)
    selectsort(select, *bounds)
    return heap, merge, quick, select


def test_sorts_source_sample():
    data = ["c", "a", "f", "b", "f", "g"]
    expected = ["a", "b", "c", "f", "f", "g"]

    heap = list(data)
    heap_sort(heap, 0, len(heap) - 1)
    assert heap == expected

    merge = list(data)
    merge_sort(merge, 0, len(merge) - 1)
    assert merge == expected

    quick = list(data)
    quicksort(quick, 0, len(quick) - 1)
    assert quick == expected

    select = list(data)
    selectsort(select, 0, len(select) - 1)
    assert select == expected


@pytest.mark.parametrize("seed", range(20))
def test_sorts_random_lists(seed):
    rng = random.Random(seed)
    data = [rng.randint(-50, 50) for _ in range(rng.randint(0, 60))]
    expected = sorted(data)

    heap = list(data)
    heap_sort(heap)
    assert heap == expected

    merge = list(data)
    merge_sort(merge)
    assert merge == expected

    quick = list(data)
    quicksort(quick)
    assert quick == expected

    select = list(data)
    selectsort(select)
    assert select == expected


def test_empty_and_single():
    empty = []
    heap_sort(empty)
    merge_sort(empty)
    quicksort(empty)
    selectsort(empty)
    assert empty == []

    single = ["z"]
    heap_sort(single)
    merge_sort(single)
    quicksort(single)
    selectsort(single)
    assert single == ["z"]


def test_sorts_only_given_range():
    rng = random.Random(7)
    original = [rng.randint(0, 100) for _ in range(30)]
    for result in _sort_all(original, 5, 20):
        assert result[:5] == original[:5]
        assert result[21:] == original[21:]
        assert result[5:21] == sorted(original[5:21])

    heap = list(original)
    heap_sort(heap, 5, 20)
    assert heap[5:21] == sorted(original[5:21])
    assert heap[:5] == original[:5]


def test_already_sorted_and_reversed():
    ascending = list(range(40))
    descending = list(range(40, 0, -1))

    heap_up = list(ascending)
    heap_sort(heap_up)
    assert heap_up == ascending
    heap_down = list(descending)
    heap_sort(heap_down)
    assert heap_down == sorted(descending)

    merge_up = list(ascending)
    merge_sort(merge_up)
    assert merge_up == ascending
    merge_down = list(descending)
    merge_sort(merge_down)
    assert merge_down == sorted(descending)

    quick_up = list(ascending)
    quicksort(quick_up)
    assert quick_up == ascending
    quick_down = list(descending)
    quicksort(quick_down)
    assert quick_down == sorted(descending)

    select_up = list(ascending)
    selectsort(select_up)
    assert select_up == ascending
    select_down = list(descending)
    selectsort(select_down)
    assert select_down == sorted(descending)


def test_out_of_range_raises():
    with pytest.raises(IndexError):
        heap_sort([3, 1, 2], 0, 3)
    with pytest.raises(IndexError):
        heap_sort([3, 1, 2], -1, 2)

    with pytest.raises(IndexError):
        merge_sort([3, 1, 2], 0, 3)
    with pytest.raises(IndexError):
        merge_sort([3, 1, 2], -1, 2)

    with pytest.raises(IndexError):
        quicksort([3, 1, 2], 0, 3)
    with pytest.raises(IndexError):
        quicksort([3, 1, 2], -1, 2)

    with pytest.raises(IndexError):
        selectsort([3, 1, 2], 0, 3)
    with pytest.raises(IndexError):
        selectsort([3, 1, 2], -1, 2)


@functools.total_ordering
class _Keyed:
    def __init__(self, key, label):
        self.key = key
        self.label = label

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


def test_merge_sort_is_stable():
    data = [_Keyed(k, i) for i, k in enumerate([2, 1, 2, 1, 3, 2, 1])]
    merge_sort(data)
    assert [item.key for item in data] == sorted(item.key for item in data)
    for key in (1, 2, 3):
        labels = [item.label for item in data if item.key == key]
        assert labels == sorted(labels)


def test_format_items_joins_with_comma():
    assert format_items(["a", "b", "c"]) == "a, b, c"


def test_format_items_empty_and_single():
    assert format_items([]) == ""
    assert format_items(["x"]) == "x"