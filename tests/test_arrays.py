import itertools

import pytest

from dsadaily.arrays import (
    closest_pair,
    h_index,
    increasing_triplet,
    intersection,
    inversion_count,
    largest_number,
    max_overlapping_intervals,
    missing_in_range,
    next_palindrome,
    push_zeros_to_end,
    segregate_zeros_ones,
    trapped_water,
)


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def _to_int(digits):
    return int("".join(map(str, digits)))


def test_overlap_identical_intervals_all_overlap():
    intervals = [[2, 7]] * 5
    assert max_overlapping_intervals(intervals) == len(intervals)


def test_overlap_nested_intervals():
    intervals = [[1, 10], [2, 9], [3, 8], [4, 7]]
    assert max_overlapping_intervals(intervals) == len(intervals)


def test_overlap_order_does_not_matter():
    intervals = [[1, 3], [2, 6], [8, 10], [5, 9], [4, 4]]
    assert max_overlapping_intervals(intervals) == max_overlapping_intervals(intervals[::-1])


def test_overlap_touching_endpoints_counts_as_overlap():
    disjoint = [[1, 2], [4, 5]]
    touching = [[1, 2], [2, 3]]
    assert max_overlapping_intervals(touching) == max_overlapping_intervals(disjoint) + 1


def test_inversion_count_reversed():
    n = 9
    assert inversion_count(list(range(n, 0, -1))) == n * (n - 1) // 2


def test_inversion_count_sorted_equals_empty():
    assert inversion_count(list(range(10))) == inversion_count([])


def test_inversion_count_does_not_modify_input():
    data = [5, 3, 2, 4, 1]
    copy = list(data)
    inversion_count(data)
    assert data == copy


def test_inversion_count_equal_values_not_counted():
    assert inversion_count([4, 4, 4, 4]) == inversion_count([1])


def test_missing_in_range_partition():
    arr = [10, 12, 11, 15]
    low, high = 10, 15
    missing = missing_in_range(arr, low, high)
    assert sorted(missing) == missing
    assert set(missing) | (set(arr) & set(range(low, high + 1))) == set(range(low, high + 1))
    assert not set(missing) & set(arr)


def test_missing_in_range_empty_array_gives_whole_range():
    assert missing_in_range([], 3, 7) == list(range(3, 8))


def test_largest_number_worked_example():
    assert largest_number([3, 30, 34, 5, 9]) == "9534330"


def test_largest_number_all_zeros():
    assert largest_number([0, 0, 0]) == "0"


def test_largest_number_uses_every_digit():
    arr = [54, 546, 548, 60]
    result = largest_number(arr)
    assert sorted(result) == sorted("".join(map(str, arr)))
    for perm in itertools.permutations(map(str, arr)):
        assert int("".join(perm)) <= int(result)


def test_largest_number_empty_raises():
    with pytest.raises(ValueError):
        largest_number([])


@pytest.mark.parametrize("citations", [[3, 0, 5, 3, 0], [5, 1, 2, 4, 1], [0, 0], [100]])
def test_h_index_definition(citations):
    h = h_index(citations)
    assert sum(c >= h for c in citations) >= h
    assert sum(c >= h + 1 for c in citations) < h + 1


def test_h_index_all_highly_cited():
    citations = [50] * 7
    assert h_index(citations) == len(citations)


def test_closest_pair_is_optimal():
    arr1, arr2, x = [1, 4, 5, 7], [10, 20, 30, 40], 32
    a, b = closest_pair(arr1, arr2, x)
    assert a in arr1 and b in arr2
    best = min(abs(p + q - x) for p in arr1 for q in arr2)
    assert abs(a + b - x) == best


def test_closest_pair_empty_raises():
    with pytest.raises(ValueError):
        closest_pair([], [1, 2], 3)


def test_push_zeros_to_end():
    arr = [1, 2, 0, 4, 3, 0, 5, 0]
    result = push_zeros_to_end(arr)
    assert result == [v for v in arr if v] + [0] * arr.count(0)
    assert arr == [1, 2, 0, 4, 3, 0, 5, 0]


def test_trapped_water_single_pit():
    height = 6
    assert trapped_water([height, 0, height]) == height


def test_trapped_water_symmetric():
    heights = [3, 0, 1, 0, 4, 0, 2]
    assert trapped_water(heights) == trapped_water(heights[::-1])


def test_trapped_water_monotonic_holds_none():
    assert trapped_water([1, 2, 3, 4, 5]) == trapped_water([])


def test_segregate_zeros_ones():
    arr = [0, 1, 0, 1, 0, 0, 1, 1, 1, 0]
    assert segregate_zeros_ones(arr) == sorted(arr)


def test_segregate_rejects_other_values():
    with pytest.raises(ValueError):
        segregate_zeros_ones([0, 2, 1])


def test_intersection_distinct_in_second_order():
    nums1, nums2 = [4, 9, 5, 4], [9, 4, 9, 8, 4]
    result = intersection(nums1, nums2)
    assert set(result) == set(nums1) & set(nums2)
    assert len(result) == len(set(result))
    assert result == sorted(result, key=nums2.index)


def test_increasing_triplet_found():
    arr = [5, 1, 6, 2, 0, 3]
    result = increasing_triplet(arr)
    assert len(result) == 3
    assert result[0] < result[1] < result[2]
    assert _is_subsequence(result, arr)


def test_increasing_triplet_absent():
    assert increasing_triplet([5, 4, 3, 2, 1]) == []
    assert increasing_triplet([1, 2]) == []


def test_next_palindrome_all_nines():
    assert next_palindrome([9, 9, 9]) == [1, 0, 0, 1]


def test_next_palindrome_worked_example():
    digits = [9, 4, 1, 8, 7, 9, 7, 8, 3, 2, 2]
    assert next_palindrome(digits) == [9, 4, 1, 8, 8, 0, 8, 8, 1, 4, 9]


@pytest.mark.parametrize("digits", [[2, 3, 5, 4, 5], [1, 2, 2, 1], [1, 9, 9, 1], [5], [1, 2, 9, 3]])
def test_next_palindrome_is_greater_palindrome(digits):
    result = next_palindrome(digits)
    assert result == result[::-1]
    assert _to_int(result) > _to_int(digits)
    assert len(result) == len(digits)


def test_next_palindrome_empty_raises():
    with pytest.raises(ValueError):
        next_palindrome([])