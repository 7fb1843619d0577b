from math import factorial

import pytest

from algokit.dynamic import (
    climb_stairs,
    find_paths,
    job_scheduling,
    k_inverse_pairs,
    length_of_lis,
    longest_common_subsequence,
    max_length,
    min_falling_path_sum,
    num_decodings,
    number_of_arithmetic_slices,
    rob,
    tribonacci,
)


def test_arithmetic_slices_example():
    assert number_of_arithmetic_slices([2, 4, 6, 8, 10]) == 7


@pytest.mark.parametrize("nums", [[], [5], [1, 9]])
def test_arithmetic_slices_short_input(nums):
    assert number_of_arithmetic_slices(nums) == 0


def test_arithmetic_slices_shift_and_negation_invariant():
    nums = [3, 1, 7, 5, 9, 11, 2]
    base = number_of_arithmetic_slices(nums)
    assert number_of_arithmetic_slices([x + 100 for x in nums]) == base
    assert number_of_arithmetic_slices([-x for x in nums]) == base


def test_climb_stairs_small_values():
    assert [climb_stairs(n) for n in (1, 2, 3)] == [1, 2, 3]


def test_climb_stairs_recurrence():
    for n in range(3, 20):
        assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_rejects_zero():
    with pytest.raises(ValueError):
        climb_stairs(0)


def test_rob_worked_example():
    assert rob([1, 2, 3]) == 4


def test_rob_single_house():
    assert rob([42]) == 42


def test_rob_at_least_richest_house():
    nums = [2, 7, 9, 3, 1, 8, 4]
    assert rob(nums) >= max(nums)
    assert rob(nums) <= sum(nums)


def test_rob_empty_raises():
    with pytest.raises(ValueError):
        rob([])


def test_k_inverse_pairs_zero_pairs():
    for n in range(0, 6):
        assert k_inverse_pairs(n, 0) == 1


def test_k_inverse_pairs_sum_is_factorial():
    n = 5
    total = sum(k_inverse_pairs(n, k) for k in range(n * (n - 1) // 2 + 1))
    assert total == factorial(n)


def test_k_inverse_pairs_symmetry_and_bounds():
    n = 6
    top = n * (n - 1) // 2
    for k in range(top + 1):
        assert k_inverse_pairs(n, k) == k_inverse_pairs(n, top - k)
    assert k_inverse_pairs(n, top + 1) == 0
    assert k_inverse_pairs(n, -1) == 0


def test_k_inverse_pairs_result_is_reduced():
    value = k_inverse_pairs(1000, 1000)
    assert 0 <= value < 1_000_000_007


def test_k_inverse_pairs_negative_n():
    with pytest.raises(ValueError):
        k_inverse_pairs(-1, 0)


def test_lcs_identical_and_disjoint():
    assert longest_common_subsequence("abcde", "abcde") == 5
    assert longest_common_subsequence("abc", "xyz") == 0
    assert longest_common_subsequence("", "abc") == 0


def test_lcs_symmetric_and_bounded():
    a, b = "dynamicprogramming", "programmatic"
    result = longest_common_subsequence(a, b)
    assert result == longest_common_subsequence(b, a)
    assert result <= min(len(a), len(b))


def test_lcs_subsequence_is_full_length():
    assert longest_common_subsequence("ace", "abcde") == len("ace")


def test_lis_increasing_decreasing_constant():
    assert length_of_lis([1, 2, 3, 4, 5]) == 5
    assert length_of_lis([5, 4, 3, 2, 1]) == 1
    assert length_of_lis([7, 7, 7]) == 1


def test_lis_bounded_by_length():
    nums = [10, 9, 2, 5, 3, 7, 101, 18]
    assert 1 <= length_of_lis(nums) <= len(nums)


def test_lis_empty_raises():
    with pytest.raises(ValueError):
        length_of_lis([])


def test_max_length_disjoint_words():
    assert max_length(["abc", "def"]) == len("abcdef")


def test_max_length_skips_words_with_repeats():
    assert max_length(["aa", "bb"]) == 0
    assert max_length(["aa", "xyz"]) == len("xyz")


def test_max_length_overlapping_words():
    assert max_length(["ab", "bc"]) == len("ab")
    assert max_length([]) == 0
    assert max_length(["", "ab"]) == len("ab")


def test_job_scheduling_single_job():
    assert job_scheduling([1], [5], [30]) == 30


def test_job_scheduling_back_to_back_jobs_all_taken():
    assert job_scheduling([1, 3, 5], [3, 5, 7], [10, 20, 30]) == 10 + 20 + 30


def test_job_scheduling_all_overlapping_takes_best():
    assert job_scheduling([1, 2, 3], [10, 10, 10], [5, 50, 20]) == 50


def test_job_scheduling_length_mismatch():
    with pytest.raises(ValueError):
        job_scheduling([1, 2], [3], [4, 5])


def test_min_falling_path_single_cell():
    assert min_falling_path_sum([[-7]]) == -7


def test_min_falling_path_constant_rows():
    matrix = [[1, 1, 1], [4, 4, 4], [2, 2, 2]]
    assert min_falling_path_sum(matrix) == 1 + 4 + 2


def test_min_falling_path_row_offset_and_no_mutation():
    matrix = [[2, 1, 3], [6, 5, 4], [7, 8, 9]]
    copy = [row[:] for row in matrix]
    base = min_falling_path_sum(matrix)
    assert matrix == copy
    shifted = [row[:] for row in matrix]
    shifted[1] = [value + 10 for value in shifted[1]]
    assert min_falling_path_sum(shifted) == base + 10


def test_min_falling_path_rejects_bad_shapes():
    with pytest.raises(ValueError):
        min_falling_path_sum([])
    with pytest.raises(ValueError):
        min_falling_path_sum([[1, 2], [3]])


def test_find_paths_no_moves():
    assert find_paths(3, 3, 0, 1, 1) == 0


def test_find_paths_single_cell_one_move():
    assert find_paths(1, 1, 1, 0, 0) == len([(1, 0), (-1, 0), (0, 1), (0, -1)])


def test_find_paths_monotone_and_symmetric():
    counts = [find_paths(3, 4, moves, 0, 1) for moves in range(6)]
    assert counts == sorted(counts)
    assert find_paths(3, 4, 5, 0, 1) == find_paths(3, 4, 5, 2, 2)


def test_find_paths_bad_start():
    with pytest.raises(ValueError):
        find_paths(2, 2, 1, 2, 0)


def test_num_decodings_zeros_and_empty():
    assert num_decodings("") == 0
    assert num_decodings("0") == 0
    assert num_decodings("06") == 0
    assert num_decodings("10") == 1


def test_num_decodings_ones_follow_stairs():
    for n in range(1, 15):
        assert num_decodings("1" * n) == climb_stairs(n)


def test_num_decodings_large_pairs_do_not_combine():
    assert num_decodings("9" * 8) == 1
    assert num_decodings("27") == 1


def test_tribonacci_base_values():
    assert [tribonacci(n) for n in range(3)] == [0, 1, 1]


def test_tribonacci_recurrence():
    for n in range(3, 30):
        assert tribonacci(n) == tribonacci(n - 1) + tribonacci(n - 2) + tribonacci(n - 3)


def test_tribonacci_negative():
    with pytest.raises(ValueError):
        tribonacci(-1)