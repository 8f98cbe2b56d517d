import pytest

from algosuite.sequences import bucket_sort, josephus, longest_increasing_subsequence, xor_swap


def test_josephus_source_example():
    assert josephus(14, 2) == 13


def test_josephus_single_person():
    assert josephus(1, 5) == 1


@pytest.mark.parametrize("n", [1, 2, 5, 17, 100])
def test_josephus_step_one_leaves_last(n):
    assert josephus(n, 1) == n


@pytest.mark.parametrize("power", [0, 1, 3, 6])
def test_josephus_step_two_power_of_two(power):
    assert josephus(2 ** power, 2) == 1


@pytest.mark.parametrize("n,k", [(7, 3), (10, 4), (41, 3), (5, 9)])
def test_josephus_result_in_range(n, k):
    assert 1 <= josephus(n, k) <= n


def test_josephus_rejects_empty_circle():
    with pytest.raises(ValueError):
        josephus(0, 2)


def test_lis_mixed():
    assert longest_increasing_subsequence([10, 9, 2, 5, 3, 7, 101, 18]) == 4


def test_lis_increasing_is_whole_length():
    values = list(range(12))
    assert longest_increasing_subsequence(values) == len(values)


def test_lis_decreasing_and_constant():
    assert longest_increasing_subsequence([9, 7, 5, 3]) == 1
    assert longest_increasing_subsequence([4, 4, 4]) == 1


def test_lis_empty():
    assert longest_increasing_subsequence([]) == 0


@pytest.mark.parametrize("a,b", [(3, 7), (0, 5), (-4, 11), (123456, -98765)])
def test_xor_swap(a, b):
    assert xor_swap(a, b) == (b, a)
    assert xor_swap(*xor_swap(a, b)) == (a, b)


def test_bucket_sort_source_sample():
    data = [0.897, 0.565, 0.656, 0.1234, 0.665]
    assert bucket_sort(data) == sorted(data)


def test_bucket_sort_keeps_duplicates():
    data = [0.5, 0.1, 0.5, 0.0, 0.99, 0.1]
    result = bucket_sort(data)
    assert result == sorted(data)
    assert len(result) == len(data)


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [1.0, -0.2, 3.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.3, bad])