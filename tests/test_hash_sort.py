from collections import Counter

import pytest

from codekata.hash_sort import FrequencyTable, sort_by_frequency


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([5, 5, 4, 6, 4], [4, 4, 5, 5, 6]),
        ([9, 9, 9, 2, 5], [9, 9, 9, 2, 5]),
        ([4, 5, 9, 8, 4, 5, 2, 1], [4, 4, 5, 5, 1, 2, 8, 9]),
        (
            [1, 3, 7, 7, 7, 3, 2, 2, 2, 7, 3, 1, 7, 1, 6, 3, 5, 5, 4, 5, 6, 2, 1, 2, 4, 7,
             3, 1, 3, 5, 4, 1, 7, 2, 6, 1, 2],
            [1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 7, 7, 7, 7, 7, 7, 7, 3, 3, 3, 3, 3,
             3, 5, 5, 5, 5, 4, 4, 4, 6, 6, 6],
        ),
        (
            [11, 13, 27, 17, 47, 23, 12, 21, 32, 47, 23, 51, 57, 16, 60, 13, 15, 35, 42, 15,
             26, 32, 17, 27, 47, 57, 13, 1, 4, 5, 4, 1, 7, 2, 36, 1, 2],
            [1, 1, 1, 13, 13, 13, 47, 47, 47, 2, 2, 4, 4, 15, 15, 17, 17, 23, 23, 27, 27, 32,
             32, 57, 57, 5, 7, 11, 12, 16, 21, 26, 35, 36, 42, 51, 60],
        ),
    ],
)
def test_sort_by_frequency_examples(values, expected):
    assert sort_by_frequency(values) == expected


def test_sorted_output_is_a_permutation():
    values = [3, 14, 3, 27, 14, 14, 0, 69]
    result = sort_by_frequency(values)
    assert Counter(result) == Counter(values)


def test_bucket_holds_pairs_in_ascending_order():
    table = FrequencyTable()
    for value in [15, 12, 15, 3]:
        table.add(value)
    assert table.bucket(1) == [(12, 1), (15, 2)]
    assert table.bucket(0) == [(3, 1)]
    assert table.bucket(2) == []


def test_len_counts_every_value():
    table = FrequencyTable()
    for value in [1, 1, 2, 30]:
        table.add(value)
    assert len(table) == 4
    table.drain_sorted()
    assert len(table) == 0


def test_limit_leaves_more_frequent_values():
    table = FrequencyTable()
    for value in [1, 1, 1, 2]:
        table.add(value)
    assert table.drain_sorted(2) == [2]
    assert table.bucket(0) == [(1, 3)]
    assert len(table) == 3


def test_value_outside_table_raises():
    table = FrequencyTable()
    with pytest.raises(ValueError):
        table.add(70)
    with pytest.raises(ValueError):
        table.add(-10)


def test_bucket_index_out_of_range():
    with pytest.raises(IndexError):
        FrequencyTable().bucket(7)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        FrequencyTable(0)