import pytest

from codekata.matrix import boustrophedon, compression_ratio, run_length, snake_matrix


def test_snake_matrix_small_example():
    assert snake_matrix(3, 3) == [[1, 2, 3], [0, 0, 4], [7, 6, 5]]


@pytest.mark.parametrize("rows,cols", [(1, 4), (4, 3), (5, 5), (6, 2)])
def test_snake_matrix_numbers_each_once(rows, cols):
    matrix = snake_matrix(rows, cols)
    numbers = sorted(v for row in matrix for v in row if v)
    expected_count = ((rows + 1) // 2) * cols + rows // 2
    assert numbers == list(range(1, expected_count + 1))


def test_snake_matrix_link_rows_alternate_sides():
    matrix = snake_matrix(5, 4)
    assert matrix[1][-1] != 0 and matrix[1][0] == 0
    assert matrix[3][0] != 0 and matrix[3][-1] == 0


def test_snake_matrix_rejects_bad_size():
    with pytest.raises(ValueError):
        snake_matrix(3, 0)


def test_boustrophedon_reverses_odd_rows():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    flat = boustrophedon(matrix)
    assert flat[:3] == matrix[0]
    assert flat[3:6] == matrix[1][::-1]
    assert flat[6:] == matrix[2]


@pytest.mark.parametrize("values", [[1, 1, 2, 2, 2, 3], [5], [0, 0, 0, 0], [1, 2, 1, 2]])
def test_run_length_round_trip(values):
    code = run_length(values)
    pairs = list(zip(code[::2], code[1::2]))
    decoded = [value for length, value in pairs for _ in range(length)]
    assert decoded == values
    assert all(a[1] != b[1] for a, b in zip(pairs, pairs[1:]))


def test_run_length_empty():
    assert run_length([]) == []


def test_compression_ratio_matches_code_length():
    values = [4, 4, 4, 4, 7, 7, 1]
    assert compression_ratio(values) == pytest.approx(len(run_length(values)) / len(values))


def test_compression_ratio_rejects_empty():
    with pytest.raises(ValueError):
        compression_ratio([])