import pytest

from gridworks.matrix import (
    MatrixError,
    add,
    fill_random,
    format_matrix,
    horizontal_stack,
    main,
    multiply,
    new_matrix,
    split,
    strassen,
    subtract,
    vertical_stack,
)


def _identity(n):
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def test_new_matrix_is_zero_filled_with_requested_shape():
    m = new_matrix(3, 5)
    assert len(m) == 3
    assert all(row == [0.0] * 5 for row in m)


def test_new_matrix_rows_are_independent():
    m = new_matrix(2, 2)
    m[0][0] = 7.0
    assert m[1][0] == 0.0


def test_new_matrix_rejects_negative_size():
    with pytest.raises(MatrixError):
        new_matrix(-1, 2)


def test_format_matrix_layout():
    assert format_matrix([[1.0, 2.5], [3.0, 4.0]]) == "1 2.5 \n3 4 \n"


def test_format_matrix_rejects_empty():
    with pytest.raises(MatrixError):
        format_matrix([])
    with pytest.raises(MatrixError):
        format_matrix([[]])


def test_fill_random_is_deterministic_and_bounded():
    a = new_matrix(4, 6)
    result = fill_random(a)
    assert result is a
    b = fill_random(new_matrix(4, 6))
    assert a == b
    assert all(-10.0 <= v <= 10.0 for row in a for v in row)
    assert len({tuple(row) for row in a}) == 4


def test_multiply_small_example():
    assert multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19.0, 22.0], [43.0, 50.0]]


def test_multiply_by_identity_is_unchanged():
    a = fill_random(new_matrix(3, 4))
    right = multiply(a, _identity(4))
    left = multiply(_identity(3), a)
    assert len(right) == 3
    assert len(left) == 3
    for got, want in zip(right, a):
        assert got == pytest.approx(want, abs=1e-9)
    for got, want in zip(left, a):
        assert got == pytest.approx(want, abs=1e-9)


def test_multiply_result_shape():
    a = fill_random(new_matrix(2, 3))
    b = fill_random(new_matrix(3, 5))
    c = multiply(a, b)
    assert len(c) == 2
    assert all(len(row) == 5 for row in c)


def test_multiply_rejects_mismatched_dimensions():
    with pytest.raises(MatrixError):
        multiply(new_matrix(2, 3), new_matrix(2, 3))


def test_multiply_rejects_empty_and_ragged():
    with pytest.raises(MatrixError):
        multiply([], [[1.0]])
    with pytest.raises(MatrixError):
        multiply([[1.0, 2.0], [3.0]], [[1.0], [2.0]])


@pytest.mark.parametrize("size", [1, 2, 4, 8, 16])
def test_strassen_agrees_with_schoolbook(size):
    a = fill_random(new_matrix(size, size))
    b = [list(reversed(row)) for row in fill_random(new_matrix(size, size))]
    fast = strassen(a, b)
    slow = multiply(a, b)
    assert len(fast) == size
    assert len(slow) == size
    for got, want in zip(fast, slow):
        assert got == pytest.approx(want, abs=1e-6)


def test_strassen_rejects_non_power_of_two():
    with pytest.raises(MatrixError):
        strassen(new_matrix(6, 6), new_matrix(6, 6))


def test_strassen_rejects_non_square_or_mismatched():
    with pytest.raises(MatrixError):
        strassen(new_matrix(2, 4), new_matrix(2, 4))
    with pytest.raises(MatrixError):
        strassen(new_matrix(4, 4), new_matrix(2, 2))


def test_split_and_stack_round_trip():
    m = [[float(r * 4 + c) for c in range(4)] for r in range(4)]
    q11, q12, q21, q22 = split(m)
    assert q11 == [[0.0, 1.0], [4.0, 5.0]]
    rebuilt = vertical_stack(horizontal_stack(q11, q12), horizontal_stack(q21, q22))
    assert rebuilt == m


def test_split_rejects_odd_and_non_square():
    with pytest.raises(MatrixError):
        split(new_matrix(3, 3))
    with pytest.raises(MatrixError):
        split(new_matrix(2, 4))


def test_vertical_stack_places_second_below_first():
    a = [[1.0, 2.0], [3.0, 4.0]]
    b = [[5.0, 6.0], [7.0, 8.0]]
    assert vertical_stack(a, b) == [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0], [7.0, 8.0]]


def test_horizontal_stack_places_second_right_of_first():
    a = [[1.0, 2.0], [3.0, 4.0]]
    b = [[5.0, 6.0], [7.0, 8.0]]
    assert horizontal_stack(a, b) == [[1.0, 2.0, 5.0, 6.0], [3.0, 4.0, 7.0, 8.0]]


def test_stacks_reject_mismatched_shapes():
    with pytest.raises(MatrixError):
        vertical_stack(new_matrix(2, 2), new_matrix(2, 3))
    with pytest.raises(MatrixError):
        horizontal_stack(new_matrix(2, 2), new_matrix(3, 2))


def test_add_then_subtract_round_trip():
    a = fill_random(new_matrix(3, 3))
    b = [list(reversed(row)) for row in a]
    restored = subtract(add(a, b), b)
    assert len(restored) == 3
    for got, want in zip(restored, a):
        assert got == pytest.approx(want, abs=1e-9)


def test_subtract_self_is_zero():
    a = fill_random(new_matrix(2, 5))
    assert subtract(a, a) == new_matrix(2, 5)


def test_add_rejects_different_shapes():
    with pytest.raises(MatrixError):
        add(new_matrix(2, 2), new_matrix(2, 3))
    with pytest.raises(MatrixError):
        subtract(new_matrix(1, 2), new_matrix(2, 1))


def test_main_prints_inputs_and_products(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    a = fill_random(new_matrix(4, 4))
    expected_start = format_matrix(a) + "\n" + format_matrix(a) + "\n"
    assert out.startswith(expected_start)
    blocks = out.split("\n\n")
    assert len(blocks) == 4
    assert blocks[3] == format_matrix(multiply(a, a))