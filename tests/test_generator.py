import numpy as np
import pytest

from reed_muller.algebra import MatrixMod2
from reed_muller.errors import InvalidOrderError
from reed_muller.rm import build_generator_matrix


def test_build_m1():
    assert build_generator_matrix(1) == MatrixMod2([[1, 1], [0, 1]])


def test_build_m2():
    expected = MatrixMod2([
        [1, 1, 1, 1],
        [0, 1, 0, 1],
        [0, 0, 1, 1],
    ])
    assert build_generator_matrix(2) == expected


def test_build_m3():
    expected = MatrixMod2([
        [1, 1, 1, 1, 1, 1, 1, 1],
        [0, 1, 0, 1, 0, 1, 0, 1],
        [0, 0, 1, 1, 0, 0, 1, 1],
        [0, 0, 0, 0, 1, 1, 1, 1],
    ])
    assert build_generator_matrix(3) == expected


@pytest.mark.parametrize("m", [2, 3, 4, 5, 6, 7])
def test_recursive_block_structure(m):
    g = build_generator_matrix(m).to_array()
    prev = build_generator_matrix(m - 1).to_array()
    half = prev.shape[1]
    assert g.shape == (m + 1, 1 << m)
    np.testing.assert_array_equal(g[:m, :half], prev)
    np.testing.assert_array_equal(g[:m, half:], prev)
    assert not g[m, :half].any()
    assert g[m, half:].all()


def test_columns_enumerate_binary_indices():
    m = 5
    g = build_generator_matrix(m).to_array()
    for col in range(1 << m):
        expected = [1] + [(col >> i) & 1 for i in range(m)]
        np.testing.assert_array_equal(g[:, col], expected)


def test_returned_matrix_is_independent():
    g = build_generator_matrix(3)
    g[0, 0] = 0
    assert build_generator_matrix(3)[0, 0] == 1


@pytest.mark.parametrize("m", [0, -1])
def test_invalid_order(m):
    with pytest.raises(InvalidOrderError):
        build_generator_matrix(m)
    with pytest.raises(ValueError):
        build_generator_matrix(m)
