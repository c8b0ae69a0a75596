import numpy as np
import pytest

from reed_muller.algebra import Vector
from reed_muller.errors import DimensionMismatchError, InvalidOrderError
from reed_muller.rm import ReedMullerEncoder

# "Test" framed with m = 3 (four message bits per codeword)
TEST_M3_FRAMES = [
    [0, 0, 0, 0, 0, 0, 1, 1],
    [0, 0, 0, 0, 0, 0, 0, 0],
    [0, 1, 0, 1, 1, 0, 1, 0],
    [0, 1, 0, 1, 0, 1, 0, 1],
    [0, 1, 1, 0, 0, 1, 1, 0],
    [0, 1, 0, 1, 1, 0, 1, 0],
    [0, 1, 1, 0, 1, 0, 0, 1],
    [0, 0, 1, 1, 1, 1, 0, 0],
    [0, 1, 1, 0, 1, 0, 0, 1],
    [0, 1, 0, 1, 0, 1, 0, 1],
]

# "Test" framed with m = 4; the last chunk carries three padding zeros
TEST_M4_FRAMES = [
    [0, 0, 0, 0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0, 0, 1, 1],
    [0, 1, 0, 1, 1, 0, 1, 0, 0, 1, 0, 1, 1, 0, 1, 0],
    [1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0],
    [1, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0, 0, 0],
    [1, 1, 0, 0, 0, 0, 1, 1, 0, 0, 1, 1, 1, 1, 0, 0],
    [0, 0, 1, 1, 1, 1, 0, 0, 0, 0, 1, 1, 1, 1, 0, 0],
    [1, 0, 0, 1, 1, 0, 0, 1, 0, 1, 1, 0, 0, 1, 1, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
]


def test_encode_m3_message():
    # message (1, 0, 1, 1) is the polynomial 1 + x2 + x3
    encoder = ReedMullerEncoder(3)
    codeword = encoder.encode(Vector([1, 0, 1, 1]))
    assert codeword == Vector([1, 1, 0, 0, 0, 0, 1, 1])


def test_encode_accepts_plain_sequences():
    encoder = ReedMullerEncoder(3)
    assert encoder.encode([1, 0, 1, 1]) == Vector([1, 1, 0, 0, 0, 0, 1, 1])


def test_encoder_attributes():
    encoder = ReedMullerEncoder(5)
    assert encoder.m == 5
    assert encoder.required_message_length == 6
    assert encoder.codeword_length == 32
    assert encoder.generator_matrix.shape == (6, 32)


def test_generator_matrix_is_a_copy():
    encoder = ReedMullerEncoder(3)
    g = encoder.generator_matrix
    g[0, 0] = 0
    assert encoder.encode([1, 0, 0, 0]) == Vector([1] * 8)


@pytest.mark.parametrize("m", [0, 1, 256])
def test_invalid_order(m):
    with pytest.raises(InvalidOrderError):
        ReedMullerEncoder(m)


def test_encode_rejects_wrong_length():
    encoder = ReedMullerEncoder(3)
    with pytest.raises(DimensionMismatchError):
        encoder.encode(Vector([1, 0, 1]))
    with pytest.raises(DimensionMismatchError):
        encoder.encode(Vector([1, 0, 1, 1, 0]))


def test_codewords_are_binary_and_linear():
    rng = np.random.default_rng(11)
    encoder = ReedMullerEncoder(4)
    a = Vector(rng.integers(0, 2, size=5))
    b = Vector(rng.integers(0, 2, size=5))
    ca, cb = encoder.encode(a), encoder.encode(b)
    combined = encoder.encode(Vector((a.to_array() + b.to_array()) % 2))
    assert set(ca) <= {0, 1}
    np.testing.assert_array_equal(combined.to_array(), (ca.to_array() + cb.to_array()) % 2)


def test_minimum_distance():
    m = 4
    encoder = ReedMullerEncoder(m)
    weights = []
    for value in range(1, 1 << (m + 1)):
        message = Vector([(value >> i) & 1 for i in range(m + 1)])
        weights.append(int(encoder.encode(message).to_array().sum()))
    assert min(weights) == 1 << (m - 1)


def test_encode_bytes_m3():
    frames = ReedMullerEncoder(3).encode_bytes(b"Test")
    assert [list(v) for v in frames] == TEST_M3_FRAMES
    assert frames[0].to_byte() == 3
    assert frames[1].to_byte() == 0


def test_encode_bytes_m4_pads_last_chunk():
    frames = ReedMullerEncoder(4).encode_bytes(b"Test")
    assert [list(v) for v in frames] == TEST_M4_FRAMES
    assert frames[1].to_byte() == 3


def test_encode_bytes_empty_input():
    frames = ReedMullerEncoder(3).encode_bytes(b"")
    assert len(frames) == 2
    assert frames[0].to_byte() == 3
    assert frames[1].to_byte() == 0


@pytest.mark.parametrize("m, size", [(2, 1), (3, 5), (5, 3), (8, 8), (9, 13)])
def test_encode_bytes_chunk_count(m, size):
    data = bytes(range(size))
    frames = ReedMullerEncoder(m).encode_bytes(data)
    n = m + 1
    total_bits = 8 * size
    chunks = -(-total_bits // n)
    assert len(frames) == 2 + chunks
    assert frames[1].to_byte() == chunks * n - total_bits
    assert all(len(v) == 1 << m for v in frames[2:])
