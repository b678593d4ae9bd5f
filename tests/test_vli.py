import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from varisat.vli import read_u64, write_u64

u64 = st.integers(min_value=0, max_value=2**64 - 1)


def encode(value):
    buf = io.BytesIO()
    write_u64(buf, value)
    return buf.getvalue()


@settings(max_examples=50)
@given(st.lists(u64, max_size=2000))
def test_roundtrip(numbers):
    buf = io.BytesIO()
    for num in numbers:
        write_u64(buf, num)

    read = io.BufferedReader(io.BytesIO(buf.getvalue()), buffer_size=128)
    out = []
    while True:
        try:
            out.append(read_u64(read))
        except EOFError:
            break

    assert out == numbers


@pytest.mark.parametrize(
    "value, length",
    [
        (0, 1),
        (2**7 - 1, 1),
        (2**7, 2),
        (2**14 - 1, 2),
        (2**14, 3),
        (2**21 - 1, 3),
        (2**21, 4),
        (2**64 - 1, 10),
    ],
)
def test_encoded_lengths(value, length):
    assert len(encode(value)) == length


def test_single_byte_marker_bit():
    assert encode(0) == b"\x01"
    assert encode(127) == b"\xff"


def test_boundary_values_roundtrip():
    values = [0, 1, 2**56 - 1, 2**56, 2**63, 2**64 - 1]
    stream = io.BytesIO(b"".join(encode(v) for v in values))
    assert [read_u64(stream) for _ in values] == values


def test_empty_input_raises_eof():
    with pytest.raises(EOFError):
        read_u64(io.BytesIO(b""))


@pytest.mark.parametrize("value", [2**7, 2**30, 2**60, 2**64 - 1])
def test_truncated_input_raises_eof(value):
    data = encode(value)
    with pytest.raises(EOFError):
        read_u64(io.BytesIO(data[:-1]))


@pytest.mark.parametrize("value", [-1, 2**64])
def test_out_of_range_value_rejected(value):
    with pytest.raises(ValueError):
        write_u64(io.BytesIO(), value)