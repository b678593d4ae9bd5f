"""Variable length encoding of unsigned 64 bit integers.

Numbers are stored in little-endian byte order. The number of trailing zero
bits of the encoding, plus one, gives the length in bytes, and the value
follows the marker bit::

    xxxxxxx1                     for up to 7 bits
    xxxxxx10 xxxxxxxx            for up to 14 bits
    xxxxx100 xxxxxxxx xxxxxxxx   for up to 21 bits
    ...

This needs as many bytes as LEB128 does, but the value bits stay consecutive
and the length is known after at most two bytes.
"""

from typing import BinaryIO

U64_MAX = (1 << 64) - 1

# The length is determined by the first two bytes at most; this bit caps it at 10.
_LENGTH_CAP_BIT = 1 << 9


def _encode(value: int) -> bytes:
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"value {value} does not fit into an unsigned 64 bit integer")
    blocks = (value.bit_length() * 9) // 64
    encoded = (value << (blocks + 1)) | (1 << blocks)
    return encoded.to_bytes(blocks + 1, "little")


def write_u64(target: BinaryIO, value: int) -> None:
    """Write ``value`` to the binary stream ``target`` in encoded form."""
    target.write(_encode(value))


def _read_exact(source: BinaryIO, count: int) -> bytes:
    data = source.read(count)
    if len(data) != count:
        raise EOFError("unexpected end of input while reading an encoded number")
    return data


def read_u64(source: BinaryIO) -> int:
    """Read one encoded number from the binary stream ``source``.

    Raises :class:`EOFError` if the stream ends before the number is complete.
    """
    head = _read_exact(source, 1)
    scan = _LENGTH_CAP_BIT | head[0]
    if head[0] == 0:
        second = _read_exact(source, 1)
        head += second
        scan |= second[0] << 8

    length = (scan & -scan).bit_length()
    data = head + _read_exact(source, length - len(head))
    return (int.from_bytes(data, "little") >> length) & U64_MAX