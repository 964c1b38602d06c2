"""
Primitive Decoders - Fixed-width and NUL-terminated field readers

Every reader takes the whole buffer plus an offset and returns either
Decoded(value, next_offset) or a DecodeFailure pointing at the field start.
Text and grid cells are single-byte (latin-1): byte N becomes code point N.
"""
import struct
from typing import Union

from .domain import Decoded, DecodeFailure, ErrorKind

ENCODING = "latin-1"

_U16 = struct.Struct("<H")


def _eof(data: bytes, offset: int, size: int, field: str) -> DecodeFailure:
    available = max(len(data) - offset, 0)
    return DecodeFailure(
        ErrorKind.UNEXPECTED_EOF,
        offset,
        field,
        f"need {size} bytes, {available} left"
    )


def read_bytes(data: bytes, offset: int, size: int, field: str) -> Union[Decoded[bytes], DecodeFailure]:
    """Read exactly `size` raw bytes"""
    end = offset + size
    if end > len(data):
        return _eof(data, offset, size, field)
    return Decoded(bytes(data[offset:end]), end)


def read_u8(data: bytes, offset: int, field: str) -> Union[Decoded[int], DecodeFailure]:
    if offset + 1 > len(data):
        return _eof(data, offset, 1, field)
    return Decoded(data[offset], offset + 1)


def read_u16(data: bytes, offset: int, field: str) -> Union[Decoded[int], DecodeFailure]:
    """Little-endian unsigned 16-bit integer"""
    if offset + _U16.size > len(data):
        return _eof(data, offset, _U16.size, field)
    return Decoded(_U16.unpack_from(data, offset)[0], offset + _U16.size)


def read_tag(data: bytes, offset: int, expected: bytes, field: str) -> Union[Decoded[bytes], DecodeFailure]:
    """Consume a constant byte sequence"""
    result = read_bytes(data, offset, len(expected), field)
    if isinstance(result, DecodeFailure):
        return result
    if result.value != expected:
        return DecodeFailure(
            ErrorKind.MAGIC_MISMATCH,
            offset,
            field,
            f"expected {expected!r}, got {result.value!r}"
        )
    return result


def read_cstring(data: bytes, offset: int, field: str) -> Union[Decoded[str], DecodeFailure]:
    """Read a NUL-terminated string; the terminator is consumed but not returned"""
    end = data.find(b"\x00", offset)
    if end < 0:
        return DecodeFailure(
            ErrorKind.UNTERMINATED_STRING,
            offset,
            field,
            "no NUL terminator before end of data"
        )
    return Decoded(bytes(data[offset:end]).decode(ENCODING), end + 1)


def read_cells(data: bytes, offset: int, count: int, field: str) -> Union[Decoded[tuple[str, ...]], DecodeFailure]:
    """Read `count` grid cells, one character per byte"""
    result = read_bytes(data, offset, count, field)
    if isinstance(result, DecodeFailure):
        return result
    return Decoded(tuple(result.value.decode(ENCODING)), result.offset)
