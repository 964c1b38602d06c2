"""
Header Decoder - Fixed-width record after the leading bytes

Layout (offsets relative to the file checksum, little-endian):

    0x00  u16      file_checksum
    0x02  12 bytes "ACROSS&DOWN\\0"
    0x0E  u16      base_checksum
    0x10  4 bytes  masked_low_checksums
    0x14  4 bytes  masked_high_checksums
    0x18  4 bytes  version ("1.3\\0")
    0x1C  2 bytes  reserved_1c
    0x1E  u16      scrambled_checksum
    0x20  12 bytes reserved_20
    0x2C  u8       width
    0x2D  u8       height
    0x2E  u16      num_clues
    0x30  u16      unknown_bitmask
    0x32  u16      scrambled_tag
    0x34           body starts

Checksums and reserved regions are kept as raw values, never verified.
"""
from typing import Union

from .domain import Decoded, DecodeFailure, PuzzleHeader
from .primitives import ENCODING, read_bytes, read_tag, read_u8, read_u16
from .scanner import MAGIC

HEADER_SIZE = 0x34


def _read_version(data: bytes, offset: int) -> Union[Decoded[str], DecodeFailure]:
    """Four bytes on disk; the last one is a terminator and is dropped"""
    result = read_bytes(data, offset, 4, "version")
    if isinstance(result, DecodeFailure):
        return result
    return Decoded(result.value[:3].decode(ENCODING), result.offset)


# (field name, reader) in on-disk order; a name of None is consumed and dropped
_FIELDS = (
    ("file_checksum", lambda d, o: read_u16(d, o, "file_checksum")),
    (None, lambda d, o: read_tag(d, o, MAGIC, "magic")),
    ("base_checksum", lambda d, o: read_u16(d, o, "base_checksum")),
    ("masked_low_checksums", lambda d, o: read_bytes(d, o, 4, "masked_low_checksums")),
    ("masked_high_checksums", lambda d, o: read_bytes(d, o, 4, "masked_high_checksums")),
    ("version", _read_version),
    ("reserved_1c", lambda d, o: read_bytes(d, o, 2, "reserved_1c")),
    ("scrambled_checksum", lambda d, o: read_u16(d, o, "scrambled_checksum")),
    ("reserved_20", lambda d, o: read_bytes(d, o, 12, "reserved_20")),
    ("width", lambda d, o: read_u8(d, o, "width")),
    ("height", lambda d, o: read_u8(d, o, "height")),
    ("num_clues", lambda d, o: read_u16(d, o, "num_clues")),
    ("unknown_bitmask", lambda d, o: read_u16(d, o, "unknown_bitmask")),
    ("scrambled_tag", lambda d, o: read_u16(d, o, "scrambled_tag")),
)


def decode_header(data: bytes, offset: int) -> Union[Decoded[PuzzleHeader], DecodeFailure]:
    """Decode the header starting at the file checksum"""
    values = {}
    for name, reader in _FIELDS:
        result = reader(data, offset)
        if isinstance(result, DecodeFailure):
            return result
        if name is not None:
            values[name] = result.value
        offset = result.offset

    return Decoded(PuzzleHeader(**values), offset)
