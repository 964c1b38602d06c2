"""
Byte Scanner - Locate the ACROSS&DOWN marker

.puz files may carry arbitrary bytes before the header. The header starts two
bytes before the marker (the file checksum), so the marker can never sit at
offset 0 or 1.
"""
from typing import Union

from .domain import Decoded, DecodeFailure, ErrorKind

MAGIC = b"ACROSS&DOWN\x00"
CHECKSUM_SIZE = 2


def scan_marker(data: bytes) -> Union[Decoded[bytes], DecodeFailure]:
    """
    Split off the leading bytes.

    Returns:
        Decoded(leading_bytes, checksum_offset) on success
    """
    position = data.find(MAGIC)

    if position < 0:
        return DecodeFailure(
            ErrorKind.MARKER_NOT_FOUND,
            len(data),
            "magic",
            f"{MAGIC!r} not present"
        )

    if position < CHECKSUM_SIZE:
        return DecodeFailure(
            ErrorKind.INSUFFICIENT_PREFIX,
            position,
            "magic",
            f"marker at offset {position} leaves no room for the file checksum"
        )

    start = position - CHECKSUM_SIZE
    return Decoded(bytes(data[:start]), start)
