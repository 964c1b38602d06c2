"""
Shared fixtures: build .puz byte buffers field by field.
"""
import struct

import pytest

MAGIC = b"ACROSS&DOWN\x00"


def make_puz(
    width: int = 2,
    height: int = 1,
    solution: bytes = b"AB",
    grid: bytes = b"CD",
    title: bytes = b"",
    author: bytes = b"",
    copyright: bytes = b"",
    clues: tuple = (),
    notes: bytes = b"",
    leading: bytes = b"",
    file_checksum: bytes = b"\xab\xcd",
    base_checksum: int = 0,
    masked_low: bytes = b"\x00" * 4,
    masked_high: bytes = b"\x00" * 4,
    version: bytes = b"1.3\x00",
    reserved_1c: bytes = b"\x00" * 2,
    scrambled_checksum: int = 0,
    reserved_20: bytes = b"\x00" * 12,
    num_clues: int | None = None,
    unknown_bitmask: int = 0,
    scrambled_tag: int = 0,
    trailing: bytes = b"",
) -> bytes:
    """Assemble a .puz buffer; every part can be overridden"""
    if num_clues is None:
        num_clues = len(clues)

    header = (
        file_checksum
        + MAGIC
        + struct.pack("<H", base_checksum)
        + masked_low
        + masked_high
        + version
        + reserved_1c
        + struct.pack("<H", scrambled_checksum)
        + reserved_20
        + struct.pack("<BBHHH", width, height, num_clues, unknown_bitmask, scrambled_tag)
    )
    strings = [title, author, copyright, *clues, notes]
    body = solution + grid + b"".join(s + b"\x00" for s in strings)
    return leading + header + body + trailing


@pytest.fixture
def build_puz():
    """Factory fixture returning make_puz"""
    return make_puz


@pytest.fixture
def sample_puz():
    """A 3x2 puzzle with clues, notes, and extra bytes at both ends"""
    return make_puz(
        width=3,
        height=2,
        solution=b"CAT.OX",
        grid=b"C--.-X",
        title=b"Tiny Test",
        author=b"A. Setter",
        copyright=b"\xa9 2024",
        clues=(b"Feline", b"Bovine", b"Sign of a kiss"),
        notes=b"Have fun",
        leading=b"PREFIX",
        trailing=b"GEXT\x06\x00",
        scrambled_checksum=0x1234,
    )
