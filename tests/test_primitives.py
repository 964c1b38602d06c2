"""
Unit tests for mcp_puz_ux.core.primitives and the marker scanner
"""
from mcp_puz_ux.core.domain import Decoded, DecodeFailure, ErrorKind
from mcp_puz_ux.core.primitives import (
    read_bytes,
    read_cells,
    read_cstring,
    read_tag,
    read_u8,
    read_u16,
)
from mcp_puz_ux.core.scanner import MAGIC, scan_marker


class TestIntegerReaders:
    """Test fixed-width integer readers."""

    def test_u8(self):
        assert read_u8(b"\x07\x08", 1, "x") == Decoded(8, 2)

    def test_u16_little_endian(self):
        assert read_u16(b"\xab\xcd", 0, "x") == Decoded(0xCDAB, 2)

    def test_u16_short(self):
        result = read_u16(b"\x01\x02\x03", 2, "width")
        assert isinstance(result, DecodeFailure)
        assert result.kind is ErrorKind.UNEXPECTED_EOF
        assert result.offset == 2
        assert result.field == "width"

    def test_u8_at_end(self):
        result = read_u8(b"\x01", 1, "height")
        assert result.kind is ErrorKind.UNEXPECTED_EOF


class TestByteReaders:
    """Test slice, tag and cell readers."""

    def test_read_bytes(self):
        assert read_bytes(b"abcdef", 1, 3, "x") == Decoded(b"bcd", 4)

    def test_read_bytes_zero_length(self):
        assert read_bytes(b"", 0, 0, "x") == Decoded(b"", 0)

    def test_read_bytes_short(self):
        result = read_bytes(b"abc", 1, 3, "reserved_20")
        assert result.kind is ErrorKind.UNEXPECTED_EOF
        assert "need 3 bytes, 2 left" in result.message

    def test_read_tag_match(self):
        assert read_tag(b"xxACROSS&DOWN\x00", 2, MAGIC, "magic") == Decoded(MAGIC, 14)

    def test_read_tag_mismatch(self):
        result = read_tag(b"ACROSS&DOWNX", 0, b"ACROSS&DOWN\x00", "magic")
        assert result.kind is ErrorKind.MAGIC_MISMATCH

    def test_read_tag_short(self):
        result = read_tag(b"ACROSS", 0, MAGIC, "magic")
        assert result.kind is ErrorKind.UNEXPECTED_EOF

    def test_read_cells_maps_bytes_to_code_points(self):
        result = read_cells(b"A.\xc9-", 0, 4, "grid")
        assert result == Decoded(("A", ".", "\xc9", "-"), 4)

    def test_read_cells_short(self):
        result = read_cells(b"AB", 0, 4, "solution")
        assert result.kind is ErrorKind.UNEXPECTED_EOF
        assert result.field == "solution"


class TestCString:
    """Test NUL-terminated text reader."""

    def test_reads_up_to_nul(self):
        assert read_cstring(b"Hello\x00World\x00", 0, "title") == Decoded("Hello", 6)

    def test_empty_string(self):
        assert read_cstring(b"\x00rest", 0, "author") == Decoded("", 1)

    def test_latin1_not_utf8(self):
        # 0xC2 0xA9 is UTF-8 for ©, but each byte is its own character here
        result = read_cstring(b"\xc2\xa9\x00", 0, "copyright")
        assert result.value == "\xc2\xa9"

    def test_unterminated(self):
        result = read_cstring(b"xxNo terminator", 2, "title")
        assert result.kind is ErrorKind.UNTERMINATED_STRING
        assert result.offset == 2
        assert result.field == "title"


class TestScanMarker:
    """Test marker scanning and prefix handling."""

    def test_marker_at_offset_two(self):
        result = scan_marker(b"\xab\xcd" + MAGIC + b"rest")
        assert result == Decoded(b"", 0)

    def test_leading_bytes(self):
        result = scan_marker(b"junk" + b"\x01\x02" + MAGIC)
        assert result == Decoded(b"junk", 4)

    def test_marker_at_offset_zero(self):
        result = scan_marker(MAGIC + b"rest")
        assert result.kind is ErrorKind.INSUFFICIENT_PREFIX
        assert result.offset == 0

    def test_marker_at_offset_one(self):
        result = scan_marker(b"\x01" + MAGIC)
        assert result.kind is ErrorKind.INSUFFICIENT_PREFIX
        assert result.offset == 1

    def test_marker_missing(self):
        data = b"\x00\x00ACROSS&DOWN"  # no terminator
        result = scan_marker(data)
        assert result.kind is ErrorKind.MARKER_NOT_FOUND
        assert result.offset == len(data)

    def test_first_match_wins(self):
        data = b"ab" + MAGIC + b"cd" + MAGIC
        assert scan_marker(data).offset == 0
