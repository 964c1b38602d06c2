"""
Unit tests for services, the filesystem adapter and MCP handlers
"""
import asyncio
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from mcp_puz_ux.adapters.filesystem import FilesystemPuzzleSource
from mcp_puz_ux.adapters.mcp.handlers import MCPHandlers
from mcp_puz_ux.container import Container
from mcp_puz_ux.core.domain import DecodeFailure, ErrorKind, PuzzleFile
from mcp_puz_ux.core.ports import PuzzleSource
from mcp_puz_ux.core.services import DecodePuzzleService, ListPuzzlesService


class TestFilesystemPuzzleSource:
    """Test FilesystemPuzzleSource adapter."""

    def test_resolve_relative(self, tmp_path):
        source = FilesystemPuzzleSource(tmp_path)
        assert source.resolve("nyt/a.puz") == tmp_path / "nyt" / "a.puz"

    def test_resolve_absolute(self, tmp_path):
        source = FilesystemPuzzleSource(tmp_path / "library")
        target = tmp_path / "elsewhere.puz"
        assert source.resolve(target) == target

    def test_read(self, tmp_path):
        (tmp_path / "a.puz").write_bytes(b"\x00\x01\x02")
        source = FilesystemPuzzleSource(tmp_path)
        assert source.read("a.puz") == b"\x00\x01\x02"

    def test_read_missing(self, tmp_path):
        source = FilesystemPuzzleSource(tmp_path)
        with pytest.raises(FileNotFoundError):
            source.read("missing.puz")

    def test_list_all_missing_dir(self, tmp_path):
        source = FilesystemPuzzleSource(tmp_path / "nope")
        assert source.list_all() == []

    def test_list_all(self, tmp_path):
        """Test listing finds .puz files recursively, sorted by name."""
        (tmp_path / "nyt").mkdir()
        (tmp_path / "nyt" / "b.puz").write_bytes(b"12345")
        (tmp_path / "a.PUZ").write_bytes(b"12")
        (tmp_path / "notes.txt").write_text("not a puzzle")

        source = FilesystemPuzzleSource(tmp_path)
        puzzles = source.list_all()

        assert [p.name for p in puzzles] == ["a.PUZ", "nyt/b.puz"]
        assert puzzles[1].size_bytes == 5
        assert puzzles[1].path == tmp_path / "nyt" / "b.puz"


class TestDecodePuzzleService:
    """Test DecodePuzzleService with a mocked source."""

    def test_decodes_source_bytes(self, sample_puz):
        source = MagicMock(spec=PuzzleSource)
        source.read.return_value = sample_puz

        result = DecodePuzzleService(source).execute("x.puz")

        source.read.assert_called_once_with("x.puz")
        assert result.value.title == "Tiny Test"

    def test_returns_failure_value(self):
        source = MagicMock(spec=PuzzleSource)
        source.read.return_value = b"garbage"

        result = DecodePuzzleService(source).execute("x.puz")

        assert isinstance(result, DecodeFailure)
        assert result.kind is ErrorKind.MARKER_NOT_FOUND

    def test_io_errors_propagate(self):
        source = MagicMock(spec=PuzzleSource)
        source.read.side_effect = FileNotFoundError("x.puz")

        with pytest.raises(FileNotFoundError):
            DecodePuzzleService(source).execute("x.puz")


class TestListPuzzlesService:
    """Test ListPuzzlesService."""

    def test_totals(self):
        source = MagicMock(spec=PuzzleSource)
        source.list_all.return_value = [
            PuzzleFile(name="a.puz", path=Path("/p/a.puz"), size_bytes=100),
            PuzzleFile(name="b.puz", path=Path("/p/b.puz"), size_bytes=50),
        ]

        puzzles, total = ListPuzzlesService(source).execute()

        assert len(puzzles) == 2
        assert total == 150


class TestMCPHandlers:
    """Test MCP handlers against a real library directory."""

    def test_decode_puzzle(self, tmp_path, sample_puz):
        (tmp_path / "tiny.puz").write_bytes(sample_puz)
        handlers = MCPHandlers(Container(library_dir=tmp_path))

        result = asyncio.run(handlers.decode_puzzle("tiny.puz"))

        assert result["success"] is True
        assert result["path"] == str(tmp_path / "tiny.puz")
        assert result["metadata"]["title"] == "Tiny Test"
        assert result["metadata"]["width"] == 3
        assert result["metadata"]["leading_bytes"] == 6
        assert result["metadata"]["size_bytes"] == len(sample_puz)
        assert result["solution"] == ["CAT", ".OX"]
        assert result["grid"] == ["C--", ".-X"]
        assert result["clues"] == ["Feline", "Bovine", "Sign of a kiss"]

    def test_decode_puzzle_without_solution(self, tmp_path, sample_puz):
        (tmp_path / "tiny.puz").write_bytes(sample_puz)
        handlers = MCPHandlers(Container(library_dir=tmp_path))

        result = asyncio.run(handlers.decode_puzzle("tiny.puz", include_solution=False))

        assert result["success"] is True
        assert "solution" not in result

    def test_decode_puzzle_malformed(self, tmp_path, build_puz):
        (tmp_path / "bad.puz").write_bytes(build_puz()[:56] + b"no terminator")
        handlers = MCPHandlers(Container(library_dir=tmp_path))

        result = asyncio.run(handlers.decode_puzzle("bad.puz"))

        assert result["success"] is False
        assert result["kind"] == "UnterminatedString"
        assert result["field"] == "title"
        assert result["offset"] == 56

    def test_decode_puzzle_missing_file(self, tmp_path):
        handlers = MCPHandlers(Container(library_dir=tmp_path))

        result = asyncio.run(handlers.decode_puzzle("missing.puz"))

        assert result["success"] is False
        assert "Failed to decode puzzle" in result["error"]

    def test_list_puzzles(self, tmp_path, sample_puz):
        (tmp_path / "tiny.puz").write_bytes(sample_puz)
        handlers = MCPHandlers(Container(library_dir=tmp_path))

        result = asyncio.run(handlers.list_puzzles())

        assert result["success"] is True
        assert result["count"] == 1
        assert result["total_bytes"] == len(sample_puz)
        assert result["puzzles"][0]["name"] == "tiny.puz"
