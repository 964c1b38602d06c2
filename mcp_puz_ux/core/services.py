"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
the decoder and ports, but contain no infrastructure concerns.
"""
import logging
from pathlib import Path
from typing import Union

from .decoder import decode_puzzle
from .domain import Decoded, DecodeFailure, PuzzleDocument, PuzzleFile
from .ports import PuzzleSource

logger = logging.getLogger(__name__)


class DecodePuzzleService:
    """Use case: Load a .puz file and decode it"""

    def __init__(self, source: PuzzleSource):
        self.source = source

    def execute(self, location: str | Path) -> Union[Decoded[PuzzleDocument], DecodeFailure]:
        """
        Read and decode a puzzle.

        I/O errors propagate; malformed content comes back as a DecodeFailure.
        """
        data = self.source.read(location)
        logger.debug("Read %d bytes from %s", len(data), location)
        return decode_puzzle(data)


class ListPuzzlesService:
    """Use case: List puzzles in the library"""

    def __init__(self, source: PuzzleSource):
        self.source = source

    def execute(self) -> tuple[list[PuzzleFile], int]:
        """
        List puzzle files and their combined size.

        Returns:
            (puzzle_files, total_bytes)
        """
        puzzles = self.source.list_all()
        total = sum(p.size_bytes for p in puzzles)
        return puzzles, total
