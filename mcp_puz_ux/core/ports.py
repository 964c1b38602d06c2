"""
Ports - Interfaces for external dependencies

These define HOW the core gets puzzle bytes from the outside world,
but NOT the implementation details.
"""
from abc import ABC, abstractmethod
from pathlib import Path

from .domain import PuzzleFile


class PuzzleSource(ABC):
    """Port for loading .puz files"""

    @abstractmethod
    def resolve(self, location: str | Path) -> Path:
        """Turn a user-supplied name or path into a concrete path"""
        pass

    @abstractmethod
    def read(self, location: str | Path) -> bytes:
        """Read the whole file, closing it before returning"""
        pass

    @abstractmethod
    def list_all(self) -> list[PuzzleFile]:
        """List all puzzles in the library"""
        pass
