"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from pathlib import Path

from .adapters import FilesystemPuzzleSource
from .core import DecodePuzzleService, ListPuzzlesService


class Container:
    """Dependency injection container for the application"""

    def __init__(self, library_dir: str | Path):
        # Adapters (infrastructure)
        self.source = FilesystemPuzzleSource(library_dir)

        # Services (use cases)
        self.decode_puzzle = DecodePuzzleService(source=self.source)
        self.list_puzzles = ListPuzzlesService(source=self.source)
