"""
Filesystem Puzzle Adapter

Implements PuzzleSource port using a local puzzle library directory.
"""
from pathlib import Path

from ..core.domain import PuzzleFile
from ..core.ports import PuzzleSource

PUZZLE_SUFFIX = ".puz"


class FilesystemPuzzleSource(PuzzleSource):
    """Reads .puz files from disk"""

    def __init__(self, library_dir: str | Path):
        self.library_dir = Path(library_dir).expanduser()

    def resolve(self, location: str | Path) -> Path:
        """Absolute paths are used as-is; anything else is relative to the library"""
        path = Path(location).expanduser()
        if path.is_absolute():
            return path
        return self.library_dir / path

    def read(self, location: str | Path) -> bytes:
        """Read the whole file"""
        with open(self.resolve(location), "rb") as f:
            return f.read()

    def list_all(self) -> list[PuzzleFile]:
        """List all .puz files under the library, sorted by relative name"""
        if not self.library_dir.exists():
            return []

        puzzles = []
        for file_path in self.library_dir.rglob("*"):
            if file_path.is_file() and file_path.suffix.lower() == PUZZLE_SUFFIX:
                puzzles.append(PuzzleFile(
                    name=file_path.relative_to(self.library_dir).as_posix(),
                    path=file_path,
                    size_bytes=file_path.stat().st_size
                ))

        puzzles.sort(key=lambda x: x.name)
        return puzzles
