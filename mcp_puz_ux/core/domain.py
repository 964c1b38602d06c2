"""
Domain Models - Pure puzzle entities

No external dependencies. These represent the decoded .puz document and the
values the decoding stages hand to each other.
"""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    """Why a decode stopped"""
    INSUFFICIENT_PREFIX = "InsufficientPrefix"
    MARKER_NOT_FOUND = "MarkerNotFound"
    MAGIC_MISMATCH = "MagicMismatch"
    UNEXPECTED_EOF = "UnexpectedEof"
    UNTERMINATED_STRING = "UnterminatedString"


@dataclass(frozen=True)
class DecodeFailure:
    """A terminal decode error, attributed to the field being read"""
    kind: ErrorKind
    offset: int  # byte offset where the failing field starts
    field: str
    message: str = ""

    def __str__(self) -> str:
        text = f"{self.kind.value} at offset {self.offset} ({self.field})"
        if self.message:
            text += f": {self.message}"
        return text


@dataclass(frozen=True)
class Decoded(Generic[T]):
    """A decoded value and the offset of the first byte not consumed"""
    value: T
    offset: int


@dataclass(frozen=True)
class PuzzleHeader:
    """Fixed-width record following the leading bytes"""
    file_checksum: int
    base_checksum: int
    masked_low_checksums: bytes
    masked_high_checksums: bytes
    version: str
    reserved_1c: bytes
    scrambled_checksum: int
    reserved_20: bytes
    width: int
    height: int
    num_clues: int
    unknown_bitmask: int
    scrambled_tag: int


@dataclass(frozen=True)
class PuzzleBody:
    """Grids and text fields following the header"""
    solution: tuple[str, ...]
    grid: tuple[str, ...]
    title: str
    author: str
    copyright: str
    clues: tuple[str, ...]
    notes: str


@dataclass(frozen=True)
class PuzzleDocument:
    """A fully decoded .puz file.

    Grids are row-major with stride ``width``: cell (row, col) lives at
    ``row * width + col``.
    """
    leading_bytes: bytes

    # header
    file_checksum: int
    base_checksum: int
    masked_low_checksums: bytes
    masked_high_checksums: bytes
    version: str
    reserved_1c: bytes
    scrambled_checksum: int
    reserved_20: bytes
    width: int
    height: int
    num_clues: int
    unknown_bitmask: int
    scrambled_tag: int

    # body
    solution: tuple[str, ...]
    grid: tuple[str, ...]
    title: str
    author: str
    copyright: str
    clues: tuple[str, ...]
    notes: str

    trailing_bytes: bytes = b""

    @classmethod
    def assemble(
        cls,
        leading_bytes: bytes,
        header: PuzzleHeader,
        body: PuzzleBody,
        trailing_bytes: bytes
    ) -> "PuzzleDocument":
        """Build a document from the outputs of each decoding stage"""
        return cls(
            leading_bytes=leading_bytes,
            file_checksum=header.file_checksum,
            base_checksum=header.base_checksum,
            masked_low_checksums=header.masked_low_checksums,
            masked_high_checksums=header.masked_high_checksums,
            version=header.version,
            reserved_1c=header.reserved_1c,
            scrambled_checksum=header.scrambled_checksum,
            reserved_20=header.reserved_20,
            width=header.width,
            height=header.height,
            num_clues=header.num_clues,
            unknown_bitmask=header.unknown_bitmask,
            scrambled_tag=header.scrambled_tag,
            solution=body.solution,
            grid=body.grid,
            title=body.title,
            author=body.author,
            copyright=body.copyright,
            clues=body.clues,
            notes=body.notes,
            trailing_bytes=trailing_bytes,
        )

    @property
    def header(self) -> PuzzleHeader:
        return PuzzleHeader(
            file_checksum=self.file_checksum,
            base_checksum=self.base_checksum,
            masked_low_checksums=self.masked_low_checksums,
            masked_high_checksums=self.masked_high_checksums,
            version=self.version,
            reserved_1c=self.reserved_1c,
            scrambled_checksum=self.scrambled_checksum,
            reserved_20=self.reserved_20,
            width=self.width,
            height=self.height,
            num_clues=self.num_clues,
            unknown_bitmask=self.unknown_bitmask,
            scrambled_tag=self.scrambled_tag,
        )

    @property
    def body(self) -> PuzzleBody:
        return PuzzleBody(
            solution=self.solution,
            grid=self.grid,
            title=self.title,
            author=self.author,
            copyright=self.copyright,
            clues=self.clues,
            notes=self.notes,
        )

    @property
    def is_scrambled(self) -> bool:
        """Nonzero scrambled_tag conventionally marks an encrypted solution"""
        return self.scrambled_tag != 0

    def rows(self, cells: tuple[str, ...]) -> list[str]:
        """Split a grid (solution or grid) into row strings"""
        return [
            "".join(cells[row * self.width:(row + 1) * self.width])
            for row in range(self.height)
        ]


@dataclass
class PuzzleFile:
    """A .puz file found in the puzzle library"""
    name: str
    path: Path
    size_bytes: int
