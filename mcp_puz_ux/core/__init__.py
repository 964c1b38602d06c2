"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- scanner.py, primitives.py, header.py, body.py, decoder.py: .puz decoding pipeline
- ports.py: Port interfaces (abstractions for external dependencies)
- services.py: Application services (use cases)
"""
from .domain import (
    Decoded,
    DecodeFailure,
    ErrorKind,
    PuzzleBody,
    PuzzleDocument,
    PuzzleFile,
    PuzzleHeader,
)
from .decoder import decode_puzzle
from .ports import PuzzleSource
from .services import DecodePuzzleService, ListPuzzlesService

__all__ = [
    # Domain models
    "Decoded",
    "DecodeFailure",
    "ErrorKind",
    "PuzzleBody",
    "PuzzleDocument",
    "PuzzleFile",
    "PuzzleHeader",
    # Decoding
    "decode_puzzle",
    # Ports
    "PuzzleSource",
    # Services
    "DecodePuzzleService",
    "ListPuzzlesService",
]
