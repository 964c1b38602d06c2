"""
puz-ux - Across Lite .puz crossword decoder

Hexagonal layout:
- core/: domain models, the decoding pipeline, ports and services
- adapters/: filesystem puzzle library and MCP handlers
- cli.py / server.py: delivery
"""
from .core import DecodeFailure, ErrorKind, PuzzleDocument, decode_puzzle

__all__ = [
    "DecodeFailure",
    "ErrorKind",
    "PuzzleDocument",
    "decode_puzzle",
]

__version__ = "0.1.0"
