"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- filesystem.py: Filesystem-based puzzle library
- mcp/: MCP tool schemas and handlers
"""
from .filesystem import FilesystemPuzzleSource

__all__ = [
    "FilesystemPuzzleSource",
]
