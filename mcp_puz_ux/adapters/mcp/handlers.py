"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any

from ...container import Container
from ...core.domain import DecodeFailure


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def decode_puzzle(
        self,
        path: str,
        include_solution: bool = True
    ) -> dict[str, Any]:
        """Decode a puzzle and return metadata, grids and clues"""
        try:
            result = await asyncio.to_thread(
                self.container.decode_puzzle.execute,
                path
            )

            if isinstance(result, DecodeFailure):
                return {
                    "success": False,
                    "error": f"Failed to decode puzzle: {result}",
                    "kind": result.kind.value,
                    "offset": result.offset,
                    "field": result.field,
                }

            doc = result.value
            response = {
                "success": True,
                "path": str(self.container.source.resolve(path)),
                "metadata": {
                    "title": doc.title,
                    "author": doc.author,
                    "copyright": doc.copyright,
                    "version": doc.version,
                    "width": doc.width,
                    "height": doc.height,
                    "num_clues": doc.num_clues,
                    "scrambled": doc.is_scrambled,
                    "file_checksum": doc.file_checksum,
                    "base_checksum": doc.base_checksum,
                    "scrambled_checksum": doc.scrambled_checksum,
                    "leading_bytes": len(doc.leading_bytes),
                    "trailing_bytes": len(doc.trailing_bytes),
                    "size_bytes": result.offset,
                },
                "grid": doc.rows(doc.grid),
                "clues": list(doc.clues),
                "notes": doc.notes,
            }
            if include_solution:
                response["solution"] = doc.rows(doc.solution)
            return response

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to decode puzzle: {str(e)}"
            }

    async def list_puzzles(self) -> dict[str, Any]:
        """List puzzle files in the library"""
        try:
            puzzles, total_bytes = await asyncio.to_thread(
                self.container.list_puzzles.execute
            )

            return {
                "success": True,
                "library_dir": str(self.container.source.library_dir),
                "puzzles": [
                    {
                        "name": p.name,
                        "path": str(p.path),
                        "size_bytes": p.size_bytes,
                    }
                    for p in puzzles
                ],
                "count": len(puzzles),
                "total_bytes": total_bytes,
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to list puzzles: {str(e)}"
            }
