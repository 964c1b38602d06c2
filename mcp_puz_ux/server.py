"""
puz-ux MCP Server

MCP delivery layer - wraps the hexagonal core as MCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from .adapters.mcp import MCPHandlers
from .config import configure_logging, get_host, get_library_dir, get_port
from .container import Container

# Default library directory (can be overridden via env var or CLI arg)
LIBRARY_DIR = Path(get_library_dir()).expanduser()

# Initialize MCP server with HTTP config
mcp = FastMCP("puz-ux", host=get_host(), port=get_port())

handlers = MCPHandlers(Container(library_dir=LIBRARY_DIR))


@mcp.tool()
async def decode_puzzle(path: str, include_solution: bool = True) -> dict:
    """
    Decode an Across Lite .puz crossword file.

    Args:
        path: Path to the .puz file. Relative paths resolve against the puzzle library.
        include_solution: Include the solution grid (set False to avoid spoilers)

    Returns:
        Dictionary with metadata (title, author, size, checksums), grid rows,
        solution rows and the clue list in file order.

    Example:
        decode_puzzle("nyt/2024-01-30.puz")
        → {metadata: {title: "NY Times, Tue, Jan 30, 2024", width: 15, ...},
           grid: ["-----.----.----", ...], clues: ["Taxi", ...]}

    Grids are row strings; "." is a block, "-" an empty square.
    Checksums are reported as stored and never verified.
    """
    return await handlers.decode_puzzle(path=path, include_solution=include_solution)


@mcp.tool()
async def list_puzzles() -> dict:
    """
    List .puz files in the puzzle library.

    Returns:
        Dictionary with puzzle names, paths and sizes
    """
    return await handlers.list_puzzles()


def main():
    """Main entry point for the MCP server."""
    global LIBRARY_DIR, handlers

    parser = argparse.ArgumentParser(
        description="puz-ux: Across Lite .puz crosswords over MCP."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to for HTTP transport (default: $PUZ_HTTP_HOST or 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to for HTTP transport (default: $PUZ_HTTP_PORT or 6661)"
    )
    parser.add_argument(
        "--library-dir",
        default=None,
        help=f"Puzzle library directory (default: {LIBRARY_DIR}, or set PUZ_LIBRARY_DIR env var)"
    )
    args = parser.parse_args()

    try:
        configure_logging()
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    # Override library dir if specified
    if args.library_dir:
        LIBRARY_DIR = Path(args.library_dir).expanduser()
        handlers = MCPHandlers(Container(library_dir=LIBRARY_DIR))

    if args.host is not None:
        mcp.settings.host = args.host
    if args.port is not None:
        mcp.settings.port = args.port

    # Run the server
    if args.transport == "streamable-http":
        print(f"Starting puz-ux on http://{mcp.settings.host}:{mcp.settings.port}")
        print(f"Puzzle library: {LIBRARY_DIR}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    sys.exit(main())
