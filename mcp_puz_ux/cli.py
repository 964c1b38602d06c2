#!/usr/bin/env python3
"""
CLI for puz-ux - decode and inspect .puz crosswords without the MCP server

Usage:
  puz-cli list-tools                      # Show MCP tool definitions
  puz-cli show nyt/2024-01-30.puz         # Metadata, grids and clues (relative to $PUZ_LIBRARY_DIR)
  puz-cli show ./daily.puz --no-solution  # Hide the solution grid
  puz-cli grid ./daily.puz                # Bare solution, grid and clue list
  puz-cli list                            # List puzzles in the library

Fast iteration: Uses hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import json
import sys

from .config import LOG_LEVELS, configure_logging, get_library_dir
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .core.domain import DecodeFailure
from .formatters import (
    format_clues,
    format_decode_puzzle,
    format_grid,
    format_list_puzzles,
)


def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_name, tool_schema in TOOL_SCHEMAS.items():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def show_command(path: str, include_solution: bool, library_dir: str) -> int:
    """Decode a puzzle and print a summary"""
    container = Container(library_dir=library_dir)
    handlers = MCPHandlers(container)

    result = await handlers.decode_puzzle(path=path, include_solution=include_solution)

    print(format_decode_puzzle(result))

    if not result["success"]:
        return 1

    return 0


def grid_command(path: str, library_dir: str) -> int:
    """Print the solution, the grid and the clues, nothing else"""
    container = Container(library_dir=library_dir)

    try:
        result = container.decode_puzzle.execute(path)
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if isinstance(result, DecodeFailure):
        print(f"ERROR: {result}", file=sys.stderr)
        return 1

    doc = result.value
    print(format_grid(doc.solution, doc.width, doc.height))
    print()
    print(format_grid(doc.grid, doc.width, doc.height))
    print()
    if doc.clues:
        print(format_clues(doc.clues))

    return 0


async def list_command(library_dir: str) -> int:
    """List puzzles in the library"""
    container = Container(library_dir=library_dir)
    handlers = MCPHandlers(container)

    result = await handlers.list_puzzles()

    print(format_list_puzzles(result))

    if not result["success"]:
        return 1

    return 0


def main():
    parser = argparse.ArgumentParser(
        description="puz-ux CLI - Decode Across Lite .puz crosswords"
    )
    parser.add_argument(
        "--library-dir",
        default=get_library_dir(),
        help="Puzzle library directory (default: $PUZ_LIBRARY_DIR or ~/puzzles)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Logging level (default: $PUZ_LOG_LEVEL or WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    # show command
    show_parser = subparsers.add_parser("show", help="Decode and summarize a puzzle")
    show_parser.add_argument("path", help="Path to .puz file (absolute or relative to the library)")
    show_parser.add_argument(
        "--no-solution",
        action="store_true",
        help="Do not print the solution grid"
    )

    # grid command
    grid_parser = subparsers.add_parser("grid", help="Print solution, grid and clues")
    grid_parser.add_argument("path", help="Path to .puz file (absolute or relative to the library)")

    # list command
    subparsers.add_parser("list", help="List puzzles in the library")

    args = parser.parse_args()

    try:
        configure_logging(args.log_level)
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not args.command:
        parser.print_help()
        return 1

    # Run command
    if args.command == "list-tools":
        return list_tools_command()
    elif args.command == "show":
        return asyncio.run(show_command(
            path=args.path,
            include_solution=not args.no_solution,
            library_dir=args.library_dir
        ))
    elif args.command == "grid":
        return grid_command(path=args.path, library_dir=args.library_dir)
    elif args.command == "list":
        return asyncio.run(list_command(library_dir=args.library_dir))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
