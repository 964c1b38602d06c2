"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by the MCP server and the CLI's list-tools command.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "decode_puzzle": {
        "name": "decode_puzzle",
        "description": """Decode an Across Lite .puz crossword. Returns metadata, grids and clues.

decode_puzzle("nyt/2024-01-30.puz") → {title, author, width, height, solution: [...rows], grid: [...rows], clues: [...]}
Relative paths resolve against the puzzle library. Checksums are reported, not verified.
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "path": {
                    "type": "string",
                    "description": "Path to the .puz file (absolute, or relative to the puzzle library)"
                },
                "include_solution": {
                    "type": "boolean",
                    "description": "Include the solution grid (omit to avoid spoilers)",
                    "default": True
                }
            },
            "required": ["path"]
        }
    },
    "list_puzzles": {
        "name": "list_puzzles",
        "description": """List .puz files in the puzzle library.

list_puzzles() → {puzzles: [{name, path, size_bytes}], count, total_bytes}
""",
        "inputSchema": {
            "type": "object",
            "properties": {}
        }
    }
}
