"""
BBG Lite formatters for puzzle tool results

Format handler results as Bloomberg Terminal-inspired text output.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any, Sequence

RULE = "─" * 70


def format_grid(cells: Sequence[str], width: int, height: int) -> str:
    """Render a row-major grid, one line per row.

    Cell (row, col) is cells[row * width + col]. Cells are printed as stored:
    "." is a block and "-" an empty square in .puz files.
    """
    return "\n".join(
        "".join(cells[row * width + col] for col in range(width))
        for row in range(height)
    )


def format_clues(clues: Sequence[str]) -> str:
    """One line per clue, in file order.

    Numbers are file positions, not crossword clue numbers.
    """
    width = len(str(len(clues)))
    return "\n".join(f"  {i:>{width}}. {clue}" for i, clue in enumerate(clues, 1))


def format_decode_puzzle(result: dict[str, Any]) -> str:
    """Format decode_puzzle result as BBG Lite text.

    Example output:
        NY TIMES, TUE, JAN 30, 2024 | 15x15 | 78 CLUES

        AUTHOR:      Jane Doe / Will Shortz
        COPYRIGHT:   © 2024, The New York Times
        VERSION:     1.3
        SCRAMBLED:   no
        CHECKSUMS:   file=0x1A2B base=0x3C4D scrambled=0x0000 (not verified)

        SOLUTION
        ──────────────────────────────────────────────────────────────────────
        CAB.ODE
        ...

        CLUES
        ──────────────────────────────────────────────────────────────────────
           1. Taxi
           ...

        PATH: /home/user/puzzles/nyt/2024-01-30.puz
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    meta = result['metadata']
    lines = []

    # Header
    title = meta['title'] or "(untitled)"
    lines.append(f"{title.upper()} | {meta['width']}x{meta['height']} | {meta['num_clues']} CLUES")
    lines.append("")

    # Metadata
    lines.append(f"AUTHOR:      {meta['author'] or 'N/A'}")
    lines.append(f"COPYRIGHT:   {meta['copyright'] or 'N/A'}")
    lines.append(f"VERSION:     {meta['version']}")
    lines.append(f"SCRAMBLED:   {'yes' if meta['scrambled'] else 'no'}")
    lines.append(
        f"CHECKSUMS:   file=0x{meta['file_checksum']:04X} "
        f"base=0x{meta['base_checksum']:04X} "
        f"scrambled=0x{meta['scrambled_checksum']:04X} (not verified)"
    )
    if meta.get('leading_bytes') or meta.get('trailing_bytes'):
        lines.append(f"EXTRA:       {meta['leading_bytes']} leading / {meta['trailing_bytes']} trailing bytes")

    # Grids
    if 'solution' in result:
        lines.append("")
        lines.append("SOLUTION")
        lines.append(RULE)
        lines.extend(result['solution'])

    lines.append("")
    lines.append("GRID")
    lines.append(RULE)
    lines.extend(result['grid'])

    # Clues
    lines.append("")
    lines.append("CLUES")
    lines.append(RULE)
    if result['clues']:
        lines.append(format_clues(result['clues']))
    else:
        lines.append("  (none)")

    if result.get('notes'):
        lines.append("")
        lines.append(f"NOTES: {result['notes']}")

    lines.append("")
    lines.append(f"PATH: {result['path']}")

    return "\n".join(lines)


def format_list_puzzles(result: dict[str, Any]) -> str:
    """Format list_puzzles result as BBG Lite text.

    Example output:
        PUZZLE LIBRARY | /home/user/puzzles
        ──────────────────────────────────────────────────────────────────────
        2 puzzles (7 KB)

        SIZE      NAME
        ──────────────────────────────────────────────────────────────────────
          3.6 KB  nyt/2024-01-30.puz
          3.4 KB  nyt/2024-01-31.puz

        Try: decode_puzzle("NAME")
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    lines = []
    lines.append(f"PUZZLE LIBRARY | {result['library_dir']}")
    lines.append(RULE)

    count = result['count']
    if count == 0:
        lines.append("NO PUZZLES FOUND")
        return "\n".join(lines)

    plural = "puzzle" if count == 1 else "puzzles"
    lines.append(f"{count} {plural} ({result['total_bytes'] / 1024:.0f} KB)")
    lines.append("")
    lines.append(f"{'SIZE':<8}  NAME")
    lines.append(RULE)

    for puzzle in result['puzzles']:
        size_kb = puzzle['size_bytes'] / 1024
        lines.append(f"{size_kb:>5.1f} KB  {puzzle['name']}")

    lines.append("")
    lines.append('Try: decode_puzzle("NAME")')

    return "\n".join(lines)
