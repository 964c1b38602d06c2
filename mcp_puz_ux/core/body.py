"""
Body Decoder - Grids and text fields sized by the header

Order: solution, grid (width*height bytes each), title, author, copyright,
num_clues clues, notes. The first failing field aborts the body.
"""
from typing import Union

from .domain import Decoded, DecodeFailure, PuzzleBody, PuzzleHeader
from .primitives import read_cells, read_cstring


def decode_clues(data: bytes, offset: int, count: int) -> Union[Decoded[tuple[str, ...]], DecodeFailure]:
    """Read `count` NUL-terminated clues in file order"""
    clues = []
    for index in range(count):
        result = read_cstring(data, offset, f"clues[{index}]")
        if isinstance(result, DecodeFailure):
            return result
        clues.append(result.value)
        offset = result.offset
    return Decoded(tuple(clues), offset)


def decode_body(data: bytes, offset: int, header: PuzzleHeader) -> Union[Decoded[PuzzleBody], DecodeFailure]:
    """Decode the body that follows a header"""
    cell_count = header.width * header.height
    values = {}

    for name in ("solution", "grid"):
        result = read_cells(data, offset, cell_count, name)
        if isinstance(result, DecodeFailure):
            return result
        values[name] = result.value
        offset = result.offset

    for name in ("title", "author", "copyright"):
        result = read_cstring(data, offset, name)
        if isinstance(result, DecodeFailure):
            return result
        values[name] = result.value
        offset = result.offset

    result = decode_clues(data, offset, header.num_clues)
    if isinstance(result, DecodeFailure):
        return result
    values["clues"] = result.value
    offset = result.offset

    result = read_cstring(data, offset, "notes")
    if isinstance(result, DecodeFailure):
        return result
    values["notes"] = result.value

    return Decoded(PuzzleBody(**values), result.offset)
