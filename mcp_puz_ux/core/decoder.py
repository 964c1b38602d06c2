"""
Puzzle Decoder - Single-pass pipeline over a .puz buffer

Scanning -> header -> body -> tail -> document. Each stage starts where the
previous one stopped; the first DecodeFailure is returned as-is.
"""
import logging
from typing import Union

from .body import decode_body
from .domain import Decoded, DecodeFailure, PuzzleDocument
from .header import decode_header
from .scanner import scan_marker

logger = logging.getLogger(__name__)


def collect_tail(data: bytes, offset: int) -> Decoded[bytes]:
    """Everything after the notes field, verbatim. Never fails."""
    return Decoded(bytes(data[offset:]), len(data))


def decode_puzzle(data: bytes) -> Union[Decoded[PuzzleDocument], DecodeFailure]:
    """
    Decode a complete .puz buffer.

    Args:
        data: Whole file contents

    Returns:
        Decoded(document, end_offset) where end_offset == len(data),
        or the DecodeFailure of the first stage that failed
    """
    data = bytes(data)

    leading = scan_marker(data)
    if isinstance(leading, DecodeFailure):
        logger.info("Puzzle scan failed: %s", leading)
        return leading
    logger.debug("Header starts at offset %d", leading.offset)

    header = decode_header(data, leading.offset)
    if isinstance(header, DecodeFailure):
        logger.info("Puzzle header decode failed: %s", header)
        return header
    logger.debug(
        "Header decoded: %dx%d, %d clues, version %s",
        header.value.width,
        header.value.height,
        header.value.num_clues,
        header.value.version
    )

    body = decode_body(data, header.offset, header.value)
    if isinstance(body, DecodeFailure):
        logger.info("Puzzle body decode failed: %s", body)
        return body
    logger.debug("Body ends at offset %d", body.offset)

    tail = collect_tail(data, body.offset)
    if tail.value:
        logger.debug("Collected %d trailing bytes", len(tail.value))

    document = PuzzleDocument.assemble(leading.value, header.value, body.value, tail.value)
    return Decoded(document, tail.offset)
