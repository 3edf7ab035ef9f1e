"""
#WHERE
    Imported by m2_document, m3_placement, pipeline.py and tests.

#WHAT
    Record Codec (Module 1) - stateless encode / decode of a single block
    line and of the three header lines, plus invariant number handling.

#INPUT
    Comma-delimited text lines.

#OUTPUT
    Block / Header dataclasses and their text lines.
"""

from .block import (
    Block,
    BlockSnapshot,
    LiveBlock,
    Vec3,
    block_from_snapshot,
    decode_block,
    encode_block,
)
from .header import Header, decode_header, encode_header, generate_uuid
from .numbers import format_float, parse_float, parse_int

__all__ = [
    "Block",
    "BlockSnapshot",
    "LiveBlock",
    "Vec3",
    "block_from_snapshot",
    "decode_block",
    "encode_block",
    "Header",
    "decode_header",
    "encode_header",
    "generate_uuid",
    "format_float",
    "parse_float",
    "parse_int",
]
