"""
#WHERE
    Imported by m3_placement, pipeline.py and tests.

#WHAT
    Document Model (Module 2) - header + ordered blocks, fail-fast whole
    document decode / encode, snapshot import, and the blueprint file
    storage helpers.

#INPUT
    Blueprint text lines or file paths.

#OUTPUT
    Document instances, text lines, files on disk.
"""

from .document import Document, decode_document, dumps, encode_document, loads
from .storage import find_blueprint, normalize_blueprint_name, read_blueprint, write_blueprint

__all__ = [
    "Document",
    "decode_document",
    "encode_document",
    "dumps",
    "loads",
    "find_blueprint",
    "normalize_blueprint_name",
    "read_blueprint",
    "write_blueprint",
]
