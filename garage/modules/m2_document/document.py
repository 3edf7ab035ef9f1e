"""
#WHERE
    Used by storage.py, the placement engine (PlacementEngine.plan) and
    pipeline.py.

#WHAT
    A whole blueprint: one header and an ordered list of blocks.  Decoding
    is all-or-nothing: any bad line raises InvalidDocument and no partial
    document is returned.  An empty block list is rejected the same way.

#INPUT
    Text lines (or one string) of a blueprint file; live block snapshots.

#OUTPUT
    Document instance, or its text lines.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from garage.modules.m1_record_codec import (
    Block,
    Header,
    LiveBlock,
    block_from_snapshot,
    decode_block,
    decode_header,
    encode_block,
    encode_header,
)
from garage.shared.constants import HEADER_LINE_COUNT
from garage.shared.errors import InvalidDocument, MalformedRecord

log = logging.getLogger(__name__)

# Only CR, LF and CRLF end a line; other Unicode breaks are field text.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


@dataclass
class Document:
    header: Header = field(default_factory=Header)
    blocks: List[Block] = field(default_factory=list)
    file_name: str = ""
    file_path: str = ""

    # ── source identity ──────────────────────────────────────────────

    def set_file_name(self, file_name: str) -> None:
        self.file_name = file_name

    def set_path(self, path: Union[str, Path]) -> None:
        self.file_path = str(path)
        self.file_name = Path(path).stem

    # ── mutation ─────────────────────────────────────────────────────

    def set_player_name(self, player_name: str) -> str:
        return self.header.restamp(player_name, len(self.blocks))

    def replace_blocks(self, snapshots: Iterable[LiveBlock]) -> int:
        """Rebuild the block list from live snapshots, keeping input order.

        Snapshots that cannot be converted are skipped.  The identity is
        re-stamped with the current player name and the new block count.
        Returns the number of skipped snapshots.
        """
        self.blocks.clear()
        skipped = 0
        for snapshot in snapshots:
            try:
                self.blocks.append(block_from_snapshot(snapshot))
            except (MalformedRecord, AttributeError, TypeError, ValueError) as exc:
                skipped += 1
                log.warning("Skipping block snapshot: %s", exc)
        self.header.restamp(self.header.player_name, len(self.blocks))
        log.info("Document rebuilt from snapshots: %d blocks, %d skipped",
                 len(self.blocks), skipped)
        return skipped

    # ── codec ────────────────────────────────────────────────────────

    @classmethod
    def from_lines(cls, lines: Union[str, Sequence[str]], strict: bool = False) -> "Document":
        return decode_document(lines, strict=strict)

    def to_lines(self) -> List[str]:
        return encode_document(self)


def split_lines(text: str) -> List[str]:
    lines = _LINE_BREAK.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def decode_document(lines: Union[str, Sequence[str]], strict: bool = False) -> Document:
    """Decode a whole blueprint.  Raises InvalidDocument / InvalidHeader."""
    if isinstance(lines, str):
        lines = split_lines(lines)
    if len(lines) < HEADER_LINE_COUNT:
        raise InvalidDocument(f"Blueprint needs at least {HEADER_LINE_COUNT} lines, got {len(lines)}")

    header = decode_header(lines[:HEADER_LINE_COUNT], strict=strict)

    blocks: List[Block] = []
    for number, line in enumerate(lines[HEADER_LINE_COUNT:], HEADER_LINE_COUNT + 1):
        try:
            blocks.append(decode_block(line, strict=strict))
        except MalformedRecord as exc:
            raise InvalidDocument(f"Line {number}: {exc}") from exc

    if not blocks:
        raise InvalidDocument("Blueprint contains no blocks")

    log.debug("Decoded blueprint '%s': %d blocks", header.scene_name, len(blocks))
    return Document(header=header, blocks=blocks)


def encode_document(document: Document) -> List[str]:
    lines = encode_header(document.header)
    lines.extend(encode_block(block) for block in document.blocks)
    return [line for line in lines if line.strip()]


def dumps(document: Document) -> str:
    return "".join(line + "\n" for line in encode_document(document))


def loads(text: str, strict: bool = False) -> Document:
    return decode_document(text, strict=strict)
