"""Single-pass role classification of a blueprint's blocks.

Policy, in stored block order:
    anchor   → the first anchor-tagged block; later ones are ordinary
    camera   → collected only when custom cameras are enabled
    marker   → first instance per marker kind; later ones are ordinary
    other    → ordinary
Blocks the substrate cannot spawn (id outside the catalog size, when known)
are dropped before classification.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from garage.modules.m1_record_codec import Block
from garage.shared.catalog import BlockRole
from garage.shared.errors import MissingAnchor
from .models import Classification, PlacementContext

log = logging.getLogger(__name__)


def classify(blocks: Iterable[Block], context: PlacementContext) -> Classification:
    anchor: Optional[Block] = None
    placed, ordinary, cameras, markers = [], [], [], {}
    skipped = 0

    for block in blocks:
        if not context.is_spawnable(block.type_id):
            skipped += 1
            continue
        placed.append(block)

        definition = context.catalog.lookup(block.type_id)
        role = definition.role if definition else BlockRole.ORDINARY

        if role is BlockRole.ANCHOR and anchor is None:
            anchor = block
        elif role is BlockRole.CAMERA and context.use_custom_cameras:
            cameras.append(block)
        elif role is BlockRole.MARKER and definition.marker_kind not in markers:
            markers[definition.marker_kind] = block
        else:
            ordinary.append(block)

    if skipped:
        log.debug("Skipped %d blocks with unknown ids", skipped)
    if anchor is None:
        raise MissingAnchor(
            f"Blueprint does not contain the anchor block (id {context.catalog.anchor_id})"
        )

    log.debug("Classified: %d ordinary, %d cameras, %d markers",
              len(ordinary), len(cameras), len(markers))
    return Classification(anchor=anchor, placed=placed, ordinary=ordinary,
                          cameras=cameras, markers=markers)
