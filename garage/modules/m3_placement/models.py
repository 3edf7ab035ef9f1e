"""
#WHERE
    Used by classifier.py, alignment.py, viewpoints.py, engine.py,
    instantiation.py, pipeline.py and tests.

#WHAT
    Placement data models: the context that replaces the old process-wide
    plugin state, world poses, viewpoints, visibility flags and the
    placement plan handed to the instantiation substrate.

#INPUT
    Settings values, classified blocks, alignment results.

#OUTPUT
    PlacementContext, PlacedPose, Viewpoint, VisibilityFlags,
    Classification, PlacementPlan dataclass instances.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, List, Optional

from garage.modules.m1_record_codec import Block, Vec3
from garage.shared.catalog import DEFAULT_CATALOG, MarkerKind, RoleCatalog
from garage.shared.constants import CANONICAL_UNIT, TARGET_POSITION

if TYPE_CHECKING:
    from .alignment import AlignmentTransform


@dataclass(slots=True)
class PlacementContext:
    use_custom_cameras: bool = True
    anchor_visible: bool = True
    markers_visible: bool = False
    catalog: RoleCatalog = field(default_factory=lambda: DEFAULT_CATALOG)
    target_position: Vec3 = TARGET_POSITION
    canonical_unit: float = CANONICAL_UNIT
    catalog_size: Optional[int] = None   # spawnable ids are [0, catalog_size)

    def is_spawnable(self, type_id: int) -> bool:
        if self.catalog_size is None:
            return True
        return 0 <= type_id < self.catalog_size


@dataclass(slots=True, frozen=True)
class PlacedPose:
    position: Vec3
    rotation: Vec3   # Euler degrees, [0, 360)
    scale: Vec3


@dataclass(slots=True, frozen=True)
class Viewpoint:
    position: Vec3
    rotation: Vec3
    field_of_view: float   # orthographic half-size when is_orthographic
    is_orthographic: bool = False


@dataclass(slots=True, frozen=True)
class VisibilityFlags:
    hide_anchor: bool = False
    hide_markers: bool = True
    hide_cameras: bool = False


@dataclass(slots=True)
class Classification:
    anchor: Block
    placed: List[Block] = field(default_factory=list)   # stored order
    ordinary: List[Block] = field(default_factory=list)
    cameras: List[Block] = field(default_factory=list)
    markers: Dict[MarkerKind, Block] = field(default_factory=dict)


@dataclass(slots=True)
class PlacementPlan:
    transform: "AlignmentTransform"
    anchor: Block
    blocks: List[Block]
    ordinary_blocks: List[Block]
    camera_blocks: List[Block]
    markers: Dict[MarkerKind, Block]
    viewpoints: List[Viewpoint]
    visibility: VisibilityFlags
    skybox: int = 0

    @property
    def has_custom_viewpoints(self) -> bool:
        return bool(self.viewpoints)

    @property
    def hidden_blocks(self) -> List[Block]:
        hidden: List[Block] = []
        if self.visibility.hide_anchor:
            hidden.append(self.anchor)
        if self.visibility.hide_markers:
            hidden.extend(self.markers.values())
        if self.visibility.hide_cameras:
            hidden.extend(self.camera_blocks)
        return hidden

    def is_hidden(self, block: Block) -> bool:
        return any(block is b for b in self.hidden_blocks)

    def all_blocks(self) -> List[Block]:
        """Every spawnable block, in stored (stacking) order."""
        return list(self.blocks)

    def marker_pose(self, kind: MarkerKind) -> Optional[PlacedPose]:
        block = self.markers.get(kind)
        return self.transform.apply(block) if block is not None else None

    def anchor_pose(self) -> PlacedPose:
        return self.transform.apply(self.anchor)
