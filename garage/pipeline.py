"""
#WHERE
    Entry point of the whole system - called by main.py and by the host
    engine's menu hook.

#WHAT
    End-to-end pipeline: settings → find blueprint → decode → plan
    placement → (optional) instantiate through the host's factories.
    Also exports live block snapshots back to a blueprint file.

#INPUT
    PipelineConfig; optionally an id → factory registry or live snapshots.

#OUTPUT
    PlacementPlan (or None when disabled), InstantiatedBlueprint, file path.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Mapping, Optional

from garage.modules.m1_record_codec import LiveBlock
from garage.modules.m2_document import Document, find_blueprint, read_blueprint, write_blueprint
from garage.modules.m3_placement import (
    InstantiatedBlueprint,
    PlacementContext,
    PlacementEngine,
    PlacementPlan,
    instantiate_plan,
)
from garage.modules.m3_placement.instantiation import BlockFactory
from garage.shared.errors import BlueprintError

log = logging.getLogger(__name__)

BLUEPRINTS_DIR_ENV = "GARAGE_BLUEPRINTS_DIR"


def _default_blueprints_dir() -> str:
    return os.environ.get(BLUEPRINTS_DIR_ENV, "Blueprints")


@dataclass
class PipelineConfig:
    enabled: bool = True
    blueprints_dir: str = field(default_factory=_default_blueprints_dir)
    blueprint_name: str = ""
    use_custom_cameras: bool = True     # read viewpoints from camera blocks
    anchor_visible: bool = True         # keep the garage block itself visible
    markers_visible: bool = False
    strict_numbers: bool = False        # reject unparsable numeric fields
    catalog_size: Optional[int] = None  # host block list size, if known

    def to_context(self) -> PlacementContext:
        return PlacementContext(
            use_custom_cameras=self.use_custom_cameras,
            anchor_visible=self.anchor_visible,
            markers_visible=self.markers_visible,
            catalog_size=self.catalog_size,
        )


class Pipeline:
    """Blueprint name → placement plan.  Any failure aborts before spawning."""

    def __init__(self, config: PipelineConfig | None = None) -> None:
        self.config = config or PipelineConfig()
        self.engine = PlacementEngine(self.config.to_context())
        self.document: Optional[Document] = None

    def load(self) -> Document:
        cfg = self.config
        if not cfg.blueprint_name:
            raise FileNotFoundError("No blueprint name configured")
        try:
            path = find_blueprint(cfg.blueprints_dir, cfg.blueprint_name)
            self.document = read_blueprint(path, strict=cfg.strict_numbers)
        except FileNotFoundError as exc:
            log.error("Blueprint not found: %s", exc)
            raise
        except BlueprintError as exc:
            log.error("Blueprint not valid: %s", exc)
            raise
        return self.document

    def run(self) -> Optional[PlacementPlan]:
        if not self.config.enabled:
            log.info("Pipeline disabled - nothing to place")
            return None
        document = self.load()
        try:
            return self.engine.plan(document)
        except BlueprintError as exc:
            log.error("Blueprint cannot be placed: %s", exc)
            raise

    def instantiate(self, registry: Mapping[int, BlockFactory]) -> Optional[InstantiatedBlueprint]:
        plan = self.run()
        if plan is None:
            return None
        return instantiate_plan(plan, registry)

    @staticmethod
    def export(snapshots: Iterable[LiveBlock], player_name: str, path: str | Path) -> Path:
        """Write live blocks to a new blueprint file stamped for *player_name*."""
        document = Document()
        document.replace_blocks(snapshots)
        document.set_player_name(player_name)
        return write_blueprint(document, path)
