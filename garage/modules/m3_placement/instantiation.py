"""
#WHERE
    Called by pipeline.py (Pipeline.instantiate) with the factory registry
    supplied by the host engine.

#WHAT
    Boundary to the object-instantiation substrate.  Each planned block
    becomes a SpawnRequest carrying its world pose; the registry maps a
    type id to the factory that builds the live object.  Ids without a
    factory are skipped, mirroring the engine's own block list bounds.

#INPUT
    PlacementPlan, Mapping[type id → factory callable].

#OUTPUT
    InstantiatedBlueprint with the opaque handles the factories returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional

from garage.modules.m1_record_codec import Block, Vec3
from .models import PlacementPlan

log = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class SpawnRequest:
    type_id: int
    position: Vec3
    rotation: Vec3
    scale: Vec3
    properties: tuple[float, ...]
    hidden: bool = False


BlockFactory = Callable[[SpawnRequest], Any]


@dataclass(slots=True)
class InstantiatedBlueprint:
    handles: List[Any] = field(default_factory=list)
    hidden_handles: List[Any] = field(default_factory=list)
    skipped: int = 0


def spawn_request(plan: PlacementPlan, block: Block, hidden: Optional[bool] = None) -> SpawnRequest:
    pose = plan.transform.apply(block)
    properties = [*pose.position, *pose.rotation, *pose.scale, *block.payload]
    return SpawnRequest(
        type_id=block.type_id,
        position=pose.position,
        rotation=pose.rotation,
        scale=pose.scale,
        properties=tuple(properties),
        hidden=plan.is_hidden(block) if hidden is None else hidden,
    )


def instantiate_plan(plan: PlacementPlan, registry: Mapping[int, BlockFactory]) -> InstantiatedBlueprint:
    result = InstantiatedBlueprint()
    hidden_ids = {id(b) for b in plan.hidden_blocks}
    for block in plan.all_blocks():
        factory = registry.get(block.type_id)
        if factory is None:
            result.skipped += 1
            log.debug("No factory for block id %d - skipped", block.type_id)
            continue
        request = spawn_request(plan, block, hidden=id(block) in hidden_ids)
        handle = factory(request)
        result.handles.append(handle)
        if request.hidden:
            result.hidden_handles.append(handle)
    log.info("Instantiated %d blocks (%d hidden, %d skipped)",
             len(result.handles), len(result.hidden_handles), result.skipped)
    return result
