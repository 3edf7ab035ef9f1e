"""
#WHERE
    Used by pipeline.py, main.py and tests.

#WHAT
    Placement engine - turns a decoded blueprint into a placement plan:
    classify blocks → align on the anchor → derive viewpoints → visibility.
    Pure: nothing is spawned, shown or hidden here.

#INPUT
    Document (from m2_document), PlacementContext.

#OUTPUT
    PlacementPlan.
"""

import logging
from typing import Optional

from garage.modules.m2_document import Document
from .alignment import compute_alignment
from .classifier import classify
from .models import PlacementContext, PlacementPlan, VisibilityFlags
from .viewpoints import derive_viewpoints, sort_cameras

log = logging.getLogger(__name__)


class PlacementEngine:
    """Builds a PlacementPlan for one blueprint.

    The context carries what used to be plugin-wide settings, so two engines
    with different settings can run side by side.
    """

    def __init__(self, context: Optional[PlacementContext] = None) -> None:
        self.context = context or PlacementContext()

    def plan(self, document: Document) -> PlacementPlan:
        ctx = self.context
        parts = classify(document.blocks, ctx)
        transform = compute_alignment(parts.anchor, ctx.target_position, ctx.canonical_unit)

        cameras = sort_cameras(parts.cameras)
        viewpoints = derive_viewpoints(cameras, transform)
        if ctx.use_custom_cameras and not viewpoints:
            log.info("No camera blocks in blueprint - using default viewpoints")

        visibility = self.visibility(consumed_cameras=bool(viewpoints))
        plan = PlacementPlan(
            transform=transform,
            anchor=parts.anchor,
            blocks=parts.placed,
            ordinary_blocks=parts.ordinary,
            camera_blocks=cameras,
            markers=parts.markers,
            viewpoints=viewpoints,
            visibility=visibility,
            skybox=document.header.skybox,
        )
        log.info("PlacementEngine: %d blocks planned (scale %.4f, yaw %+.2f°, %d cameras)",
                 len(plan.all_blocks()), transform.uniform_scale,
                 transform.yaw_correction_degrees, len(cameras))
        return plan

    def visibility(self, consumed_cameras: bool) -> VisibilityFlags:
        return VisibilityFlags(
            hide_anchor=not self.context.anchor_visible,
            hide_markers=not self.context.markers_visible,
            hide_cameras=consumed_cameras,
        )


def plan_placement(document: Document, context: Optional[PlacementContext] = None) -> PlacementPlan:
    return PlacementEngine(context).plan(document)
