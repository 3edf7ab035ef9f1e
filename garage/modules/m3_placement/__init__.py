"""
#WHERE
    Imported by pipeline.py, main.py and tests.

#WHAT
    Placement Engine (Module 3) - classifies blueprint blocks, aligns the
    set on the anchor block, derives the six menu viewpoints and hands
    spawn requests to an injected factory registry.

#INPUT
    Document from Module 2, PlacementContext.

#OUTPUT
    PlacementPlan; InstantiatedBlueprint when a registry is supplied.
"""

from .models import (
    Classification,
    PlacedPose,
    PlacementContext,
    PlacementPlan,
    Viewpoint,
    VisibilityFlags,
)
from .alignment import AlignmentTransform, compute_alignment, normalize_angle
from .classifier import classify
from .viewpoints import derive_viewpoints, sort_cameras
from .engine import PlacementEngine, plan_placement
from .instantiation import InstantiatedBlueprint, SpawnRequest, instantiate_plan

__all__ = [
    "AlignmentTransform",
    "Classification",
    "InstantiatedBlueprint",
    "PlacedPose",
    "PlacementContext",
    "PlacementEngine",
    "PlacementPlan",
    "SpawnRequest",
    "Viewpoint",
    "VisibilityFlags",
    "classify",
    "compute_alignment",
    "derive_viewpoints",
    "instantiate_plan",
    "normalize_angle",
    "plan_placement",
    "sort_cameras",
]
