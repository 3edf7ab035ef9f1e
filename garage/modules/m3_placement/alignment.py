"""
#WHERE
    Used by engine.py (PlacementEngine.plan), viewpoints.py and
    instantiation.py.

#WHAT
    Rigid alignment of a whole blueprint onto the fixed garage frame, driven
    by the anchor block:

        1. scale the set uniformly about the origin so the anchor's scale
           becomes the canonical unit
        2. rotate the set about the *world* Y axis so the anchor faces 90°
        3. translate the set so the anchor lands on the target position

    The order matters: the rotation pivots on the set origin, so the
    translation is computed from the already scaled-and-rotated anchor.

    Euler angles follow the Y-X-Z composition (R = Ry · Rx · Rz), so a
    world-Y pre-rotation only adds to the yaw component.

#INPUT
    Anchor Block, target position, canonical unit.

#OUTPUT
    AlignmentTransform, PlacedPose per block.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from garage.modules.m1_record_codec import Block, Vec3
from garage.shared.constants import CANONICAL_UNIT, TARGET_POSITION, TARGET_YAW
from garage.shared.errors import DegenerateAnchor
from .models import PlacedPose

log = logging.getLogger(__name__)


def normalize_angle(degrees: float) -> float:
    """Map any angle onto [0, 360)."""
    angle = (degrees + 360.0) % 360.0
    return 0.0 if angle == 360.0 else angle


def yaw_matrix(degrees: float) -> np.ndarray:
    return Rotation.from_euler("y", degrees, degrees=True).as_matrix()


def _vec3(values) -> Vec3:
    x, y, z = (float(v) for v in values)
    return (x, y, z)


@dataclass(slots=True, frozen=True)
class AlignmentTransform:
    uniform_scale: float = 1.0
    yaw_correction_degrees: float = 0.0
    translation: Vec3 = (0.0, 0.0, 0.0)

    def apply_position(self, position: Sequence[float]) -> Vec3:
        scaled = self.uniform_scale * np.asarray(position, dtype=np.float64)
        rotated = yaw_matrix(self.yaw_correction_degrees) @ scaled
        return _vec3(rotated + np.asarray(self.translation, dtype=np.float64))

    def apply_rotation(self, rotation: Sequence[float]) -> Vec3:
        x, y, z = rotation
        return (normalize_angle(x),
                normalize_angle(y + self.yaw_correction_degrees),
                normalize_angle(z))

    def apply_scale(self, scale: Sequence[float]) -> Vec3:
        return _vec3(self.uniform_scale * np.asarray(scale, dtype=np.float64))

    def apply(self, block: Block) -> PlacedPose:
        return PlacedPose(
            position=self.apply_position(block.position),
            rotation=self.apply_rotation(block.rotation),
            scale=self.apply_scale(block.scale),
        )


def compute_alignment(anchor: Block,
                      target_position: Sequence[float] = TARGET_POSITION,
                      canonical_unit: float = CANONICAL_UNIT) -> AlignmentTransform:
    """Transform that puts *anchor* on *target_position*, facing 90°."""
    scale_x = anchor.scale[0]
    if scale_x == 0 or not math.isfinite(scale_x):
        raise DegenerateAnchor(f"Anchor scale {scale_x!r} cannot be normalised")

    uniform_scale = canonical_unit / scale_x
    yaw_correction = TARGET_YAW - normalize_angle(anchor.rotation[1])

    # Anchor offset from the set origin once scaled and rotated.
    offset = yaw_matrix(yaw_correction) @ (uniform_scale * np.asarray(anchor.position, dtype=np.float64))
    translation = np.asarray(target_position, dtype=np.float64) - offset

    transform = AlignmentTransform(
        uniform_scale=uniform_scale,
        yaw_correction_degrees=yaw_correction,
        translation=_vec3(translation),
    )
    log.debug("Alignment: scale=%.5f yaw=%.3f translation=%s",
              uniform_scale, yaw_correction, transform.translation)
    return transform
