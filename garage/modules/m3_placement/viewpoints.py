"""
#WHERE
    Used by engine.py; the resulting list is consumed by the menu camera
    layer outside this package.

#WHAT
    Derives the six menu viewpoints from the blueprint's camera blocks.
    Cameras are ordered by their paint / order key (stable), then indexed
    cyclically so any number of cameras fills all six slots.

#INPUT
    Camera blocks (any order), the alignment transform.

#OUTPUT
    Sorted camera list, List[Viewpoint] (empty when there are no cameras).
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np
from scipy.spatial.transform import Rotation

from garage.modules.m1_record_codec import Block, Vec3
from garage.shared.constants import (
    CAMERA_FLIP_YAW,
    FOV_INDEX,
    FOV_RANGE,
    ORTHO_SIZE_INDEX,
    ORTHOGRAPHIC_MODE,
    PROJECTION_INDEX,
    SORT_KEY_INDEX,
    VIEWPOINT_COUNT,
)
from .alignment import AlignmentTransform, normalize_angle
from .models import Viewpoint


def sort_cameras(cameras: Sequence[Block]) -> List[Block]:
    return sorted(cameras, key=lambda b: b.properties[SORT_KEY_INDEX])


def _euler_to_rotation(euler: Sequence[float]) -> Rotation:
    x, y, z = euler
    return Rotation.from_euler("YXZ", [y, x, z], degrees=True)


def _rotation_to_euler(rotation: Rotation) -> Vec3:
    y, x, z = rotation.as_euler("YXZ", degrees=True)
    return (normalize_angle(float(x)), normalize_angle(float(y)), normalize_angle(float(z)))


def flip_rotation(euler: Sequence[float]) -> Vec3:
    """Turn a rotation around its own up axis by CAMERA_FLIP_YAW degrees."""
    turned = _euler_to_rotation(euler) * Rotation.from_euler("y", CAMERA_FLIP_YAW, degrees=True)
    return _rotation_to_euler(turned)


def camera_viewpoint(camera: Block, transform: AlignmentTransform) -> Viewpoint:
    pose = transform.apply(camera)
    mode = camera.properties[PROJECTION_INDEX]
    orthographic = math.isfinite(mode) and round(mode) == ORTHOGRAPHIC_MODE
    if orthographic:
        lens = camera.properties[ORTHO_SIZE_INDEX]
    else:
        lens = float(np.clip(camera.properties[FOV_INDEX], *FOV_RANGE))
    return Viewpoint(
        position=pose.position,
        rotation=flip_rotation(pose.rotation),
        field_of_view=lens,
        is_orthographic=orthographic,
    )


def derive_viewpoints(cameras: Sequence[Block], transform: AlignmentTransform) -> List[Viewpoint]:
    """Six viewpoints from *cameras*; viewpoint i uses sorted camera i % count."""
    ordered = sort_cameras(cameras)
    if not ordered:
        return []
    derived = [camera_viewpoint(camera, transform) for camera in ordered]
    return [derived[i % len(derived)] for i in range(VIEWPOINT_COUNT)]
