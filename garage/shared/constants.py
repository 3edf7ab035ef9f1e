"""
#WHERE
    Imported by the record codec, the document model, the placement engine
    and pipeline.py - single source of truth for format and layout constants.

#WHAT
    Centralised constants used across 3+ modules.  Edit here, not in
    individual module files.

#INPUT / #OUTPUT
    Pure constants - no I/O.
"""

# ── File format ──────────────────────────────────────────────────────────

BLUEPRINT_EXTENSION: str = ".zeeplevel"
FIELD_DELIMITER: str = ","

HEADER_LINE_COUNT: int = 3
HEADER_FIELD_COUNTS: tuple[int, int, int] = (3, 8, 6)
CAMERA_PROPERTY_COUNT: int = 8

BLOCK_FIELD_COUNT: int = 38                       # type id + properties
BLOCK_PROPERTY_COUNT: int = BLOCK_FIELD_COUNT - 1
POSE_PROPERTY_COUNT: int = 9                      # position, rotation, scale

INVALID_TRACK_LABEL: str = "invalid track"        # author time == 0

# ── Header defaults (scratch documents) ─────────────────────────────────

DEFAULT_SCENE_NAME: str = "LevelEditor2"
DEFAULT_PLAYER_NAME: str = "Bouwerman"
DEFAULT_SKYBOX: int = 0
DEFAULT_GROUND: int = -1

# ── Block payload layout (indices into Block.properties) ────────────────

SORT_KEY_INDEX: int = 9          # paint / order key
FOV_INDEX: int = 10
PROJECTION_INDEX: int = 11
ORTHO_SIZE_INDEX: int = 12

ORTHOGRAPHIC_MODE: int = 1
FOV_RANGE: tuple[float, float] = (1.0, 180.0)

# ── Alignment ────────────────────────────────────────────────────────────

TARGET_POSITION: tuple[float, float, float] = (-0.036, 6.358, 7.931)
TARGET_YAW: float = 90.0
CANONICAL_UNIT: float = 0.33333

VIEWPOINT_COUNT: int = 6
CAMERA_FLIP_YAW: float = 180.0   # cameras face opposite their placement
