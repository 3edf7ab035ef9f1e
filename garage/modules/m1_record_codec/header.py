"""
#WHERE
    Used by m2_document for the first three lines of every blueprint.

#WHAT
    Document-level metadata: scene / author identity, eight opaque camera
    properties, medal times and skybox / ground selection.  Also stamps the
    opaque uuid used to tell blueprints apart.

#INPUT
    Exactly three comma-delimited lines (3, 8 and 6 fields).

#OUTPUT
    Header dataclass, or its three lines.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence

from garage.shared.constants import (
    CAMERA_PROPERTY_COUNT,
    DEFAULT_GROUND,
    DEFAULT_PLAYER_NAME,
    DEFAULT_SCENE_NAME,
    DEFAULT_SKYBOX,
    FIELD_DELIMITER,
    HEADER_FIELD_COUNTS,
    HEADER_LINE_COUNT,
    INVALID_TRACK_LABEL,
)
from garage.shared.errors import InvalidHeader
from .numbers import format_float, format_int, parse_float, parse_int


def generate_uuid(player_name: str, object_count: int,
                  now: Optional[datetime] = None,
                  rng: Optional[random.Random] = None) -> str:
    """Build ``ddMMyyyy-HHmmssfff-<player>-<random>-<count>``.

    The random part is ten digits and never starts with 0.  Unique in
    practice (clock + randomness), not cryptographically.
    """
    now = now or datetime.now()
    rng = rng or random.Random()
    date = now.strftime("%d%m%Y")
    time = now.strftime("%H%M%S") + f"{now.microsecond // 1000:03d}"
    number = f"{rng.randint(1, 9)}{rng.randint(0, 999_999_999):09d}"
    return f"{date}-{time}-{player_name}-{number}-{object_count}"


@dataclass(slots=True)
class Header:
    scene_name: str = DEFAULT_SCENE_NAME
    player_name: str = DEFAULT_PLAYER_NAME
    uuid: Optional[str] = None          # None stamps a fresh uuid
    camera_properties: list[float] = field(
        default_factory=lambda: [0.0] * CAMERA_PROPERTY_COUNT
    )
    author_time: float = 0.0
    author_time_label: Optional[str] = None   # None derives it from author_time
    gold_time: float = 0.0
    silver_time: float = 0.0
    bronze_time: float = 0.0
    skybox: int = DEFAULT_SKYBOX
    ground: int = DEFAULT_GROUND

    def __post_init__(self) -> None:
        if self.uuid is None:
            self.uuid = generate_uuid(self.player_name, 0)
        if self.author_time_label is None:
            self.author_time_label = INVALID_TRACK_LABEL if self.author_time == 0 else ""

    @property
    def is_invalid_track(self) -> bool:
        return self.author_time_label == INVALID_TRACK_LABEL

    def restamp(self, player_name: str, object_count: int) -> str:
        """Give the header a fresh uuid for *player_name* and *object_count* blocks."""
        self.uuid = generate_uuid(player_name, object_count)
        self.player_name = player_name
        return self.uuid


def _split(line: str, expected: int, name: str) -> list[str]:
    values = line.split(FIELD_DELIMITER)
    if len(values) != expected:
        raise InvalidHeader(f"Header {name} line has {len(values)} fields, expected {expected}")
    return values


def decode_header(lines: Sequence[str], strict: bool = False) -> Header:
    if len(lines) != HEADER_LINE_COUNT:
        raise InvalidHeader(f"Header needs {HEADER_LINE_COUNT} lines, got {len(lines)}")
    n_identity, n_camera, n_times = HEADER_FIELD_COUNTS

    scene_name, player_name, uuid = _split(lines[0], n_identity, "identity")
    camera = [parse_float(v, strict) for v in _split(lines[1], n_camera, "camera")]
    times = _split(lines[2], n_times, "times")

    author_time = _author_time_strict(times[0]) if strict else parse_float(times[0])
    skybox = parse_int(times[4], strict)
    return Header(
        scene_name=scene_name,
        player_name=player_name,
        uuid=uuid,
        camera_properties=camera,
        author_time=author_time,
        author_time_label=INVALID_TRACK_LABEL if author_time == 0 else "",
        gold_time=parse_float(times[1], strict),
        silver_time=parse_float(times[2], strict),
        bronze_time=parse_float(times[3], strict),
        skybox=DEFAULT_SKYBOX if skybox == -1 else skybox,
        # Read from field 0, not field 5: matches what existing readers do.
        ground=parse_int(times[0]),
    )


def _author_time_strict(text: str) -> float:
    # The sentinel label is a legal author time even in strict mode.
    if text == INVALID_TRACK_LABEL:
        return 0.0
    return parse_float(text, strict=True)


def encode_header(header: Header) -> list[str]:
    identity = FIELD_DELIMITER.join([header.scene_name, header.player_name, header.uuid])
    camera = FIELD_DELIMITER.join(format_float(v) for v in header.camera_properties)
    author = header.author_time_label if header.is_invalid_track else format_float(header.author_time)
    times = FIELD_DELIMITER.join([
        author,
        format_float(header.gold_time),
        format_float(header.silver_time),
        format_float(header.bronze_time),
        format_int(header.skybox),
        format_int(header.ground),
    ])
    return [identity, camera, times]
