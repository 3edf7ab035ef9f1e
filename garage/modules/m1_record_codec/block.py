"""
#WHERE
    Used by m2_document (decode / encode / replace_blocks) and by the
    placement engine, which reads poses and payload fields from Block.

#WHAT
    One placed object of a blueprint: a numeric type id and 37 floats.
    The first nine floats are the pose (position, rotation in degrees,
    scale); the rest is type-specific payload that the core passes through.

#INPUT
    One comma-delimited line with 38 fields, or a live block snapshot.

#OUTPUT
    Block dataclass, or its 38-field line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Sequence

from garage.shared.constants import (
    BLOCK_FIELD_COUNT,
    BLOCK_PROPERTY_COUNT,
    FIELD_DELIMITER,
    POSE_PROPERTY_COUNT,
)
from garage.shared.errors import MalformedRecord
from .numbers import format_float, format_int, parse_float, parse_int

Vec3 = tuple[float, float, float]


def _default_properties() -> list[float]:
    payload = [0.0] * (BLOCK_PROPERTY_COUNT - POSE_PROPERTY_COUNT)
    return [0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0] + payload


@dataclass(slots=True)
class Block:
    type_id: int = -1
    properties: list[float] = field(default_factory=_default_properties)

    def __post_init__(self) -> None:
        if len(self.properties) != BLOCK_PROPERTY_COUNT:
            raise MalformedRecord(
                f"Block needs {BLOCK_PROPERTY_COUNT} properties, got {len(self.properties)}"
            )

    def _get3(self, start: int) -> Vec3:
        p = self.properties
        return (p[start], p[start + 1], p[start + 2])

    def _set3(self, start: int, value: Sequence[float]) -> None:
        x, y, z = value
        self.properties[start:start + 3] = [float(x), float(y), float(z)]

    @property
    def position(self) -> Vec3:
        return self._get3(0)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self._set3(0, value)

    @property
    def rotation(self) -> Vec3:
        """Euler angles in degrees."""
        return self._get3(3)

    @rotation.setter
    def rotation(self, value: Sequence[float]) -> None:
        self._set3(3, value)

    @property
    def scale(self) -> Vec3:
        return self._get3(6)

    @scale.setter
    def scale(self, value: Sequence[float]) -> None:
        self._set3(6, value)

    @property
    def payload(self) -> list[float]:
        return self.properties[POSE_PROPERTY_COUNT:]

    def copy(self) -> "Block":
        return Block(self.type_id, list(self.properties))


class LiveBlock(Protocol):
    """What the instantiation substrate exposes for a spawned block."""
    block_id: int
    properties: Sequence[float]


@dataclass(slots=True)
class BlockSnapshot:
    block_id: int
    properties: list[float]


def decode_block(line: str, strict: bool = False) -> Block:
    """Decode one 38-field block line.

    Raises MalformedRecord on a wrong field count.  Bad numeric fields fall
    back to -1 / 0.0 unless *strict*.
    """
    values = line.split(FIELD_DELIMITER)
    if len(values) != BLOCK_FIELD_COUNT:
        raise MalformedRecord(
            f"Block line has {len(values)} fields, expected {BLOCK_FIELD_COUNT}"
        )
    type_id = parse_int(values[0], strict)
    properties = [parse_float(v, strict) for v in values[1:]]
    return Block(type_id, properties)


def encode_block(block: Block) -> str:
    fields = [format_int(block.type_id)]
    fields.extend(format_float(v) for v in block.properties)
    return FIELD_DELIMITER.join(fields)


def block_from_snapshot(snapshot: LiveBlock) -> Block:
    """Convert a live block into a Block; raises if the property array is unusable."""
    properties = [float(v) for v in snapshot.properties]
    if len(properties) != BLOCK_PROPERTY_COUNT:
        raise MalformedRecord(
            f"Snapshot of block {snapshot.block_id} has {len(properties)} properties"
        )
    return Block(int(snapshot.block_id), properties)
