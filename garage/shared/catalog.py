"""
#WHERE
    Imported by shared/__init__.py → re-exported to the placement engine,
    pipeline.py and tests.

#WHAT
    Single source of truth for the block roles the placement engine
    recognises.  Every other type id is an ordinary block; the core never
    interprets ids beyond this table.

#INPUT
    None (constant definitions).

#OUTPUT
    BlockRole / MarkerKind enums, RoleDefinition dataclass, ROLES dict,
    RoleCatalog lookup and DEFAULT_CATALOG.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class BlockRole(Enum):
    ANCHOR   = auto()
    CAMERA   = auto()
    MARKER   = auto()
    ORDINARY = auto()


class MarkerKind(Enum):
    SPAWN_POINT        = auto()
    ROTATION_REFERENCE = auto()


@dataclass(slots=True, frozen=True)
class RoleDefinition:
    """Single catalog entry."""
    name: str
    block_id: int
    role: BlockRole
    marker_kind: Optional[MarkerKind] = None
    description: str = ""


ROLES: dict[str, RoleDefinition] = {
    "garage":             RoleDefinition("garage",             2290, BlockRole.ANCHOR, None,                          "Garage block the blueprint is aligned on"),
    "camera":             RoleDefinition("camera",             2291, BlockRole.CAMERA, None,                          "Menu viewpoint"),
    "spawn_point":        RoleDefinition("spawn_point",        2292, BlockRole.MARKER, MarkerKind.SPAWN_POINT,        "Soapbox showcase position"),
    "rotation_reference": RoleDefinition("rotation_reference", 2293, BlockRole.MARKER, MarkerKind.ROTATION_REFERENCE, "Soapbox showcase facing"),
}


@dataclass(slots=True)
class RoleCatalog:
    """Lookup from numeric type id to role definition."""
    roles: dict[int, RoleDefinition] = field(default_factory=dict)

    @classmethod
    def from_definitions(cls, definitions) -> "RoleCatalog":
        catalog = cls()
        for definition in definitions:
            if definition.block_id in catalog.roles:
                raise ValueError(f"Duplicate role id: {definition.block_id}")
            if (definition.role is BlockRole.MARKER) != (definition.marker_kind is not None):
                raise ValueError(f"Marker kind mismatch for role: {definition.name}")
            catalog.roles[definition.block_id] = definition
        return catalog

    def lookup(self, type_id: int) -> Optional[RoleDefinition]:
        return self.roles.get(type_id)

    def role_of(self, type_id: int) -> BlockRole:
        definition = self.roles.get(type_id)
        return definition.role if definition else BlockRole.ORDINARY

    def ids_for(self, role: BlockRole) -> list[int]:
        return [d.block_id for d in self.roles.values() if d.role is role]

    @property
    def anchor_id(self) -> int:
        ids = self.ids_for(BlockRole.ANCHOR)
        if len(ids) != 1:
            raise ValueError(f"Catalog must define exactly one anchor id, got {ids}")
        return ids[0]


DEFAULT_CATALOG = RoleCatalog.from_definitions(ROLES.values())


def get_role_by_id(type_id: int) -> Optional[RoleDefinition]:
    return DEFAULT_CATALOG.lookup(type_id)


def get_role_names() -> list[str]:
    return list(ROLES.keys())
