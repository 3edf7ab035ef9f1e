"""
#WHERE
    Imported by every layer (codec, document, placement) and by tests.

#WHAT
    Shared role catalog, error types and format constants.

#INPUT
    None (constant registries).

#OUTPUT
    ROLES, DEFAULT_CATALOG, BlockRole / MarkerKind enums, error classes.
"""

from .catalog import (
    ROLES,
    DEFAULT_CATALOG,
    BlockRole,
    MarkerKind,
    RoleCatalog,
    RoleDefinition,
    get_role_by_id,
    get_role_names,
)
from .errors import (
    BlueprintError,
    DegenerateAnchor,
    InvalidDocument,
    InvalidHeader,
    MalformedRecord,
    MissingAnchor,
)

__all__ = [
    "ROLES",
    "DEFAULT_CATALOG",
    "BlockRole",
    "MarkerKind",
    "RoleCatalog",
    "RoleDefinition",
    "get_role_by_id",
    "get_role_names",
    "BlueprintError",
    "DegenerateAnchor",
    "InvalidDocument",
    "InvalidHeader",
    "MalformedRecord",
    "MissingAnchor",
]
