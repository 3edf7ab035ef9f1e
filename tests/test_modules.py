"""
Unit Tests for Shared Components
================================
Role catalog, error hierarchy and format constants.

Run with: pytest tests/test_modules.py -v
Or: python tests/test_modules.py
"""

import unittest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class TestRoleCatalog(unittest.TestCase):
    """Tests for the block role catalog."""

    def test_roles_exist(self):
        """Catalog contains the four recognised roles."""
        from garage.shared.catalog import ROLES

        self.assertIn("garage", ROLES)
        self.assertIn("camera", ROLES)
        self.assertIn("spawn_point", ROLES)
        self.assertIn("rotation_reference", ROLES)

    def test_anchor_id(self):
        """The garage block is the only anchor."""
        from garage.shared.catalog import DEFAULT_CATALOG

        self.assertEqual(DEFAULT_CATALOG.anchor_id, 2290)

    def test_lookup_by_id(self):
        from garage.shared.catalog import BlockRole, MarkerKind, get_role_by_id

        camera = get_role_by_id(2291)
        self.assertIsNotNone(camera)
        self.assertEqual(camera.role, BlockRole.CAMERA)

        spawn = get_role_by_id(2292)
        self.assertEqual(spawn.marker_kind, MarkerKind.SPAWN_POINT)

        self.assertIsNone(get_role_by_id(1))

    def test_unknown_ids_are_ordinary(self):
        from garage.shared.catalog import DEFAULT_CATALOG, BlockRole

        self.assertEqual(DEFAULT_CATALOG.role_of(0), BlockRole.ORDINARY)
        self.assertEqual(DEFAULT_CATALOG.role_of(-1), BlockRole.ORDINARY)
        self.assertEqual(DEFAULT_CATALOG.role_of(2293), BlockRole.MARKER)

    def test_role_names(self):
        from garage.shared.catalog import get_role_names

        self.assertEqual(len(get_role_names()), 4)

    def test_duplicate_ids_rejected(self):
        """Two roles cannot share one id."""
        from garage.shared.catalog import BlockRole, RoleCatalog, RoleDefinition

        with self.assertRaises(ValueError):
            RoleCatalog.from_definitions([
                RoleDefinition("a", 10, BlockRole.ANCHOR),
                RoleDefinition("b", 10, BlockRole.CAMERA),
            ])

    def test_marker_needs_kind(self):
        from garage.shared.catalog import BlockRole, MarkerKind, RoleCatalog, RoleDefinition

        with self.assertRaises(ValueError):
            RoleCatalog.from_definitions([RoleDefinition("m", 11, BlockRole.MARKER)])
        with self.assertRaises(ValueError):
            RoleCatalog.from_definitions([
                RoleDefinition("c", 12, BlockRole.CAMERA, MarkerKind.SPAWN_POINT),
            ])

    def test_catalog_without_anchor(self):
        from garage.shared.catalog import BlockRole, RoleCatalog, RoleDefinition

        catalog = RoleCatalog.from_definitions([RoleDefinition("c", 5, BlockRole.CAMERA)])
        with self.assertRaises(ValueError):
            catalog.anchor_id


class TestErrors(unittest.TestCase):
    """Tests for the error hierarchy."""

    def test_hierarchy(self):
        from garage.shared.errors import (
            BlueprintError,
            DegenerateAnchor,
            InvalidDocument,
            InvalidHeader,
            MalformedRecord,
            MissingAnchor,
        )

        for cls in (MalformedRecord, InvalidDocument, MissingAnchor, DegenerateAnchor):
            self.assertTrue(issubclass(cls, BlueprintError))
        self.assertTrue(issubclass(InvalidHeader, InvalidDocument))
        self.assertTrue(issubclass(BlueprintError, ValueError))


class TestConstants(unittest.TestCase):
    """Format constants agree with each other."""

    def test_block_layout(self):
        from garage.shared import constants as c

        self.assertEqual(c.BLOCK_FIELD_COUNT, c.BLOCK_PROPERTY_COUNT + 1)
        self.assertEqual(c.POSE_PROPERTY_COUNT, 9)
        self.assertEqual(c.SORT_KEY_INDEX, c.POSE_PROPERTY_COUNT)
        self.assertLess(c.ORTHO_SIZE_INDEX, c.BLOCK_PROPERTY_COUNT)

    def test_header_layout(self):
        from garage.shared import constants as c

        self.assertEqual(c.HEADER_LINE_COUNT, len(c.HEADER_FIELD_COUNTS))
        self.assertEqual(c.HEADER_FIELD_COUNTS, (3, 8, 6))


if __name__ == "__main__":
    unittest.main(verbosity=2)
