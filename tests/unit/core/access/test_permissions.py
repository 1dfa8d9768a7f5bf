"""
Unit tests for RBAC permission resolution and role editing.
"""

import unittest

from core.access.catalog import recruiter_role, super_admin_role
from core.access.models import (
    AdminUser,
    ModuleId,
    PermissionAction,
    Role,
    build_permission_map,
)
from core.access.permissions import (
    grant,
    has_permission,
    navigation_for,
    revoke,
    toggle_permission,
)
from core.exceptions import InvalidRoleError


def _user(role_id: str) -> AdminUser:
    return AdminUser(id="u1", email="u1@example.com", role_id=role_id, branch_id="main-hub")


class TestHasPermission(unittest.TestCase):

    def setUp(self):
        self.editor = Role(
            id="role-editor",
            name="Editor",
            permissions=build_permission_map([{"moduleId": "JOBS", "actions": ["EDIT"]}]),
        )
        self.roles = [super_admin_role(), self.editor]

    def test_no_actor_is_denied(self):
        self.assertFalse(has_permission(None, self.roles, ModuleId.JOBS, PermissionAction.VIEW))

    def test_unknown_role_is_denied(self):
        actor = _user("role-deleted")
        for module in ModuleId:
            for action in PermissionAction:
                self.assertFalse(has_permission(actor, self.roles, module, action))

    def test_exact_membership_only(self):
        actor = _user("role-editor")
        self.assertTrue(has_permission(actor, self.roles, ModuleId.JOBS, PermissionAction.EDIT))
        # EDIT does not imply VIEW
        self.assertFalse(has_permission(actor, self.roles, ModuleId.JOBS, PermissionAction.VIEW))
        self.assertFalse(has_permission(actor, self.roles, ModuleId.TEAM, PermissionAction.EDIT))

    def test_accepts_names(self):
        actor = _user("role-editor")
        self.assertTrue(has_permission(actor, self.roles, "JOBS", "EDIT"))
        self.assertTrue(has_permission(actor, self.roles, "jobs", "edit"))

    def test_unknown_names_are_denied_not_raised(self):
        actor = _user("role-super")
        self.assertFalse(has_permission(actor, self.roles, "PAYROLL", "VIEW"))
        self.assertFalse(has_permission(actor, self.roles, "JOBS", "APPROVE"))

    def test_super_admin_has_catalog_actions(self):
        actor = _user("role-super")
        self.assertTrue(has_permission(actor, self.roles, ModuleId.ROLES, PermissionAction.DELETE))
        self.assertTrue(has_permission(actor, self.roles, ModuleId.CANDIDATES, PermissionAction.EXPORT))
        # GUIDE only offers VIEW
        self.assertFalse(has_permission(actor, self.roles, ModuleId.GUIDE, PermissionAction.EDIT))


class TestRoleEditing(unittest.TestCase):

    def setUp(self):
        self.role = Role(id="role-x", name="X")

    def test_grant_and_revoke(self):
        granted = grant(self.role, ModuleId.JOBS, PermissionAction.VIEW)
        self.assertEqual(granted.actions_for(ModuleId.JOBS), frozenset({PermissionAction.VIEW}))
        # Original is untouched
        self.assertEqual(self.role.permissions, {})

        revoked = revoke(granted, ModuleId.JOBS, PermissionAction.VIEW)
        self.assertNotIn(ModuleId.JOBS, revoked.permissions)

    def test_toggle_twice_restores(self):
        once = toggle_permission(self.role, "TEAM", "CREATE")
        self.assertTrue(PermissionAction.CREATE in once.actions_for(ModuleId.TEAM))
        twice = toggle_permission(once, "TEAM", "CREATE")
        self.assertEqual(twice.permissions, self.role.permissions)

    def test_grant_unknown_action_raises(self):
        with self.assertRaises(InvalidRoleError):
            grant(self.role, "JOBS", "APPROVE")

    def test_build_permission_map_merges_and_drops_empty(self):
        perms = build_permission_map([
            {"moduleId": "JOBS", "actions": ["VIEW"]},
            {"module_id": "JOBS", "actions": ["EDIT"]},
            {"moduleId": "TEAM", "actions": []},
        ])
        self.assertEqual(perms, {ModuleId.JOBS: frozenset({PermissionAction.VIEW, PermissionAction.EDIT})})

    def test_role_from_dict_rejects_unknown_module(self):
        with self.assertRaises(InvalidRoleError):
            Role.from_dict({"id": "r", "name": "R", "permissions": [{"moduleId": "PAYROLL", "actions": ["VIEW"]}]})

    def test_role_from_dict_requires_id_and_name(self):
        with self.assertRaises(InvalidRoleError):
            Role.from_dict({"id": "r"})

    def test_role_dict_shape(self):
        data = recruiter_role().to_dict()
        self.assertTrue(data["isSystem"])
        jobs = next(p for p in data["permissions"] if p["moduleId"] == "JOBS")
        self.assertEqual(jobs["actions"], ["CREATE", "EDIT", "VIEW"])


class TestNavigation(unittest.TestCase):

    def test_anonymous_gets_public_links(self):
        labels = [link.label for link in navigation_for(None, [])]
        self.assertEqual(labels, ["Portal", "Login"])

    def test_links_follow_view_permission(self):
        roles = [recruiter_role()]
        labels = [link.label for link in navigation_for(_user("role-recruiter"), roles)]
        self.assertEqual(labels, ["Candidate Intelligence", "Jobs", "System Guide", "Talent Pool"])

    def test_unknown_role_sees_nothing(self):
        self.assertEqual(navigation_for(_user("role-gone"), [super_admin_role()]), [])

    def test_super_admin_sees_everything_sorted(self):
        labels = [link.label for link in navigation_for(_user("role-super"), [super_admin_role()])]
        self.assertEqual(len(labels), 8)
        self.assertEqual(labels, sorted(labels, key=str.lower))


if __name__ == '__main__':
    unittest.main()
