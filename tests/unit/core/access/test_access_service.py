"""
Tests for AccessControlService against a seeded in-memory database.
"""

import unittest

import pytest

from core.access.bootstrap import PRIMARY_ADMIN_ID, seed_defaults
from core.access.catalog import RECRUITER_ROLE_ID, SUPER_ROLE_ID
from core.access.credentials import verify_password
from core.access.models import ModuleId, PermissionAction
from core.access.service import AccessControlService
from core.config_loader import AccessConfig
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    InvalidRoleError,
    PermissionDeniedError,
    RoleNotFoundError,
    SystemRoleError,
    UserNotFoundError,
    ValidationError,
)
from database.repository import PlatformRepository
from tests import ADMIN_EMAIL, ADMIN_PASSWORD, make_test_session_factory


@pytest.mark.db
class TestAccessControlService(unittest.TestCase):

    def setUp(self):
        self.db = make_test_session_factory()()
        self.repo = PlatformRepository(self.db)
        self.service = AccessControlService(self.repo, AccessConfig())
        self.admin = self.service.session_for(PRIMARY_ADMIN_ID)

    def tearDown(self):
        self.db.rollback()
        self.db.close()

    def _recruiter_session(self):
        user = self.service.add_admin_user(
            self.admin, full_name="Rita Recruiter", email="rita@protocol.ai",
            password="Secret#1", role_id=RECRUITER_ROLE_ID,
        )
        return self.service.session_for(user.id), user

    # Authentication
    def test_authenticate(self):
        user = self.service.authenticate(ADMIN_EMAIL.upper(), ADMIN_PASSWORD)
        self.assertEqual(user.id, PRIMARY_ADMIN_ID)

    def test_authenticate_rejects_bad_credentials(self):
        with self.assertRaises(AuthenticationError):
            self.service.authenticate(ADMIN_EMAIL, "wrong")
        with self.assertRaises(AuthenticationError):
            self.service.authenticate("ghost@protocol.ai", ADMIN_PASSWORD)

    def test_session_for_unknown_user_is_anonymous(self):
        self.assertFalse(self.service.session_for("admin-missing").is_authenticated)
        self.assertFalse(self.service.session_for(None).is_authenticated)

    # Roles
    def test_add_role(self):
        role = self.service.add_role(
            self.admin, "Auditor", "Read only",
            [{"moduleId": "JOBS", "actions": ["VIEW"]}],
        )
        self.assertTrue(role.id.startswith("role-"))
        self.assertFalse(role.is_system)
        self.assertEqual(self.service.get_role(role.id).name, "Auditor")

    def test_add_role_rejects_unknown_action(self):
        with self.assertRaises(InvalidRoleError):
            self.service.add_role(self.admin, "Bad", permissions=[{"moduleId": "JOBS", "actions": ["APPROVE"]}])

    def test_add_role_requires_permission(self):
        recruiter, _ = self._recruiter_session()
        with self.assertRaises(PermissionDeniedError):
            self.service.add_role(recruiter, "Sneaky")

    def test_role_edit_applies_on_next_check(self):
        recruiter, user = self._recruiter_session()
        self.assertFalse(recruiter.has_permission(ModuleId.TEAM, PermissionAction.VIEW))

        role = self.service.get_role(RECRUITER_ROLE_ID)
        perms = [mp.to_dict() for mp in role.module_permissions()]
        perms.append({"moduleId": "TEAM", "actions": ["VIEW"]})
        updated = self.service.update_role(self.admin, RECRUITER_ROLE_ID, permissions=perms)

        self.assertTrue(updated.is_system)
        refreshed = self.service.session_for(user.id)
        self.assertTrue(refreshed.has_permission(ModuleId.TEAM, PermissionAction.VIEW))

    def test_update_unknown_role(self):
        with self.assertRaises(RoleNotFoundError):
            self.service.update_role(self.admin, "role-nope", name="X")

    def test_delete_system_role_rejected(self):
        with self.assertRaises(SystemRoleError):
            self.service.delete_role(self.admin, SUPER_ROLE_ID)
        self.assertIsNotNone(self.repo.get_role(SUPER_ROLE_ID))

    def test_deleted_role_leaves_users_without_permissions(self):
        role = self.service.add_role(self.admin, "Temp", permissions=[{"moduleId": "JOBS", "actions": ["VIEW"]}])
        user = self.service.add_admin_user(
            self.admin, full_name="Tim Temp", email="tim@protocol.ai",
            password="Secret#1", role_id=role.id,
        )
        self.service.delete_role(self.admin, role.id)

        session = self.service.session_for(user.id)
        self.assertTrue(session.is_authenticated)
        self.assertIsNone(session.role)
        self.assertEqual(session.navigation(), [])

    # Team
    def test_add_admin_user_defaults_to_actor_branch(self):
        _, user = self._recruiter_session()
        self.assertEqual(user.branch_id, "main-hub")
        self.assertTrue(verify_password("Secret#1", user.password_hash))

    def test_add_admin_user_validation(self):
        with self.assertRaises(ValidationError):
            self.service.add_admin_user(self.admin, "X", "not-an-email", "pw", RECRUITER_ROLE_ID)
        with self.assertRaises(ValidationError):
            self.service.add_admin_user(self.admin, "X", "x@protocol.ai", "pw", "role-nope")
        with self.assertRaises(ValidationError):
            self.service.add_admin_user(self.admin, " ", "x@protocol.ai", "pw", RECRUITER_ROLE_ID)

    def test_add_admin_user_rejects_overlong_password(self):
        with self.assertRaises(ValidationError):
            self.service.add_admin_user(self.admin, "Long", "long@protocol.ai", "a" * 80, RECRUITER_ROLE_ID)
        self.assertIsNone(self.repo.get_user_by_email("long@protocol.ai"))

    def test_add_admin_user_checks_phone(self):
        with self.assertRaises(ValidationError):
            self.service.add_admin_user(self.admin, "Pat", "pat@protocol.ai", "pw", RECRUITER_ROLE_ID, phone="call me")
        user = self.service.add_admin_user(self.admin, "Pat", "pat@protocol.ai", "pw", RECRUITER_ROLE_ID,
                                           phone="+1 555-0100")
        self.assertEqual(user.phone, "+1 555-0100")

    def test_add_admin_user_duplicate_email(self):
        with self.assertRaises(ConflictError):
            self.service.add_admin_user(self.admin, "Dup", ADMIN_EMAIL, "pw", RECRUITER_ROLE_ID)

    def test_cannot_delete_self(self):
        with self.assertRaises(ValidationError):
            self.service.delete_admin_user(self.admin, PRIMARY_ADMIN_ID)

    def test_delete_admin_user(self):
        _, user = self._recruiter_session()
        self.service.delete_admin_user(self.admin, user.id)
        self.assertIsNone(self.repo.get_user(user.id))
        with self.assertRaises(UserNotFoundError):
            self.service.delete_admin_user(self.admin, user.id)

    def test_recruiter_cannot_list_team(self):
        recruiter, _ = self._recruiter_session()
        with self.assertRaises(PermissionDeniedError):
            self.service.list_users(recruiter)

    # Branches
    def test_provision_branch(self):
        branch, admin, password = self.service.provision_branch(self.admin, "North Hub", "Protocol AI Global")

        self.assertEqual(admin.email, "north.hub@company.com")
        self.assertEqual(admin.role_id, RECRUITER_ROLE_ID)
        self.assertEqual(admin.branch_id, branch.id)
        self.assertEqual(len(password), 12)
        self.assertTrue(verify_password(password, self.repo.get_user(admin.id).password_hash))
        self.assertIn(branch.id, [b.id for b in self.service.list_branches()])

        # The new administrator can log in with the generated password
        self.assertEqual(self.service.authenticate(admin.email, password).id, admin.id)

    def test_provision_branch_twice_conflicts(self):
        self.service.provision_branch(self.admin, "North Hub", "Protocol AI Global")
        with self.assertRaises(ConflictError):
            self.service.provision_branch(self.admin, "North Hub", "Protocol AI Global")

    def test_recruiter_cannot_provision(self):
        recruiter, _ = self._recruiter_session()
        with self.assertRaises(PermissionDeniedError):
            self.service.provision_branch(recruiter, "South", "Co")


@pytest.mark.db
class TestSeedDefaults(unittest.TestCase):

    def test_seed_is_idempotent(self):
        factory = make_test_session_factory(seed=False)
        db = factory()
        try:
            repo = PlatformRepository(db)
            first = seed_defaults(repo, AccessConfig())
            second = seed_defaults(repo, AccessConfig())
        finally:
            db.close()

        self.assertEqual(first, {"roles": 2, "branches": 1, "users": 1})
        self.assertEqual(second, {"roles": 0, "branches": 0, "users": 0})

    def test_seed_uses_configured_admin(self):
        config = AccessConfig(admin_email="Root@HireAI.io", admin_password="Pa55!word")
        db = make_test_session_factory(access_config=config)()
        try:
            user = AccessControlService(PlatformRepository(db), config).authenticate("root@hireai.io", "Pa55!word")
        finally:
            db.close()
        self.assertEqual(user.role_id, SUPER_ROLE_ID)


if __name__ == '__main__':
    unittest.main()
