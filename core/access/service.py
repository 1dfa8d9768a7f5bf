#!/usr/bin/env python3
"""
Access Control Service - role, team and branch management.

Wraps the pure permission functions around a persistence store. Every
mutation takes the caller's AdminSession and checks the matching module
permission first; lookups that only feed permission checks stay total.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Protocol, Tuple

from core.access.catalog import RECRUITER_ROLE_ID
from core.access.credentials import (
    MAX_PASSWORD_BYTES,
    generate_branch_credentials,
    hash_password,
    verify_password,
)
from core.access.models import AdminUser, Branch, ModuleId, PermissionAction as A, Role, build_permission_map
from core.access.session import AdminSession
from core.config_loader import AccessConfig
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    RoleNotFoundError,
    SystemRoleError,
    UserNotFoundError,
    ValidationError,
)
from core.validation import validate_email, validate_phone, validate_required

logger = logging.getLogger(__name__)


class AccessStore(Protocol):
    """Collection interface the persistence layer provides."""

    def list_roles(self) -> List[Role]: ...
    def get_role(self, role_id: str) -> Optional[Role]: ...
    def save_role(self, role: Role) -> Role: ...
    def delete_role(self, role_id: str) -> bool: ...

    def list_users(self) -> List[AdminUser]: ...
    def get_user(self, user_id: str) -> Optional[AdminUser]: ...
    def get_user_by_email(self, email: str) -> Optional[AdminUser]: ...
    def save_user(self, user: AdminUser) -> AdminUser: ...
    def delete_user(self, user_id: str) -> bool: ...

    def list_branches(self) -> List[Branch]: ...
    def save_branch(self, branch: Branch) -> Branch: ...


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:9]}"


class AccessControlService:
    """Stateless service; all state lives in the store and the session."""

    def __init__(self, store: AccessStore, config: Optional[AccessConfig] = None):
        self.store = store
        self.config = config or AccessConfig()

    # ----------------------------
    # Sessions
    # ----------------------------
    def authenticate(self, email: str, password: str) -> AdminUser:
        """
        Verify credentials.

        Raises:
            AuthenticationError: Unknown email or wrong password.
        """
        user = self.store.get_user_by_email((email or "").strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Access denied. Invalid email or password.")
        logger.info("Login: %s", user.email)
        return user

    def session_for(self, user_id: Optional[str], token: Optional[str] = None) -> AdminSession:
        """Session for ``user_id``; anonymous if the user no longer exists."""
        actor = self.store.get_user(user_id) if user_id else None
        if actor is None:
            return AdminSession.anonymous()
        return AdminSession(actor=actor, roles=self.store.list_roles(), token=token)

    # ----------------------------
    # Roles
    # ----------------------------
    def list_roles(self) -> List[Role]:
        return self.store.list_roles()

    def get_role(self, role_id: str) -> Role:
        role = self.store.get_role(role_id)
        if role is None:
            raise RoleNotFoundError(f"Role {role_id} not found")
        return role

    def add_role(
        self,
        session: AdminSession,
        name: str,
        description: str = "",
        permissions: Iterable[Any] = (),
    ) -> Role:
        session.require(ModuleId.ROLES, A.CREATE)
        if not validate_required(name or ""):
            raise ValidationError("Role name is required")

        role = Role(
            id=_new_id("role"),
            name=name.strip(),
            description=description or "",
            permissions=build_permission_map(permissions),
            is_system=False,
        )
        self.store.save_role(role)
        logger.info("Role %s (%s) created by %s", role.id, role.name, session.actor.email)
        return role

    def update_role(
        self,
        session: AdminSession,
        role_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None,
        permissions: Optional[Iterable[Any]] = None,
    ) -> Role:
        """Apply a partial update. ``is_system`` is never changed here."""
        session.require(ModuleId.ROLES, A.EDIT)
        role = self.get_role(role_id)

        if name is not None and not validate_required(name):
            raise ValidationError("Role name is required")

        updated = Role(
            id=role.id,
            name=name.strip() if name is not None else role.name,
            description=description if description is not None else role.description,
            permissions=build_permission_map(permissions) if permissions is not None else role.permissions,
            is_system=role.is_system,
        )
        self.store.save_role(updated)
        logger.info("Role %s updated by %s", role.id, session.actor.email)
        return updated

    def delete_role(self, session: AdminSession, role_id: str) -> None:
        """
        Delete a non-system role.

        Users still assigned to it keep the dangling role id and resolve
        to no permissions.

        Raises:
            RoleNotFoundError: Unknown role id.
            SystemRoleError: The role is a system role.
        """
        session.require(ModuleId.ROLES, A.DELETE)
        role = self.get_role(role_id)
        if role.is_system:
            raise SystemRoleError(f"System role '{role.name}' cannot be deleted")

        orphaned = [u.email for u in self.store.list_users() if u.role_id == role_id]
        if orphaned:
            logger.warning("Deleting role %s still assigned to %d user(s)", role_id, len(orphaned))

        self.store.delete_role(role_id)
        logger.info("Role %s deleted by %s", role_id, session.actor.email)

    # ----------------------------
    # Team
    # ----------------------------
    def list_users(self, session: AdminSession) -> List[AdminUser]:
        session.require(ModuleId.TEAM, A.VIEW)
        return self.store.list_users()

    def add_admin_user(
        self,
        session: AdminSession,
        full_name: str,
        email: str,
        password: str,
        role_id: str,
        position: str = "",
        phone: str = "",
        branch_id: Optional[str] = None,
    ) -> AdminUser:
        session.require(ModuleId.TEAM, A.CREATE)

        email = (email or "").strip().lower()
        if not validate_required(full_name or ""):
            raise ValidationError("Full name is required")
        if not validate_email(email):
            raise ValidationError(f"Invalid email address: {email!r}")
        if not validate_required(password or ""):
            raise ValidationError("Password is required")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes")
        if phone and not validate_phone(phone):
            raise ValidationError(f"Invalid phone number: {phone!r}")
        if not role_id or self.store.get_role(role_id) is None:
            raise ValidationError("Please select a valid organizational role.")
        if self.store.get_user_by_email(email) is not None:
            raise ConflictError(f"User with email {email} already exists")

        user = AdminUser(
            id=_new_id("admin"),
            full_name=full_name.strip(),
            email=email,
            position=position or "",
            phone=phone or "",
            role_id=role_id,
            branch_id=branch_id or session.active_branch_id or self.config.main_branch_id,
            password_hash=hash_password(password),
            created_at=datetime.now(timezone.utc),
        )
        self.store.save_user(user)
        logger.info("Admin user %s created by %s", user.email, session.actor.email)
        return user

    def delete_admin_user(self, session: AdminSession, user_id: str) -> None:
        session.require(ModuleId.TEAM, A.DELETE)
        if session.actor.id == user_id:
            raise ValidationError("You cannot delete your own account")
        if self.store.get_user(user_id) is None:
            raise UserNotFoundError(f"User {user_id} not found")

        self.store.delete_user(user_id)
        logger.info("Admin user %s deleted by %s", user_id, session.actor.email)

    # ----------------------------
    # Branches
    # ----------------------------
    def list_branches(self) -> List[Branch]:
        return self.store.list_branches()

    def provision_branch(
        self,
        session: AdminSession,
        name: str,
        company_name: str,
    ) -> Tuple[Branch, AdminUser, str]:
        """
        Create a branch and its administrator account.

        Returns:
            (branch, branch admin, generated plain-text password). The
            password is only ever returned here; storage keeps the hash.
        """
        session.require(ModuleId.BRANCHES, A.CREATE)
        if not validate_required(name or "") or not validate_required(company_name or ""):
            raise ValidationError("Branch name and company name are required")

        email, password = generate_branch_credentials(name, self.config.branch_email_domain)
        if self.store.get_user_by_email(email) is not None:
            raise ConflictError(f"A branch administrator {email} already exists")
        if self.store.get_role(RECRUITER_ROLE_ID) is None:
            raise RoleNotFoundError(f"Role {RECRUITER_ROLE_ID} not found")

        now = datetime.now(timezone.utc)
        branch = Branch(id=_new_id("branch"), name=name.strip(),
                        company_name=company_name.strip(), created_at=now)
        admin = AdminUser(
            id=_new_id("admin"),
            full_name=f"{branch.name} Administrator",
            email=email,
            position="Branch Manager",
            role_id=RECRUITER_ROLE_ID,
            branch_id=branch.id,
            password_hash=hash_password(password),
            created_at=now,
        )
        self.store.save_branch(branch)
        self.store.save_user(admin)
        logger.info("Branch %s provisioned with administrator %s", branch.id, email)
        return branch, admin, password
