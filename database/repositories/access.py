import logging
from typing import List, Optional

from sqlalchemy import select

from core.access import models as domain
from core.exceptions import InvalidRoleError
from database.models import AdminUser, Branch, Role
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class RoleRepository(BaseRepository):
    """
    Roles are validated on the way out. A stored role with unknown
    modules or actions is logged and treated as missing, so permission
    checks against it fail closed.
    """

    @staticmethod
    def to_domain(row: Role) -> Optional[domain.Role]:
        try:
            return domain.Role.from_dict({
                "id": row.id,
                "name": row.name,
                "description": row.description,
                "permissions": row.permissions or [],
                "isSystem": row.is_system,
            })
        except InvalidRoleError as e:
            logger.error("Skipping invalid stored role %s: %s", row.id, e)
            return None

    def list_roles(self) -> List[domain.Role]:
        rows = self.db.execute(select(Role).order_by(Role.created_at, Role.id)).scalars().all()
        return [r for r in (self.to_domain(row) for row in rows) if r is not None]

    def get_role(self, role_id: str) -> Optional[domain.Role]:
        row = self.db.get(Role, role_id)
        return self.to_domain(row) if row is not None else None

    def save_role(self, role: domain.Role) -> domain.Role:
        self._upsert(Role(
            id=role.id,
            name=role.name,
            description=role.description,
            permissions=[mp.to_dict() for mp in role.module_permissions()],
            is_system=role.is_system,
        ))
        return role

    def delete_role(self, role_id: str) -> bool:
        return self._delete_by_id(Role, role_id)


class AdminUserRepository(BaseRepository):
    @staticmethod
    def to_domain(row: AdminUser) -> domain.AdminUser:
        return domain.AdminUser(
            id=row.id,
            full_name=row.full_name or "",
            email=row.email,
            position=row.position or "",
            phone=row.phone or "",
            password_hash=row.password_hash,
            role_id=row.role_id,
            branch_id=row.branch_id or "",
            created_at=row.created_at,
        )

    def list_users(self) -> List[domain.AdminUser]:
        rows = self.db.execute(select(AdminUser).order_by(AdminUser.created_at, AdminUser.id)).scalars().all()
        return [self.to_domain(row) for row in rows]

    def get_user(self, user_id: str) -> Optional[domain.AdminUser]:
        row = self.db.get(AdminUser, user_id)
        return self.to_domain(row) if row is not None else None

    def get_user_by_email(self, email: str) -> Optional[domain.AdminUser]:
        stmt = select(AdminUser).where(AdminUser.email == (email or "").strip().lower())
        row = self.db.execute(stmt).scalar_one_or_none()
        return self.to_domain(row) if row is not None else None

    def save_user(self, user: domain.AdminUser) -> domain.AdminUser:
        self._upsert(AdminUser(
            id=user.id,
            full_name=user.full_name,
            email=user.email.strip().lower(),
            position=user.position,
            phone=user.phone,
            password_hash=user.password_hash,
            role_id=user.role_id,
            branch_id=user.branch_id or None,
            created_at=user.created_at,
        ))
        return user

    def delete_user(self, user_id: str) -> bool:
        return self._delete_by_id(AdminUser, user_id)


class BranchRepository(BaseRepository):
    def list_branches(self) -> List[domain.Branch]:
        rows = self.db.execute(select(Branch).order_by(Branch.created_at, Branch.id)).scalars().all()
        return [
            domain.Branch(id=r.id, name=r.name, company_name=r.company_name, created_at=r.created_at)
            for r in rows
        ]

    def save_branch(self, branch: domain.Branch) -> domain.Branch:
        self._upsert(Branch(
            id=branch.id,
            name=branch.name,
            company_name=branch.company_name,
            created_at=branch.created_at,
        ))
        return branch
