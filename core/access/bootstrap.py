"""First-run seeding of system roles, the main branch and the primary admin."""

import logging
from datetime import datetime, timezone
from typing import Dict

from core.access.catalog import SUPER_ROLE_ID, system_roles
from core.access.credentials import hash_password
from core.access.models import AdminUser, Branch
from core.access.service import AccessStore
from core.config_loader import AccessConfig

logger = logging.getLogger(__name__)

PRIMARY_ADMIN_ID = "admin-primary"


def seed_defaults(store: AccessStore, config: AccessConfig) -> Dict[str, int]:
    """
    Seed whatever is missing. Safe to call on every start.

    - system roles are added by id when absent
    - the main branch is added when there are no branches
    - the primary administrator is added when there are no users

    Returns:
        Count of records created per collection.
    """
    created = {"roles": 0, "branches": 0, "users": 0}

    existing_roles = {r.id for r in store.list_roles()}
    for role in system_roles():
        if role.id not in existing_roles:
            store.save_role(role)
            created["roles"] += 1

    if not store.list_branches():
        store.save_branch(Branch(
            id=config.main_branch_id,
            name=config.main_branch_name,
            company_name=config.company_name,
            created_at=datetime.now(timezone.utc),
        ))
        created["branches"] += 1

    if not store.list_users():
        store.save_user(AdminUser(
            id=PRIMARY_ADMIN_ID,
            full_name=config.admin_full_name,
            email=config.admin_email.strip().lower(),
            position="Super Administrator",
            role_id=SUPER_ROLE_ID,
            branch_id=config.main_branch_id,
            password_hash=hash_password(config.admin_password),
            created_at=datetime.now(timezone.utc),
        ))
        created["users"] += 1

    if any(created.values()):
        logger.info("Seeded defaults: %s", created)
    return created
