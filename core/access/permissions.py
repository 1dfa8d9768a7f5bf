#!/usr/bin/env python3
"""
Permission resolution - pure RBAC lookups.

Key behavior:
- Fails closed: no actor, unknown role, missing module or missing action
  all resolve to False. Nothing in here raises for a lookup miss.
- Exact membership: EDIT on a module does not imply VIEW.
- Role edits return new Role objects; revoking the last action on a
  module drops the module entry instead of leaving an empty set.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from core.access.models import (
    AdminUser,
    ModuleId,
    PermissionAction,
    Role,
    find_role,
)
from core.exceptions import InvalidRoleError

logger = logging.getLogger(__name__)

ModuleLike = Union[ModuleId, str]
ActionLike = Union[PermissionAction, str]


def _coerce(module_id: ModuleLike, action: ActionLike):
    try:
        return ModuleId.parse(module_id), PermissionAction.parse(action)
    except InvalidRoleError:
        return None, None


def role_allows(role: Optional[Role], module_id: ModuleLike, action: ActionLike) -> bool:
    """True iff ``role`` grants exactly ``action`` on ``module_id``."""
    if role is None:
        return False
    module, act = _coerce(module_id, action)
    if module is None:
        return False
    return act in role.actions_for(module)


def has_permission(
    actor: Optional[AdminUser],
    roles: Iterable[Role],
    module_id: ModuleLike,
    action: ActionLike,
) -> bool:
    """
    Can ``actor`` perform ``action`` on ``module_id``?

    Args:
        actor: Current actor, or None when nobody is logged in.
        roles: Role snapshot to resolve ``actor.role_id`` against.
        module_id: Module enum member or its name.
        action: Action enum member or its name.

    Returns:
        False for any lookup miss, True only on exact action membership.
    """
    if actor is None:
        return False
    return role_allows(find_role(roles, actor.role_id), module_id, action)


# ----------------------------
# Role editing
# ----------------------------
def grant(role: Role, module_id: ModuleLike, action: ActionLike) -> Role:
    module, act = ModuleId.parse(module_id), PermissionAction.parse(action)
    perms = dict(role.permissions)
    perms[module] = perms.get(module, frozenset()) | {act}
    return role.with_permissions(perms)


def revoke(role: Role, module_id: ModuleLike, action: ActionLike) -> Role:
    module, act = ModuleId.parse(module_id), PermissionAction.parse(action)
    perms = dict(role.permissions)
    remaining = perms.get(module, frozenset()) - {act}
    if remaining:
        perms[module] = remaining
    else:
        perms.pop(module, None)
    return role.with_permissions(perms)


def toggle_permission(role: Role, module_id: ModuleLike, action: ActionLike) -> Role:
    """Flip one checkbox of the role editor matrix."""
    if role_allows(role, module_id, action):
        return revoke(role, module_id, action)
    return grant(role, module_id, action)


# ----------------------------
# Navigation surface
# ----------------------------
@dataclass(frozen=True)
class NavLink:
    to: str
    label: str
    icon: str = ""

    def to_dict(self) -> dict:
        return {"to": self.to, "label": self.label, "icon": self.icon}


# (module, path, label, icon); each entry needs VIEW on its module
ADMIN_NAVIGATION = (
    (ModuleId.JOBS, "/admin/jobs", "Jobs", "briefcase"),
    (ModuleId.CANDIDATES, "/admin/talent", "Talent Pool", "users"),
    (ModuleId.INTELLIGENCE, "/admin/intelligence", "Candidate Intelligence", "brain"),
    (ModuleId.TEAM, "/admin/team", "Team", "id-badge"),
    (ModuleId.ROLES, "/admin/roles", "Roles", "shield"),
    (ModuleId.BRANCHES, "/admin/branches", "Branches", "building"),
    (ModuleId.SETTINGS, "/admin/settings", "Settings", "cog"),
    (ModuleId.GUIDE, "/admin/guide", "System Guide", "book"),
)

PUBLIC_NAVIGATION = (
    NavLink(to="/", label="Portal", icon="globe"),
    NavLink(to="/admin/login", label="Login", icon="lock"),
)


def navigation_for(actor: Optional[AdminUser], roles: Iterable[Role]) -> List[NavLink]:
    """Navigation entries visible to ``actor``, sorted by label."""
    if actor is None:
        return list(PUBLIC_NAVIGATION)

    roles = list(roles)
    links = [
        NavLink(to=path, label=label, icon=icon)
        for module, path, label, icon in ADMIN_NAVIGATION
        if has_permission(actor, roles, module, PermissionAction.VIEW)
    ]
    return sorted(links, key=lambda link: link.label.lower())
