"""RBAC data structures.

Modules and actions are closed enums. Raw records coming from storage or
the API go through ``Role.from_dict`` which rejects unknown names, so the
rest of the access layer only ever sees valid members.
"""

import enum
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional

from core.exceptions import InvalidRoleError


class PermissionAction(str, enum.Enum):
    VIEW = "VIEW"
    CREATE = "CREATE"
    EDIT = "EDIT"
    DELETE = "DELETE"
    EXECUTE = "EXECUTE"
    EXPORT = "EXPORT"

    @classmethod
    def parse(cls, value: Any) -> "PermissionAction":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise InvalidRoleError(f"Unknown permission action: {value!r}")


class ModuleId(str, enum.Enum):
    JOBS = "JOBS"
    CANDIDATES = "CANDIDATES"
    CV_PARSING = "CV_PARSING"
    ASSESSMENTS = "ASSESSMENTS"
    BENCHMARK = "BENCHMARK"
    INTELLIGENCE = "INTELLIGENCE"
    TEAM = "TEAM"
    ROLES = "ROLES"
    BRANCHES = "BRANCHES"
    SETTINGS = "SETTINGS"
    GUIDE = "GUIDE"

    @classmethod
    def parse(cls, value: Any) -> "ModuleId":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise InvalidRoleError(f"Unknown module: {value!r}")


PermissionMap = Dict[ModuleId, FrozenSet[PermissionAction]]


@dataclass(frozen=True)
class ModulePermission:
    """Actions granted on one module."""
    module_id: ModuleId
    actions: FrozenSet[PermissionAction]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "moduleId": self.module_id.value,
            "actions": sorted(a.value for a in self.actions),
        }


def build_permission_map(entries: Iterable[Any]) -> PermissionMap:
    """
    Build a validated module -> actions map.

    Accepts ModulePermission objects or raw dicts shaped
    ``{"moduleId": ..., "actions": [...]}`` (``module_id`` also accepted).
    Entries for the same module are merged; modules whose action set ends
    up empty are dropped.
    """
    merged: Dict[ModuleId, set] = {}
    for entry in entries or []:
        if isinstance(entry, ModulePermission):
            module_id, actions = entry.module_id, entry.actions
        elif isinstance(entry, Mapping):
            raw_module = entry.get("moduleId", entry.get("module_id"))
            if raw_module is None:
                raise InvalidRoleError(f"Permission entry without module: {entry!r}")
            module_id = ModuleId.parse(raw_module)
            actions = [PermissionAction.parse(a) for a in entry.get("actions") or []]
        else:
            raise InvalidRoleError(f"Unsupported permission entry: {entry!r}")
        merged.setdefault(module_id, set()).update(actions)

    return {m: frozenset(acts) for m, acts in merged.items() if acts}


@dataclass(frozen=True)
class Role:
    id: str
    name: str
    description: str = ""
    permissions: PermissionMap = field(default_factory=dict)
    is_system: bool = False

    def actions_for(self, module_id: ModuleId) -> FrozenSet[PermissionAction]:
        return self.permissions.get(module_id, frozenset())

    def module_permissions(self) -> List[ModulePermission]:
        return [
            ModulePermission(module_id=m, actions=acts)
            for m, acts in sorted(self.permissions.items(), key=lambda kv: kv[0].value)
        ]

    def with_permissions(self, permissions: PermissionMap) -> "Role":
        return replace(self, permissions={m: a for m, a in permissions.items() if a})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "permissions": [mp.to_dict() for mp in self.module_permissions()],
            "isSystem": self.is_system,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Role":
        """Validate and build a Role from a stored or submitted record."""
        role_id = data.get("id")
        name = data.get("name")
        if not role_id or not name:
            raise InvalidRoleError("Role requires both id and name")
        return cls(
            id=str(role_id),
            name=str(name),
            description=str(data.get("description") or ""),
            permissions=build_permission_map(data.get("permissions") or []),
            is_system=bool(data.get("isSystem", data.get("is_system", False))),
        )


@dataclass(frozen=True)
class AdminUser:
    """An authenticated console actor."""
    id: str
    email: str
    role_id: str
    branch_id: str
    full_name: str = ""
    position: str = ""
    phone: str = ""
    password_hash: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def public_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "fullName": self.full_name,
            "email": self.email,
            "position": self.position,
            "phone": self.phone,
            "roleId": self.role_id,
            "branchId": self.branch_id,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class Branch:
    id: str
    name: str
    company_name: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def find_role(roles: Iterable[Role], role_id: Optional[str]) -> Optional[Role]:
    if not role_id:
        return None
    return next((r for r in roles if r.id == role_id), None)
