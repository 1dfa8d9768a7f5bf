"""Module catalog and the built-in system roles."""

from typing import Dict, List, Tuple

from core.access.models import ModuleId, PermissionAction as A, Role, build_permission_map

SUPER_ROLE_ID = "role-super"
RECRUITER_ROLE_ID = "role-recruiter"

# Module -> (display name, actions the role editor offers)
SYSTEM_MODULES: Dict[ModuleId, Tuple[str, Tuple[A, ...]]] = {
    ModuleId.JOBS: ("Jobs Management", (A.VIEW, A.CREATE, A.EDIT, A.DELETE)),
    ModuleId.CANDIDATES: ("Talent Network", (A.VIEW, A.EDIT, A.DELETE, A.EXECUTE, A.EXPORT)),
    ModuleId.CV_PARSING: ("CV Intelligence", (A.VIEW, A.EXECUTE)),
    ModuleId.ASSESSMENTS: ("Technical Exams", (A.VIEW, A.EXECUTE)),
    ModuleId.BENCHMARK: ("Salary Oracle", (A.VIEW, A.EXECUTE)),
    ModuleId.INTELLIGENCE: ("Candidate Analytics", (A.VIEW, A.EXECUTE)),
    ModuleId.TEAM: ("Admin Accounts & Role Assignment", (A.VIEW, A.CREATE, A.EDIT, A.DELETE)),
    ModuleId.ROLES: ("RBAC Protocols", (A.VIEW, A.CREATE, A.EDIT, A.DELETE)),
    ModuleId.BRANCHES: ("Branch Infrastructure", (A.VIEW, A.CREATE, A.EDIT, A.DELETE)),
    ModuleId.SETTINGS: ("System Protocols", (A.VIEW, A.EDIT)),
    ModuleId.GUIDE: ("System Documentation", (A.VIEW,)),
}


def module_catalog() -> List[dict]:
    return [
        {"id": m.value, "name": name, "actions": [a.value for a in actions]}
        for m, (name, actions) in SYSTEM_MODULES.items()
    ]


def super_admin_role() -> Role:
    return Role(
        id=SUPER_ROLE_ID,
        name="Super Admin",
        description="Global system override and governance.",
        permissions={m: frozenset(actions) for m, (_, actions) in SYSTEM_MODULES.items()},
        is_system=True,
    )


def recruiter_role() -> Role:
    """Default role handed to provisioned branch administrators."""
    return Role(
        id=RECRUITER_ROLE_ID,
        name="Recruiter",
        description="Branch-level hiring operations.",
        permissions=build_permission_map([
            {"moduleId": "JOBS", "actions": ["VIEW", "CREATE", "EDIT"]},
            {"moduleId": "CANDIDATES", "actions": ["VIEW", "EDIT", "EXECUTE"]},
            {"moduleId": "CV_PARSING", "actions": ["VIEW", "EXECUTE"]},
            {"moduleId": "ASSESSMENTS", "actions": ["VIEW", "EXECUTE"]},
            {"moduleId": "INTELLIGENCE", "actions": ["VIEW", "EXECUTE"]},
            {"moduleId": "GUIDE", "actions": ["VIEW"]},
        ]),
        is_system=True,
    )


def system_roles() -> List[Role]:
    return [super_admin_role(), recruiter_role()]
