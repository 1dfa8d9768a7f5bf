"""
Access control - role-based permissions for the admin console.

Public API:
- has_permission: Fail-closed permission lookup
- grant / revoke / toggle_permission: Role permission editing
- navigation_for: Admin navigation visible to an actor
- AdminSession / SessionTokens: Per-request session state and JWT bearer tokens
- AccessControlService: Role, team and branch management over a store
"""

from core.access.models import AdminUser, Branch, ModuleId, ModulePermission, PermissionAction, Role
from core.access.permissions import grant, has_permission, navigation_for, revoke, toggle_permission
from core.access.session import AdminSession, SessionTokens
from core.access.service import AccessControlService

__all__ = [
    'AdminUser',
    'Branch',
    'ModuleId',
    'ModulePermission',
    'PermissionAction',
    'Role',
    'grant',
    'has_permission',
    'navigation_for',
    'revoke',
    'toggle_permission',
    'AdminSession',
    'SessionTokens',
    'AccessControlService',
]
