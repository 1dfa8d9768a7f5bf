#!/usr/bin/env python3
"""
Role endpoints - RBAC role management.
"""

import logging

from fastapi import APIRouter, Depends

from core.access.models import ModuleId, PermissionAction
from core.access.service import AccessControlService
from core.access.session import AdminSession
from ..dependencies import RequirePermission, get_access_service
from ..models.requests import RoleCreate, RoleUpdate
from ..models.responses import ActionResponse, RoleModel, RolesResponse
from ..utils import role_model

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/roles", tags=["roles"])


@router.get("", response_model=RolesResponse)
def list_roles(
    session: AdminSession = Depends(RequirePermission(ModuleId.ROLES, PermissionAction.VIEW)),
    access: AccessControlService = Depends(get_access_service),
):
    roles = access.list_roles()
    return RolesResponse(count=len(roles), roles=[role_model(r) for r in roles])


@router.post("", response_model=RoleModel, status_code=201)
def create_role(
    body: RoleCreate,
    session: AdminSession = Depends(RequirePermission(ModuleId.ROLES, PermissionAction.CREATE)),
    access: AccessControlService = Depends(get_access_service),
):
    """
    Create a custom role.

    Unknown module or action names are rejected with 400.
    """
    role = access.add_role(
        session,
        name=body.name,
        description=body.description,
        permissions=[p.model_dump() for p in body.permissions],
    )
    return role_model(role)


@router.put("/{role_id}", response_model=RoleModel)
def update_role(
    role_id: str,
    body: RoleUpdate,
    session: AdminSession = Depends(RequirePermission(ModuleId.ROLES, PermissionAction.EDIT)),
    access: AccessControlService = Depends(get_access_service),
):
    """
    Update a role. Takes effect on the next permission check of every
    user holding it.
    """
    role = access.update_role(
        session,
        role_id,
        name=body.name,
        description=body.description,
        permissions=[p.model_dump() for p in body.permissions] if body.permissions is not None else None,
    )
    return role_model(role)


@router.delete("/{role_id}", response_model=ActionResponse)
def delete_role(
    role_id: str,
    session: AdminSession = Depends(RequirePermission(ModuleId.ROLES, PermissionAction.DELETE)),
    access: AccessControlService = Depends(get_access_service),
):
    """Delete a custom role. System roles are rejected with 403."""
    access.delete_role(session, role_id)
    return ActionResponse(message=f"Role {role_id} deleted")
