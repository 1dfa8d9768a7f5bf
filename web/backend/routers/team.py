#!/usr/bin/env python3
"""
Team endpoints - admin accounts and role assignment.
"""

from fastapi import APIRouter, Depends

from core.access.models import ModuleId, PermissionAction
from core.access.service import AccessControlService
from core.access.session import AdminSession
from ..dependencies import RequirePermission, get_access_service
from ..models.requests import AdminUserCreate
from ..models.responses import ActionResponse, AdminUserModel, TeamResponse
from ..utils import user_model

router = APIRouter(prefix="/api/team", tags=["team"])


@router.get("", response_model=TeamResponse)
def list_team(
    session: AdminSession = Depends(RequirePermission(ModuleId.TEAM, PermissionAction.VIEW)),
    access: AccessControlService = Depends(get_access_service),
):
    users = access.list_users(session)
    return TeamResponse(count=len(users), users=[user_model(u) for u in users])


@router.post("", response_model=AdminUserModel, status_code=201)
def create_admin_user(
    body: AdminUserCreate,
    session: AdminSession = Depends(RequirePermission(ModuleId.TEAM, PermissionAction.CREATE)),
    access: AccessControlService = Depends(get_access_service),
):
    """Create an admin account in the actor's branch unless branchId is given."""
    user = access.add_admin_user(
        session,
        full_name=body.fullName,
        email=body.email,
        password=body.password,
        role_id=body.roleId,
        position=body.position,
        phone=body.phone,
        branch_id=body.branchId,
    )
    return user_model(user)


@router.delete("/{user_id}", response_model=ActionResponse)
def delete_admin_user(
    user_id: str,
    session: AdminSession = Depends(RequirePermission(ModuleId.TEAM, PermissionAction.DELETE)),
    access: AccessControlService = Depends(get_access_service),
):
    """Delete an admin account. Deleting yourself is rejected with 400."""
    access.delete_admin_user(session, user_id)
    return ActionResponse(message=f"User {user_id} deleted")
