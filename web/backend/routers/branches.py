#!/usr/bin/env python3
"""
Branch endpoints - branch infrastructure provisioning.
"""

from fastapi import APIRouter, Depends

from core.access.models import ModuleId, PermissionAction
from core.access.service import AccessControlService
from core.access.session import AdminSession
from ..dependencies import RequirePermission, get_access_service
from ..models.requests import BranchCreate
from ..models.responses import BranchesResponse, ProvisionedBranchResponse
from ..utils import branch_model, user_model

router = APIRouter(prefix="/api/branches", tags=["branches"])


@router.get("", response_model=BranchesResponse)
def list_branches(
    session: AdminSession = Depends(RequirePermission(ModuleId.BRANCHES, PermissionAction.VIEW)),
    access: AccessControlService = Depends(get_access_service),
):
    branches = access.list_branches()
    return BranchesResponse(count=len(branches), branches=[branch_model(b) for b in branches])


@router.post("", response_model=ProvisionedBranchResponse, status_code=201)
def provision_branch(
    body: BranchCreate,
    session: AdminSession = Depends(RequirePermission(ModuleId.BRANCHES, PermissionAction.CREATE)),
    access: AccessControlService = Depends(get_access_service),
):
    """
    Create a branch and its administrator.

    The response carries the generated credentials; they are not
    retrievable afterwards.
    """
    branch, admin, password = access.provision_branch(session, body.name, body.companyName)
    return ProvisionedBranchResponse(
        branch=branch_model(branch),
        admin=user_model(admin),
        email=admin.email,
        password=password,
    )
