#!/usr/bin/env python3
"""
Navigation endpoints - what the current actor can see.
"""

from typing import List

from fastapi import APIRouter, Depends

from core.access.catalog import module_catalog
from core.access.models import ModuleId, PermissionAction
from core.access.session import AdminSession
from ..dependencies import RequirePermission, get_admin_session
from ..models.responses import NavLinkModel

router = APIRouter(prefix="/api", tags=["navigation"])


@router.get("/navigation", response_model=List[NavLinkModel])
def get_navigation(session: AdminSession = Depends(get_admin_session)):
    """Navigation entries for the current actor, sorted by label."""
    return [NavLinkModel(**link.to_dict()) for link in session.navigation()]


@router.get("/modules")
def get_modules(session: AdminSession = Depends(RequirePermission(ModuleId.ROLES, PermissionAction.VIEW))):
    """Module catalog with the actions the role editor offers."""
    return {"success": True, "modules": module_catalog()}
