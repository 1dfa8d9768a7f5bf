#!/usr/bin/env python3
"""
Application endpoints - talent pool status changes.
"""

from fastapi import APIRouter, Depends

from core.access.models import ModuleId, PermissionAction
from core.access.session import AdminSession
from core.recruitment.service import RecruitmentService
from ..dependencies import RequirePermission, get_recruitment_service
from ..models.requests import ApplicationUpdate
from ..models.responses import ActionResponse, ApplicationSummary
from ..utils import application_summary

router = APIRouter(prefix="/api/applications", tags=["applications"])


@router.patch("/{application_id}", response_model=ApplicationSummary)
def update_application(
    application_id: str,
    body: ApplicationUpdate,
    session: AdminSession = Depends(RequirePermission(ModuleId.CANDIDATES, PermissionAction.EDIT)),
    recruitment: RecruitmentService = Depends(get_recruitment_service),
):
    """Change status and/or archive flag. Every save bumps the version."""
    app = recruitment.update_application(
        session,
        application_id,
        status=body.status,
        archived=body.archived,
    )
    return application_summary(app)


@router.delete("/{application_id}", response_model=ActionResponse)
def delete_application(
    application_id: str,
    session: AdminSession = Depends(RequirePermission(ModuleId.CANDIDATES, PermissionAction.DELETE)),
    recruitment: RecruitmentService = Depends(get_recruitment_service),
):
    recruitment.delete_application(session, application_id)
    return ActionResponse(message=f"Application {application_id} deleted")
