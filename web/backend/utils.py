#!/usr/bin/env python3
"""
Conversion helpers from domain objects to API response models.
"""

from typing import Optional, Any
from datetime import datetime

from core.access.models import AdminUser, Branch, Role
from core.ranking.dto import ApplicationDTO, JobDTO
from .models.responses import (
    AdminUserModel,
    ApplicationSummary,
    BranchModel,
    JobSummary,
    ModulePermissionModel,
    RoleModel,
)


def safe_str(value: Optional[Any], default: str = "") -> str:
    """
    Safely convert value to string.

    Args:
        value: Value to convert.
        default: Default value if value is None.

    Returns:
        String value.
    """
    if value is None:
        return default
    return str(value)


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.

    Args:
        dt: Datetime object.

    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def role_model(role: Role) -> RoleModel:
    return RoleModel(
        id=role.id,
        name=role.name,
        description=role.description,
        permissions=[ModulePermissionModel(**mp.to_dict()) for mp in role.module_permissions()],
        isSystem=role.is_system,
    )


def user_model(user: AdminUser) -> AdminUserModel:
    # Never exposes password_hash
    return AdminUserModel(
        id=user.id,
        fullName=user.full_name,
        email=user.email,
        position=user.position,
        phone=user.phone,
        roleId=user.role_id,
        branchId=safe_str(user.branch_id),
        createdAt=safe_datetime_iso(user.created_at),
    )


def branch_model(branch: Branch) -> BranchModel:
    return BranchModel(
        id=branch.id,
        name=branch.name,
        companyName=branch.company_name,
        createdAt=safe_datetime_iso(branch.created_at),
    )


def job_summary(job: JobDTO) -> JobSummary:
    return JobSummary(
        id=job.id,
        title=job.title,
        branchId=job.branch_id,
        department=job.department,
        location=job.location,
        status=job.status,
        minYearsExperience=job.min_years_experience,
        threshold=job.matching_rules.threshold,
        salaryBudget=job.salary_budget,
        requiredSkills=list(job.required_skills),
        archived=job.archived,
    )


def application_summary(app: ApplicationDTO) -> ApplicationSummary:
    return ApplicationSummary(
        id=app.id,
        jobId=app.job_id,
        fullName=app.candidate_info.full_name,
        email=app.candidate_info.email,
        matchScore=app.match_score,
        status=app.status,
        archived=app.archived,
        expectedSalary=app.candidate_info.expected_salary,
        noticePeriod=app.candidate_info.notice_period,
        version=app.version,
    )
