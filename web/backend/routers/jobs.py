#!/usr/bin/env python3
"""
Job endpoints - requisitions, application intake, applicants and the
candidate intelligence ranking.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from core.access.models import ModuleId, PermissionAction
from core.access.session import AdminSession
from core.exceptions import JobNotFoundException
from core.ranking.dto import CandidateInfo, ExtractedCVData
from core.ranking.models import RankingWeights
from core.ranking.service import RankingService
from core.recruitment.service import RecruitmentService
from database.repositories.recruitment import matching_rules_from_json
from database.repository import PlatformRepository
from ..config import get_config
from ..dependencies import RequirePermission, get_ranking_service, get_recruitment_service, get_repo
from ..models.requests import ApplicationSubmit, JobCreate, JobUpdate
from ..models.responses import (
    ActionResponse,
    ApplicationSummary,
    ApplicationsResponse,
    JobSummary,
    JobsResponse,
    RankingResponse,
)
from ..services.intelligence_service import IntelligenceService
from ..utils import application_summary, job_summary
from .auth import limiter

logger = logging.getLogger(__name__)

APPLY_RATE_LIMIT = get_config().web.apply_rate_limit

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=JobsResponse)
def list_jobs(
    include_archived: bool = Query(default=False, description="Include archived jobs"),
    all_branches: bool = Query(default=False, description="Ignore the actor's branch"),
    session: AdminSession = Depends(RequirePermission(ModuleId.JOBS, PermissionAction.VIEW)),
    repo: PlatformRepository = Depends(get_repo),
):
    """List jobs of the actor's branch (or every branch with all_branches)."""
    branch_id = None if all_branches else session.active_branch_id
    jobs = repo.list_jobs(branch_id=branch_id, include_archived=include_archived)
    return JobsResponse(count=len(jobs), jobs=[job_summary(j) for j in jobs])


@router.get("/{job_id}/applications", response_model=ApplicationsResponse)
def list_applications(
    job_id: str,
    include_archived: bool = Query(default=False, description="Include archived applications"),
    session: AdminSession = Depends(RequirePermission(ModuleId.CANDIDATES, PermissionAction.VIEW)),
    repo: PlatformRepository = Depends(get_repo),
):
    if repo.get_job(job_id) is None:
        raise JobNotFoundException(f"Job {job_id} not found")
    apps = [a for a in repo.list_applications(job_id=job_id) if include_archived or not a.archived]
    return ApplicationsResponse(count=len(apps), applications=[application_summary(a) for a in apps])


@router.get("/{job_id}/ranking", response_model=RankingResponse)
def get_ranking(
    job_id: str,
    skills: Optional[float] = Query(default=None, ge=0, description="Skills weight"),
    salary: Optional[float] = Query(default=None, ge=0, description="Salary weight"),
    experience: Optional[float] = Query(default=None, ge=0, description="Experience weight"),
    availability: Optional[float] = Query(default=None, ge=0, description="Availability weight"),
    session: AdminSession = Depends(RequirePermission(ModuleId.INTELLIGENCE, PermissionAction.VIEW)),
    ranking: RankingService = Depends(get_ranking_service),
):
    """
    Rank the job's active applicants.

    Weights default to the configured slider positions; any weight that
    is passed replaces only that slider.
    """
    defaults = ranking.default_weights()
    weights = RankingWeights(
        skills=defaults.skills if skills is None else skills,
        salary=defaults.salary if salary is None else salary,
        experience=defaults.experience if experience is None else experience,
        availability=defaults.availability if availability is None else availability,
    )
    return IntelligenceService(ranking).get_ranking(job_id, weights)


# JobUpdate field -> JobDTO field
JOB_UPDATE_FIELDS = {
    "title": "title",
    "department": "department",
    "location": "location",
    "minYearsExperience": "min_years_experience",
    "requiredSkills": "required_skills",
    "matchingRules": "matching_rules",
    "salaryBudget": "salary_budget",
    "status": "status",
    "archived": "archived",
}


@router.post("", response_model=JobSummary, status_code=201)
def create_job(
    body: JobCreate,
    session: AdminSession = Depends(RequirePermission(ModuleId.JOBS, PermissionAction.CREATE)),
    recruitment: RecruitmentService = Depends(get_recruitment_service),
):
    """Open a requisition in the actor's branch."""
    job = recruitment.create_job(
        session,
        title=body.title,
        department=body.department,
        location=body.location,
        min_years_experience=body.minYearsExperience,
        required_skills=body.requiredSkills,
        matching_rules=matching_rules_from_json(body.matchingRules.model_dump()) if body.matchingRules else None,
        salary_budget=body.salaryBudget,
        status=body.status,
    )
    return job_summary(job)


@router.patch("/{job_id}", response_model=JobSummary)
def update_job(
    job_id: str,
    body: JobUpdate,
    session: AdminSession = Depends(RequirePermission(ModuleId.JOBS, PermissionAction.EDIT)),
    recruitment: RecruitmentService = Depends(get_recruitment_service),
):
    """
    Edit, close or archive a job.

    Only the fields present in the body change; an explicit null
    salaryBudget falls back to the configured budget heuristic.
    """
    changes = {}
    for key, value in body.model_dump(exclude_unset=True).items():
        if value is None and key != "salaryBudget":
            continue
        if key == "matchingRules":
            value = matching_rules_from_json(value)
        changes[JOB_UPDATE_FIELDS[key]] = value
    return job_summary(recruitment.update_job(session, job_id, **changes))


@router.delete("/{job_id}", response_model=ActionResponse)
def delete_job(
    job_id: str,
    session: AdminSession = Depends(RequirePermission(ModuleId.JOBS, PermissionAction.DELETE)),
    recruitment: RecruitmentService = Depends(get_recruitment_service),
):
    """Permanently delete a job and its applications."""
    recruitment.delete_job(session, job_id)
    return ActionResponse(message=f"Job {job_id} deleted")


@router.post("/{job_id}/applications", response_model=ApplicationSummary, status_code=201)
@limiter.limit(APPLY_RATE_LIMIT)
def submit_application(
    request: Request,
    job_id: str,
    body: ApplicationSubmit,
    recruitment: RecruitmentService = Depends(get_recruitment_service),
):
    """
    Public application intake; no login required.

    The screening outcome (APPROVED_FOR_TEST or REJECTED) follows the
    job's matching threshold. Closed or archived jobs answer 400.
    """
    app = recruitment.submit_application(
        job_id,
        candidate=CandidateInfo(
            full_name=body.fullName,
            email=body.email,
            phone=body.phone,
            current_salary=body.currentSalary,
            expected_salary=body.expectedSalary,
            notice_period=body.noticePeriod,
            source=body.source,
        ),
        extracted=ExtractedCVData(
            skills=body.skills,
            experience_years=body.experienceYears,
            education=body.education,
            summary=body.summary,
            current_title=body.currentTitle,
        ),
        match_score=body.matchScore,
        strengths=body.strengths,
        skill_gaps=body.skillGaps,
    )
    return application_summary(app)
