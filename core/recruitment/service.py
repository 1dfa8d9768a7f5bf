#!/usr/bin/env python3
"""
Recruitment Service - job requisitions and candidate applications.

Admin operations take the caller's AdminSession and check the JOBS or
CANDIDATES permission first. Application intake is public: candidates
apply to open jobs without an account, and the screening outcome is
derived from the job's matching threshold.
"""

import logging
import math
import uuid
from dataclasses import replace
from typing import Any, Iterable, Optional, Protocol

from core.access.models import ModuleId, PermissionAction as A
from core.access.session import AdminSession
from core.config_loader import AccessConfig
from core.exceptions import ApplicationNotFoundError, JobNotFoundException, ValidationError
from core.ranking.dto import (
    ApplicationDTO,
    CandidateInfo,
    ExtractedCVData,
    JobDTO,
    MatchingRules,
)
from core.recruitment.models import ApplicationStatus, JobStatus
from core.validation import validate_email, validate_phone, validate_required, validate_salary

logger = logging.getLogger(__name__)

# Fields update_job accepts
JOB_FIELDS = frozenset({
    "title",
    "department",
    "location",
    "status",
    "min_years_experience",
    "required_skills",
    "matching_rules",
    "salary_budget",
    "archived",
})


class RecruitmentStore(Protocol):
    def get_job(self, job_id: str) -> Optional[JobDTO]: ...
    def save_job(self, job: JobDTO) -> JobDTO: ...
    def delete_job(self, job_id: str) -> bool: ...
    def get_application(self, application_id: str) -> Optional[ApplicationDTO]: ...
    def save_application(self, app: ApplicationDTO) -> ApplicationDTO: ...
    def delete_application(self, application_id: str) -> bool: ...


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:9]}"


def _validate_job(job: JobDTO) -> JobDTO:
    if not validate_required(job.title or ""):
        raise ValidationError("Job title is required")
    if not math.isfinite(job.min_years_experience) or job.min_years_experience < 0:
        raise ValidationError("Minimum years of experience must be a non-negative number")
    if job.salary_budget is not None and (not math.isfinite(job.salary_budget) or job.salary_budget <= 0):
        raise ValidationError("Salary budget must be a positive number")
    threshold = job.matching_rules.threshold
    if not 0 <= threshold <= 100:
        raise ValidationError("Matching threshold must be between 0 and 100")
    return replace(
        job,
        title=job.title.strip(),
        status=JobStatus.parse(job.status).value,
        required_skills=[s.strip() for s in job.required_skills if s and s.strip()],
    )


class RecruitmentService:
    """Stateless service over a RecruitmentStore."""

    def __init__(self, store: RecruitmentStore, config: Optional[AccessConfig] = None):
        self.store = store
        self.config = config or AccessConfig()

    def get_job(self, job_id: str) -> JobDTO:
        job = self.store.get_job(job_id)
        if job is None:
            raise JobNotFoundException(f"Job {job_id} not found")
        return job

    def get_application(self, application_id: str) -> ApplicationDTO:
        app = self.store.get_application(application_id)
        if app is None:
            raise ApplicationNotFoundError(f"Application {application_id} not found")
        return app

    # ----------------------------
    # Jobs
    # ----------------------------
    def create_job(
        self,
        session: AdminSession,
        title: str,
        department: str = "",
        location: str = "",
        min_years_experience: float = 0.0,
        required_skills: Iterable[str] = (),
        matching_rules: Optional[MatchingRules] = None,
        salary_budget: Optional[float] = None,
        status: str = JobStatus.OPEN.value,
    ) -> JobDTO:
        """Open a requisition in the actor's branch."""
        session.require(ModuleId.JOBS, A.CREATE)
        job = _validate_job(JobDTO(
            id=_new_id("job"),
            title=title or "",
            branch_id=session.active_branch_id or self.config.main_branch_id,
            department=department or "",
            location=location or "",
            status=status,
            min_years_experience=float(min_years_experience or 0),
            required_skills=list(required_skills),
            matching_rules=matching_rules or MatchingRules(),
            salary_budget=salary_budget,
        ))
        self.store.save_job(job)
        logger.info("Job %s (%s) created by %s", job.id, job.title, session.actor.email)
        return job

    def update_job(self, session: AdminSession, job_id: str, **changes: Any) -> JobDTO:
        """
        Apply a partial update; archiving and closing go through here too.

        Raises:
            JobNotFoundException: Unknown job id.
            ValidationError: Unknown field or invalid value.
        """
        session.require(ModuleId.JOBS, A.EDIT)
        unknown = set(changes) - JOB_FIELDS
        if unknown:
            raise ValidationError(f"Unknown job field(s): {', '.join(sorted(unknown))}")

        job = _validate_job(replace(self.get_job(job_id), **changes))
        self.store.save_job(job)
        logger.info("Job %s updated by %s (%s)", job_id, session.actor.email, ", ".join(sorted(changes)))
        return job

    def delete_job(self, session: AdminSession, job_id: str) -> None:
        """Delete a job and every application to it."""
        session.require(ModuleId.JOBS, A.DELETE)
        if not self.store.delete_job(job_id):
            raise JobNotFoundException(f"Job {job_id} not found")
        logger.info("Job %s deleted by %s", job_id, session.actor.email)

    # ----------------------------
    # Applications
    # ----------------------------
    def submit_application(
        self,
        job_id: str,
        candidate: CandidateInfo,
        extracted: Optional[ExtractedCVData] = None,
        match_score: float = 0.0,
        strengths: Iterable[str] = (),
        skill_gaps: Iterable[str] = (),
    ) -> ApplicationDTO:
        """
        Public intake for an open job.

        ``match_score`` comes from the CV screening step; scores at or
        above the job's threshold are approved for the technical test,
        the rest are rejected.

        Raises:
            JobNotFoundException: Unknown job id.
            ValidationError: Closed or archived job, or invalid candidate details.
        """
        job = self.get_job(job_id)
        if job.archived or job.status != JobStatus.OPEN.value:
            raise ValidationError(f"Job {job_id} is not accepting applications")

        if not validate_required(candidate.full_name):
            raise ValidationError("Full name is required")
        if not validate_email(candidate.email):
            raise ValidationError("Valid email required")
        if not validate_phone(candidate.phone):
            raise ValidationError("Valid phone required")
        for label, value in (("current", candidate.current_salary), ("expected", candidate.expected_salary)):
            if value and not validate_salary(value):
                raise ValidationError(f"Invalid {label} salary: {value!r}")
        if not math.isfinite(match_score) or not 0 <= match_score <= 100:
            raise ValidationError("Match score must be between 0 and 100")

        if match_score >= job.matching_rules.threshold:
            status = ApplicationStatus.APPROVED_FOR_TEST
        else:
            status = ApplicationStatus.REJECTED

        app = ApplicationDTO(
            id=_new_id("app"),
            job_id=job.id,
            branch_id=job.branch_id,
            candidate_info=replace(candidate, full_name=candidate.full_name.strip(),
                                   email=candidate.email.strip().lower()),
            extracted_data=extracted or ExtractedCVData(),
            match_score=float(match_score),
            strengths=list(strengths),
            skill_gaps=list(skill_gaps),
            status=status.value,
        )
        self.store.save_application(app)
        logger.info("Application %s to job %s screened as %s", app.id, job.id, status.value)
        return app

    def update_application(
        self,
        session: AdminSession,
        application_id: str,
        status: Optional[str] = None,
        archived: Optional[bool] = None,
    ) -> ApplicationDTO:
        """Move an application through the pipeline or (un)archive it. Bumps the version."""
        session.require(ModuleId.CANDIDATES, A.EDIT)
        app = self.get_application(application_id)

        changes = {}
        if status is not None:
            changes["status"] = ApplicationStatus.parse(status).value
        if archived is not None:
            changes["archived"] = bool(archived)

        updated = self.store.save_application(replace(app, **changes))
        logger.info("Application %s updated by %s (version %d)", application_id,
                    session.actor.email, updated.version)
        return updated

    def delete_application(self, session: AdminSession, application_id: str) -> None:
        session.require(ModuleId.CANDIDATES, A.DELETE)
        if not self.store.delete_application(application_id):
            raise ApplicationNotFoundError(f"Application {application_id} not found")
        logger.info("Application %s deleted by %s", application_id, session.actor.email)
