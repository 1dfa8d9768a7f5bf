import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import select

from core.ranking.dto import (
    ApplicationDTO,
    CandidateInfo,
    ExtractedCVData,
    JobDTO,
    MatchingRules,
)
from database.models import Application, JobPost
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def _num(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def matching_rules_from_json(data: Optional[Dict[str, Any]]) -> MatchingRules:
    data = data or {}
    defaults = MatchingRules()
    return MatchingRules(
        skill_weight=_num(data.get("skillWeight"), defaults.skill_weight),
        experience_weight=_num(data.get("experienceWeight"), defaults.experience_weight),
        education_weight=_num(data.get("educationWeight"), defaults.education_weight),
        keywords_weight=_num(data.get("keywordsWeight"), defaults.keywords_weight),
        threshold=_num(data.get("threshold"), defaults.threshold),
    )


def matching_rules_to_json(rules: MatchingRules) -> Dict[str, float]:
    return {
        "skillWeight": rules.skill_weight,
        "experienceWeight": rules.experience_weight,
        "educationWeight": rules.education_weight,
        "keywordsWeight": rules.keywords_weight,
        "threshold": rules.threshold,
    }


class JobPostRepository(BaseRepository):
    @staticmethod
    def to_dto(row: JobPost) -> JobDTO:
        return JobDTO(
            id=row.id,
            title=row.title,
            branch_id=row.branch_id or "",
            department=row.department or "",
            location=row.location or "",
            status=row.status,
            min_years_experience=_num(row.min_years_experience),
            required_skills=list(row.required_skills or []),
            matching_rules=matching_rules_from_json(row.matching_rules),
            salary_budget=row.salary_budget,
            archived=bool(row.archived),
            created_at=row.created_at,
        )

    def list_jobs(self, branch_id: Optional[str] = None, include_archived: bool = False) -> List[JobDTO]:
        stmt = select(JobPost).order_by(JobPost.created_at.desc(), JobPost.id)
        if branch_id:
            stmt = stmt.where(JobPost.branch_id == branch_id)
        if not include_archived:
            stmt = stmt.where(JobPost.archived.is_(False))
        return [self.to_dto(row) for row in self.db.execute(stmt).scalars().all()]

    def get_job(self, job_id: str) -> Optional[JobDTO]:
        row = self.db.get(JobPost, job_id)
        return self.to_dto(row) if row is not None else None

    def save_job(self, job: JobDTO) -> JobDTO:
        row = JobPost(
            id=job.id,
            branch_id=job.branch_id or None,
            title=job.title,
            department=job.department,
            location=job.location,
            status=job.status,
            required_skills=list(job.required_skills),
            min_years_experience=job.min_years_experience,
            matching_rules=matching_rules_to_json(job.matching_rules),
            salary_budget=job.salary_budget,
            archived=job.archived,
        )
        if job.created_at is not None:
            row.created_at = job.created_at
        self._upsert(row)
        return job

    def delete_job(self, job_id: str) -> bool:
        """Applications to the job go with it."""
        return self._delete_by_id(JobPost, job_id)


class ApplicationRepository(BaseRepository):
    @staticmethod
    def to_dto(row: Application) -> ApplicationDTO:
        info = row.candidate_info or {}
        extracted = row.extracted_data or {}
        return ApplicationDTO(
            id=row.id,
            job_id=row.job_id,
            branch_id=row.branch_id or "",
            candidate_info=CandidateInfo(
                full_name=info.get("fullName", ""),
                email=info.get("email", ""),
                phone=info.get("phone", ""),
                current_salary=str(info.get("currentSalary", "") or ""),
                expected_salary=str(info.get("expectedSalary", "") or ""),
                notice_period=str(info.get("noticePeriod", "") or ""),
                source=info.get("source"),
            ),
            extracted_data=ExtractedCVData(
                skills=list(extracted.get("skills") or []),
                experience_years=_num(extracted.get("experienceYears")),
                education=extracted.get("education", "") or "",
                summary=extracted.get("summary", "") or "",
                current_title=extracted.get("currentTitle", "") or "",
            ),
            match_score=_num(row.match_score),
            strengths=list(row.strengths or []),
            skill_gaps=list(row.skill_gaps or []),
            status=row.status,
            archived=bool(row.archived),
            version=row.version or 1,
            applied_at=row.applied_at,
        )

    def list_applications(self, job_id: Optional[str] = None) -> List[ApplicationDTO]:
        """Applications in submission order (the ranking tie-break order)."""
        stmt = select(Application).order_by(Application.applied_at, Application.id)
        if job_id:
            stmt = stmt.where(Application.job_id == job_id)
        return [self.to_dto(row) for row in self.db.execute(stmt).scalars().all()]

    def get_application(self, application_id: str) -> Optional[ApplicationDTO]:
        row = self.db.get(Application, application_id)
        return self.to_dto(row) if row is not None else None

    def save_application(self, app: ApplicationDTO) -> ApplicationDTO:
        """Save a whole record; an existing record gets its version bumped."""
        existing = self.db.get(Application, app.id)
        version = (existing.version or 1) + 1 if existing is not None else (app.version or 1)
        info = app.candidate_info
        data = app.extracted_data
        row = Application(
            id=app.id,
            job_id=app.job_id,
            branch_id=app.branch_id or None,
            candidate_info={
                "fullName": info.full_name,
                "email": info.email,
                "phone": info.phone,
                "currentSalary": info.current_salary,
                "expectedSalary": info.expected_salary,
                "noticePeriod": info.notice_period,
                "source": info.source,
            },
            extracted_data={
                "skills": list(data.skills),
                "experienceYears": data.experience_years,
                "education": data.education,
                "summary": data.summary,
                "currentTitle": data.current_title,
            },
            match_score=app.match_score,
            strengths=list(app.strengths),
            skill_gaps=list(app.skill_gaps),
            status=app.status,
            archived=app.archived,
            version=version,
        )
        if app.applied_at is None and existing is None:
            app.applied_at = datetime.now(timezone.utc)
        if app.applied_at is not None:
            row.applied_at = app.applied_at
        self._upsert(row)
        app.version = version
        return app

    def delete_application(self, application_id: str) -> bool:
        return self._delete_by_id(Application, application_id)
