#!/usr/bin/env python3
"""
Test suite configuration and utilities.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Skip the database-backed tests
    python -m pytest tests/ -v -m "not db"

    # Using unittest
    python -m unittest discover tests -v

Database tests use an in-memory SQLite engine per test case, so no
external service is needed.
"""

from typing import Optional

from sqlalchemy.orm import sessionmaker

from core.access.bootstrap import seed_defaults
from core.config_loader import AccessConfig
from core.ranking.dto import (
    ApplicationDTO,
    CandidateInfo,
    ExtractedCVData,
    JobDTO,
    MatchingRules,
)
from database.database import make_engine
from database.models import Base

TEST_DB_URL = "sqlite://"

ADMIN_EMAIL = "admin@protocol.ai"
ADMIN_PASSWORD = "Admin@123"


def make_test_session_factory(seed: bool = True, access_config: Optional[AccessConfig] = None):
    """Fresh in-memory database with tables (and seeded defaults)."""
    engine = make_engine(TEST_DB_URL)
    Base.metadata.create_all(engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    if seed:
        from database.uow import platform_uow
        with platform_uow(factory) as repo:
            seed_defaults(repo, access_config or AccessConfig())
    return factory


def make_job(job_id: str = "job-1", threshold: float = 0, salary_budget=None, **kwargs) -> JobDTO:
    defaults = dict(
        title="Backend Engineer",
        branch_id="main-hub",
        department="Engineering",
        location="Remote",
        min_years_experience=2,
        required_skills=["python", "sql"],
    )
    defaults.update(kwargs)
    return JobDTO(
        id=job_id,
        matching_rules=MatchingRules(threshold=threshold),
        salary_budget=salary_budget,
        **defaults
    )


def make_application(
    app_id: str,
    job_id: str = "job-1",
    match_score: float = 80,
    experience_years: float = 4,
    expected_salary: str = "2000",
    notice_period: str = "Immediate",
    archived: bool = False,
    full_name: Optional[str] = None,
) -> ApplicationDTO:
    return ApplicationDTO(
        id=app_id,
        job_id=job_id,
        branch_id="main-hub",
        candidate_info=CandidateInfo(
            full_name=full_name or f"Candidate {app_id}",
            email=f"{app_id}@example.com",
            phone="+1 555 0100",
            current_salary="1800",
            expected_salary=expected_salary,
            notice_period=notice_period,
        ),
        extracted_data=ExtractedCVData(
            skills=["python"],
            experience_years=experience_years,
        ),
        match_score=match_score,
        archived=archived,
    )
