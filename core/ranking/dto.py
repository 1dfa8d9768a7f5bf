"""Data Transfer Objects for the ranking engine.

ORM rows are converted into these plain objects inside the unit of work,
so ranking can run after the database session is closed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class MatchingRules:
    """Per-job weights used by the AI screening step (0-100 each, no sum rule)."""
    skill_weight: float = 40.0
    experience_weight: float = 30.0
    education_weight: float = 15.0
    keywords_weight: float = 15.0
    threshold: float = 60.0


@dataclass
class JobDTO:
    id: str
    title: str
    branch_id: str = ""
    department: str = ""
    location: str = ""
    status: str = "OPEN"
    min_years_experience: float = 0.0
    required_skills: List[str] = field(default_factory=list)
    matching_rules: MatchingRules = field(default_factory=MatchingRules)
    salary_budget: Optional[float] = None
    archived: bool = False
    created_at: Optional[datetime] = None


@dataclass
class CandidateInfo:
    full_name: str = ""
    email: str = ""
    phone: str = ""
    current_salary: str = ""
    expected_salary: str = ""
    notice_period: str = ""
    source: Optional[str] = None


@dataclass
class ExtractedCVData:
    """Profile fields produced by the external CV extraction step."""
    skills: List[str] = field(default_factory=list)
    experience_years: float = 0.0
    education: str = ""
    summary: str = ""
    current_title: str = ""


@dataclass
class ApplicationDTO:
    id: str
    job_id: str
    branch_id: str = ""
    candidate_info: CandidateInfo = field(default_factory=CandidateInfo)
    extracted_data: ExtractedCVData = field(default_factory=ExtractedCVData)
    match_score: float = 0.0
    strengths: List[str] = field(default_factory=list)
    skill_gaps: List[str] = field(default_factory=list)
    status: str = "PENDING"
    archived: bool = False
    version: int = 1
    applied_at: Optional[datetime] = None
