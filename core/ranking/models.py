#!/usr/bin/env python3
"""
Ranking Models - Data structures for ranking inputs and results.
"""

import enum
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from core.ranking.dto import ApplicationDTO


class Level(str, enum.Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


WEIGHT_KEYS = ("skills", "salary", "experience", "availability")


def _weight(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


@dataclass(frozen=True)
class RankingWeights:
    """Admin-adjustable slider weights. Not persisted with the job."""
    skills: float = 50.0
    salary: float = 20.0
    experience: float = 20.0
    availability: float = 10.0

    def __post_init__(self):
        for key in WEIGHT_KEYS:
            object.__setattr__(self, key, _weight(getattr(self, key)))

    @property
    def total(self) -> float:
        return self.skills + self.salary + self.experience + self.availability

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "RankingWeights":
        """Missing or unparseable keys count as 0."""
        data = data or {}
        return cls(**{key: _weight(data.get(key, 0)) for key in WEIGHT_KEYS})

    def to_dict(self) -> Dict[str, float]:
        return {key: getattr(self, key) for key in WEIGHT_KEYS}


@dataclass
class RankedCandidate:
    """An application plus the derived ranking signals."""
    application: ApplicationDTO
    intelligence_score: int = 0
    fit_status: Level = Level.LOW
    risk_level: Level = Level.LOW
    salary_alignment: int = 0

    factors: Dict[str, float] = field(default_factory=dict)

    @property
    def id(self) -> str:
        return self.application.id

    @property
    def match_score(self) -> float:
        return self.application.match_score

    def to_dict(self) -> Dict[str, Any]:
        app = self.application
        return {
            "id": app.id,
            "jobId": app.job_id,
            "fullName": app.candidate_info.full_name,
            "matchScore": app.match_score,
            "experienceYears": app.extracted_data.experience_years,
            "expectedSalary": app.candidate_info.expected_salary,
            "noticePeriod": app.candidate_info.notice_period,
            "intelligenceScore": self.intelligence_score,
            "fitStatus": self.fit_status.value,
            "riskLevel": self.risk_level.value,
            "salaryAlignment": self.salary_alignment,
            "factors": dict(self.factors),
        }
