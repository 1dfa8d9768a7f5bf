#!/usr/bin/env python3
"""
Ranking Engine - weighted candidate ranking for one job.

Key behavior:
- Pure and synchronous: safe to recompute on every slider change.
- Only the job's non-archived applications are ranked.
- composite = round(sum(factor * weight)); optionally normalized to
  100 * composite / sum(weights) when RankingConfig.normalize_scores is on.
- Stable: equal composites keep their input order.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional

from core.config_loader import RankingConfig
from core.ranking.dto import ApplicationDTO, JobDTO
from core.ranking.factors import (
    availability_factor,
    experience_factor,
    parse_salary,
    salary_factor,
    skill_factor,
)
from core.ranking.models import Level, RankedCandidate, RankingWeights

logger = logging.getLogger(__name__)

FIT_HIGH = 80
FIT_MEDIUM = 60

RISK_SCORE_HIGH = 50
RISK_SCORE_MEDIUM = 70
RISK_SALARY_HIGH = 0.6
RISK_SALARY_MEDIUM = 0.8


def round_half_up(value: float) -> int:
    """Round .5 upwards (Python's round() is banker's rounding). Non-finite gives 0."""
    if not math.isfinite(value):
        return 0
    return int(math.floor(value + 0.5))


def normalized_score(factors: Dict[str, float], weights: RankingWeights) -> float:
    """
    100 * sum(factor * weight) / sum(weights), or 0 for a zero weight sum.

    Weights are scaled by the largest one first so huge sliders cannot
    overflow the sums.
    """
    values = weights.to_dict()
    scale = max(values.values())
    if scale <= 0:
        return 0.0
    scaled = {key: w / scale for key, w in values.items()}
    total = sum(scaled.values())
    return 100.0 * sum(factors[key] * scaled[key] for key in scaled) / total


def fit_status(match_score: float) -> Level:
    if match_score >= FIT_HIGH:
        return Level.HIGH
    if match_score >= FIT_MEDIUM:
        return Level.MEDIUM
    return Level.LOW


def risk_level(match_score: float, salary_fit: float) -> Level:
    # High check takes precedence
    if match_score < RISK_SCORE_HIGH or salary_fit < RISK_SALARY_HIGH:
        return Level.HIGH
    if match_score < RISK_SCORE_MEDIUM or salary_fit < RISK_SALARY_MEDIUM:
        return Level.MEDIUM
    return Level.LOW


def resolve_budget(job: JobDTO, config: Optional[RankingConfig] = None) -> float:
    """
    Salary budget for ``job``.

    An explicit ``salary_budget`` wins; otherwise the legacy threshold
    heuristic from config applies.
    """
    if job.salary_budget is not None and job.salary_budget > 0:
        return float(job.salary_budget)
    config = config or RankingConfig()
    if job.matching_rules.threshold > 0:
        return config.budget_with_threshold
    return config.budget_without_threshold


def score_candidate(
    job: JobDTO,
    application: ApplicationDTO,
    weights: RankingWeights,
    budget: float,
    config: Optional[RankingConfig] = None,
) -> RankedCandidate:
    config = config or RankingConfig()
    info = application.candidate_info

    skill = skill_factor(application.match_score)
    experience = experience_factor(
        application.extracted_data.experience_years,
        job.min_years_experience,
        cap=config.experience_overqualification_cap,
    )
    salary = salary_factor(parse_salary(info.expected_salary), budget)
    availability = availability_factor(info.notice_period)

    factors = {
        "skills": skill,
        "salary": salary,
        "experience": experience,
        "availability": availability,
    }
    if config.normalize_scores:
        raw = normalized_score(factors, weights)
    else:
        raw = sum(factors[key] * weight for key, weight in weights.to_dict().items())

    return RankedCandidate(
        application=application,
        intelligence_score=round_half_up(raw),
        fit_status=fit_status(application.match_score),
        risk_level=risk_level(application.match_score, salary),
        salary_alignment=round_half_up(salary * 100),
        factors=factors,
    )


def rank(
    job: Optional[JobDTO],
    applications: Iterable[ApplicationDTO],
    weights: Optional[RankingWeights] = None,
    config: Optional[RankingConfig] = None,
) -> List[RankedCandidate]:
    """
    Rank the job's active applicants by weighted intelligence score.

    Args:
        job: Selected job, or None (gives an empty ranking).
        applications: Any applications; other jobs' and archived ones are skipped.
        weights: Slider weights (defaults to 50/20/20/10).
        config: Ranking configuration (budget fallback, normalization).

    Returns:
        RankedCandidate list, highest score first, input order on ties.
    """
    if job is None:
        return []

    config = config or RankingConfig()
    weights = weights or RankingWeights()
    budget = resolve_budget(job, config)

    scored = [
        score_candidate(job, app, weights, budget, config)
        for app in applications
        if app.job_id == job.id and not app.archived
    ]
    # sorted() is stable
    ranked = sorted(scored, key=lambda c: c.intelligence_score, reverse=True)

    logger.debug("Ranked %d candidates for job %s (budget=%s)", len(ranked), job.id, budget)
    return ranked
