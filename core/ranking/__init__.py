#!/usr/bin/env python3
"""
Ranking Module - weighted candidate ranking for the intelligence view.

Public API:
- rank: Rank a job's active applications
- RankingWeights: Slider weights (skills/salary/experience/availability)
- RankedCandidate: Application plus score, fit, risk and salary alignment

Modules:
- dto.py: Plain job/application objects handed over by persistence
- models.py: Weights, results and the High/Medium/Low level enum
- factors.py: Per-candidate factor functions
- engine.py: Composite score, labels and ordering
"""

from core.ranking.engine import rank, resolve_budget, fit_status, risk_level
from core.ranking.models import Level, RankedCandidate, RankingWeights

__all__ = [
    'rank',
    'resolve_budget',
    'fit_status',
    'risk_level',
    'Level',
    'RankedCandidate',
    'RankingWeights',
]
