#!/usr/bin/env python3
"""
Ranking Service - loads a job snapshot and runs the ranking engine.
"""

import logging
from typing import List, Optional, Protocol

from core.config_loader import RankingConfig
from core.exceptions import JobNotFoundException
from core.ranking.dto import ApplicationDTO, JobDTO
from core.ranking.engine import rank
from core.ranking.models import RankedCandidate, RankingWeights

logger = logging.getLogger(__name__)


class RankingStore(Protocol):
    def get_job(self, job_id: str) -> Optional[JobDTO]: ...
    def list_applications(self, job_id: Optional[str] = None) -> List[ApplicationDTO]: ...


class RankingService:
    """Candidate intelligence for one job at a time."""

    def __init__(self, store: RankingStore, config: Optional[RankingConfig] = None):
        self.store = store
        self.config = config or RankingConfig()

    def default_weights(self) -> RankingWeights:
        w = self.config.default_weights
        return RankingWeights(
            skills=w.skills,
            salary=w.salary,
            experience=w.experience,
            availability=w.availability,
        )

    def rank_job(self, job_id: str, weights: Optional[RankingWeights] = None) -> List[RankedCandidate]:
        """
        Rank every active application of ``job_id``.

        Raises:
            JobNotFoundException: Unknown job id.
        """
        job = self.store.get_job(job_id)
        if job is None:
            raise JobNotFoundException(f"Job {job_id} not found")

        applications = self.store.list_applications(job_id=job_id)
        ranked = rank(job, applications, weights or self.default_weights(), self.config)
        logger.info("Ranked %d applicant(s) for job %s", len(ranked), job_id)
        return ranked
