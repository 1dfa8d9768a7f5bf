#!/usr/bin/env python3
"""
Candidate intelligence service - ranking view for one job.
"""

import logging

from core.ranking.engine import resolve_budget
from core.ranking.models import RankingWeights
from core.ranking.service import RankingService
from core.exceptions import JobNotFoundException
from ..models.responses import RankedCandidateModel, RankingResponse

logger = logging.getLogger(__name__)


class IntelligenceService:
    """Formats RankingService output for the API."""

    def __init__(self, ranking: RankingService):
        self.ranking = ranking

    def get_ranking(self, job_id: str, weights: RankingWeights) -> RankingResponse:
        """
        Rank a job's active applicants.

        Raises:
            JobNotFoundException: Unknown job id.
        """
        job = self.ranking.store.get_job(job_id)
        if job is None:
            raise JobNotFoundException(f"Job {job_id} not found")

        ranked = self.ranking.rank_job(job_id, weights)
        return RankingResponse(
            jobId=job_id,
            budget=resolve_budget(job, self.ranking.config),
            normalized=self.ranking.config.normalize_scores,
            weights=weights.to_dict(),
            count=len(ranked),
            candidates=[RankedCandidateModel(**c.to_dict()) for c in ranked],
        )
