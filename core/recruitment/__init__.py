"""
Recruitment - job requisitions and the application pipeline.

Public API:
- RecruitmentService: Job create/update/delete, application intake and status updates
- JobStatus / ApplicationStatus: Lifecycle states
"""

from core.recruitment.models import ApplicationStatus, JobStatus
from core.recruitment.service import RecruitmentService

__all__ = [
    'ApplicationStatus',
    'JobStatus',
    'RecruitmentService',
]
