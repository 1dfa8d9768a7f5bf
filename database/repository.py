import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.access.models import AdminUser, Branch, Role
from core.ranking.dto import ApplicationDTO, JobDTO
from database.repositories import (
    AdminUserRepository,
    ApplicationRepository,
    BranchRepository,
    JobPostRepository,
    RoleRepository,
)

logger = logging.getLogger(__name__)


class PlatformRepository:
    """
    Collection-query facade over one Session.

    Implements the AccessStore, RankingStore and RecruitmentStore
    protocols the services are built on.
    """

    def __init__(self, db: Session):
        self.db = db
        self.roles = RoleRepository(db)
        self.users = AdminUserRepository(db)
        self.branches = BranchRepository(db)
        self.jobs = JobPostRepository(db)
        self.applications = ApplicationRepository(db)

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    # Roles
    def list_roles(self) -> List[Role]:
        return self.roles.list_roles()

    def get_role(self, role_id: str) -> Optional[Role]:
        return self.roles.get_role(role_id)

    def save_role(self, role: Role) -> Role:
        return self.roles.save_role(role)

    def delete_role(self, role_id: str) -> bool:
        return self.roles.delete_role(role_id)

    # Admin users
    def list_users(self) -> List[AdminUser]:
        return self.users.list_users()

    def get_user(self, user_id: str) -> Optional[AdminUser]:
        return self.users.get_user(user_id)

    def get_user_by_email(self, email: str) -> Optional[AdminUser]:
        return self.users.get_user_by_email(email)

    def save_user(self, user: AdminUser) -> AdminUser:
        return self.users.save_user(user)

    def delete_user(self, user_id: str) -> bool:
        return self.users.delete_user(user_id)

    # Branches
    def list_branches(self) -> List[Branch]:
        return self.branches.list_branches()

    def save_branch(self, branch: Branch) -> Branch:
        return self.branches.save_branch(branch)

    # Jobs and applications
    def list_jobs(self, branch_id: Optional[str] = None, include_archived: bool = False) -> List[JobDTO]:
        return self.jobs.list_jobs(branch_id=branch_id, include_archived=include_archived)

    def get_job(self, job_id: str) -> Optional[JobDTO]:
        return self.jobs.get_job(job_id)

    def save_job(self, job: JobDTO) -> JobDTO:
        return self.jobs.save_job(job)

    def delete_job(self, job_id: str) -> bool:
        return self.jobs.delete_job(job_id)

    def list_applications(self, job_id: Optional[str] = None) -> List[ApplicationDTO]:
        return self.applications.list_applications(job_id=job_id)

    def get_application(self, application_id: str) -> Optional[ApplicationDTO]:
        return self.applications.get_application(application_id)

    def save_application(self, app: ApplicationDTO) -> ApplicationDTO:
        return self.applications.save_application(app)

    def delete_application(self, application_id: str) -> bool:
        return self.applications.delete_application(application_id)
