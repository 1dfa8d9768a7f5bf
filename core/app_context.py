from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from sqlalchemy.orm import sessionmaker

from core.access.service import AccessControlService, AccessStore
from core.access.session import SessionTokens
from core.config_loader import AppConfig
from core.ranking.service import RankingService, RankingStore
from core.recruitment.service import RecruitmentService, RecruitmentStore


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Replaces ambient global state: the token issuer and config live
    here, and services are built per unit of work around a repository
    via ``access_service(repo)``, ``ranking_service(repo)`` or
    ``recruitment_service(repo)``, usually
    inside ``with ctx.uow() as repo``.
    """
    config: AppConfig
    sessions: SessionTokens
    session_factory: Optional[sessionmaker] = None

    @classmethod
    def build(cls, config: AppConfig, session_factory: Optional[sessionmaker] = None) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration
            session_factory: SQLAlchemy sessionmaker; defaults to the
                module-level one in database.database

        Returns:
            Fully wired AppContext instance (no DB session attached)
        """
        if session_factory is None:
            from database.database import SessionLocal
            session_factory = SessionLocal

        sessions = SessionTokens(
            secret=config.access.jwt_secret,
            algorithm=config.access.jwt_algorithm,
            ttl=timedelta(minutes=config.access.session_ttl_minutes),
        )
        return cls(config=config, sessions=sessions, session_factory=session_factory)

    def access_service(self, store: AccessStore) -> AccessControlService:
        return AccessControlService(store, self.config.access)

    def ranking_service(self, store: RankingStore) -> RankingService:
        return RankingService(store, self.config.ranking)

    def recruitment_service(self, store: RecruitmentStore) -> RecruitmentService:
        return RecruitmentService(store, self.config.access)

    def uow(self):
        """Unit of work over ``session_factory`` yielding a PlatformRepository."""
        from database.uow import platform_uow
        return platform_uow(self.session_factory)
