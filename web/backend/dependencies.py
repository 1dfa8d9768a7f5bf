#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.
"""

from functools import lru_cache
from typing import Generator, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session, sessionmaker

from core.access.models import ModuleId, PermissionAction
from core.access.service import AccessControlService
from core.access.session import AdminSession
from core.app_context import AppContext
from core.exceptions import AuthenticationError
from core.ranking.service import RankingService
from core.recruitment.service import RecruitmentService
from database.database import make_engine
from database.repository import PlatformRepository
from .config import get_config

# Bearer session tokens
security_scheme = HTTPBearer(auto_error=False)


class DatabaseManager:
    """Manages database connections and sessions."""

    def __init__(self, url: Optional[str] = None):
        config = get_config()
        self.engine = make_engine(url or config.database.url, echo=config.database.echo)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session. Commits on success, rolls back on error.

        Yields:
            Session: SQLAlchemy database session.
        """
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()


@lru_cache()
def get_db_manager() -> DatabaseManager:
    return DatabaseManager()


@lru_cache()
def get_app_context() -> AppContext:
    """Process-wide context (config plus the bearer token issuer)."""
    return AppContext.build(get_config(), get_db_manager().SessionLocal)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Usage:
        @app.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    yield from get_db_manager().get_session()


def get_repo(db: Session = Depends(get_db)) -> PlatformRepository:
    return PlatformRepository(db)


def get_access_service(
    repo: PlatformRepository = Depends(get_repo),
    ctx: AppContext = Depends(get_app_context),
) -> AccessControlService:
    return ctx.access_service(repo)


def get_ranking_service(
    repo: PlatformRepository = Depends(get_repo),
    ctx: AppContext = Depends(get_app_context),
) -> RankingService:
    return ctx.ranking_service(repo)


def get_recruitment_service(
    repo: PlatformRepository = Depends(get_repo),
    ctx: AppContext = Depends(get_app_context),
) -> RecruitmentService:
    return ctx.recruitment_service(repo)


def get_admin_session(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    service: AccessControlService = Depends(get_access_service),
    ctx: AppContext = Depends(get_app_context),
) -> AdminSession:
    """
    Resolve the bearer token to a fresh AdminSession.

    The actor and role snapshot are re-read on every request. A token
    whose user has been deleted is revoked and yields an anonymous session.
    """
    token = credentials.credentials if credentials else None
    user_id = ctx.sessions.resolve(token)
    session = service.session_for(user_id, token=token)
    if user_id and not session.is_authenticated:
        ctx.sessions.revoke(token)
    return session


def require_login(session: AdminSession = Depends(get_admin_session)) -> AdminSession:
    if not session.is_authenticated:
        raise AuthenticationError("Not authenticated")
    return session


class RequirePermission:
    """Dependency that checks one module permission of the current actor."""

    def __init__(self, module_id: ModuleId, action: PermissionAction):
        self.module_id = module_id
        self.action = action

    def __call__(self, session: AdminSession = Depends(require_login)) -> AdminSession:
        session.require(self.module_id, self.action)
        return session
