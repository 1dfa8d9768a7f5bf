import contextlib
import logging

from database.database import SessionLocal
from database.repository import PlatformRepository

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def platform_uow(session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a PlatformRepository bound to a fresh Session. Commits on
    success, rolls back on exception, always closes.

    Usage:
        with platform_uow() as repo:
            roles = repo.list_roles()
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        repo = PlatformRepository(session)
        yield repo
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
