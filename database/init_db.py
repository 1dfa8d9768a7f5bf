import logging

from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from tenacity import retry, stop_after_attempt, wait_fixed

from core.access.bootstrap import seed_defaults
from core.config_loader import AccessConfig
from database.database import engine as default_engine
from database.models import Base
from database.uow import platform_uow

logger = logging.getLogger(__name__)


@retry(stop=stop_after_attempt(5), wait=wait_fixed(2), reraise=True)
def init_db(access_config: AccessConfig = None, bind: Engine = None) -> dict:
    """Create tables and seed system roles, main branch and primary admin."""
    bind = bind or default_engine
    logger.info("Initializing database...")
    try:
        Base.metadata.create_all(bind=bind)
        logger.info("Tables created or verified.")

        factory = sessionmaker(autocommit=False, autoflush=False, bind=bind)
        with platform_uow(factory) as repo:
            return seed_defaults(repo, access_config or AccessConfig())
    except Exception as e:
        logger.error(f"Error initializing DB: {e}")
        raise
