#!/usr/bin/env python3
"""
HireAI Console - FastAPI Application

Admin API for role-based access control and candidate intelligence.

Usage:
    python main.py serve

Then open:
    - http://localhost:8080/docs - API Documentation (Swagger UI)
    - http://localhost:8080/redoc - Alternative API Documentation
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError

from core.config_loader import AccessConfig
from core.exceptions import HireAIError
from database.init_db import init_db
from .config import get_config
from .dependencies import get_db_manager
from .exceptions import (
    service_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .routers import (
    auth_router,
    navigation_router,
    roles_router,
    team_router,
    branches_router,
    jobs_router,
    applications_router
)
from .routers.auth import add_rate_limit_handlers

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and seed defaults before serving."""
    config = get_config()
    if config.access.jwt_secret == AccessConfig().jwt_secret:
        logger.warning("Bearer tokens are signed with the default secret; set access.jwt_secret or HIREAI_JWT_SECRET")
    created = init_db(config.access, bind=get_db_manager().engine)
    logger.info(f"Database ready (seeded: {created})")
    yield


# Create FastAPI app
app = FastAPI(
    title="HireAI Console API",
    description="Role-based admin console and candidate intelligence ranking",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure rate limiting
add_rate_limit_handlers(app)

# Register exception handlers
app.add_exception_handler(HireAIError, service_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# Include routers
app.include_router(auth_router)
app.include_router(navigation_router)
app.include_router(roles_router)
app.include_router(team_router)
app.include_router(branches_router)
app.include_router(jobs_router)
app.include_router(applications_router)


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "hireai-console"}


def main():
    """Run the web server."""
    import uvicorn

    config = get_config()
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger.info(f"Starting HireAI Console on {config.web.host}:{config.web.port}")
    logger.info(f"API Docs: http://{config.web.host}:{config.web.port}/docs")

    uvicorn.run(
        "web.backend.app:app",
        host=config.web.host,
        port=config.web.port,
        reload=False,
        log_level="info"
    )


if __name__ == "__main__":
    main()
