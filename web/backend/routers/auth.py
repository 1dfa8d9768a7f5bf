#!/usr/bin/env python3
"""
Auth endpoints - console login, logout and current session.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from fastapi.security import HTTPAuthorizationCredentials

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from core.access.service import AccessControlService
from core.access.session import AdminSession
from core.app_context import AppContext
from ..config import get_config
from ..dependencies import (
    get_access_service,
    get_admin_session,
    get_app_context,
    security_scheme,
)
from ..models.requests import LoginRequest
from ..models.responses import ActionResponse, LoginResponse, SessionResponse
from ..services.auth_service import AuthService

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)
LOGIN_RATE_LIMIT = get_config().web.login_rate_limit

router = APIRouter(prefix="/api/auth", tags=["auth"])


def add_rate_limit_handlers(app):
    """Add rate limit exception handlers to the FastAPI app."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


async def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"success": False, "error": str(exc), "type": "RateLimitExceeded"}
    )


@router.post("/login", response_model=LoginResponse)
@limiter.limit(LOGIN_RATE_LIMIT)
def login(
    request: Request,
    body: LoginRequest,
    access: AccessControlService = Depends(get_access_service),
    ctx: AppContext = Depends(get_app_context),
):
    """
    Exchange email and password for a bearer session token.

    Returns 401 on bad credentials.
    """
    return AuthService(access, ctx.sessions).login(body.email, body.password)


@router.post("/logout", response_model=ActionResponse)
def logout(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    access: AccessControlService = Depends(get_access_service),
    ctx: AppContext = Depends(get_app_context),
):
    """Revoke the current bearer token (idempotent)."""
    token = credentials.credentials if credentials else None
    revoked = AuthService(access, ctx.sessions).logout(token)
    return ActionResponse(message="Logged out" if revoked else "No active session")


@router.get("/me", response_model=SessionResponse)
def me(session: AdminSession = Depends(get_admin_session)):
    """
    Describe the current session.

    Anonymous callers get authenticated=false and the public navigation.
    """
    return AuthService.describe(session)
