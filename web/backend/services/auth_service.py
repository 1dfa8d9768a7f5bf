#!/usr/bin/env python3
"""
Auth service - console login, logout and session description.
"""

import logging
from typing import Optional

from core.access.service import AccessControlService
from core.access.session import AdminSession, SessionTokens
from ..models.responses import (
    LoginResponse,
    ModulePermissionModel,
    NavLinkModel,
    SessionResponse,
)
from ..utils import user_model

logger = logging.getLogger(__name__)


class AuthService:
    """Issues and revokes bearer tokens for console actors."""

    def __init__(self, access: AccessControlService, sessions: SessionTokens):
        self.access = access
        self.sessions = sessions

    def login(self, email: str, password: str) -> LoginResponse:
        """
        Authenticate and issue a session token.

        Raises:
            AuthenticationError: If credentials are invalid.
        """
        user = self.access.authenticate(email, password)
        token = self.sessions.issue(user.id)
        return LoginResponse(token=token, user=user_model(user))

    def logout(self, token: Optional[str]) -> bool:
        revoked = self.sessions.revoke(token)
        if revoked:
            logger.info("Session revoked")
        return revoked

    @staticmethod
    def describe(session: AdminSession) -> SessionResponse:
        if not session.is_authenticated:
            return SessionResponse(
                authenticated=False,
                navigation=[NavLinkModel(**link.to_dict()) for link in session.navigation()],
            )

        role = session.role
        return SessionResponse(
            authenticated=True,
            user=user_model(session.actor),
            roleId=session.actor.role_id,
            roleName=role.name if role else None,
            permissions=[ModulePermissionModel(**mp.to_dict()) for mp in role.module_permissions()] if role else [],
            navigation=[NavLinkModel(**link.to_dict()) for link in session.navigation()],
        )
