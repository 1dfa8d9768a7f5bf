#!/usr/bin/env python3
"""
Explicit session state for the admin console.

``AdminSession`` is the per-request context (current actor plus the role
snapshot it was resolved against). ``SessionTokens`` issues and verifies
the JWT bearer tokens of the web layer; the actor itself is re-read from
storage on every request so role edits take effect on the next check.
"""

import logging
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from jose import JWTError, jwt

from core.access.models import AdminUser, Role, find_role
from core.access.permissions import (
    ActionLike,
    ModuleLike,
    NavLink,
    has_permission,
    navigation_for,
)
from core.exceptions import PermissionDeniedError

logger = logging.getLogger(__name__)


@dataclass
class AdminSession:
    actor: Optional[AdminUser] = None
    roles: List[Role] = field(default_factory=list)
    token: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "AdminSession":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.actor is not None

    @property
    def role(self) -> Optional[Role]:
        return find_role(self.roles, self.actor.role_id) if self.actor else None

    @property
    def active_branch_id(self) -> Optional[str]:
        return self.actor.branch_id if self.actor else None

    def has_permission(self, module_id: ModuleLike, action: ActionLike) -> bool:
        return has_permission(self.actor, self.roles, module_id, action)

    def require(self, module_id: ModuleLike, action: ActionLike) -> None:
        """Raise PermissionDeniedError unless the actor holds the permission."""
        if not self.has_permission(module_id, action):
            who = self.actor.email if self.actor else "anonymous"
            logger.info("Denied %s %s/%s", who, getattr(module_id, "value", module_id),
                        getattr(action, "value", action))
            raise PermissionDeniedError(
                str(getattr(module_id, "value", module_id)),
                str(getattr(action, "value", action)),
            )

    def navigation(self) -> List[NavLink]:
        return navigation_for(self.actor, self.roles)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SessionTokens:
    """
    Signed bearer tokens (JWT). ``sub`` carries the user id, ``exp`` the expiry.

    Tokens survive restarts and are valid on every worker sharing the
    secret. Logout adds the token id to a revocation set kept until the
    token would have expired anyway.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(hours=8)):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl
        self._revoked: Dict[str, float] = {}
        self._lock = threading.Lock()

    def issue(self, user_id: str) -> str:
        claims = {
            "sub": user_id,
            "exp": _now() + self.ttl,
            "jti": uuid.uuid4().hex,
            "type": "access",
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def decode(self, token: Optional[str]) -> Optional[Dict[str, Any]]:
        """Verified claims, or None for a missing, tampered or expired token."""
        if not token:
            return None
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            return None
        if payload.get("type") != "access" or not payload.get("sub"):
            return None
        return payload

    def resolve(self, token: Optional[str]) -> Optional[str]:
        """User id for ``token``, or None when invalid, expired or revoked."""
        payload = self.decode(token)
        if payload is None:
            return None
        with self._lock:
            if payload.get("jti") in self._revoked:
                return None
        return payload["sub"]

    def revoke(self, token: Optional[str]) -> bool:
        payload = self.decode(token)
        if payload is None or not payload.get("jti"):
            return False
        with self._lock:
            self._purge()
            if payload["jti"] in self._revoked:
                return False
            self._revoked[payload["jti"]] = float(payload["exp"])
        return True

    def _purge(self) -> None:
        now = _now().timestamp()
        for jti in [j for j, exp in self._revoked.items() if exp <= now]:
            del self._revoked[jti]

    @property
    def revoked_count(self) -> int:
        return len(self._revoked)
