"""Business logic services."""

from .auth_service import AuthService
from .intelligence_service import IntelligenceService
