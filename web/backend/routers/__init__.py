"""API route handlers."""

from .auth import router as auth_router
from .navigation import router as navigation_router
from .roles import router as roles_router
from .team import router as team_router
from .branches import router as branches_router
from .jobs import router as jobs_router
from .applications import router as applications_router
