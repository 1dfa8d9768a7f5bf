from .base import Base
from .access import Branch, Role, AdminUser
from .recruitment import JobPost, Application

__all__ = [
    'Base',
    'Branch',
    'Role',
    'AdminUser',
    'JobPost',
    'Application',
]
