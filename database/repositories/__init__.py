from database.repositories.base import BaseRepository
from database.repositories.access import RoleRepository, AdminUserRepository, BranchRepository
from database.repositories.recruitment import JobPostRepository, ApplicationRepository

__all__ = [
    'BaseRepository',
    'RoleRepository',
    'AdminUserRepository',
    'BranchRepository',
    'JobPostRepository',
    'ApplicationRepository',
]
