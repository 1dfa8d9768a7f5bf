#!/usr/bin/env python3
"""
Domain exceptions for the HireAI console.

The ranking and permission functions are total and never raise for bad
input; these exceptions belong to the stateful services around them
(role/user management, authentication, persistence lookups).
"""


class HireAIError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str = "An error occurred"):
        self.message = message
        super().__init__(self.message)


class AuthenticationError(HireAIError):
    """Raised when credentials or a session token are invalid."""
    pass


class PermissionDeniedError(HireAIError):
    """Raised when the current actor lacks a module permission."""

    def __init__(self, module_id: str, action: str, message: str = ""):
        self.module_id = module_id
        self.action = action
        super().__init__(message or f"Missing permission {action} on {module_id}")


class RoleNotFoundError(HireAIError):
    """Raised when a role id does not exist."""
    pass


class UserNotFoundError(HireAIError):
    """Raised when an admin user id does not exist."""
    pass


class JobNotFoundException(HireAIError):
    """Raised when a job is not found."""
    pass


class ApplicationNotFoundError(HireAIError):
    """Raised when an application id does not exist."""
    pass


class SystemRoleError(HireAIError):
    """Raised when trying to delete a system role."""
    pass


class InvalidRoleError(HireAIError):
    """Raised when a role record carries unknown modules or actions."""
    pass


class ValidationError(HireAIError):
    """Raised when input validation fails."""
    pass


class ConflictError(HireAIError):
    """Raised when a resource already exists."""
    pass
