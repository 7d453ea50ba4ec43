from __future__ import annotations

from typing import Optional, Sequence

from .enums import LoginFailure


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    def __init__(self, message: str, errors: Optional[Sequence[dict]] = None):
        super().__init__(message)
        self.errors = list(errors or [])


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness or state invariant."""


class LoginError(DomainError):
    """Mixin carrying the reason a login was refused."""

    def __init__(self, reason: LoginFailure, message: str):
        super().__init__(message)
        self.reason = reason


class LoginAuthenticationError(LoginError, AuthenticationError):
    pass


class LoginAuthorizationError(LoginError, AuthorizationError):
    pass


class LoginNotFoundError(LoginError, NotFoundError):
    pass
