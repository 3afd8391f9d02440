"""
domain.exceptions - Custom exception hierarchy for GitFit.

All domain-level errors inherit from DomainError so callers can catch
broad or specific exceptions as needed.
"""


class DomainError(Exception):
    """Base exception for all domain-level errors."""


class AuthenticationError(DomainError):
    """Raised when authentication fails (bad credentials, expired token)."""


class DuplicateLoginError(DomainError):
    """Raised when attempting to register with a login that already exists."""


class EntryNotFoundError(DomainError):
    """Raised when a food entry does not exist or is owned by another user."""


class InvalidDateRangeError(DomainError):
    """Raised when a range query has its start after its finish."""
