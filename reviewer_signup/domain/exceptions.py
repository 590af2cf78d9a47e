"""
Domain exceptions - Semantic error types for account signup.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class SignUpError(Exception):
    """Base class for signup domain errors."""

    pass


class UsernameAlreadyTaken(SignUpError):
    """Username was claimed by another account before the insert landed."""

    pass
