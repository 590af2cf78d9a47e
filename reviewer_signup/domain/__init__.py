"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for reviewer account
signup. It defines its own port interfaces for infrastructure
abstraction, ensuring true hexagonal architecture decoupling.
"""

from .envelope import EntityKind, Envelope, MissingContent
from .exceptions import SignUpError, UsernameAlreadyTaken
from .ports import AccountRecord, AccountRepository
from .signup import SignUpService

__all__ = [
    "AccountRecord",
    "AccountRepository",
    "EntityKind",
    "Envelope",
    "MissingContent",
    "SignUpError",
    "SignUpService",
    "UsernameAlreadyTaken",
]
