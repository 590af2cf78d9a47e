"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, plus the value types that cross that boundary.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class AccountRecord:
    """
    Persisted reviewer account.

    Values are already normalized by the domain layer:
    - every text field trimmed
    - email_address and username lower-cased
    - password_hash is a bcrypt hash, never the plaintext
    """

    full_name: str
    email_address: str
    username: str
    password_hash: str
    professional_area: str | None = None


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def find_by_username(self, username: str) -> AccountRecord | None:
        """
        Look up an account by its exact username.

        Args:
            username: Username to match (compared as given)

        Returns:
            The stored account, or None if no row matches
        """
        ...

    def insert(self, record: AccountRecord) -> bool:
        """
        Insert a new account row.

        The username column is unique at the storage layer, so two
        concurrent inserts for the same username cannot both succeed.

        Args:
            record: Normalized account to persist

        Returns:
            True if the row was written, False if the username was taken
        """
        ...
