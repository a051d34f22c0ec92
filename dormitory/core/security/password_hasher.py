"""
Password hashing and verification utilities.

Provides password hashing using bcrypt with configurable rounds, and
the generated default password used for new accounts and resets.
"""

import bcrypt
from typing import Optional

from dormitory.core.logging import get_logger

logger = get_logger(__name__)


class PasswordHasher:
    """
    Handle password hashing and verification using bcrypt.

    Uses bcrypt with configurable rounds for computational cost.
    """

    DEFAULT_ROUNDS = 12
    MIN_ROUNDS = 4
    MAX_ROUNDS = 31

    def __init__(self, rounds: int = DEFAULT_ROUNDS, default_suffix: str = "1234abcd#"):
        """
        Initialize password hasher.

        Args:
            rounds: Number of bcrypt rounds (4-31, default 12)
            default_suffix: Suffix appended to the last name for generated passwords

        Raises:
            ValueError: If rounds is outside valid range
        """
        if not (self.MIN_ROUNDS <= rounds <= self.MAX_ROUNDS):
            raise ValueError(
                f"Rounds must be between {self.MIN_ROUNDS} and {self.MAX_ROUNDS}, got {rounds}"
            )

        self.rounds = rounds
        self.default_suffix = default_suffix

    def hash(self, password: str) -> str:
        """
        Hash a password with salt.

        Raises:
            ValueError: If password is empty
            TypeError: If password is not a string
        """
        if not isinstance(password, str):
            raise TypeError("Password must be a string")

        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed_password: Optional[str]) -> bool:
        """
        Verify a password against its hash.

        Returns False for missing hashes or malformed stored values.
        """
        if not password or not hashed_password:
            return False

        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError as e:
            logger.warning(f"Stored password hash could not be checked: {e}")
            return False

    def default_password(self, last_name: str) -> str:
        """Generated password for new and reset accounts."""
        return f"{last_name}{self.default_suffix}"


def get_password_hasher() -> PasswordHasher:
    from dormitory.config import settings

    return PasswordHasher(
        rounds=settings.PASSWORD_BCRYPT_ROUNDS,
        default_suffix=settings.DEFAULT_PASSWORD_SUFFIX,
    )
