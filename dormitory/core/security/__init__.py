"""
Security utilities: password hashing and session tokens.
"""

from dormitory.core.security.jwt_handler import JWTManager, get_jwt_manager
from dormitory.core.security.password_hasher import PasswordHasher, get_password_hasher

__all__ = [
    "JWTManager",
    "PasswordHasher",
    "get_jwt_manager",
    "get_password_hasher",
]
