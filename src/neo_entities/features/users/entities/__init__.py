"""User entities."""

from .password_history import PasswordHistory
from .user import User
from .user_role import UserRole

__all__ = ["User", "UserRole", "PasswordHistory"]
