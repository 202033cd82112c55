"""Users feature: accounts, role assignments and password history."""

from .entities import PasswordHistory, User, UserRole

__all__ = ["User", "UserRole", "PasswordHistory"]
