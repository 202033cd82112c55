"""Roles feature: roles, their claim values and their hierarchy."""

from .entities import Role, RoleClaim, RoleHierarchy

__all__ = ["Role", "RoleClaim", "RoleHierarchy"]
