"""Role entities."""

from .role import Role
from .role_claim import RoleClaim
from .role_hierarchy import RoleHierarchy

__all__ = ["Role", "RoleClaim", "RoleHierarchy"]
