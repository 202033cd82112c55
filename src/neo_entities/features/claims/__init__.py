"""Claims feature: permissions and their dependencies."""

from .entities import Claim, ClaimDependency

__all__ = ["Claim", "ClaimDependency"]
