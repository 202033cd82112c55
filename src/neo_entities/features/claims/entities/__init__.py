"""Claim entities."""

from .claim import Claim
from .claim_dependency import ClaimDependency

__all__ = ["Claim", "ClaimDependency"]
