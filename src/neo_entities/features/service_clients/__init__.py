"""Service clients feature: machine identities, their claims and scopes."""

from .entities import ServiceClientClaim, ServiceClientScope

__all__ = ["ServiceClientClaim", "ServiceClientScope"]
