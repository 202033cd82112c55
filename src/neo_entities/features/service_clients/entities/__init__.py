"""Service client entities."""

from .service_client_claim import ServiceClientClaim
from .service_client_scope import ServiceClientScope

__all__ = ["ServiceClientClaim", "ServiceClientScope"]
