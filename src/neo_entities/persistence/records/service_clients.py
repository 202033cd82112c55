"""Service client persistence records."""

from uuid import UUID

from pydantic import Field

from .base import RecordBase


class ServiceClientClaimRecord(RecordBase):
    service_client_id: UUID = Field(..., description="Service client")
    claim_id: UUID = Field(..., description="Claim")
    value: int = Field(..., description="Claim value: -1 denied, 0 inherited, 1 granted")


class ServiceClientScopeRecord(RecordBase):
    service_client_id: UUID = Field(..., description="Service client")
    scope: str = Field(..., description="Scope name")
