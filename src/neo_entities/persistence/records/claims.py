"""Claim persistence records."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import RecordBase


class ClaimRecord(RecordBase):
    name: str = Field(..., description="Claim name")
    description: Optional[str] = Field(None, description="Claim description")


class ClaimDependencyRecord(RecordBase):
    claim_id: UUID = Field(..., description="Dependent claim")
    depends_on_claim_id: UUID = Field(..., description="Required claim")
