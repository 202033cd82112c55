"""Role persistence records."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import RecordBase


class RoleRecord(RecordBase):
    name: str = Field(..., description="Role name")
    description: Optional[str] = Field(None, description="Role description")


class RoleClaimRecord(RecordBase):
    role_id: UUID = Field(..., description="Role holding the claim")
    claim_id: UUID = Field(..., description="Claim")
    value: int = Field(..., description="Claim value: -1 denied, 0 inherited, 1 granted")


class RoleHierarchyRecord(RecordBase):
    role_id: UUID = Field(..., description="Child role")
    parent_role_id: UUID = Field(..., description="Parent role")
