"""Base persistence record.

Records are the flat, storage-ready shape of an entity: the envelope is
spread into scalar columns and value objects are unwrapped to primitives.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class RecordBase(BaseModel):
    """Envelope columns shared by every persistence record.

    Strict mode: values must already have their persisted Python type, so a
    record never silently coerces what a factory hands it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    id: UUID = Field(..., description="Entity identifier")
    tenant_code: UUID = Field(..., description="Owning tenant code")
    entity_version: int = Field(..., description="Optimistic concurrency version")

    # Creation trail
    created_at: datetime = Field(..., description="Creation timestamp (UTC)")
    created_by: str = Field(..., description="Creating actor")
    created_correlation_id: UUID = Field(..., description="Creating request correlation id")
    created_execution_origin: str = Field(..., description="Creating subsystem")
    created_business_operation_code: str = Field(..., description="Creating business operation")

    # Last-change trail
    last_changed_at: Optional[datetime] = Field(None, description="Last change timestamp (UTC)")
    last_changed_by: Optional[str] = Field(None, description="Last changing actor")
    last_changed_correlation_id: Optional[UUID] = Field(None, description="Last change correlation id")
    last_changed_execution_origin: Optional[str] = Field(None, description="Last changing subsystem")
    last_changed_business_operation_code: Optional[str] = Field(None, description="Last change business operation")
