"""User persistence records."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from .base import RecordBase


class UserRecord(RecordBase):
    username: str = Field(..., description="Login name")
    email: str = Field(..., description="Email address as entered")
    password_hash: bytes = Field(..., description="Password digest")
    status: int = Field(..., description="UserStatus code: 1 active, 2 suspended, 3 blocked")


class UserRoleRecord(RecordBase):
    user_id: UUID = Field(..., description="User")
    role_id: UUID = Field(..., description="Assigned role")


class PasswordHistoryRecord(RecordBase):
    user_id: UUID = Field(..., description="User")
    password_hash: bytes = Field(..., description="Previous password digest")
    changed_at: datetime = Field(..., description="When the password was set")
