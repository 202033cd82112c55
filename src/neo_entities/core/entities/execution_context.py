"""Execution context entity.

Carries who is acting, for which tenant, under which correlation id and
from which subsystem. Every "register new" and "change" operation stamps
the audit envelope from it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from ..value_objects import TenantInfo
from ...utils.datetime import to_utc, utc_now
from ...utils.uuid import generate_uuid_v7


@dataclass(frozen=True)
class ExecutionContext:
    """Immutable description of the operation being executed."""

    tenant_info: TenantInfo
    user: str
    correlation_id: UUID
    execution_origin: str
    business_operation_code: str
    clock: Callable[[], datetime] = field(default=utc_now, compare=False, repr=False)

    @classmethod
    def create(
        cls,
        tenant_info: TenantInfo,
        user: str,
        execution_origin: str,
        business_operation_code: str,
        correlation_id: Optional[UUID] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "ExecutionContext":
        """Create a context, generating a correlation id when none is given."""
        return cls(
            tenant_info=tenant_info,
            user=user,
            correlation_id=correlation_id or generate_uuid_v7(),
            execution_origin=execution_origin,
            business_operation_code=business_operation_code,
            clock=clock or utc_now,
        )

    def now(self) -> datetime:
        """Current time according to the context clock, in UTC."""
        return to_utc(self.clock())
