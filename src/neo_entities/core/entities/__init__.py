"""Core entities: the audit envelope and the execution context that stamps it."""

from .execution_context import ExecutionContext
from .entity_info import EntityInfo
from .protocols import AuditedEntity, register_entity_change

__all__ = [
    "ExecutionContext",
    "EntityInfo",
    "AuditedEntity",
    "register_entity_change",
]
