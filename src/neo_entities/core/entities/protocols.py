"""Protocols and helpers shared by audited entities.

Entities embed an ``EntityInfo`` rather than inheriting from a base class;
this module holds the small amount of behaviour they have in common.
"""

from dataclasses import replace
from typing import Any, Protocol, TypeVar, runtime_checkable

from .entity_info import EntityInfo
from .execution_context import ExecutionContext


@runtime_checkable
class AuditedEntity(Protocol):
    """Any entity carrying an audit envelope."""

    entity_info: EntityInfo


TEntity = TypeVar("TEntity", bound=AuditedEntity)


def register_entity_change(entity: TEntity, context: ExecutionContext, **changes: Any) -> TEntity:
    """Return a copy of ``entity`` with ``changes`` applied and the envelope advanced.

    The copy goes through the entity's constructor, so changed fields are
    validated exactly as on creation.
    """
    return replace(entity, entity_info=entity.entity_info.register_change(context), **changes)
