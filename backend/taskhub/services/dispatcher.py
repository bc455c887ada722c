"""Operation Dispatcher — one generic path from (kind, operation) to the engine.

Invariants:
    - Every call reaches exactly one engine operation, exactly once (no retry)
    - Create on an owned kind always passes through apply_ownership first
    - Get/Update/Delete never touch ownership (delegated to the engine)
    - EngineError → Failure; any other exception propagates to the global handler
    - get_many always yields a list (empty is a success, not a failure)
    - Holds no state across requests beyond the read-only registry
    - A kind missing from the registry raises ValueError before any engine call

Design Decisions:
    - Explicit Operation → engine method dict over getattr: every binding visible
      in one place, adding a kind needs no new code here
    - Returns OperationResult instead of raising: routes unwrap, tests inspect
"""

import logging
from typing import Any, Mapping, Sequence

from pydantic import BaseModel

from taskhub.core.domain_types import EntityId, EntityKind, Identity, Operation
from taskhub.core.engine_protocols import Engine
from taskhub.core.errors import EngineError, ErrorContext
from taskhub.core.ownership import apply_ownership
from taskhub.core.resource_registry import (
    RESOURCE_REGISTRY, ResourceContract, get_contract,
)
from taskhub.core.response_shaping import (
    OperationResult, shape_failure, shape_success,
)

logger = logging.getLogger(__name__)


class OperationDispatcher:
    """Routes (kind, operation) -> engine call -> shaped result."""

    def __init__(
        self,
        engine: Engine,
        registry: Mapping[EntityKind, ResourceContract] = RESOURCE_REGISTRY,
    ):
        self._registry = registry
        self._bindings = {
            Operation.CREATE: engine.create,
            Operation.GET_ONE: engine.get_one,
            Operation.GET_MANY: engine.get_many,
            Operation.UPDATE: engine.update,
            Operation.DELETE: engine.delete,
        }

    async def create(
        self, kind: EntityKind, create_input: BaseModel, identity: Identity,
    ) -> OperationResult[BaseModel]:
        owned_input = apply_ownership(
            kind, create_input, identity, self._registry,
        )
        return await self._invoke(kind, Operation.CREATE, identity, owned_input)

    async def get_one(
        self, kind: EntityKind, entity_id: EntityId, identity: Identity,
    ) -> OperationResult[BaseModel]:
        return await self._invoke(
            kind, Operation.GET_ONE, identity, entity_id, entity_id=entity_id,
        )

    async def get_many(
        self, kind: EntityKind, query: BaseModel, identity: Identity,
    ) -> OperationResult[list[BaseModel]]:
        return await self._invoke(kind, Operation.GET_MANY, identity, query)

    async def update(
        self,
        kind: EntityKind,
        entity_id: EntityId,
        update_input: BaseModel,
        identity: Identity,
    ) -> OperationResult[BaseModel]:
        return await self._invoke(
            kind, Operation.UPDATE, identity, entity_id, update_input,
            entity_id=entity_id,
        )

    async def delete(
        self, kind: EntityKind, entity_id: EntityId, identity: Identity,
    ) -> OperationResult[BaseModel]:
        return await self._invoke(
            kind, Operation.DELETE, identity, entity_id, entity_id=entity_id,
        )

    async def _invoke(
        self,
        kind: EntityKind,
        operation: Operation,
        identity: Identity,
        *args: Any,
        entity_id: EntityId | None = None,
    ) -> OperationResult:
        """Single engine call with logging and failure shaping."""
        get_contract(kind, self._registry)
        log_extra = {
            "entity_kind": kind.value,
            "operation": operation.value,
            "member_id": str(identity.member_id),
            "entity_id": str(entity_id) if entity_id else None,
        }
        logger.info(f"Dispatching {operation.value} {kind.value}", extra=log_extra)

        engine_call = self._bindings[operation]
        try:
            result = await engine_call(kind, *args)
        except EngineError as e:
            logger.warning(
                f"Engine failure on {operation.value} {kind.value}: {e.message}",
                extra={**log_extra, "error_code": e.code},
            )
            return shape_failure(e, ErrorContext(
                entity_kind=kind.value,
                operation=operation.value,
                entity_id=log_extra["entity_id"],
                member_id=log_extra["member_id"],
            ))

        if operation is Operation.GET_MANY:
            return shape_success(_as_list(result))
        return shape_success(result)


def _as_list(result: Sequence[BaseModel] | None) -> list[BaseModel]:
    """Engine order preserved; None from a lax engine means no rows."""
    return list(result) if result is not None else []
