"""SQL Engine — reference Engine implementation over SQLAlchemy async sessions.

Invariants:
    - One ORM model per EntityKind (explicit _MODELS dict)
    - Results are returned as the registry's entity schema, never ORM objects
    - get_many: equality filter on each QueryInput field that is set,
      ordered by (created_at, id)
    - update applies only fields present in the input (exclude_unset)
    - delete returns the entity snapshot taken before removal
    - Every SQLAlchemyError is rolled back and raised as StorageError

Design Decisions:
    - Session injected per request: the engine holds no state between requests
    - Null for a non-nullable column is an EngineValidationError, not a DB round-trip
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Mapping

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from taskhub.core.domain_types import EntityId, EntityKind
from taskhub.core.errors import EngineValidationError, EntityNotFoundError
from taskhub.core.resource_registry import (
    RESOURCE_REGISTRY, ResourceContract, get_contract,
)
from taskhub.db.base import Base
from taskhub.infrastructure.database import map_sqlalchemy_error
from taskhub.models.label import Label as LabelModel
from taskhub.models.member import Member as MemberModel
from taskhub.models.project import Project as ProjectModel
from taskhub.models.task import Task as TaskModel
from taskhub.models.team import Team as TeamModel

logger = logging.getLogger(__name__)

_MODELS: dict[EntityKind, type[Base]] = {
    EntityKind.TASK: TaskModel,
    EntityKind.PROJECT: ProjectModel,
    EntityKind.MEMBER: MemberModel,
    EntityKind.TEAM: TeamModel,
    EntityKind.LABEL: LabelModel,
}


class SqlEngine:
    """CRUD for every EntityKind on a single AsyncSession."""

    def __init__(
        self,
        db: AsyncSession,
        registry: Mapping[EntityKind, ResourceContract] = RESOURCE_REGISTRY,
    ):
        self._db = db
        self._registry = registry

    async def create(self, kind: EntityKind, create_input: BaseModel) -> BaseModel:
        model = _MODELS[kind]
        values = create_input.model_dump()
        self._check_nullable(model, values)
        async with self._guard("create"):
            row = model(**values)
            self._db.add(row)
            await self._db.commit()
            await self._db.refresh(row)
        return self._to_entity(kind, row)

    async def get_one(self, kind: EntityKind, entity_id: EntityId) -> BaseModel:
        async with self._guard("get"):
            row = await self._load(kind, entity_id)
        return self._to_entity(kind, row)

    async def get_many(self, kind: EntityKind, query: BaseModel) -> list[BaseModel]:
        model = _MODELS[kind]
        stmt = select(model)
        for field, value in query.model_dump(exclude_none=True).items():
            stmt = stmt.where(getattr(model, field) == value)
        stmt = stmt.order_by(model.created_at, model.id)
        async with self._guard("list"):
            result = await self._db.execute(stmt)
            rows = result.scalars().all()
        return [self._to_entity(kind, row) for row in rows]

    async def update(
        self, kind: EntityKind, entity_id: EntityId, update_input: BaseModel,
    ) -> BaseModel:
        values = update_input.model_dump(exclude_unset=True)
        self._check_nullable(_MODELS[kind], values)
        async with self._guard("update"):
            row = await self._load(kind, entity_id)
            for field, value in values.items():
                setattr(row, field, value)
            await self._db.commit()
            await self._db.refresh(row)
        return self._to_entity(kind, row)

    async def delete(self, kind: EntityKind, entity_id: EntityId) -> BaseModel:
        async with self._guard("delete"):
            row = await self._load(kind, entity_id)
            snapshot = self._to_entity(kind, row)
            await self._db.delete(row)
            await self._db.commit()
        logger.info(
            f"Deleted {kind.value} {entity_id}",
            extra={"entity_kind": kind.value, "entity_id": str(entity_id)},
        )
        return snapshot

    # ─── helpers ───────────────────────────────────────────────

    async def _load(self, kind: EntityKind, entity_id: EntityId) -> Base:
        row = await self._db.get(_MODELS[kind], entity_id)
        if row is None:
            raise EntityNotFoundError(kind.value, str(entity_id))
        return row

    def _to_entity(self, kind: EntityKind, row: Base) -> BaseModel:
        return get_contract(kind, self._registry).entity.model_validate(row)

    @staticmethod
    def _check_nullable(model: type[Base], values: dict) -> None:
        columns = model.__table__.columns
        for field, value in values.items():
            if value is None and field in columns and not columns[field].nullable:
                raise EngineValidationError(f"'{field}' cannot be null", field)

    @asynccontextmanager
    async def _guard(self, operation: str) -> AsyncIterator[None]:
        """Roll back and map SQLAlchemy failures to StorageError."""
        try:
            yield
        except SQLAlchemyError as e:
            await self._db.rollback()
            logger.error(f"SQL engine {operation} failed: {e}")
            raise map_sqlalchemy_error(e) from e
