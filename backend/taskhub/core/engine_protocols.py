"""Boundary Protocols — contracts between the gateway and its collaborators.

Invariants:
    - The gateway reaches the engine and the credential store only through these
    - Engine methods raise EngineError subclasses on failure, never return sentinels
    - Every engine method receives the EntityKind (one engine serves all kinds)
    - CredentialValidator returns None for any key it cannot resolve

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
"""

from typing import Protocol, Sequence

from pydantic import BaseModel

from taskhub.core.domain_types import EntityId, EntityKind, Identity


class Engine(Protocol):
    """Persistence/business engine behind the gateway."""
    async def create(
        self, kind: EntityKind, create_input: BaseModel,
    ) -> BaseModel: ...
    async def get_one(self, kind: EntityKind, entity_id: EntityId) -> BaseModel: ...
    async def get_many(
        self, kind: EntityKind, query: BaseModel,
    ) -> Sequence[BaseModel]: ...
    async def update(
        self, kind: EntityKind, entity_id: EntityId, update_input: BaseModel,
    ) -> BaseModel: ...
    async def delete(self, kind: EntityKind, entity_id: EntityId) -> BaseModel: ...


class CredentialValidator(Protocol):
    """Resolves an API key to the member it was issued to."""
    async def validate(self, api_key: str) -> Identity | None: ...
