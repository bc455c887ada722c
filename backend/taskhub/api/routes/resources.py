"""Resource Routes — five endpoints per registry row, generated from one factory.

Invariants:
    - Every route resolves the caller before anything else: a missing or bad
      key is 401 even when the body is malformed JSON or fails validation
    - Every route answers 200 with the entity (or list) on success
    - Engine failures surface as the generic ENGINE_FAILURE envelope
    - Routes contain no resource-specific logic: schemas come from the contract

Design Decisions:
    - Bodies are parsed by a dependency declared after resolve_identity, not by
      a FastAPI body parameter (FastAPI decodes body parameters before any
      dependency runs)
    - The input schema is still published per route via openapi_extra
    - GET /{resource} takes an optional JSON body; absent or null means empty query
"""

import logging
from typing import Callable
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from taskhub.api.auth import resolve_identity
from taskhub.api.dependencies import get_dispatcher
from taskhub.core.domain_types import EntityId, Identity
from taskhub.core.resource_registry import RESOURCE_REGISTRY, ResourceContract
from taskhub.core.response_shaping import unwrap
from taskhub.services.dispatcher import OperationDispatcher

logger = logging.getLogger(__name__)

_EMPTY_BODIES = (b"", b"null")


def build_resources_router(registry=RESOURCE_REGISTRY, prefix: str = "") -> APIRouter:
    """One router holding every registered resource kind."""
    router = APIRouter(prefix=prefix)
    for contract in registry.values():
        router.include_router(build_resource_router(contract))
    return router


def build_resource_router(contract: ResourceContract) -> APIRouter:
    """Create, get one, list, update, delete for one kind."""
    router = APIRouter(prefix=f"/{contract.path}", tags=[contract.tag])
    _add_create_route(router, contract)
    _add_get_one_route(router, contract)
    _add_get_many_route(router, contract)
    _add_update_route(router, contract)
    _add_delete_route(router, contract)
    return router


# ─── Body parsing ────────────────────────────────────────────────

def json_body(model: type[BaseModel], required: bool = True) -> Callable:
    """Dependency parsing the request body into `model`.

    Declared after resolve_identity in every route signature, so FastAPI
    only reads the body once the caller is known.
    """

    async def parse(request: Request) -> BaseModel:
        raw = (await request.body()).strip()
        if not required and raw in _EMPTY_BODIES:
            return model()
        try:
            return model.model_validate_json(raw)
        except ValidationError as e:
            raise RequestValidationError([
                {**err, "loc": ("body", *err["loc"])}
                for err in e.errors(
                    include_url=False, include_context=False, include_input=False,
                )
            ]) from e

    return parse


def _body_openapi(model: type[BaseModel], required: bool = True) -> dict:
    schema = model.model_json_schema(ref_template="#/components/schemas/{model}")
    schema.pop("$defs", None)
    return {"requestBody": {
        "required": required,
        "content": {"application/json": {"schema": schema}},
    }}


# ─── Routes ──────────────────────────────────────────────────────

def _add_create_route(router: APIRouter, contract: ResourceContract) -> None:

    async def create(
        identity: Identity = Depends(resolve_identity),
        body: BaseModel = Depends(json_body(contract.create_input)),
        dispatcher: OperationDispatcher = Depends(get_dispatcher),
    ):
        return unwrap(await dispatcher.create(contract.kind, body, identity))

    router.add_api_route(
        "", create, methods=["POST"],
        response_model=contract.entity, status_code=status.HTTP_200_OK,
        operation_id=f"create_{contract.kind.value}",
        summary=f"Create a {contract.kind.value}",
        openapi_extra=_body_openapi(contract.create_input),
    )


def _add_get_one_route(router: APIRouter, contract: ResourceContract) -> None:

    async def get_one(
        entity_id: UUID,
        identity: Identity = Depends(resolve_identity),
        dispatcher: OperationDispatcher = Depends(get_dispatcher),
    ):
        return unwrap(await dispatcher.get_one(
            contract.kind, EntityId(entity_id), identity,
        ))

    router.add_api_route(
        "/{entity_id}", get_one, methods=["GET"],
        response_model=contract.entity, status_code=status.HTTP_200_OK,
        operation_id=f"get_{contract.kind.value}",
        summary=f"Get one {contract.kind.value}",
    )


def _add_get_many_route(router: APIRouter, contract: ResourceContract) -> None:

    async def get_many(
        identity: Identity = Depends(resolve_identity),
        query: BaseModel = Depends(json_body(contract.query_input, required=False)),
        dispatcher: OperationDispatcher = Depends(get_dispatcher),
    ):
        return unwrap(await dispatcher.get_many(contract.kind, query, identity))

    router.add_api_route(
        "", get_many, methods=["GET"],
        response_model=list[contract.entity], status_code=status.HTTP_200_OK,
        operation_id=f"get_{contract.path}",
        summary=f"List {contract.path}",
        openapi_extra=_body_openapi(contract.query_input, required=False),
    )


def _add_update_route(router: APIRouter, contract: ResourceContract) -> None:

    async def update(
        entity_id: UUID,
        identity: Identity = Depends(resolve_identity),
        body: BaseModel = Depends(json_body(contract.update_input)),
        dispatcher: OperationDispatcher = Depends(get_dispatcher),
    ):
        return unwrap(await dispatcher.update(
            contract.kind, EntityId(entity_id), body, identity,
        ))

    router.add_api_route(
        "/{entity_id}", update, methods=["PUT"],
        response_model=contract.entity, status_code=status.HTTP_200_OK,
        operation_id=f"update_{contract.kind.value}",
        summary=f"Update a {contract.kind.value}",
        openapi_extra=_body_openapi(contract.update_input),
    )


def _add_delete_route(router: APIRouter, contract: ResourceContract) -> None:

    async def delete(
        entity_id: UUID,
        identity: Identity = Depends(resolve_identity),
        dispatcher: OperationDispatcher = Depends(get_dispatcher),
    ):
        return unwrap(await dispatcher.delete(
            contract.kind, EntityId(entity_id), identity,
        ))

    router.add_api_route(
        "/{entity_id}", delete, methods=["DELETE"],
        response_model=contract.entity, status_code=status.HTTP_200_OK,
        operation_id=f"delete_{contract.kind.value}",
        summary=f"Delete a {contract.kind.value}",
    )
