"""Resource cases — request builders and payloads for all 25 endpoints."""

from uuid import uuid4

from taskhub.core.domain_types import EntityKind, Operation
from taskhub.core.resource_registry import RESOURCE_REGISTRY

VALID_KEY = "thk_live_0123456789abcdef"

CREATE_PAYLOADS = {
    EntityKind.TASK: {"title": "Ship release"},
    EntityKind.PROJECT: {"name": "Apollo"},
    EntityKind.MEMBER: {"name": "Ada", "email": "ada@example.com"},
    EntityKind.TEAM: {"name": "Core", "owner_id": str(uuid4())},
    EntityKind.LABEL: {"name": "bug", "color": "#ff0000"},
}

SEED_FIELDS = {
    EntityKind.TASK: {"title": "Seeded", "owner_id": uuid4()},
    EntityKind.PROJECT: {"name": "Seeded", "owner_id": uuid4()},
    EntityKind.MEMBER: {"name": "Seeded", "email": "seed@example.com"},
    EntityKind.TEAM: {"name": "Seeded", "owner_id": uuid4()},
    EntityKind.LABEL: {"name": "Seeded"},
}

ENDPOINTS = [
    (kind, operation)
    for kind in EntityKind
    for operation in Operation
]


def endpoint_request(kind: EntityKind, operation: Operation, entity_id) -> dict:
    """httpx request kwargs for one (kind, operation)."""
    path = f"/{RESOURCE_REGISTRY[kind].path}"
    if operation is Operation.CREATE:
        return {"method": "POST", "url": path, "json": CREATE_PAYLOADS[kind]}
    if operation is Operation.GET_MANY:
        return {"method": "GET", "url": path}
    if operation is Operation.GET_ONE:
        return {"method": "GET", "url": f"{path}/{entity_id}"}
    if operation is Operation.UPDATE:
        return {"method": "PUT", "url": f"{path}/{entity_id}", "json": {}}
    return {"method": "DELETE", "url": f"{path}/{entity_id}"}
