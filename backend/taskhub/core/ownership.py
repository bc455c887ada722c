"""Ownership Policy — server-side owner attribution for owned resource kinds.

Invariants:
    - For owned kinds, the returned input's owner field == identity.member_id,
      whatever the caller sent (forged id, null, or absent)
    - For non-owned kinds, the input object is returned unchanged
    - Pure: never mutates the given input, never raises for a registered kind
    - Applied to Create only
"""

from typing import Mapping, TypeVar

from pydantic import BaseModel

from taskhub.core.domain_types import EntityKind, Identity
from taskhub.core.resource_registry import (
    RESOURCE_REGISTRY, ResourceContract, get_contract,
)

InputT = TypeVar("InputT", bound=BaseModel)


def apply_ownership(
    kind: EntityKind,
    create_input: InputT,
    identity: Identity,
    registry: Mapping[EntityKind, ResourceContract] = RESOURCE_REGISTRY,
) -> InputT:
    """Return create_input with the owner field forced to the caller."""
    contract = get_contract(kind, registry)
    if not contract.owned:
        return create_input
    return create_input.model_copy(
        update={contract.owner_field: identity.member_id},
    )
