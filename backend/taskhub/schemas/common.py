"""Shared schema bases — entity envelope and input config.

Invariants:
    - Every entity carries id, created_at, updated_at
    - Input schemas store enum values as plain str, defaults included
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class EntityBase(BaseModel):
    """Fields the engine assigns to every entity."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class InputBase(BaseModel):
    """Base for Create/Update/Query inputs."""
    model_config = ConfigDict(use_enum_values=True, validate_default=True)
