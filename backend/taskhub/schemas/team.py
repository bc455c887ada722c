"""Team Schemas — not owned: a caller-supplied owner_id is kept as sent."""

from uuid import UUID

from pydantic import Field

from taskhub.core.domain_types import Visibility
from taskhub.schemas.common import EntityBase, InputBase


class Team(EntityBase):
    name: str
    prefix: str | None = None
    visibility: Visibility = Visibility.NONE
    owner_id: UUID


class CreateTeamInput(InputBase):
    name: str = Field(min_length=1, max_length=200)
    prefix: str | None = Field(None, max_length=10)
    visibility: Visibility = Visibility.NONE
    owner_id: UUID


class UpdateTeamInput(InputBase):
    name: str | None = Field(None, min_length=1, max_length=200)
    prefix: str | None = Field(None, max_length=10)
    visibility: Visibility | None = None
    owner_id: UUID | None = None


class GetTeamsInput(InputBase):
    name: str | None = None
    visibility: Visibility | None = None
    owner_id: UUID | None = None
