"""Project Schemas — owned resource; owner_id is always set by the gateway."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from taskhub.core.domain_types import Visibility, WorkStatus
from taskhub.schemas.common import EntityBase, InputBase


class Project(EntityBase):
    name: str
    prefix: str | None = None
    description: str | None = None
    status: WorkStatus = WorkStatus.NONE
    visibility: Visibility = Visibility.NONE
    start_date: datetime | None = None
    due_date: datetime | None = None
    lead_id: UUID | None = None
    owner_id: UUID


class CreateProjectInput(InputBase):
    name: str = Field(min_length=1, max_length=200)
    prefix: str | None = Field(None, max_length=10)
    description: str | None = Field(None, max_length=10_000)
    status: WorkStatus = WorkStatus.NONE
    visibility: Visibility = Visibility.NONE
    start_date: datetime | None = None
    due_date: datetime | None = None
    lead_id: UUID | None = None
    owner_id: UUID | None = None


class UpdateProjectInput(InputBase):
    name: str | None = Field(None, min_length=1, max_length=200)
    prefix: str | None = Field(None, max_length=10)
    description: str | None = Field(None, max_length=10_000)
    status: WorkStatus | None = None
    visibility: Visibility | None = None
    start_date: datetime | None = None
    due_date: datetime | None = None
    lead_id: UUID | None = None


class GetProjectsInput(InputBase):
    status: WorkStatus | None = None
    visibility: Visibility | None = None
    lead_id: UUID | None = None
    owner_id: UUID | None = None
