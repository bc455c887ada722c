"""Task Schemas — owned resource; owner_id is always set by the gateway."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from taskhub.core.domain_types import TaskPriority, WorkStatus
from taskhub.schemas.common import EntityBase, InputBase


class Task(EntityBase):
    title: str
    description: str | None = None
    status: WorkStatus = WorkStatus.NONE
    priority: TaskPriority = TaskPriority.NONE
    due_date: datetime | None = None
    project_id: UUID | None = None
    lead_id: UUID | None = None
    parent_id: UUID | None = None
    owner_id: UUID


class CreateTaskInput(InputBase):
    """Task creation. owner_id is accepted but overwritten with the caller."""
    title: str = Field(min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    status: WorkStatus = WorkStatus.NONE
    priority: TaskPriority = TaskPriority.NONE
    due_date: datetime | None = None
    project_id: UUID | None = None
    lead_id: UUID | None = None
    parent_id: UUID | None = None
    owner_id: UUID | None = None


class UpdateTaskInput(InputBase):
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = Field(None, max_length=10_000)
    status: WorkStatus | None = None
    priority: TaskPriority | None = None
    due_date: datetime | None = None
    project_id: UUID | None = None
    lead_id: UUID | None = None
    parent_id: UUID | None = None


class GetTasksInput(InputBase):
    status: WorkStatus | None = None
    priority: TaskPriority | None = None
    project_id: UUID | None = None
    lead_id: UUID | None = None
    owner_id: UUID | None = None
    parent_id: UUID | None = None
