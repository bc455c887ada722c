"""Resource Contract Registry — one row per entity kind, read-only after import.

Invariants:
    - Exactly one ResourceContract per EntityKind
    - owned=True only for Task and Project
    - Every owned contract's create_input declares its owner_field
    - RESOURCE_REGISTRY is a read-only mapping (never mutated at runtime)

Design Decisions:
    - Ownership is a flag on the row, not knowledge scattered across endpoints:
      adding a resource kind is a data change
    - Schemas referenced by class, not by name: no registry lookups by string
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from pydantic import BaseModel

from taskhub.core.domain_types import EntityKind
from taskhub.schemas.label import (
    CreateLabelInput, GetLabelsInput, Label, UpdateLabelInput,
)
from taskhub.schemas.member import (
    CreateMemberInput, GetMembersInput, Member, UpdateMemberInput,
)
from taskhub.schemas.project import (
    CreateProjectInput, GetProjectsInput, Project, UpdateProjectInput,
)
from taskhub.schemas.task import (
    CreateTaskInput, GetTasksInput, Task, UpdateTaskInput,
)
from taskhub.schemas.team import (
    CreateTeamInput, GetTeamsInput, Team, UpdateTeamInput,
)


@dataclass(frozen=True)
class ResourceContract:
    """Path, schemas and ownership for one entity kind."""
    kind: EntityKind
    path: str
    entity: type[BaseModel]
    create_input: type[BaseModel]
    update_input: type[BaseModel]
    query_input: type[BaseModel]
    owned: bool = False
    owner_field: str = "owner_id"

    @property
    def tag(self) -> str:
        """OpenAPI tag: Task, Project, ..."""
        return self.kind.value.capitalize()


RESOURCE_REGISTRY: Mapping[EntityKind, ResourceContract] = MappingProxyType({
    EntityKind.TASK: ResourceContract(
        kind=EntityKind.TASK, path="tasks", entity=Task,
        create_input=CreateTaskInput, update_input=UpdateTaskInput,
        query_input=GetTasksInput, owned=True,
    ),
    EntityKind.PROJECT: ResourceContract(
        kind=EntityKind.PROJECT, path="projects", entity=Project,
        create_input=CreateProjectInput, update_input=UpdateProjectInput,
        query_input=GetProjectsInput, owned=True,
    ),
    EntityKind.MEMBER: ResourceContract(
        kind=EntityKind.MEMBER, path="members", entity=Member,
        create_input=CreateMemberInput, update_input=UpdateMemberInput,
        query_input=GetMembersInput,
    ),
    EntityKind.TEAM: ResourceContract(
        kind=EntityKind.TEAM, path="teams", entity=Team,
        create_input=CreateTeamInput, update_input=UpdateTeamInput,
        query_input=GetTeamsInput,
    ),
    EntityKind.LABEL: ResourceContract(
        kind=EntityKind.LABEL, path="labels", entity=Label,
        create_input=CreateLabelInput, update_input=UpdateLabelInput,
        query_input=GetLabelsInput,
    ),
})


def get_contract(
    kind: EntityKind,
    registry: Mapping[EntityKind, ResourceContract] = RESOURCE_REGISTRY,
) -> ResourceContract:
    """Row for `kind`. Raises ValueError for a kind with no row."""
    try:
        return registry[kind]
    except KeyError:
        raise ValueError(f"No resource contract registered for '{kind}'") from None
