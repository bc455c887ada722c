"""SQL Engine — reference engine against in-memory SQLite.

Tests cover:
    - create/get/update/delete round through the ORM for every kind
    - get_many filters by set query fields and returns creation order
    - delete returns the pre-delete snapshot
    - missing ids raise EntityNotFoundError; null required fields raise
      EngineValidationError; constraint violations raise StorageError
"""

from uuid import uuid4

import pytest

from taskhub.core.domain_types import EntityId, EntityKind
from taskhub.core.errors import (
    EngineValidationError, EntityNotFoundError, StorageError,
)
from taskhub.infrastructure.sql_engine import SqlEngine
from taskhub.schemas.label import CreateLabelInput, GetLabelsInput, UpdateLabelInput
from taskhub.schemas.member import CreateMemberInput
from taskhub.schemas.project import CreateProjectInput, GetProjectsInput
from taskhub.schemas.task import (
    CreateTaskInput, GetTasksInput, Task, UpdateTaskInput,
)
from taskhub.schemas.team import CreateTeamInput, GetTeamsInput


@pytest.fixture
def engine(test_db):
    return SqlEngine(test_db)


async def test_create_task_returns_entity_schema(engine):
    owner = uuid4()
    task = await engine.create(
        EntityKind.TASK, CreateTaskInput(title="Write docs", owner_id=owner),
    )
    assert isinstance(task, Task)
    assert task.owner_id == owner
    assert task.status.value == "none"
    assert task.created_at is not None


async def test_get_one_roundtrip(engine):
    label = await engine.create(EntityKind.LABEL, CreateLabelInput(name="bug"))
    fetched = await engine.get_one(EntityKind.LABEL, EntityId(label.id))
    assert fetched.id == label.id
    assert fetched.name == "bug"


async def test_get_one_missing_raises_not_found(engine):
    with pytest.raises(EntityNotFoundError):
        await engine.get_one(EntityKind.PROJECT, EntityId(uuid4()))


async def test_kinds_do_not_share_ids(engine):
    label = await engine.create(EntityKind.LABEL, CreateLabelInput(name="bug"))
    with pytest.raises(EntityNotFoundError):
        await engine.get_one(EntityKind.TEAM, EntityId(label.id))


async def test_get_many_empty_table(engine):
    assert await engine.get_many(EntityKind.TEAM, GetTeamsInput()) == []


async def test_get_many_creation_order(engine):
    created = [
        await engine.create(EntityKind.LABEL, CreateLabelInput(name=f"l{i}"))
        for i in range(3)
    ]
    listed = await engine.get_many(EntityKind.LABEL, GetLabelsInput())
    assert [entity.id for entity in listed] == [entity.id for entity in created]


async def test_get_many_filters_on_set_fields(engine):
    mine, theirs = uuid4(), uuid4()
    await engine.create(EntityKind.PROJECT, CreateProjectInput(name="A", owner_id=mine))
    await engine.create(EntityKind.PROJECT, CreateProjectInput(name="B", owner_id=theirs))
    await engine.create(
        EntityKind.PROJECT,
        CreateProjectInput(name="C", owner_id=mine, status="done"),
    )

    by_owner = await engine.get_many(EntityKind.PROJECT, GetProjectsInput(owner_id=mine))
    assert [p.name for p in by_owner] == ["A", "C"]

    done = await engine.get_many(
        EntityKind.PROJECT, GetProjectsInput(owner_id=mine, status="done"),
    )
    assert [p.name for p in done] == ["C"]


async def test_update_applies_only_sent_fields(engine):
    task = await engine.create(
        EntityKind.TASK,
        CreateTaskInput(title="Old", description="keep me", owner_id=uuid4()),
    )
    updated = await engine.update(
        EntityKind.TASK, EntityId(task.id), UpdateTaskInput(title="New"),
    )
    assert updated.title == "New"
    assert updated.description == "keep me"
    assert updated.owner_id == task.owner_id


async def test_update_can_clear_nullable_field(engine):
    label = await engine.create(
        EntityKind.LABEL, CreateLabelInput(name="bug", description="x"),
    )
    updated = await engine.update(
        EntityKind.LABEL, EntityId(label.id), UpdateLabelInput(description=None),
    )
    assert updated.description is None


async def test_update_null_required_field_rejected(engine):
    task = await engine.create(
        EntityKind.TASK, CreateTaskInput(title="Old", owner_id=uuid4()),
    )
    with pytest.raises(EngineValidationError):
        await engine.update(
            EntityKind.TASK, EntityId(task.id), UpdateTaskInput(title=None),
        )


async def test_update_missing_raises_not_found(engine):
    with pytest.raises(EntityNotFoundError):
        await engine.update(
            EntityKind.LABEL, EntityId(uuid4()), UpdateLabelInput(name="x"),
        )


async def test_delete_returns_snapshot_and_removes(engine):
    team = await engine.create(
        EntityKind.TEAM, CreateTeamInput(name="Core", owner_id=uuid4()),
    )
    before = await engine.get_one(EntityKind.TEAM, EntityId(team.id))

    deleted = await engine.delete(EntityKind.TEAM, EntityId(team.id))

    assert deleted == before
    with pytest.raises(EntityNotFoundError):
        await engine.get_one(EntityKind.TEAM, EntityId(team.id))


async def test_duplicate_member_email_is_storage_error(engine):
    await engine.create(
        EntityKind.MEMBER, CreateMemberInput(name="Ada", email="ada@example.com"),
    )
    with pytest.raises(StorageError):
        await engine.create(
            EntityKind.MEMBER, CreateMemberInput(name="Ada 2", email="ada@example.com"),
        )
    # session still usable after rollback
    assert await engine.get_many(EntityKind.TASK, GetTasksInput()) == []
