"""Domain Types — rich types that replace bare primitives across the gateway.

Invariants:
    - EntityId, MemberId wrap UUIDs; never use bare UUID in dispatch logic
    - EntityKind is a closed set of five resource families
    - Operation is a closed set of five verbs, identical for every kind
    - Identity is immutable and derived per request (never cached)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", UUID)
MemberId = NewType("MemberId", UUID)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, resolved from an API key for one request."""
    member_id: MemberId


# ─── Gateway Enums ───────────────────────────────────────────────

class EntityKind(str, Enum):
    """The resource families exposed by the gateway."""
    TASK = "task"
    PROJECT = "project"
    MEMBER = "member"
    TEAM = "team"
    LABEL = "label"


class Operation(str, Enum):
    """Uniform operation set: every kind supports all five."""
    CREATE = "create"
    GET_ONE = "get_one"
    GET_MANY = "get_many"
    UPDATE = "update"
    DELETE = "delete"


# ─── Entity Field Enums ──────────────────────────────────────────

class WorkStatus(str, Enum):
    """Progress states shared by tasks and projects."""
    NONE = "none"
    BACKLOG = "backlog"
    TO_DO = "to_do"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELED = "canceled"


class TaskPriority(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class Visibility(str, Enum):
    """Who can see a project or team."""
    NONE = "none"
    PRIVATE = "private"
    INTERNAL = "internal"
    PUBLIC = "public"


class MemberRole(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"
    READ_ONLY = "read_only"
