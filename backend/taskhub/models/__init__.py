"""ORM Models — SQLAlchemy declarative models backing the reference engine.

Invariants:
    - All models inherit from Base (db/base.py)
    - One table per EntityKind, plus api_keys for credential lookup

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all / alembic autogenerate runs
"""

from taskhub.models.task import Task  # noqa: F401
from taskhub.models.project import Project  # noqa: F401
from taskhub.models.member import Member  # noqa: F401
from taskhub.models.team import Team  # noqa: F401
from taskhub.models.label import Label  # noqa: F401
from taskhub.models.api_key import ApiKey  # noqa: F401
