"""Team ORM."""

import uuid

from sqlalchemy import String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from taskhub.db.base import Base, EntityColumnsMixin


class Team(EntityColumnsMixin, Base):
    __tablename__ = "teams"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    prefix: Mapped[str | None] = mapped_column(String(10), nullable=True)
    visibility: Mapped[str] = mapped_column(String(20), nullable=False, default="none")
    owner_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), nullable=False)
