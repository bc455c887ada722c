"""Member ORM — people who hold API keys and own tasks/projects."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from taskhub.db.base import Base, EntityColumnsMixin


class Member(EntityColumnsMixin, Base):
    __tablename__ = "members"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    role: Mapped[str] = mapped_column(String(20), nullable=False, default="member")
    github_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    google_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
