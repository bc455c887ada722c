"""Label ORM."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskhub.db.base import Base, EntityColumnsMixin


class Label(EntityColumnsMixin, Base):
    __tablename__ = "labels"

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    color: Mapped[str | None] = mapped_column(String(7), nullable=True)
