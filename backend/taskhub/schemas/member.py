"""Member Schemas — not owned; creation input forwarded unchanged."""

from pydantic import Field

from taskhub.core.domain_types import MemberRole
from taskhub.schemas.common import EntityBase, InputBase


class Member(EntityBase):
    name: str
    email: str
    role: MemberRole = MemberRole.MEMBER
    github_id: str | None = None
    google_id: str | None = None
    photo_url: str | None = None


class CreateMemberInput(InputBase):
    name: str = Field(min_length=1, max_length=200)
    email: str = Field(min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    role: MemberRole = MemberRole.MEMBER
    github_id: str | None = Field(None, max_length=100)
    google_id: str | None = Field(None, max_length=100)
    photo_url: str | None = Field(None, max_length=2000)


class UpdateMemberInput(InputBase):
    name: str | None = Field(None, min_length=1, max_length=200)
    email: str | None = Field(
        None, min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$",
    )
    role: MemberRole | None = None
    github_id: str | None = Field(None, max_length=100)
    google_id: str | None = Field(None, max_length=100)
    photo_url: str | None = Field(None, max_length=2000)


class GetMembersInput(InputBase):
    name: str | None = None
    email: str | None = None
    role: MemberRole | None = None
