"""Label Schemas."""

from pydantic import Field

from taskhub.schemas.common import EntityBase, InputBase


class Label(EntityBase):
    name: str
    description: str | None = None
    color: str | None = None


class CreateLabelInput(InputBase):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(None, max_length=2000)
    color: str | None = Field(None, pattern=r"^#[0-9a-fA-F]{6}$")


class UpdateLabelInput(InputBase):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=2000)
    color: str | None = Field(None, pattern=r"^#[0-9a-fA-F]{6}$")


class GetLabelsInput(InputBase):
    name: str | None = None
    color: str | None = None
