"""Pydantic DTOs for category drafts."""

from pydantic import BaseModel, Field, field_validator

from ._validators import optional_text, required_text


class CategoryPayload(BaseModel):
    """Validated create/edit payload for a category."""

    name: str = Field(..., examples=["Handicrafts"])
    description: str = ""
    parent_category: str | None = Field(None, serialization_alias="parentCategory")
    is_active: bool = Field(True, serialization_alias="isActive")

    @field_validator("name", mode="before")
    @classmethod
    def _name_required(cls, value: object) -> str:
        return required_text(value, "Category name is required")

    @field_validator("description", mode="before")
    @classmethod
    def _strip_description(cls, value: object) -> str:
        return optional_text(value) or ""

    @field_validator("parent_category", mode="before")
    @classmethod
    def _blank_parent_is_root(cls, value: object) -> str | None:
        return optional_text(value)
