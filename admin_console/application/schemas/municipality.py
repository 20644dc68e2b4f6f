"""Pydantic DTOs for municipality drafts."""

from pydantic import BaseModel, Field, field_validator

from ._validators import optional_text, required_text


class MunicipalityPayload(BaseModel):
    """Validated create/edit payload for a municipality."""

    name: str = Field(..., examples=["Calapan City"])
    province: str = Field("", examples=["Oriental Mindoro"])
    is_active: bool = Field(True, serialization_alias="isActive")

    @field_validator("name", mode="before")
    @classmethod
    def _name_required(cls, value: object) -> str:
        return required_text(value, "Municipality name is required")

    @field_validator("province", mode="before")
    @classmethod
    def _strip_province(cls, value: object) -> str:
        return optional_text(value) or ""
