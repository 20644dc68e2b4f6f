"""Pydantic DTOs for plan drafts and plan reassignment."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from ._validators import optional_text, required_text


class PlanPayload(BaseModel):
    """Validated create/edit payload for a subscription plan.

    Numbers are only checked for non-negativity; the backend owns the rest.
    """

    code: str = Field(..., examples=["pro_monthly"])
    name: str = Field(..., examples=["Pro"])
    description: str = ""
    price: float = Field(0.0, ge=0)
    currency: str = "PHP"
    interval: Literal["monthly", "quarterly"] = "monthly"
    features: list[str] = Field(default_factory=list)
    discount_percent: float = Field(0.0, ge=0, serialization_alias="discountPercent")
    discount_expires_at: datetime | None = Field(
        None, serialization_alias="discountExpiresAt"
    )
    is_active: bool = Field(True, serialization_alias="isActive")

    @field_validator("code", mode="before")
    @classmethod
    def _code_required(cls, value: object) -> str:
        return required_text(value, "Plan code is required")

    @field_validator("name", mode="before")
    @classmethod
    def _name_required(cls, value: object) -> str:
        return required_text(value, "Plan name is required")

    @field_validator("description", mode="before")
    @classmethod
    def _strip_description(cls, value: object) -> str:
        return optional_text(value) or ""

    @field_validator("price", "discount_percent", mode="before")
    @classmethod
    def _blank_number_is_zero(cls, value: object) -> object:
        if value is None or (isinstance(value, str) and not value.strip()):
            return 0.0
        return value

    @field_validator("discount_expires_at", mode="before")
    @classmethod
    def _blank_expiry_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("features", mode="before")
    @classmethod
    def _split_features(cls, value: object) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = value.splitlines()
        return [text for text in (optional_text(item) for item in value) if text]
