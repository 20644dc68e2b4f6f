"""Pydantic DTOs for refund decisions."""

from pydantic import BaseModel, field_validator

from ._validators import optional_text, required_text


class RefundApproval(BaseModel):
    """Approval note is optional."""

    note: str | None = None

    @field_validator("note", mode="before")
    @classmethod
    def _strip_note(cls, value: object) -> str | None:
        return optional_text(value)


class RefundRejection(BaseModel):
    """A rejection must say why."""

    note: str

    @field_validator("note", mode="before")
    @classmethod
    def _note_required(cls, value: object) -> str:
        return required_text(value, "A reason is required to reject a refund")
