"""Shared field normalizers for draft schemas."""

from typing import Any

from pydantic import ValidationError


def required_text(value: Any, message: str) -> str:
    """Trimmed text that must not be empty."""
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValueError(message)
    return text


def optional_text(value: Any) -> str | None:
    """Trimmed text, or None when blank."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def first_error_message(exc: ValidationError) -> tuple[str, str | None]:
    """The first validation error as (message, field) for a notification."""
    errors = exc.errors()
    if not errors:
        return str(exc), None
    error = errors[0]
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    ctx_error = (error.get("ctx") or {}).get("error")
    if ctx_error is not None:
        return str(ctx_error), field
    message = error.get("msg", "Invalid value")
    return (f"{field}: {message}" if field else message), field
