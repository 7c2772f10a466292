"""Field rules shared by the catalog aggregates."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from catalog_core.domain.notification import Notification

MAX_NAME_LENGTH: Final = 255


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def validate_required_text(
    notification: Notification,
    value: str | None,
    field: str,
    max_length: int = MAX_NAME_LENGTH,
) -> None:
    """Record an error on *field* when *value* is blank or too long."""
    if value is None or not value.strip():
        notification.add_error(f"{field} should not be empty", field)
        return
    if len(value) > max_length:
        notification.add_error(
            f"{field} must be shorter than or equal to {max_length} characters", field
        )
