"""Notification — per-operation accumulator of validation errors."""

from __future__ import annotations


class Notification:
    """Collects validation messages for one operation.

    Field errors are grouped under their field. An error without a field is
    keyed by its own message, so every entry of ``to_json()`` keeps the
    position at which it was first added. Messages are appended, never
    replaced.

    Usage::

        notification = Notification()
        notification.add_error("name should not be empty", "name")
        notification.add_error("something went wrong")
        notification.has_errors()   # True
        notification.to_json()
        # [{"name": ["name should not be empty"]}, "something went wrong"]
    """

    def __init__(self) -> None:
        self.errors: dict[str, str | list[str]] = {}

    def add_error(self, error: str, field: str | None = None) -> None:
        """Append a single *error* to *field*, or record it on its own."""
        if field is None:
            self.errors.setdefault(error, error)
            return
        messages = self.errors.setdefault(field, [])
        if isinstance(messages, str):
            # a bare error already took this key
            messages = self.errors[field] = [messages]
        if error not in messages:
            messages.append(error)

    def set_error(self, error: str | list[str], field: str | None = None) -> None:
        """Append one or many messages to *field* without clearing prior ones."""
        for message in [error] if isinstance(error, str) else error:
            self.add_error(message, field)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def copy_errors(self, notification: Notification) -> None:
        """Merge every error held by *notification* into this one."""
        for key, value in notification.errors.items():
            if isinstance(value, str):
                self.add_error(value)
            else:
                self.set_error(value, key)

    def to_json(self) -> list[str | dict[str, list[str]]]:
        return [
            value if isinstance(value, str) else {key: list(value)}
            for key, value in self.errors.items()
        ]

    def __repr__(self) -> str:
        return f"Notification({self.to_json()!r})"
