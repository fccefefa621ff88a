from typing import Any


class InvalidTimestampError(ValueError):
    """Raised when an activity event carries no usable creation timestamp."""

    def __init__(self, value: Any, reason: str = "unparseable timestamp"):
        self.value = value
        self.reason = reason
        super().__init__(f"{reason}: {value!r}")


class ContentUnavailableError(RuntimeError):
    """Raised when the coach needs motivational content that is not stored."""
