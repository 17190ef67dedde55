"""Status message container for code viewer notifications."""

from dataclasses import dataclass


@dataclass
class StatusMessage:
    """Container for a transient notification raised by a code viewer."""
    text: str
    is_error: bool = False
    timeout: int | None = 3000  # Milliseconds before the notification is cleared
