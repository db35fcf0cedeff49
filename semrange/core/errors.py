# semrange/core/errors.py
from __future__ import annotations

__all__ = ["InvalidVersion", "InvalidRange", "ReactorScramError"]



class InvalidVersion(ValueError):
    """
    Raised when text does not match the version grammar.

    `offset` is the UTF-8 byte offset of the first rejected character,
    so callers can point at the exact spot in their diagnostics.
    """
    def __init__(self, text: str, offset: int) -> None:
        super().__init__(f"Invalid semantic version {text!r} (rejected at offset {offset})")
        self.text = text
        self.offset = offset



class InvalidRange(ValueError):
    """Raised when text does not match any range form, or a literal interval is empty."""
    def __init__(self, text: str, reason: str | None = None) -> None:
        message = f"Invalid version range string {text!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.text = text
        self.reason = reason



class ReactorScramError(AssertionError):
    """Raised when semrange violates a core invariant and hits the shutdown button."""
    pass
