"""Exception classes for penmode.

Provides standardized exceptions for error handling throughout penmode.

No-op outcomes (an empty or already-marked word) are values, not errors.
See penmode.edits.NoOp.
"""

from __future__ import annotations


class PenModeError(Exception):
    """Base exception for all penmode errors.

    Subclass this for specific error categories.
    """

    pass


class ContractViolation(PenModeError):
    """A caller broke a precondition.

    Indicates a bug in the calling code rather than a recoverable condition.
    """

    pass


class CursorError(ContractViolation):
    """Cursor offset outside ``0 <= cursor <= len(line)``."""

    def __init__(self, cursor: object, length: int | None = None) -> None:
        """Initialize cursor error.

        Args:
            cursor: The offending cursor value
            length: Length of the line it was checked against (optional)
        """
        self.cursor = cursor
        self.length = length

        if length is None:
            message = f"invalid cursor {cursor!r}"
        else:
            message = f"cursor {cursor!r} out of range for line of length {length}"
        super().__init__(message)


class EditRejectedError(PenModeError):
    """The text buffer refused to apply an edit.

    The document is left as it was before the edit was attempted.
    """

    def __init__(self, message: str, lineno: int | None = None) -> None:
        """Initialize edit rejection.

        Args:
            message: Description of the failure
            lineno: Buffer line the edit targeted (0-indexed, optional)
        """
        self.message = message
        self.lineno = lineno

        location = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{location}{message}")


class ConfigError(PenModeError):
    """Invalid configuration value."""

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        super().__init__(f"Config '{key}': {message}")
