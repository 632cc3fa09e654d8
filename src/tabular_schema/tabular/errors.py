"""Errors raised while interpreting a schema as a table.

Every error here derives from InvalidTabularSchemaError, so callers can catch
"any tabular-schema problem" without matching message text while still reading
the specific message from ``err.message``.
"""

from __future__ import annotations

INVALID_TABULAR_SCHEMA = "invalid tabular schema"


class InvalidTabularSchemaError(ValueError):
    """Base error for schemas that don't work as tables."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"{INVALID_TABULAR_SCHEMA}: {message}")


class CompileError(InvalidTabularSchemaError):
    """The schema's structural shape cannot be compiled into columns."""


class InvalidSchemaError(CompileError):
    """A required container is missing or has the wrong JSON type."""


class UnimplementedSchemaError(CompileError):
    """The schema uses a recognized shape that has no compiler yet."""


class TitleValidationError(InvalidTabularSchemaError):
    """Column titles are not usable as machine-readable names."""

    def __init__(self, problems: list[str]):
        self.problems = list(problems)
        super().__init__("column names have problems:\n" + "\n".join(self.problems))


class ColTypeDecodeError(ValueError):
    """A column type value is neither a string nor an array of strings."""

    def __init__(self, message: str = "invalid data for ColType"):
        self.message = message
        super().__init__(message)
