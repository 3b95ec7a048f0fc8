"""Exceptions raised while loading configuration."""

from __future__ import annotations

from typing import List, Optional


class ConfigError(Exception):
    """Base class for every error raised by envbind."""


class ConfigTypeError(ConfigError, TypeError):
    """The bind target is not an assignable record instance."""


class RequiredFieldsError(ConfigError, ValueError):
    """One or more required fields had no value.

    Attributes:
        missing (list[str]): violations in field order, e.g. "DB_PASSWORD is required".
    """

    def __init__(self, missing: List[str]) -> None:
        self.missing = list(missing)
        super().__init__(f"validation errors: {'; '.join(self.missing)}")


class CoercionError(ConfigError, ValueError):
    """A resolved value could not be converted to its field's type."""

    def __init__(self, field: str, value: Optional[str], reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"error setting field {field}: {reason}")


class UnsupportedFieldTypeError(CoercionError):
    """The field's annotation is outside the supported set."""


class EnvFileError(ConfigError, OSError):
    """An explicitly requested .env file could not be loaded."""
