"""Public API for the core binding engine."""

from .binder import bind
from .coerce import FieldKind, parse_bool, parse_duration, parse_string_list
from .errors import (
    CoercionError,
    ConfigError,
    ConfigTypeError,
    EnvFileError,
    RequiredFieldsError,
    UnsupportedFieldTypeError,
)
from .fields import FieldDeclaration, collect_declarations, env_field
from .presenter import should_mask, sprint
from .tags import ParsedTag, parse_tag

__all__ = [
    "bind",
    "collect_declarations",
    "env_field",
    "parse_bool",
    "parse_duration",
    "parse_string_list",
    "parse_tag",
    "should_mask",
    "sprint",
    "CoercionError",
    "ConfigError",
    "ConfigTypeError",
    "EnvFileError",
    "FieldDeclaration",
    "FieldKind",
    "ParsedTag",
    "RequiredFieldsError",
    "UnsupportedFieldTypeError",
]
