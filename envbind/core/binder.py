"""Bind environment values onto a record's tagged fields.

Resolution per field, independently of every other field:
    1) the variable's value, if non-empty (unset and empty are the same)
    2) the tag's default, unless it is the "required" marker
    3) a required violation, collected and reported after the pass
A field with neither a value nor a default is left untouched.
"""

from __future__ import annotations

import os
from typing import Any, Callable, List, Optional

from loguru import logger
from pydantic import ValidationError

from envbind.core.coerce import coerce_value
from envbind.core.errors import (
    CoercionError,
    RequiredFieldsError,
    UnsupportedFieldTypeError,
)
from envbind.core.fields import FieldDeclaration, collect_declarations, ensure_record
from envbind.core.presenter import should_mask

Lookup = Callable[[str], Optional[str]]


def _resolve(
    decl: FieldDeclaration, lookup: Optional[Lookup], errors: List[str]
) -> Optional[str]:
    """Return the value to coerce, or None when the field stays as is."""
    name = decl.variable_name
    value = (lookup(name) or "") if lookup is not None else ""
    if value:
        logger.debug(f"{decl.name}: using environment variable {name}")
        return value

    if decl.required:
        errors.append(f"{name} is required")
        return None
    if decl.default is not None:
        logger.debug(f"{decl.name}: {name} not set, using declared default")
        return decl.default

    logger.debug(f"{decl.name}: {name} not set and no default; leaving unchanged")
    return None


def _assign(config: Any, decl: FieldDeclaration, value: str) -> None:
    try:
        coerced = coerce_value(decl.kind, value, decl.annotation)
        # validate_assignment models re-check the value here
        setattr(config, decl.name, coerced)
    except TypeError as e:
        raise UnsupportedFieldTypeError(decl.name, value, str(e)) from e
    except ValidationError as e:
        raise CoercionError(decl.name, value, str(e)) from e
    except ValueError as e:
        raise CoercionError(decl.name, value, str(e)) from e

    masked = should_mask(decl.name) or should_mask(decl.variable_name)
    shown = "<masked>" if masked else repr(coerced)
    logger.debug(f"{decl.name} = {shown}")


def bind(
    config: Any,
    *,
    use_system: bool = True,
    lookup: Optional[Lookup] = None,
) -> Any:
    """Populate the tagged fields of `config` in place.

    Args:
        config: a dataclass or (non-frozen) pydantic model instance.
        use_system: consult the environment at all. When False every field
            resolves from its default only.
        lookup: variable lookup, defaults to `os.environ.get`.

    Returns:
        The same `config` object, for chaining.

    Raises:
        ConfigTypeError: `config` is not an assignable record; nothing is touched.
        CoercionError: a value could not be converted; binding stops there.
        RequiredFieldsError: after the full pass, if any required field was empty.
    """
    ensure_record(config, assignable=True)
    if not use_system:
        lookup = None
    elif lookup is None:
        lookup = os.environ.get

    decls = collect_declarations(config)
    logger.debug(f"Binding {len(decls)} field(s) on {type(config).__name__}")

    errors: List[str] = []
    for decl in decls:
        value = _resolve(decl, lookup, errors)
        if value is not None:
            _assign(config, decl, value)

    if errors:
        raise RequiredFieldsError(errors)
    return config
