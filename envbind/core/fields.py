"""Field declarations: which attributes of a record bind to which variables.

Two record flavours are supported:

    @dataclass
    class Settings:
        port: int = env_field("PORT,8080", default=0)
        hosts: list[str] = env_field("HOSTS,localhost,127.0.0.1", default_factory=list)
        password: str = env_field("DB_PASSWORD,required", default="")

    class Settings(BaseModel):
        port: int = Field(0, json_schema_extra={"env": "PORT,8080"})

Fields without a tag are never read or written.
"""

from __future__ import annotations

import dataclasses
import typing
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from loguru import logger
from pydantic import BaseModel

from envbind.core.coerce import FieldKind, kind_for_annotation
from envbind.core.constants import ENV_TAG_KEY
from envbind.core.errors import ConfigTypeError
from envbind.core.tags import parse_tag


@dataclass(frozen=True)
class FieldDeclaration:
    """One tagged attribute of a record."""

    name: str
    kind: FieldKind
    annotation: Any
    tag: str

    @property
    def variable_name(self) -> str:
        """Environment variable the field reads from."""
        return parse_tag(self.tag).name

    @property
    def default(self) -> Optional[str]:
        """Raw default payload, "required", or None."""
        return parse_tag(self.tag).default

    @property
    def required(self) -> bool:
        """Whether the tag marks the field as required."""
        return parse_tag(self.tag).required


def env_field(
    tag: str,
    default: Any = None,
    *,
    default_factory: Optional[Callable[[], Any]] = None,
) -> Any:
    """Declare a dataclass field bound to an environment variable.

    Args:
        tag: "NAME", "NAME,default" or "NAME,required".
        default: value the attribute holds until (unless) it is bound.
        default_factory: used instead of `default` for mutable values like lists.
    """
    metadata = {ENV_TAG_KEY: tag}
    if default_factory is not None:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def _is_record_class(obj: Any) -> bool:
    return isinstance(obj, type) and (
        dataclasses.is_dataclass(obj) or issubclass(obj, BaseModel)
    )


def ensure_record(config: Any, *, assignable: bool = False) -> None:
    """Check that `config` is a record instance, optionally an assignable one.

    Raises:
        ConfigTypeError: for classes, non-record values and frozen records.
    """
    if _is_record_class(config):
        raise ConfigTypeError(
            f"config must be an instance, not the class {config.__name__}"
        )
    if not (dataclasses.is_dataclass(config) or isinstance(config, BaseModel)):
        raise ConfigTypeError(
            "config must be a dataclass or pydantic model instance, "
            f"got {type(config).__name__}"
        )
    if not assignable:
        return

    cls = type(config)
    if dataclasses.is_dataclass(config):
        frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    else:
        frozen = bool(cls.model_config.get("frozen", False))
    if frozen:
        raise ConfigTypeError(
            f"config {cls.__name__} is frozen and cannot be assigned"
        )


def _dataclass_declarations(config: Any) -> List[FieldDeclaration]:
    cls = type(config)
    try:
        hints = typing.get_type_hints(cls)
    except NameError as e:
        # Unresolvable forward refs end up UNSUPPORTED, like any unknown type
        logger.warning(f"Could not resolve type hints for {cls.__name__}: {e}")
        hints = {}

    decls = []
    for f in dataclasses.fields(config):
        tag = f.metadata.get(ENV_TAG_KEY)
        if not tag:
            continue
        annotation = hints.get(f.name, f.type)
        decls.append(
            FieldDeclaration(
                name=f.name,
                kind=kind_for_annotation(annotation),
                annotation=annotation,
                tag=tag,
            )
        )
    return decls


def _model_declarations(config: BaseModel) -> List[FieldDeclaration]:
    decls = []
    for name, info in type(config).model_fields.items():
        extra = info.json_schema_extra
        tag = extra.get(ENV_TAG_KEY) if isinstance(extra, dict) else None
        if not tag:
            continue
        decls.append(
            FieldDeclaration(
                name=name,
                kind=kind_for_annotation(info.annotation),
                annotation=info.annotation,
                tag=str(tag),
            )
        )
    return decls


def collect_declarations(config: Any) -> List[FieldDeclaration]:
    """Return the tagged fields of a record instance in declaration order."""
    ensure_record(config)
    if isinstance(config, BaseModel):
        return _model_declarations(config)
    return _dataclass_declarations(config)
