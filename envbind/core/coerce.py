"""Conversion of raw environment strings into typed field values.

The supported set is closed: str, int, bool, float, list[str] and
datetime.timedelta (plus Optional[...] of any of them). Every other
annotation maps to FieldKind.UNSUPPORTED and always fails to coerce.
"""

from __future__ import annotations

import math
import re
import types
from datetime import timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, List, Optional, Union, get_args, get_origin

from envbind.core.constants import INT_MAX, INT_MIN


class FieldKind(str, Enum):
    """Semantic type of a bindable field."""

    STRING = "string"
    INT = "int"
    BOOL = "bool"
    FLOAT = "float"
    STRING_LIST = "string_list"
    DURATION = "duration"
    UNSUPPORTED = "unsupported"


_TRUE_VALUES = {"true", "1", "yes", "on", "t"}
_FALSE_VALUES = {"false", "0", "no", "off", "f", ""}

_INT_RE = re.compile(r"[+-]?[0-9]+")

# Longer units first so "ms" is not read as "m" followed by "s".
_DURATION_UNITS_NS = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),  # U+00B5 micro sign
    "μs": Decimal(1_000),  # U+03BC greek mu
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}
_UNIT_PATTERN = "ns|us|µs|μs|ms|s|m|h"
_NUMBER_PATTERN = r"[0-9]+(?:\.[0-9]*)?|\.[0-9]+"
_DURATION_PART_RE = re.compile(rf"({_NUMBER_PATTERN})({_UNIT_PATTERN})")
_DURATION_RE = re.compile(rf"[+-]?(?:(?:{_NUMBER_PATTERN})(?:{_UNIT_PATTERN}))+")


def _unwrap_optional(tp: Any) -> Any:
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = [a for a in get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return args[0]
    return tp


def kind_for_annotation(tp: Any) -> FieldKind:
    """Map a resolved type annotation to its FieldKind."""
    tp = _unwrap_optional(tp)

    # timedelta first; everything after is an exact type match
    if tp is timedelta:
        return FieldKind.DURATION
    if tp is str:
        return FieldKind.STRING
    if tp is bool:
        return FieldKind.BOOL
    if tp is int:
        return FieldKind.INT
    if tp is float:
        return FieldKind.FLOAT
    if get_origin(tp) is list and get_args(tp) == (str,):
        return FieldKind.STRING_LIST
    return FieldKind.UNSUPPORTED


def type_name(tp: Any) -> str:
    """Readable name for an annotation, used in error messages."""
    return getattr(tp, "__name__", None) or str(tp)


def parse_bool(value: str) -> bool:
    """Parse a boolean, case-insensitively.

    Raises:
        ValueError: if the value is in neither the true nor the false set.
    """
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean value: {value}")


def parse_string_list(value: str) -> List[str]:
    """Split on commas, trim each item and drop the empty ones."""
    if value == "":
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_int(value: str) -> int:
    """Parse a base-10 signed 64-bit integer."""
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"not a base-10 integer: {value!r}")
    result = int(value)
    if not INT_MIN <= result <= INT_MAX:
        raise ValueError(f"value out of range: {value!r}")
    return result


def parse_float(value: str) -> float:
    """Parse a decimal float; surrounding whitespace and underscores are rejected."""
    if value != value.strip() or "_" in value:
        raise ValueError(f"not a float: {value!r}")
    result = float(value)
    if math.isinf(result) and value.lstrip("+-").lower() not in ("inf", "infinity"):
        raise ValueError(f"value out of range: {value!r}")
    return result


def parse_duration(value: str) -> timedelta:
    """Parse a unit-suffixed duration such as "30s", "1h30m" or "-1.5ms".

    Valid units are ns, us (or µs), ms, s, m and h. A bare "0" is allowed.
    The result is truncated to microsecond resolution.

    Raises:
        ValueError: on empty input, a missing or unknown unit, or a total
            outside the signed 64-bit nanosecond range.
    """
    if value in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION_RE.fullmatch(value):
        raise ValueError(f"invalid duration: {value!r}")

    negative = value.startswith("-")
    total_ns = Decimal(0)
    for number, unit in _DURATION_PART_RE.findall(value):
        total_ns += Decimal(number) * _DURATION_UNITS_NS[unit]
    if total_ns > (-INT_MIN if negative else INT_MAX):
        raise ValueError(f"invalid duration: {value!r} out of range")

    result = timedelta(microseconds=int(total_ns // 1000))
    return -result if negative else result


def _decimal_units(value: int, unit: int) -> str:
    whole, frac = divmod(value, unit)
    if not frac:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{frac:0{digits}d}".rstrip("0")


def format_duration(value: timedelta) -> str:
    """Render a timedelta in the unit syntax parse_duration accepts.

    Examples: "30s", "5m0s", "1h30m0s", "1.5s", "250ms", "10µs", "0s".
    """
    us = value // timedelta(microseconds=1)
    if us == 0:
        return "0s"
    sign = "-" if us < 0 else ""
    us = abs(us)
    if us < 1_000:
        return f"{sign}{us}µs"
    if us < 1_000_000:
        return f"{sign}{_decimal_units(us, 1_000)}ms"

    hours, rest = divmod(us, 3_600_000_000)
    minutes, rest = divmod(rest, 60_000_000)
    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{out}{_decimal_units(rest, 1_000_000)}s"


def coerce_value(kind: FieldKind, value: str, annotation: Optional[Any] = None) -> Any:
    """Convert a resolved raw string into the Python value for `kind`.

    Raises:
        ValueError: the value is malformed for the kind; the message names it.
        TypeError: the kind is UNSUPPORTED.
    """
    # duration before the numeric kinds
    if kind is FieldKind.DURATION:
        try:
            return parse_duration(value)
        except (ValueError, OverflowError) as e:
            raise ValueError(f"invalid duration value '{value}': {e}") from e

    if kind is FieldKind.STRING:
        return value

    if kind is FieldKind.INT:
        try:
            return parse_int(value)
        except ValueError as e:
            raise ValueError(f"invalid integer value '{value}': {e}") from e

    if kind is FieldKind.BOOL:
        try:
            return parse_bool(value)
        except ValueError as e:
            raise ValueError(f"invalid boolean value '{value}': {e}") from e

    if kind is FieldKind.FLOAT:
        try:
            return parse_float(value)
        except ValueError as e:
            raise ValueError(f"invalid float value '{value}': {e}") from e

    if kind is FieldKind.STRING_LIST:
        return parse_string_list(value)

    raise TypeError(f"unsupported field type: {type_name(annotation or kind.value)}")
