"""Human-readable dump of a bound record with sensitive values masked."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from envbind.core.coerce import format_duration
from envbind.core.constants import (
    MASK_TOKEN,
    MASKED_KEYWORDS,
    NAME_COLUMN_WIDTH,
    REPORT_DIVIDER,
    REPORT_HEADER,
)
from envbind.core.fields import collect_declarations


def should_mask(name: str) -> bool:
    """True if `name` contains a sensitive keyword, ignoring case."""
    lowered = name.lower()
    return any(keyword in lowered for keyword in MASKED_KEYWORDS)


def format_value(value: Any) -> str:
    """Render a field value for display.

    Lists show their items comma-separated; durations use unit syntax.
    """
    if isinstance(value, timedelta):
        return format_duration(value)
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return str(value)


def sprint(config: Any) -> str:
    """Return the configuration report for `config`.

    Example:
        Environment Configuration:
        ==========================
        SERVER_PORT         : 8080
        DB_PASSWORD         : ***MASKED***
    """
    lines = [REPORT_HEADER, REPORT_DIVIDER]
    for decl in collect_declarations(config):
        if should_mask(decl.name) or should_mask(decl.variable_name):
            display = MASK_TOKEN
        else:
            display = format_value(getattr(config, decl.name))
        lines.append(f"{decl.variable_name:<{NAME_COLUMN_WIDTH}}: {display}")
    return "\n".join(lines) + "\n"
