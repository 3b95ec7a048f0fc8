"""Declaration tag parsing.

A tag has one of three shapes:
  - "NAME"
  - "NAME,default"      (default may itself contain commas, e.g. list values)
  - "NAME,required"
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from envbind.core.constants import REQUIRED_MARKER


class ParsedTag(NamedTuple):
    """Variable name plus the raw default payload, if any."""

    name: str
    default: Optional[str] = None

    @property
    def required(self) -> bool:
        """True when the tag marks the field as required."""
        return self.default == REQUIRED_MARKER


def parse_tag(tag: str) -> ParsedTag:
    """Split a tag at its first comma only.

    Everything after the first comma is kept verbatim, so
    "HOSTS,localhost,127.0.0.1" -> ParsedTag("HOSTS", "localhost,127.0.0.1").
    """
    name, sep, default = tag.partition(",")
    if not sep:
        return ParsedTag(name)
    return ParsedTag(name, default)
