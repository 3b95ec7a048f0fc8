"""Helpers for reading .env files into the process environment.

Files are parsed with python-dotenv into a plain overlay dict first; the
overlay is then merged into os.environ without overriding variables that
are already set, so the system environment always wins over file values.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Iterable, MutableMapping, Optional, Union

from dotenv import dotenv_values
from loguru import logger

from envbind.core.errors import EnvFileError

PathLike = Union[str, Path]


def read_env_file(path: PathLike) -> Dict[str, str]:
    """Parse one .env file into a dict; keys without a value are dropped.

    Raises:
        EnvFileError: if the file does not exist or cannot be read.
    """
    p = Path(path)
    if not p.is_file():
        raise EnvFileError(f"error loading .env file(s): {p} not found")
    try:
        raw = dotenv_values(p, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileError(f"error loading .env file(s): {p}: {e}") from e
    return {k: v for k, v in raw.items() if v is not None}


def read_env_files(paths: Iterable[PathLike]) -> Dict[str, str]:
    """Parse several .env files into a single overlay; later files win."""
    overlay: Dict[str, str] = {}
    for path in paths:
        values = read_env_file(path)
        logger.debug(f"Read {len(values)} variable(s) from {path}")
        overlay.update(values)
    return overlay


def apply_to_environ(
    overlay: Dict[str, str],
    environ: Optional[MutableMapping[str, str]] = None,
) -> Dict[str, str]:
    """Merge `overlay` into the environment without overriding existing keys.

    Returns:
        The subset of `overlay` that was actually written.
    """
    env = os.environ if environ is None else environ
    applied = {k: v for k, v in overlay.items() if k not in env}
    env.update(applied)
    return applied


def load_env_files(paths: Iterable[PathLike]) -> Dict[str, str]:
    """Read `paths` in order and merge the result into os.environ.

    Raises:
        EnvFileError: if any file is missing or unreadable. Nothing is
            written to the environment in that case.
    """
    paths = list(paths)
    overlay = read_env_files(paths)
    applied = apply_to_environ(overlay)
    logger.info(
        f"Loaded {len(applied)} of {len(overlay)} variable(s) from "
        f"{', '.join(str(p) for p in paths)}"
    )
    return overlay


def try_load_env_file(path: PathLike) -> bool:
    """Best-effort variant of load_env_files for a single file.

    Returns:
        True if the file was loaded, False if it was missing or unreadable.
    """
    try:
        load_env_files([path])
    except EnvFileError as e:
        logger.debug(f"Skipping env file: {e}")
        return False
    return True
