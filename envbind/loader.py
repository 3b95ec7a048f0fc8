"""Entry points that load .env files and then bind a record.

Each function is a thin composition of `envbind.helpers.env_files` and
`envbind.core.binder.bind`:

    load(cfg)                         ./.env if present, then environment
    load(cfg, LoadOptions(...))       explicit files and/or no system lookup
    load_from_env(cfg)                environment only, no files
    load_from_file(cfg, path)         one file, then environment
    load_from_files(cfg, *paths)      several files, later ones win
    find_and_load(cfg)                first file found in the usual places
    must_load(cfg)                    like load, but exits on any error
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from envbind.core.binder import bind
from envbind.core.constants import (
    DEFAULT_ENV_FPATH,
    ENV_FILE_OVERRIDE_VAR,
    SEARCH_FPATHS,
)
from envbind.core.errors import ConfigError
from envbind.helpers.env_files import PathLike, load_env_files, try_load_env_file

T = TypeVar("T")


class LoadOptions(BaseModel):
    """Options for `load`.

    Attributes:
        env_files (list[Path]): .env files to load, in order. When empty, a
            ./.env file is loaded if one exists.
        use_system (bool): read variables from the environment. When False,
            every field takes its declared default.
    """

    model_config = ConfigDict(extra="forbid")

    env_files: List[Path] = Field(default_factory=list)
    use_system: bool = True


def load(config: T, options: Optional[LoadOptions] = None) -> T:
    """Load .env file(s) as configured, then bind `config`.

    Raises:
        EnvFileError: an explicitly listed file could not be loaded.
        ConfigError: any binding error (see `envbind.core.binder.bind`).
    """
    options = options or LoadOptions()
    if options.env_files:
        load_env_files(options.env_files)
    elif not try_load_env_file(DEFAULT_ENV_FPATH):
        logger.debug(f"No {DEFAULT_ENV_FPATH} loaded; using environment only")
    return bind(config, use_system=options.use_system)


def load_from_env(config: T) -> T:
    """Bind `config` from the current environment; no file is read."""
    return bind(config)


def load_from_file(config: T, env_file: PathLike) -> T:
    """Load a single .env file, then bind `config`."""
    load_env_files([env_file])
    return bind(config)


def load_from_files(config: T, *env_files: PathLike) -> T:
    """Load several .env files in order, then bind `config`.

    Later files override earlier ones; variables already present in the
    environment are never overridden.
    """
    load_env_files(env_files)
    return bind(config)


def candidate_paths() -> List[str]:
    """Locations probed by find_and_load, in order."""
    paths = list(SEARCH_FPATHS)
    override = os.getenv(ENV_FILE_OVERRIDE_VAR, "")
    if override:
        paths.append(override)
    return paths


def find_and_load(config: T) -> T:
    """Load the first .env file found in the usual places, then bind `config`.

    Binding runs against the environment even when no file is found.
    """
    for path in candidate_paths():
        if not Path(path).exists():
            continue
        if try_load_env_file(path):
            logger.info(f"Using env file {path}")
            break
        logger.warning(f"Found {path} but could not load it; trying next location")
    else:
        logger.debug("No env file found; using environment only")
    return bind(config)


def must_load(config: T, options: Optional[LoadOptions] = None) -> T:
    """Like `load`, but any configuration error terminates the process.

    Raises:
        SystemExit: carrying the error message, on any ConfigError.
    """
    try:
        return load(config, options)
    except ConfigError as e:
        logger.critical(f"Failed to load configuration: {e}")
        raise SystemExit(str(e)) from e

