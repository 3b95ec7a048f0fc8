"""Constants for core module."""

from pathlib import Path

# --- Tags --- #
ENV_TAG_KEY: str = "env"
REQUIRED_MARKER: str = "required"

# --- Display --- #
MASK_TOKEN: str = "***MASKED***"
NAME_COLUMN_WIDTH: int = 20
REPORT_HEADER: str = "Environment Configuration:"
REPORT_DIVIDER: str = "=" * 26
MASKED_KEYWORDS: tuple[str, ...] = (
    "password",
    "secret",
    "key",
    "token",
    "credential",
    "auth",
    "pass",
    "pwd",
    "access",
    "private",
)

# --- I/O --- #
DEFAULT_ENV_FPATH: Path = Path(".env")
ENV_FILE_OVERRIDE_VAR: str = "ENV_FILE"
# Probed in order by find_and_load; $ENV_FILE is appended at call time.
SEARCH_FPATHS: tuple[str, ...] = (
    ".env",
    "./.env",
    "../.env",
    "../../.env",
    "./config/.env",
    "./env/.env",
)

# --- Integers are bound to the signed 64-bit range --- #
INT_MIN: int = -(2**63)
INT_MAX: int = 2**63 - 1
