"""Records shared by the tests."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import List, Optional

from pydantic import BaseModel, Field

from envbind import env_field


@dataclass
class AppConfig:
    """A typical service config covering every supported kind."""

    server_port: str = env_field("SERVER_PORT,8080", default="")
    db_host: str = env_field("DB_HOST,localhost", default="")
    db_password: str = env_field("DB_PASSWORD,required", default="")
    debug_mode: bool = env_field("DEBUG_MODE,false", default=True)
    max_users: int = env_field("MAX_USERS,100", default=0)
    timeout: timedelta = env_field("TIMEOUT,30s", default=timedelta(0))
    allowed_hosts: List[str] = env_field(
        "ALLOWED_HOSTS,localhost,127.0.0.1", default_factory=list
    )
    api_key: str = env_field("API_KEY", default="")
    float_value: float = env_field("FLOAT_VALUE,3.14", default=0.0)


@dataclass
class UntaggedConfig:
    """Only db_host carries a tag."""

    server_port: str = ""
    db_host: str = env_field("DB_HOST", default="")
    note: Optional[str] = field(default="keep me")


class AppSettings(BaseModel):
    """Pydantic flavour of a config record."""

    port: int = Field(0, json_schema_extra={"env": "PORT,9000"})
    hosts: List[str] = Field(
        default_factory=list, json_schema_extra={"env": "HOSTS,a, b ,c"}
    )
    token: str = Field("", json_schema_extra={"env": "AUTH_TOKEN,required"})
    verbose: bool = Field(False, json_schema_extra={"env": "VERBOSE"})
    label: str = "untouched"


# Every variable read by the records above or set by the tests
TEST_VARIABLES = (
    "SERVER_PORT",
    "DB_HOST",
    "DB_PASSWORD",
    "DB_USER",
    "INVALID_FIELD",
    "DEBUG_MODE",
    "MAX_USERS",
    "TIMEOUT",
    "ALLOWED_HOSTS",
    "API_KEY",
    "FLOAT_VALUE",
    "PORT",
    "HOSTS",
    "AUTH_TOKEN",
    "VERBOSE",
    "ENV_FILE",
    "TEST_VAR",
    "FROM_FILE",
    "SHARED",
)
