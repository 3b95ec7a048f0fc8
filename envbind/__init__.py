"""envbind: bind environment variables onto typed records.

Declare a tag per field and load:

    @dataclass
    class Settings:
        port: int = env_field("PORT,8080", default=0)
        db_password: str = env_field("DB_PASSWORD,required", default="")

    settings = envbind.load(Settings())
    print(envbind.sprint(settings))

Values come from the process environment first, then from any loaded .env
file, then from the tag's default.
"""

from envbind.core import (
    CoercionError,
    ConfigError,
    ConfigTypeError,
    EnvFileError,
    RequiredFieldsError,
    UnsupportedFieldTypeError,
    bind,
    env_field,
    sprint,
)
from envbind.loader import (
    LoadOptions,
    find_and_load,
    load,
    load_from_env,
    load_from_file,
    load_from_files,
    must_load,
)

__version__ = "0.1.0"
__all__ = [
    "bind",
    "env_field",
    "find_and_load",
    "load",
    "load_from_env",
    "load_from_file",
    "load_from_files",
    "must_load",
    "sprint",
    "LoadOptions",
    "CoercionError",
    "ConfigError",
    "ConfigTypeError",
    "EnvFileError",
    "RequiredFieldsError",
    "UnsupportedFieldTypeError",
]
