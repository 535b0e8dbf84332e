"""
Typed accessors for configuration held in environment variables.

    from configuration import boolean_config, string_config

    DB_HOST = string_config("DB_HOST")
    DB_HOST.get_or_else("localhost")
"""

from configuration.audit import audit_configs
from configuration.errors import BooleanConfigError, error_payload
from configuration.types import (
    ABSENT,
    Absent,
    Config,
    ConfigFactory,
    Present,
    booleanConfig,
    boolean_config,
    or_else,
    stringConfig,
    string_config,
)

__all__: list[str] = [
    "ABSENT",
    "Absent",
    "BooleanConfigError",
    "Config",
    "ConfigFactory",
    "Present",
    "audit_configs",
    "booleanConfig",
    "boolean_config",
    "error_payload",
    "or_else",
    "stringConfig",
    "string_config",
]
