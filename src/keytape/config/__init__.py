"""Configuration and settings"""
from .settings import (
    ENV_PREFIX,
    OPTION_HANDLERS,
    KeytapeConfig,
    config_from_sources,
    env_name,
    load_env_file,
    parse_option,
    template_values,
)

__all__ = [
    "ENV_PREFIX",
    "OPTION_HANDLERS",
    "KeytapeConfig",
    "config_from_sources",
    "env_name",
    "load_env_file",
    "parse_option",
    "template_values",
]
