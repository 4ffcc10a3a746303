"""Configuration models for tll.

Dataclass settings loaded from HOCON with dataconf.
"""

from tll.core.config.base import LogLevel, Realm
from tll.core.config.loader import load_config, load_from_env, load_from_file, load_from_string
from tll.core.config.settings import (
    DEFAULT_PROJECT_URL,
    DEFAULT_VERSION_URL,
    LoggingConfig,
    RuntimeConfig,
    TllConfig,
    VersionCheckConfig,
)

__all__ = [
    "DEFAULT_PROJECT_URL",
    "DEFAULT_VERSION_URL",
    "LogLevel",
    "LoggingConfig",
    "Realm",
    "RuntimeConfig",
    "TllConfig",
    "VersionCheckConfig",
    "load_config",
    "load_from_env",
    "load_from_file",
    "load_from_string",
]
