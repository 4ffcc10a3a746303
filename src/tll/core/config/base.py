"""Base enums for configuration models."""

from enum import Enum


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Realm(str, Enum):
    """Side(s) a module is distributed to."""

    SERVER = "server"
    CLIENT = "client"
    SHARED = "shared"

    @classmethod
    def parse(cls, value: "str | Realm") -> "Realm":
        """Parse a realm name case-insensitively.

        Raises:
            ValueError: If *value* names no realm.
        """
        if isinstance(value, Realm):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown realm '{value}' (expected server, client or shared)") from None
