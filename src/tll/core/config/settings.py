"""Library configuration models."""

from dataclasses import dataclass, field

from .base import LogLevel

DEFAULT_VERSION_URL = "https://raw.githubusercontent.com/Tensitune/tll/master/version.txt"
DEFAULT_PROJECT_URL = "https://github.com/Tensitune/tll"


@dataclass
class LoggingConfig:
    """Configuration for console logging."""

    level: LogLevel = LogLevel.INFO
    """Logging level (default: INFO)"""

    prefix: str = "TLL"
    """Prefix shown in brackets before library messages (default: TLL)"""

    colorize: bool = False
    """Render palette colours as ANSI escapes (default: False)"""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.prefix:
            raise ValueError("prefix must not be empty")


@dataclass
class RuntimeConfig:
    """Which side(s) the current process plays."""

    is_server: bool = True
    """Process acts as the server (default: True)"""

    is_client: bool = False
    """Process acts as a client (default: False)"""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not (self.is_server or self.is_client):
            raise ValueError("at least one of is_server or is_client must be set")


@dataclass
class VersionCheckConfig:
    """Configuration for the published-version check."""

    enabled: bool = True
    """Run the check at all (default: True)"""

    url: str = DEFAULT_VERSION_URL
    """URL of the plain-text file holding the latest version number"""

    project_url: str = DEFAULT_PROJECT_URL
    """URL shown to users when a newer version exists"""

    timeout_seconds: float = 10.0
    """HTTP timeout in seconds (default: 10.0)"""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if not self.url:
            raise ValueError("url is required")


@dataclass
class TllConfig:
    """Top-level library configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    """Console logging configuration"""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    """Server/client runtime configuration"""

    version_check: VersionCheckConfig = field(default_factory=VersionCheckConfig)
    """Version check configuration"""
