"""Console logger with a bracketed prefix and an optional colour palette."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from tll.core.config.settings import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class Color:
    """24-bit colour passed among the parts of a log call."""

    r: int
    g: int
    b: int

    def ansi(self) -> str:
        """Return the ANSI escape selecting this colour as foreground."""
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"


COLORS: dict[str, Color] = {
    "primary": Color(253, 77, 89),
    "warning": Color(250, 180, 50),
    "white": Color(255, 255, 255),
    "path": Color(210, 210, 210),
}


class ConsoleLogger:
    """Writes prefixed console messages through ``logging``.

    ``Color`` values may be mixed into the message parts; they switch the
    colour of the text that follows when *colorize* is on and are dropped
    otherwise.

    Args:
        logger: Custom logger instance. Defaults to ``logging.getLogger("tll")``.
        colorize: Render colours as ANSI escapes.
        prefix: Prefix used by library components for their own messages.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        colorize: bool = False,
        prefix: str = "TLL",
    ) -> None:
        self._logger = logger or logging.getLogger("tll")
        self._colorize = colorize
        self._prefix = prefix

    @classmethod
    def from_config(cls, config: LoggingConfig) -> ConsoleLogger:
        return cls(colorize=config.colorize, prefix=config.prefix)

    @property
    def prefix(self) -> str:
        """Return the prefix library messages are logged under."""
        return self._prefix

    @property
    def logger(self) -> logging.Logger:
        """Return the logger messages are written to."""
        return self._logger

    def render(self, prefix: str | None, *parts: Any) -> str:
        """Build the message text for *prefix* and *parts*."""
        segments = list(parts)
        if segments and isinstance(segments[-1], str) and segments[-1].endswith("\n"):
            segments[-1] = segments[-1][:-1]

        if isinstance(prefix, str):
            segments = [COLORS["primary"], f"[{prefix}] ", COLORS["white"], *segments]
        else:
            segments = [COLORS["white"], *segments]

        text: list[str] = []
        colored = False
        for segment in segments:
            if isinstance(segment, Color):
                if self._colorize:
                    text.append(segment.ansi())
                    colored = True
                continue
            text.append(str(segment))

        if colored:
            text.append(_RESET)
        return "".join(text)

    def log(self, prefix: str | None, *parts: Any, level: int = logging.INFO) -> None:
        """Log *parts* under *prefix*. Does nothing when no parts are given."""
        if not parts:
            return
        self._logger.log(level, "%s", self.render(prefix, *parts))

    def warning(self, prefix: str | None, *parts: Any) -> None:
        self.log(prefix, *parts, level=logging.WARNING)


_default_console = ConsoleLogger()


def log(prefix: str | None, *parts: Any, level: int = logging.INFO) -> None:
    """Log *parts* under *prefix* with the shared ``ConsoleLogger``."""
    _default_console.log(prefix, *parts, level=level)


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Apply *config* to the ``tll`` logger hierarchy.

    Installs a stream handler on the root logger if none exists yet.

    Returns:
        The ``tll`` logger.
    """
    level = getattr(logging, config.level.value)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    tll_logger = logging.getLogger("tll")
    tll_logger.setLevel(level)
    return tll_logger
