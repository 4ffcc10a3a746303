"""Published-version check."""

from __future__ import annotations

import enum
import logging

import httpx

from tll.core.config.settings import VersionCheckConfig
from tll.core.console import COLORS, ConsoleLogger
from tll.core.exceptions import VersionCheckError

logger = logging.getLogger(__name__)

CURRENT_VERSION = 20230611
"""Date-stamped version of this release."""


class VersionStatus(str, enum.Enum):
    """Outcome of a version check."""

    UP_TO_DATE = "up_to_date"
    OUTDATED = "outdated"
    UNKNOWN = "unknown"


def fetch_version(url: str, client: httpx.Client | None = None, timeout: float = 10.0) -> str:
    """Fetch the body of the version file at *url*.

    Args:
        url: Location of the plain-text version file.
        client: Client to issue the request with. A short-lived client is
            created when omitted.
        timeout: Request timeout in seconds, used only for a created client.

    Returns:
        The response body.

    Raises:
        VersionCheckError: On transport errors or a non-2xx response.
    """
    try:
        if client is not None:
            response = client.get(url)
            response.raise_for_status()
            return response.text
        with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
            response = own_client.get(url)
            response.raise_for_status()
            return response.text
    except httpx.HTTPError as exc:
        raise VersionCheckError(url, exc) from exc


class VersionChecker:
    """Warns on the console when a newer version has been published.

    Args:
        config: Where to look and what to link to. Defaults to ``VersionCheckConfig()``.
        current_version: Version to compare against.
        client: Optional ``httpx.Client`` (inject a mock transport in tests).
        console: Console logger for warnings.
    """

    def __init__(
        self,
        config: VersionCheckConfig | None = None,
        current_version: int = CURRENT_VERSION,
        client: httpx.Client | None = None,
        console: ConsoleLogger | None = None,
    ) -> None:
        self._config = config or VersionCheckConfig()
        self._current_version = current_version
        self._client = client
        self._console = console or ConsoleLogger()

    @property
    def config(self) -> VersionCheckConfig:
        """Return the version check configuration."""
        return self._config

    def latest_version(self) -> int:
        """Fetch and parse the published version.

        Raises:
            VersionCheckError: If the fetch fails or the body is not an integer.
        """
        body = fetch_version(self._config.url, client=self._client, timeout=self._config.timeout_seconds)
        try:
            return int(body.strip())
        except ValueError as exc:
            raise VersionCheckError(self._config.url, exc) from exc

    def check(self) -> VersionStatus:
        """Compare the published version with the current one.

        Failures are reported as a console warning, never raised.
        """
        if not self._config.enabled:
            logger.debug("Version check disabled")
            return VersionStatus.UNKNOWN

        try:
            latest = self.latest_version()
        except VersionCheckError as exc:
            logger.debug("Version check failed: %s", exc)
            self._console.warning(self._console.prefix, COLORS["warning"], "Failed to check version")
            return VersionStatus.UNKNOWN

        if latest > self._current_version:
            self._console.warning(
                self._console.prefix,
                COLORS["warning"],
                "You are not using the latest version of TLL!",
            )
            self._console.warning(
                self._console.prefix,
                COLORS["warning"],
                "You can find the new version here: ",
                COLORS["path"],
                self._config.project_url,
            )
            return VersionStatus.OUTDATED

        return VersionStatus.UP_TO_DATE
