"""HOCON configuration loading using dataconf."""

from typing import TypeVar, cast

import dataconf

from .settings import TllConfig

T = TypeVar("T")


def load_from_file(path: str, config_class: type[T]) -> T:
    """Load configuration from a HOCON file.

    Args:
        path: Path to the HOCON configuration file
        config_class: The configuration dataclass type to load into

    Returns:
        Instance of config_class populated from the file

    Example:
        >>> config = load_from_file("tll.conf", TllConfig)
    """
    return cast(T, dataconf.file(path, config_class))


def load_from_string(hocon_str: str, config_class: type[T]) -> T:
    """Load configuration from a HOCON string.

    Example:
        >>> config = load_from_string('runtime { is_client: true }', TllConfig)
    """
    return cast(T, dataconf.string(hocon_str, config_class))


def load_from_env(prefix: str, config_class: type[T]) -> T:
    """Load configuration from environment variables.

    Variables use the format ``PREFIX_FIELD=value``; nested fields are joined
    with a double underscore, e.g. ``TLL_LOGGING__LEVEL=DEBUG`` with prefix
    ``"TLL_"``.

    Example:
        >>> config = load_from_env("TLL_", TllConfig)
    """
    return cast(T, dataconf.env(prefix, config_class))


def load_config(path: str | None = None) -> TllConfig:
    """Load a ``TllConfig`` from *path*, or return the defaults when no path is given."""
    if path is None:
        return TllConfig()
    return load_from_file(path, TllConfig)
