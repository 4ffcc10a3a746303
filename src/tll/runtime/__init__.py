"""Runtime collaborators: module loading and the version check."""

from tll.runtime.loader import ModuleLoader, realm_from_filename
from tll.runtime.version import CURRENT_VERSION, VersionChecker, VersionStatus, fetch_version

__all__ = [
    "CURRENT_VERSION",
    "ModuleLoader",
    "VersionChecker",
    "VersionStatus",
    "fetch_version",
    "realm_from_filename",
]
