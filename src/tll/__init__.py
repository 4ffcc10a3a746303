"""tll: a lightweight utility library.

Schema validation for flat records, a prefixed console logger, a realm-aware
module loader, plural-noun selection and a published-version check.
"""

from tll.core.console import COLORS, Color, ConsoleLogger, log
from tll.core.exceptions import ModuleLoadError, TllError, VersionCheckError
from tll.core.schema import SchemaValidator, ValidationErrorCode, ValidationResult, validate
from tll.core.text import get_noun, table_to_string
from tll.core.types import ValueKind, kind_of
from tll.runtime.loader import ModuleLoader
from tll.runtime.version import CURRENT_VERSION, VersionChecker, VersionStatus

__version__ = "2023.6.11"

__all__ = [
    "COLORS",
    "CURRENT_VERSION",
    "Color",
    "ConsoleLogger",
    "ModuleLoadError",
    "ModuleLoader",
    "SchemaValidator",
    "TllError",
    "ValidationErrorCode",
    "ValidationResult",
    "ValueKind",
    "VersionCheckError",
    "VersionChecker",
    "VersionStatus",
    "get_noun",
    "kind_of",
    "log",
    "table_to_string",
    "validate",
]
