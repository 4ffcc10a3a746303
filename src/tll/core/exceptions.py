"""Library-level exceptions."""

from __future__ import annotations


class TllError(Exception):
    """Base exception for tll errors."""

    pass


class SchemaAuthoringError(TllError):
    """A schema rule is malformed.

    Raised while compiling a rule. The validator reports it as an aborted
    validation instead of letting it escape.
    """

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(message)


class EmptyTypeListError(SchemaAuthoringError):
    """A type-list rule has no type names."""

    def __init__(self, field_name: str) -> None:
        super().__init__(field_name, f"'{field_name}' types not found!")


class UnknownTypeError(SchemaAuthoringError):
    """A rule names a type that does not exist, or is not a rule at all."""

    def __init__(self, field_name: str, type_name: object) -> None:
        self.type_name = type_name
        super().__init__(field_name, f"Invalid type of '{field_name}'! '{type_name}' does not exist!")


class ModuleLoadError(TllError):
    """Executing a loaded module failed."""

    def __init__(self, path: str, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load '{path}': {cause}")
        self.__cause__ = cause


class VersionCheckError(TllError):
    """Fetching or reading the published version failed."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch version from '{url}': {cause}")
        self.__cause__ = cause
