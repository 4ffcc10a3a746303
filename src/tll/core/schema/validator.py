"""Schema validation for flat records."""

from __future__ import annotations

import logging
import os
import traceback
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from tll.core.exceptions import EmptyTypeListError, SchemaAuthoringError
from tll.core.schema.rules import compile_rule

logger = logging.getLogger(__name__)

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))) + os.sep


class ValidationErrorCode(str, Enum):
    """Kind of problem found while validating a record."""

    INVALID_SCHEMA = "invalid-schema"
    INVALID_RECORD = "invalid-record"
    EMPTY_TYPE_LIST = "empty-type-list"
    UNKNOWN_TYPE = "unknown-type"
    FIELD_VIOLATION = "field-violation"


_ABORT_CODES = frozenset(
    {
        ValidationErrorCode.INVALID_SCHEMA,
        ValidationErrorCode.INVALID_RECORD,
        ValidationErrorCode.EMPTY_TYPE_LIST,
        ValidationErrorCode.UNKNOWN_TYPE,
    }
)


@dataclass
class ValidationIssue:
    """A single issue discovered during validation.

    Args:
        code: What went wrong.
        message: Human-readable description. For field violations this is
            the field name followed by its constraint, e.g.
            ``"a (must be a number)"``.
        field_name: The field involved, or ``None`` for structural issues.
    """

    code: ValidationErrorCode
    message: str
    field_name: str | None = None


@dataclass
class ValidationResult:
    """Outcome of validating a record against a schema.

    Unpacks as ``(valid, violations)``::

        ok, violations = validator.validate(schema, record)

    Args:
        valid: ``True`` when every checked field passed.
        issues: The abort issue, or every field violation.
        label: What was being validated, as used in diagnostics.
    """

    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)
    label: str = "table"

    @property
    def violations(self) -> list[str]:
        """Return the descriptions of all field violations."""
        return [i.message for i in self.issues if i.code is ValidationErrorCode.FIELD_VIOLATION]

    @property
    def aborted(self) -> bool:
        """Return ``True`` if validation stopped on a structural or schema error."""
        return any(i.code in _ABORT_CODES for i in self.issues)

    @property
    def error_code(self) -> ValidationErrorCode | None:
        """Return the abort code, if validation was aborted."""
        for issue in self.issues:
            if issue.code in _ABORT_CODES:
                return issue.code
        return None

    def __iter__(self) -> Iterator[Any]:
        yield self.valid
        yield self.violations


def _caller_location() -> str:
    """Return ``file:line`` of the innermost frame outside this package."""
    for frame, lineno in traceback.walk_stack(None):
        filename = frame.f_code.co_filename
        if not os.path.abspath(filename).startswith(_PACKAGE_DIR):
            return f"{filename}:{lineno}"
    return "<unknown>"


class SchemaValidator:
    """Validates flat records against a field-to-rule schema.

    Rules applied:
    - Schema or record not a non-empty mapping → abort.
    - Record field with no rule → accepted.
    - Empty type list or unknown type name → abort, no partial result.
    - Field failing its rule → violation; all violations are collected.

    Every failed validation is also logged at ``ERROR`` level.

    Args:
        logger: Custom logger instance. Defaults to this module's logger.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @property
    def logger(self) -> logging.Logger:
        """Return the logger diagnostics are written to."""
        return self._logger

    def validate(
        self,
        schema: Mapping[str, Any],
        record: Mapping[str, Any],
        label: str | None = None,
    ) -> ValidationResult:
        """Validate *record* against *schema*.

        Args:
            schema: Mapping of field name to rule (type name, list of type
                names, callable, or compiled rule).
            record: Mapping of field name to value.
            label: What is being validated, for diagnostics (default ``"table"``).

        Returns:
            A ``ValidationResult``.
        """
        label = label or "table"

        if not isinstance(schema, Mapping):
            return self._abort(ValidationErrorCode.INVALID_SCHEMA, "Schema must be a table!", label)
        if len(schema) == 0:
            return self._abort(ValidationErrorCode.INVALID_SCHEMA, "Schema must not be empty!", label)
        if not isinstance(record, Mapping):
            return self._abort(ValidationErrorCode.INVALID_RECORD, "Validation table must be a table!", label)
        if len(record) == 0:
            return self._abort(ValidationErrorCode.INVALID_RECORD, "Validation table must not be empty!", label)

        issues: list[ValidationIssue] = []

        for key, value in record.items():
            if key not in schema:
                continue
            raw_rule = schema[key]
            if raw_rule is None:
                continue

            name = str(key)
            try:
                rule = compile_rule(name, raw_rule)
            except SchemaAuthoringError as exc:
                code = (
                    ValidationErrorCode.EMPTY_TYPE_LIST
                    if isinstance(exc, EmptyTypeListError)
                    else ValidationErrorCode.UNKNOWN_TYPE
                )
                return self._abort(code, str(exc), label, field_name=name)

            if rule.matches(value):
                continue

            constraint = rule.describe()
            message = f"{name} ({constraint})" if constraint else name
            issues.append(ValidationIssue(ValidationErrorCode.FIELD_VIOLATION, message, field_name=name))

        if issues:
            lines = "\n".join(f"\t- {i.message}" for i in issues)
            self._logger.error("Incorrect %s! [%s]\nInvalid elements:\n%s", label, _caller_location(), lines)
            return ValidationResult(valid=False, issues=issues, label=label)

        return ValidationResult(valid=True, issues=[], label=label)

    def _abort(
        self,
        code: ValidationErrorCode,
        message: str,
        label: str,
        field_name: str | None = None,
    ) -> ValidationResult:
        self._logger.error("%s [%s]", message, _caller_location())
        return ValidationResult(
            valid=False,
            issues=[ValidationIssue(code, message, field_name=field_name)],
            label=label,
        )


_default_validator = SchemaValidator()


def validate(
    schema: Mapping[str, Any],
    record: Mapping[str, Any],
    label: str | None = None,
) -> ValidationResult:
    """Validate *record* against *schema* with a shared ``SchemaValidator``."""
    return _default_validator.validate(schema, record, label)
