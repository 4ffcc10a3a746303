"""Schema rules and record validation."""

from tll.core.schema.rules import (
    PredicateRule,
    Rule,
    TypeNameListRule,
    TypeNameRule,
    compile_rule,
    compile_schema,
)
from tll.core.schema.validator import (
    SchemaValidator,
    ValidationErrorCode,
    ValidationIssue,
    ValidationResult,
    validate,
)

__all__ = [
    "PredicateRule",
    "Rule",
    "SchemaValidator",
    "TypeNameListRule",
    "TypeNameRule",
    "ValidationErrorCode",
    "ValidationIssue",
    "ValidationResult",
    "compile_rule",
    "compile_schema",
    "validate",
]
