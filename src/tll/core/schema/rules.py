"""Schema rule models.

A schema maps field names to rules. Callers write rules as plain values
(a type name, a list of type names, or a callable); :func:`compile_rule`
turns each one into a member of the ``Rule`` union.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from tll.core.exceptions import EmptyTypeListError, UnknownTypeError
from tll.core.text import table_to_string
from tll.core.types import ValueKind, kind_of, resolve_type_name


@dataclass(frozen=True)
class TypeNameRule:
    """Field must be of exactly one kind.

    Args:
        name: Type name as written in the schema (kept for messages).
        kind: Resolved value kind.
    """

    name: str
    kind: ValueKind

    def matches(self, value: Any) -> bool:
        return kind_of(value) is self.kind

    def describe(self) -> str:
        return f"must be a {self.name}"


@dataclass(frozen=True)
class TypeNameListRule:
    """Field must be of any one of several kinds.

    Args:
        names: Type names as written in the schema, in order.
        kinds: Resolved value kinds, parallel to ``names``.
    """

    names: tuple[str, ...]
    kinds: tuple[ValueKind, ...]

    def matches(self, value: Any) -> bool:
        return kind_of(value) in self.kinds

    def describe(self) -> str:
        return f"must be a {table_to_string(self.names)}"


@dataclass(frozen=True)
class PredicateRule:
    """Field is valid when the predicate returns a truthy value."""

    predicate: Callable[[Any], Any]

    def matches(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def describe(self) -> str:
        return ""


Rule = Union[TypeNameRule, TypeNameListRule, PredicateRule]

_COMPILED = (TypeNameRule, TypeNameListRule, PredicateRule)


def compile_rule(field_name: str, raw: Any) -> Rule:
    """Turn a schema value into a ``Rule``.

    Already-compiled rules are returned unchanged.

    Args:
        field_name: Field the rule belongs to, used in error messages.
        raw: A type name, a list/tuple of type names, a callable, or a rule.

    Returns:
        The compiled rule.

    Raises:
        EmptyTypeListError: If *raw* is an empty list or tuple.
        UnknownTypeError: If a type name is not recognised, or *raw* is none
            of the accepted rule shapes.
    """
    if isinstance(raw, _COMPILED):
        return raw

    if isinstance(raw, str):
        kind = resolve_type_name(raw)
        if kind is None:
            raise UnknownTypeError(field_name, raw)
        return TypeNameRule(name=raw, kind=kind)

    if isinstance(raw, (list, tuple)):
        if not raw:
            raise EmptyTypeListError(field_name)
        kinds: list[ValueKind] = []
        for name in raw:
            kind = resolve_type_name(name)
            if kind is None:
                raise UnknownTypeError(field_name, name)
            kinds.append(kind)
        return TypeNameListRule(names=tuple(raw), kinds=tuple(kinds))

    if callable(raw):
        return PredicateRule(predicate=raw)

    raise UnknownTypeError(field_name, raw)


def compile_schema(schema: Mapping[str, Any]) -> dict[str, Rule]:
    """Compile every rule of *schema* up front.

    Useful for catching authoring errors once instead of on each validation.

    Raises:
        SchemaAuthoringError: On the first malformed rule.
    """
    return {name: compile_rule(name, raw) for name, raw in schema.items()}
