"""Runtime value kinds recognised by schema rules."""

from __future__ import annotations

import numbers
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    """Closed set of value kinds a schema rule can name.

    The ``str`` mixin allows natural string comparison without ``.value``.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    TABLE = "table"
    FUNCTION = "function"


TYPE_NAMES: dict[str, ValueKind] = {
    "string": ValueKind.STRING,
    "number": ValueKind.NUMBER,
    "bool": ValueKind.BOOLEAN,
    "boolean": ValueKind.BOOLEAN,
    "table": ValueKind.TABLE,
    "function": ValueKind.FUNCTION,
}
"""Accepted type-name spellings, including the ``bool`` alias."""


def resolve_type_name(name: object) -> ValueKind | None:
    """Map a type name to its ``ValueKind``.

    Returns:
        The matching kind, or ``None`` if *name* is not a recognised spelling.
    """
    if not isinstance(name, str):
        return None
    return TYPE_NAMES.get(name)


def kind_of(value: Any) -> ValueKind | None:
    """Return the kind of *value*, or ``None`` if no kind applies (e.g. ``None``)."""
    # bool is checked first: it subclasses int
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, numbers.Number):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (Mapping, Set)):
        return ValueKind.TABLE
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ValueKind.TABLE
    if callable(value):
        return ValueKind.FUNCTION
    return None
