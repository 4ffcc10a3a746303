"""Small text helpers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def get_noun(num: float, one: T, two: T, five: T) -> T:
    """Pick the plural form of a noun for *num*.

    Follows the three-form plural rules of Slavic languages.

    Args:
        num: Number being counted.
        one: Form for numbers ending in 1 (but not 11).
        two: Form for numbers ending in 2-4 (but not 12-14).
        five: Form for everything else.

    Returns:
        One of *one*, *two* or *five*.

    Example:
        >>> get_noun(21, "файл", "файла", "файлов")
        'файл'
    """
    n = abs(num) % 100
    if 5 <= n <= 20:
        return five

    n = n % 10
    if n == 1:
        return one
    if 2 <= n <= 4:
        return two
    return five


def table_to_string(items: Iterable[Any], sort: bool = False) -> str:
    """Join *items* with ``", "``.

    With *sort*, a sorted copy is joined; *items* itself is left untouched.
    """
    values = sorted(items) if sort else list(items)
    return ", ".join(str(v) for v in values)
