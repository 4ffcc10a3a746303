"""Property-based tests using Hypothesis.

Covers invariants for schema validation and plural-noun selection.
"""

from __future__ import annotations

import string
from typing import Any
from unittest.mock import MagicMock

from hypothesis import given
from hypothesis import strategies as st

from tll.core.schema.validator import SchemaValidator, ValidationErrorCode
from tll.core.text import get_noun
from tll.core.types import kind_of

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_field_name = st.text(alphabet=string.ascii_lowercase + "_", min_size=1, max_size=12)

_extra_name = st.text(alphabet=string.digits, min_size=1, max_size=6)

_value = st.one_of(
    st.text(max_size=10),
    st.integers(),
    st.floats(allow_nan=False),
    st.booleans(),
    st.dictionaries(st.text(max_size=5), st.integers(), max_size=3),
    st.lists(st.integers(), max_size=3),
)

_records = st.dictionaries(_field_name, _value, min_size=1, max_size=8)

_type_names = st.sampled_from(["string", "number", "bool", "boolean", "table", "function"])


def _validator() -> SchemaValidator:
    return SchemaValidator(logger=MagicMock())


def _schema_matching(record: dict[str, Any]) -> dict[str, Any]:
    schema: dict[str, Any] = {}
    for key, value in record.items():
        kind = kind_of(value)
        assert kind is not None
        schema[key] = kind.value
    return schema


# ---------------------------------------------------------------------------
# SchemaValidator
# ---------------------------------------------------------------------------


class TestSchemaValidatorProperties:
    @given(record=_records)
    def test_matching_schema_always_passes(self, record: dict[str, Any]) -> None:
        valid, violations = _validator().validate(_schema_matching(record), record)
        assert valid is True
        assert violations == []

    @given(record=_records)
    def test_type_lists_containing_the_kind_pass(self, record: dict[str, Any]) -> None:
        schema = {k: ["function", kind] for k, kind in _schema_matching(record).items()}
        assert _validator().validate(schema, record).valid is True

    @given(
        record=_records,
        extras=st.dictionaries(_extra_name, _value, min_size=1, max_size=4),
        names=st.lists(_type_names, min_size=1, max_size=8),
    )
    def test_fields_without_rules_never_matter(
        self,
        record: dict[str, Any],
        extras: dict[str, Any],
        names: list[str],
    ) -> None:
        schema = {key: names[i % len(names)] for i, key in enumerate(record)}
        base = _validator().validate(schema, record)
        extended = _validator().validate(schema, {**record, **extras})

        assert extended.valid == base.valid
        assert extended.violations == base.violations

    @given(record=_records, names=st.lists(_type_names, min_size=1, max_size=8))
    def test_one_violation_per_failing_field(self, record: dict[str, Any], names: list[str]) -> None:
        schema = {key: names[i % len(names)] for i, key in enumerate(record)}
        result = _validator().validate(schema, record)

        assert result.aborted is False
        assert len(result.violations) <= len(record)
        assert result.valid == (result.violations == [])

    @given(record=_records)
    def test_empty_schema_never_passes(self, record: dict[str, Any]) -> None:
        result = _validator().validate({}, record)
        assert result.valid is False
        assert result.error_code is ValidationErrorCode.INVALID_SCHEMA

    @given(schema=st.dictionaries(_field_name, _type_names, min_size=1))
    def test_empty_record_never_passes(self, schema: dict[str, str]) -> None:
        result = _validator().validate(schema, {})
        assert result.valid is False
        assert result.error_code is ValidationErrorCode.INVALID_RECORD


# ---------------------------------------------------------------------------
# get_noun
# ---------------------------------------------------------------------------


class TestGetNounProperties:
    @given(hundreds=st.integers(min_value=0, max_value=10_000), teen=st.integers(min_value=5, max_value=20))
    def test_five_to_twenty_use_many_form(self, hundreds: int, teen: int) -> None:
        assert get_noun(hundreds * 100 + teen, "one", "two", "five") == "five"

    @given(n=st.integers(min_value=-(10**9), max_value=10**9))
    def test_sign_does_not_matter(self, n: int) -> None:
        assert get_noun(n, "one", "two", "five") == get_noun(-n, "one", "two", "five")

    @given(n=st.integers(min_value=0, max_value=10**9))
    def test_always_returns_a_form(self, n: int) -> None:
        assert get_noun(n, "one", "two", "five") in {"one", "two", "five"}
