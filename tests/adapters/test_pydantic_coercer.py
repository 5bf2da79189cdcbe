from __future__ import annotations

import pytest
from pydantic import ValidationError

from dto_hydrator.adapters import PydanticCoercer
from dto_hydrator.domain import CoercionError
from tests.helpers.targets import Address


def test_lax_coercion_converts_numeric_strings() -> None:
    coercer = PydanticCoercer()

    assert coercer.coerce("5", int) == 5
    assert coercer.coerce(["a", "b"], list[str]) == ["a", "b"]
    assert coercer.coerce(None, int | None) is None


def test_nested_dataclass_from_mapping() -> None:
    address = PydanticCoercer().coerce({"street": "Main"}, Address | None)

    assert address == Address(street="Main", city="Berlin")


def test_strict_coercion_rejects_strings_for_ints() -> None:
    coercer = PydanticCoercer(strict=True)

    assert coercer.strict
    with pytest.raises(CoercionError):
        coercer.coerce("5", int)


def test_coercion_error_carries_context() -> None:
    with pytest.raises(CoercionError, match="Cannot coerce 'abc' to int") as excinfo:
        PydanticCoercer().coerce("abc", int)

    assert excinfo.value.value == "abc"
    assert excinfo.value.declared_type is int
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_coercion_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Cannot coerce"):
        PydanticCoercer().coerce("abc", int)
