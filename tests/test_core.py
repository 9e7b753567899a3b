"""
Tests for the base Validator contract shared by every validator kind.
"""

from dataclasses import FrozenInstanceError

import pytest

from vetter import (
    NO_VALUE,
    Failure,
    Success,
    Validator,
    any_,
    array,
    boolean,
    number,
    record,
    string,
    struct,
    tuple_,
)

# (factory, a valid value for it)
KINDS = [
    (lambda **kw: any_(**kw), 1),
    (lambda **kw: string(**kw), "abc"),
    (lambda **kw: number(**kw), 5),
    (lambda **kw: boolean(**kw), True),
    (lambda **kw: array(string(), **kw), ["a", "b"]),
    (lambda **kw: tuple_([string(), number()], **kw), ["a", 1]),
    (lambda **kw: struct({"a": string()}, **kw), {"a": "x"}),
    (lambda **kw: record(number(), **kw), {"k": 1}),
]


class TestBaseValidator:
    def test_required_by_default(self):
        result = any_().validate("name")
        assert result == Failure("name is required")

    def test_optional_absent(self):
        result = any_(required=False).validate("name")
        assert result == Success(NO_VALUE)

    def test_default_substituted(self):
        assert any_(default=5).validate("n") == Success(5)

    def test_default_overrides_required(self):
        assert any_(required=True, default="x").validate("n") == Success("x")

    def test_null_rejected(self):
        result = any_().validate("name", None)
        assert isinstance(result, Failure)
        assert result.message == "name cannot be null"

    def test_null_allowed(self):
        assert any_(allow_null=True).validate("name", None) == Success(None)

    def test_null_default_needs_allow_null(self):
        assert any_(default=None).validate("n") == Failure("n cannot be null")
        assert any_(default=None, allow_null=True).validate("n") == Success(None)

    def test_passes_values_through(self):
        value = object()
        assert any_().validate("v", value).data is value

    def test_frozen(self):
        v = Validator()
        with pytest.raises(FrozenInstanceError):
            v.required = False  # type: ignore[misc]

    def test_reusable(self):
        v = string()
        assert v.validate("a", " x ") == Success("x")
        assert v.validate("b", 1) == Failure("b must be a string")
        assert v.validate("a", " x ") == Success("x")


class TestSharedOptions:
    """Every validator kind honours required/default/allow_null the same way."""

    @pytest.mark.parametrize("make, _valid", KINDS)
    def test_absent_optional_is_no_value(self, make, _valid):
        assert make(required=False).validate("f") == Success(NO_VALUE)

    @pytest.mark.parametrize("make, _valid", KINDS)
    def test_absent_required_fails(self, make, _valid):
        assert make().validate("f") == Failure("f is required")

    @pytest.mark.parametrize("make, valid", KINDS)
    def test_default_same_as_validating_default(self, make, valid):
        v = make(default=valid)
        assert v.validate("f") == v.validate("f", valid)
        assert v.validate("f").is_success()

    @pytest.mark.parametrize("make, _valid", KINDS)
    def test_null(self, make, _valid):
        result = make().validate("f", None)
        assert isinstance(result, Failure)
        assert result.message.endswith("cannot be null")
        assert make(allow_null=True).validate("f", None) == Success(None)
