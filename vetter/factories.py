"""
Factory functions for building validator trees.

Provides terse constructors plus `to_validator`, which turns plain Python
type objects and container literals into validators.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .containers import (
    ArrayValidator,
    ItemsMode,
    ObjectValidator,
    RecordMode,
    StructMode,
    TupleMode,
)
from .core import Validator
from .scalars import BooleanValidator, NumberValidator, StringValidator


def any_(**options: Any) -> Validator:
    """
    Only the baseline checks (required / null / default), no format check.

    Usage:
        any_()
        any_(required=False)
    """
    return Validator(**options)


def string(**options: Any) -> StringValidator:
    """
    Usage:
        string()
        string(max_length=20, pattern=r"^[a-z]+$")
        string(default="")            # empty string allowed
    """
    return StringValidator(**options)


def number(**options: Any) -> NumberValidator:
    """
    Usage:
        number(minimum=0, maximum=120)
        number(allow_float=True)
    """
    return NumberValidator(**options)


def boolean(**options: Any) -> BooleanValidator:
    return BooleanValidator(**options)


def array(
    item: Validator | ItemsMode,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
    unique: bool = False,
    **options: Any,
) -> ArrayValidator:
    """
    Validate a list whose elements all match one validator.

    Usage:
        array(string())
        array(number(), min_length=1, unique=True)
        array(ItemsMode(string(), max_length=3), required=False)
    """
    if isinstance(item, ItemsMode):
        if min_length is not None or max_length is not None or unique:
            raise TypeError("Pass length/unique options inside ItemsMode, not both")
        mode = item
    else:
        mode = ItemsMode(item, min_length, max_length, unique)
    return ArrayValidator(mode=mode, **options)


def tuple_(validators: Sequence[Validator], **options: Any) -> ArrayValidator:
    """
    Validate a fixed-length list, position by position.

    Usage:
        tuple_([string(), number()])
    """
    return ArrayValidator(mode=TupleMode(tuple(validators)), **options)


def struct(fields: Mapping[str, Validator], **options: Any) -> ObjectValidator:
    """
    Validate a mapping with a known set of keys.

    Usage:
        struct({"name": string(), "age": number(minimum=0)})
    """
    return ObjectValidator(mode=StructMode(fields), **options)


def record(
    value: Validator | RecordMode,
    *,
    min_size: int | None = None,
    max_size: int | None = None,
    **options: Any,
) -> ObjectValidator:
    """
    Validate a mapping with arbitrary keys and uniformly-typed values.

    Usage:
        record(number())
        record(string(), min_size=1, max_size=10)
    """
    if isinstance(value, RecordMode):
        if min_size is not None or max_size is not None:
            raise TypeError("Pass size options inside RecordMode, not both")
        mode = value
    else:
        mode = RecordMode(value, min_size, max_size)
    return ObjectValidator(mode=mode, **options)


def to_validator(spec: Any) -> Validator:
    """
    Coerce a declarative spec to a validator.

    Conversion rules:
        Validator -> pass through
        str -> string()
        int -> number()
        float -> number(allow_float=True)
        bool -> boolean()
        object -> any_()
        dict -> struct with recursive conversion
        [x] -> array of x
        (a, b, ...) -> tuple_ of a, b, ...
    """
    if isinstance(spec, Validator):
        return spec

    if isinstance(spec, type):
        # bool before int: bool is an int subclass
        if spec is bool:
            return boolean()
        if spec is str:
            return string()
        if spec is int:
            return number()
        if spec is float:
            return number(allow_float=True)
        if spec is object:
            return any_()
        raise TypeError(f"No validator for type {spec.__name__}")

    if isinstance(spec, dict):
        return struct({k: to_validator(v) for k, v in spec.items()})

    if isinstance(spec, list):
        if len(spec) == 0:
            raise ValueError("Empty list cannot be converted to validator")
        if len(spec) > 1:
            raise TypeError("List shorthand takes exactly one item spec")
        return array(to_validator(spec[0]))

    if isinstance(spec, tuple):
        return tuple_([to_validator(v) for v in spec])

    raise TypeError(f"Cannot convert {type(spec).__name__} to validator")
