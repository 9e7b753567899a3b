"""
Composite validators for arrays and objects.

Each composite validator runs in exactly one mode, picked when it is built:

    ArrayValidator:  ItemsMode (same validator for every element)
                     TupleMode (one validator per position)
    ObjectValidator: StructMode (fixed keys, one validator each)
                     RecordMode (arbitrary keys, one validator for every value)

Children are validated depth-first; the first failing child is returned as
the result of the whole container.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .core import Validator
from .types import NO_VALUE, Result, failed, success


def _require_validator(what: str, v: Any) -> None:
    if not isinstance(v, Validator):
        raise TypeError(f"{what} must be a Validator, got {type(v).__name__}")


def _check_bounds(low: int | None, high: int | None) -> None:
    for bound in (low, high):
        if bound is not None and bound < 0:
            raise ValueError(f"Bounds must be non-negative, got {bound}")
    if low is not None and high is not None and low > high:
        raise ValueError(f"Lower bound {low} is greater than upper bound {high}")


def _dedupe(items: list[Any]) -> list[Any]:
    """
    Drop later duplicates, keeping first-seen order.

    Items are compared by equality, except that bools never match numbers:
    1 and 1.0 merge, True stays apart from both.
    """
    seen: set[Any] = set()
    result: list[Any] = []
    for item in items:
        is_bool = isinstance(item, bool)
        try:
            key = (is_bool, item)
            if key in seen:
                continue
            seen.add(key)
        except TypeError:
            # unhashable
            if any(isinstance(r, bool) == is_bool and r == item for r in result):
                continue
        result.append(item)
    return result


@dataclass(frozen=True, slots=True)
class ItemsMode:
    """Any number of elements, all validated by `item`."""

    item: Validator
    min_length: int | None = None
    max_length: int | None = None
    unique: bool = False

    def __post_init__(self) -> None:
        _require_validator("item", self.item)
        _check_bounds(self.min_length, self.max_length)


@dataclass(frozen=True, slots=True)
class TupleMode:
    """Fixed positions, element i validated by `validators[i]`."""

    validators: tuple[Validator, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "validators", tuple(self.validators))
        for i, v in enumerate(self.validators):
            _require_validator(f"Tuple position {i}", v)


@dataclass(frozen=True, slots=True)
class StructMode:
    """Named keys, each validated by its own validator, in declaration order."""

    fields: Mapping[str, Validator]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", dict(self.fields))
        for key, v in self.fields.items():
            _require_validator(f"Field {key!r}", v)


@dataclass(frozen=True, slots=True)
class RecordMode:
    """Arbitrary keys, every value validated by `value`."""

    value: Validator
    min_size: int | None = None
    max_size: int | None = None

    def __post_init__(self) -> None:
        _require_validator("value", self.value)
        _check_bounds(self.min_size, self.max_size)


@dataclass(frozen=True, slots=True, kw_only=True)
class ArrayValidator(Validator):
    """
    Validate a list (or tuple) against an ItemsMode or TupleMode.

    The output is always a new list.
    """

    mode: ItemsMode | TupleMode

    def __post_init__(self) -> None:
        if not isinstance(self.mode, (ItemsMode, TupleMode)):
            raise TypeError(
                f"Array mode must be ItemsMode or TupleMode, got {type(self.mode).__name__}"
            )

    def check(self, field: str, value: Any) -> Result[Any]:
        if not isinstance(value, (list, tuple)):
            return failed(f"{field} should be an array")

        formatted: list[Any] = []

        match self.mode:
            case ItemsMode(item=item, min_length=low, max_length=high, unique=unique):
                if low is not None and len(value) < low:
                    return failed(f"array {field}'s length should >= {low}")
                if high is not None and len(value) > high:
                    return failed(f"array {field}'s length should <= {high}")

                for i, element in enumerate(value):
                    result = item.validate(f"{field}[{i}]", element)
                    if result.is_failure():
                        return result
                    formatted.append(result.data)

                if unique:
                    formatted = _dedupe(formatted)

            case TupleMode(validators=validators):
                if len(value) > len(validators):
                    return failed(
                        f"{field} should be a tuple with {len(validators)} items"
                    )

                # Walk the validators, not the value: the value may be shorter
                for i, position in enumerate(validators):
                    element = value[i] if i < len(value) else NO_VALUE
                    result = position.validate(f"{field}[{i}]", element)
                    if result.is_failure():
                        return result
                    formatted.append(result.data)

        return success(formatted)


@dataclass(frozen=True, slots=True, kw_only=True)
class ObjectValidator(Validator):
    """
    Validate a mapping against a StructMode or RecordMode.

    The output is always a new dict. Children that come back as NO_VALUE
    are left out of it.
    """

    mode: StructMode | RecordMode

    def __post_init__(self) -> None:
        if not isinstance(self.mode, (StructMode, RecordMode)):
            raise TypeError(
                f"Object mode must be StructMode or RecordMode, got {type(self.mode).__name__}"
            )

    def check(self, field: str, value: Any) -> Result[Any]:
        if not isinstance(value, Mapping):
            return failed(f"{field} should be a plain object")

        formatted: dict[Any, Any] = {}

        match self.mode:
            case StructMode(fields=fields):
                # Undeclared keys are dropped
                for key, validator in fields.items():
                    item = value.get(key, NO_VALUE)
                    result = validator.validate(f'{field}["{key}"]', item)
                    if result.is_failure():
                        return result
                    if result.data is not NO_VALUE:
                        formatted[key] = result.data

            case RecordMode(value=validator, min_size=low, max_size=high):
                for key, item in value.items():
                    # An absent entry counts as a missing key, so `required` and
                    # `default` on the value validator never apply to it.
                    if item is NO_VALUE:
                        continue
                    result = validator.validate(f'{field}["{key}"]', item)
                    if result.is_failure():
                        return result
                    if result.data is not NO_VALUE:
                        formatted[key] = result.data

                size = len(formatted)
                if low is not None and size < low:
                    return failed(f"size of {field} should >= {low}")
                if high is not None and size > high:
                    return failed(f"size of {field} should <= {high}")

        return success(formatted)
