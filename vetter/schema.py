"""
Schema operations for vetter.

Provides validate() and to_pydantic() functions.
"""

from __future__ import annotations

import logging
import re
from typing import Annotated, Any, Literal
from typing import Optional as TypingOptional

from pydantic import BaseModel, Field, StringConstraints, create_model

from .containers import (
    ArrayValidator,
    ItemsMode,
    ObjectValidator,
    RecordMode,
    StructMode,
    TupleMode,
)
from .core import Validator
from .factories import to_validator
from .scalars import BooleanValidator, NumberValidator, StringValidator, enum_values
from .types import NO_VALUE, Result

log = logging.getLogger(__name__)


def validate(data: Any, schema: Any, field: str = "value") -> Result[Any]:
    """
    Validate data against a schema.

    Args:
        data: The value to validate
        schema: A validator, or a declarative spec accepted by `to_validator`
        field: Name used as the root of every field path in failure messages

    Returns:
        Success(formatted data) if validation passes
        Failure("<field path> <reason>") for the first failing field

    Usage:
        schema = {
            "name": str,
            "age": number(minimum=0),
            "tags": [str],
        }
        result = validate({"name": "Alice", "age": "30"}, schema)
    """
    validator = to_validator(schema)
    result = validator.validate(field, data)
    if result.is_failure():
        log.debug("Validation of %r failed: %s", field, result.message)
    return result


def to_pydantic(name: str, schema: Any) -> type[BaseModel]:
    """
    Compile a struct schema to a Pydantic model.

    Args:
        name: Name of the generated model class
        schema: A struct validator, or a dict spec

    Returns:
        A Pydantic BaseModel subclass. Nested structs become nested models
        named "<name>_<key>".

    Usage:
        User = to_pydantic("User", struct({
            "name": string(max_length=50),
            "email": string(required=False),
        }))
        user = User(name="Alice")
    """
    validator = to_validator(schema)
    if not isinstance(validator, ObjectValidator) or not isinstance(
        validator.mode, StructMode
    ):
        raise TypeError("Schema must be a struct")

    return _build_model(name, validator.mode)


def _build_model(name: str, mode: StructMode) -> type[BaseModel]:
    fields: dict[str, Any] = {}

    for key, v in mode.fields.items():
        fields[key] = _extract_pydantic_field(v, f"{name}_{key}")

    return create_model(name, **fields)


def _extract_pydantic_field(v: Validator, name: str) -> tuple[Any, Any]:
    """Extract Pydantic field type and default from validator."""
    field_type = _pydantic_type(v, name)

    if v.default is not NO_VALUE:
        return (field_type, v.default)
    if not v.required:
        return (TypingOptional[field_type], None)
    return (field_type, ...)


# Python re flags that have an inline form understood by Pydantic's regex engine
_INLINE_FLAGS = {
    re.IGNORECASE: "i",
    re.MULTILINE: "m",
    re.DOTALL: "s",
    re.VERBOSE: "x",
}


def _pattern_source(pattern: str | re.Pattern[str] | None) -> str | None:
    """Turn a compiled pattern back into source text, keeping its flags inline."""
    if not isinstance(pattern, re.Pattern):
        return pattern

    flags = pattern.flags & ~re.UNICODE
    inline = ""
    for flag, letter in _INLINE_FLAGS.items():
        if flags & flag:
            inline += letter
            flags &= ~flag
    if flags:
        raise TypeError(
            f"Cannot convert regex flags of {pattern.pattern!r} to Pydantic"
        )
    return f"(?{inline}){pattern.pattern}" if inline else pattern.pattern


def _pydantic_type(v: Validator, name: str) -> Any:
    """Pydantic type for a validator, nullable when the validator allows null."""
    field_type = _pydantic_base_type(v, name)
    if v.allow_null:
        return TypingOptional[field_type]
    return field_type


def _pydantic_base_type(v: Validator, name: str) -> Any:
    match v:
        case StringValidator(enum=choices) if choices is not None:
            return Literal[tuple(enum_values(choices))]
        case StringValidator():
            return Annotated[
                str,
                StringConstraints(
                    strip_whitespace=v.trim,
                    min_length=v.effective_min_length,
                    max_length=v.max_length,
                    pattern=_pattern_source(v.pattern),
                ),
            ]
        case NumberValidator(enum=choices) if choices is not None:
            return Literal[tuple(enum_values(choices))]
        case NumberValidator():
            base = float if v.allow_float else int
            return Annotated[base, Field(ge=v.minimum, le=v.maximum)]
        case BooleanValidator():
            return bool
        case ArrayValidator(mode=ItemsMode(item=item, min_length=low, max_length=high)):
            item_type = _pydantic_type(item, f"{name}_item")
            bounds = Field(min_length=low, max_length=high)
            return Annotated[list[item_type], bounds]  # type: ignore[valid-type]
        case ArrayValidator(mode=TupleMode(validators=validators)):
            positions = tuple(
                _pydantic_type(p, f"{name}_{i}") for i, p in enumerate(validators)
            )
            return tuple[positions] if positions else tuple[()]
        case ObjectValidator(mode=StructMode() as struct_mode):
            return _build_model(name, struct_mode)
        case ObjectValidator(mode=RecordMode(value=value, min_size=low, max_size=high)):
            value_type = _pydantic_type(value, f"{name}_value")
            bounds = Field(min_length=low, max_length=high)
            return Annotated[dict[str, value_type], bounds]  # type: ignore[valid-type]

    return Any
