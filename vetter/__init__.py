"""
Vetter - composable runtime validators with coercion and Pydantic interop.

Usage:
    from vetter import array, number, string, struct

    user = struct({
        "name": string(max_length=50),
        "age": number(minimum=0, maximum=120),
        "tags": array(string(), unique=True, required=False),
    })

    result = user.validate("user", {"name": " Amy ", "age": "30"})
    if result.is_success():
        print(result.data)     # {"name": "Amy", "age": 30}
    else:
        print(result.message)  # e.g. 'user["age"] must <= 120'
"""

import logging

from .containers import (
    ArrayValidator,
    ItemsMode,
    ObjectValidator,
    RecordMode,
    StructMode,
    TupleMode,
)
from .core import Validator
from .env import EnvReader
from .factories import (
    any_,
    array,
    boolean,
    number,
    record,
    string,
    struct,
    to_validator,
    tuple_,
)
from .scalars import BooleanValidator, NumberValidator, StringValidator
from .schema import to_pydantic, validate
from .types import (
    NO_VALUE,
    Failure,
    Result,
    Success,
    ValidationFailed,
    failed,
    map_success,
    success,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Result types
    "NO_VALUE",
    "Success",
    "Failure",
    "Result",
    "ValidationFailed",
    "success",
    "failed",
    "map_success",
    # Validators
    "Validator",
    "StringValidator",
    "NumberValidator",
    "BooleanValidator",
    "ArrayValidator",
    "ObjectValidator",
    "ItemsMode",
    "TupleMode",
    "StructMode",
    "RecordMode",
    # Factories
    "any_",
    "string",
    "number",
    "boolean",
    "array",
    "tuple_",
    "struct",
    "record",
    "to_validator",
    # Schema
    "validate",
    "to_pydantic",
    # Environment
    "EnvReader",
]
