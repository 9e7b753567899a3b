"""
Scalar validators: strings, numbers and booleans.

Each one refines a raw value into its canonical typed form or fails.
"""

from __future__ import annotations

import enum
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .core import Validator
from .types import Result, failed, success

TRUE_STRINGS = frozenset({"1", "true", "on", "yes"})
FALSE_STRINGS = frozenset({"0", "false", "off", "no"})


def enum_values(choices: Any) -> list[Any]:
    """
    Flatten an allow-list into a list of values.

    Accepts a sequence, a mapping (its values are allowed) or an Enum class
    (its member values are allowed).
    """
    if isinstance(choices, type) and issubclass(choices, enum.Enum):
        return [member.value for member in choices]
    if isinstance(choices, Mapping):
        return list(choices.values())
    return list(choices)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


@dataclass(frozen=True, slots=True, kw_only=True)
class StringValidator(Validator):
    """
    Validate a string.

    Checks run in order: type, min length, max length, pattern, enum.
    With `trim` on (the default) surrounding whitespace is stripped first and
    the stripped string is returned.

    `min_length` defaults to 0 when the default value is "", otherwise to 1.
    `pattern` is searched anywhere in the string; anchor it to match fully.
    """

    min_length: int | None = None
    max_length: int | None = None
    pattern: str | re.Pattern[str] | None = None
    enum: Sequence[str] | Mapping[str, str] | type[enum.Enum] | None = None
    trim: bool = True

    @property
    def effective_min_length(self) -> int:
        if self.min_length is not None:
            return self.min_length
        return 0 if self.default == "" else 1

    def check(self, field: str, value: Any) -> Result[Any]:
        if not isinstance(value, str):
            return failed(f"{field} must be a string")

        formatted = value.strip() if self.trim else value

        min_length = self.effective_min_length
        if len(formatted) < min_length:
            return failed(f"{field}'s length must >= {min_length}")

        if self.max_length is not None and len(formatted) > self.max_length:
            return failed(f"{field}'s length must <= {self.max_length}")

        if self.pattern is not None and re.search(self.pattern, formatted) is None:
            return failed(f"{field} does not match the pattern.")

        if self.enum is not None:
            valid_values = enum_values(self.enum)
            if formatted not in valid_values:
                choices = ", ".join(str(v) for v in valid_values)
                return failed(f"{field} can only be one of {choices}.")

        return success(formatted)


@dataclass(frozen=True, slots=True, kw_only=True)
class NumberValidator(Validator):
    """
    Validate a number, parsing numeric strings.

    Checks run in order: valid finite number, enum, integer, minimum, maximum.
    Unless `allow_float` is set the value must be integral and is returned
    as an int.
    """

    minimum: float | None = None
    maximum: float | None = None
    allow_float: bool = False
    enum: Sequence[float] | type[enum.Enum] | None = None

    def check(self, field: str, value: Any) -> Result[Any]:
        if isinstance(value, str):
            try:
                value = float(value.strip())
            except ValueError:
                return failed(f"{field} must be a valid number")

        if not _is_number(value) or not _is_finite(value):
            return failed(f"{field} must be a valid number")

        if self.enum is not None:
            valid_values = enum_values(self.enum)
            if value not in valid_values:
                choices = ", ".join(str(v) for v in valid_values)
                return failed(f"{field} can only be one of {choices}.")

        if not self.allow_float:
            if value % 1 != 0:
                return failed(f"{field} must be a integer")
            value = int(value)

        if self.minimum is not None and value < self.minimum:
            return failed(f"{field} must >= {self.minimum}")
        if self.maximum is not None and value > self.maximum:
            return failed(f"{field} must <= {self.maximum}")

        return success(value)


@dataclass(frozen=True, slots=True, kw_only=True)
class BooleanValidator(Validator):
    """
    Validate a boolean.

    Strings 1/true/on/yes and 0/false/off/no (trimmed, any case) are
    coerced, as are the numbers 1 and 0.
    """

    def check(self, field: str, value: Any) -> Result[Any]:
        if isinstance(value, str):
            text = value.strip().lower()
            if text in TRUE_STRINGS:
                value = True
            elif text in FALSE_STRINGS:
                value = False
        elif _is_number(value):
            if value == 1:
                value = True
            elif value == 0:
                value = False

        if not isinstance(value, bool):
            return failed(f"{field} must be true or false")
        return success(value)
