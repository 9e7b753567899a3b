"""
Core validator class for vetter.

Every validator node derives from Validator, which owns the options shared
by all kinds (nullability, required-ness, default value) and runs the
baseline accept/reject step before handing off to type-specific checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .types import NO_VALUE, Result, failed, success


@dataclass(frozen=True, slots=True, kw_only=True)
class Validator:
    """
    Immutable validator node.

    Used directly, it only performs the baseline checks (see `any_`).
    Subclasses override `check`, which is only reached for a present,
    non-null value.

    Options:
        allow_null: Let an explicit None through unchanged.
        required: Fail when no value is provided.
        default: Substituted when no value is provided; overrides `required`.
    """

    allow_null: bool = False
    required: bool = True
    default: Any = NO_VALUE

    def validate(self, field: str, value: Any = NO_VALUE) -> Result[Any]:
        """
        Validate a value.

        Returns:
            Success(formatted value) if validation passes
            Failure("<field> <reason>") if validation fails
        """
        if value is NO_VALUE:
            if self.default is not NO_VALUE:
                value = self.default
            elif self.required:
                return failed(f"{field} is required")

        if value is None and not self.allow_null:
            return failed(f"{field} cannot be null")

        if value is None or value is NO_VALUE:
            return success(value)

        return self.check(field, value)

    def check(self, field: str, value: Any) -> Result[Any]:
        """Type-specific checks on a present, non-null value."""
        return success(value)
