"""
Typed environment variable lookups.

Values are read from `os.environ` (or a supplied mapping) and converted to
the type of the fallback default. This module only reads an environment
mapping; loading `.env` files happens elsewhere.
"""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from typing import Any, overload

from .core import Validator
from .types import NO_VALUE, Result

log = logging.getLogger(__name__)

_TRUTHY = {"1", "true"}


class EnvReader:
    """
    Read environment variables with typed fallbacks.

    Example:
        env = EnvReader()
        port = env.get("PORT", 8000)          # int, 8000 if unset or not an int
        debug = env.get("DEBUG", False)       # True only for "1" / "true"
        name = env.get("APP_NAME", "demo")    # raw string

        result = env.read("PORT", number(minimum=1, maximum=65535))
    """

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        # Resolved per call so later changes to os.environ are seen
        return os.environ if self._environ is None else self._environ

    @overload
    def get(self, key: str, default: bool) -> bool: ...

    @overload
    def get(self, key: str, default: int) -> int: ...

    @overload
    def get(self, key: str, default: float) -> float: ...

    @overload
    def get(self, key: str, default: str) -> str: ...

    def get(self, key: str, default: Any) -> Any:
        """
        Return the variable converted to the type of `default`.

        Args:
            key: Variable name
            default: Returned when the variable is unset; its type selects
                the conversion (bool, int, float or str)

        Returns:
            bool: True only when the trimmed, lowercased value is "1" or "true"
            int / float: the parsed value, or `default` if it does not parse
            str: the raw value
        """
        value = self.environ.get(key)
        if value is None:
            return default

        # bool before int: bool is an int subclass
        if isinstance(default, bool):
            return value.strip().lower() in _TRUTHY
        if isinstance(default, int):
            try:
                return int(value.strip())
            except ValueError:
                log.debug("Env %s=%r is not an int, using %r", key, value, default)
                return default
        if isinstance(default, float):
            try:
                parsed = float(value.strip())
            except ValueError:
                parsed = math.nan
            if not math.isfinite(parsed):
                log.debug("Env %s=%r is not a number, using %r", key, value, default)
                return default
            return parsed
        return value

    def read(self, key: str, validator: Validator) -> Result[Any]:
        """
        Validate the raw variable with a validator, using `key` as the field.

        An unset variable is validated as NO_VALUE, so the validator's
        `required` and `default` options apply.
        """
        return validator.validate(key, self.environ.get(key, NO_VALUE))
