"""
Name matching policies.

Summary:
- `NameMatchPolicy.match` is a pure function of (queried name, NameField).
- `NameMatchPolicy.check` applies the policy's `DeprecationHandling` to a
  deprecated match: reject it, warn about it once, or let it through quietly.

Different callers may use different policies against the same sealed
registry, e.g. a strict policy for a newer API version that no longer accepts
old spellings and a lenient one for older clients.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .errors import DeprecatedNameError
from .fields import Match, NameField
from .log import DEPRECATION_LOGGER, create_logger

_DEPRECATION_LOG = create_logger(DEPRECATION_LOGGER)


class DeprecationHandling(enum.Enum):
    STRICT = "strict"
    LENIENT = "lenient"
    SILENT = "silent"


@dataclass(frozen=True)
class NameMatchPolicy:
    handling: DeprecationHandling = DeprecationHandling.LENIENT
    logger: Optional[logging.Logger] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_setting(cls, value: str) -> NameMatchPolicy:
        """Build a policy from a handling name such as ``"strict"``."""
        key = (value or "").strip().lower()
        try:
            return cls(DeprecationHandling(key))
        except ValueError:
            known = ", ".join(h.value for h in DeprecationHandling)
            raise ValueError(f"Unknown deprecation handling '{value}'. Known: {known}") from None

    @property
    def strict(self) -> bool:
        return self.handling is DeprecationHandling.STRICT

    def match(self, name: str, name_field: NameField) -> Match:
        return name_field.match(name)

    def allows(self, name: str, name_field: NameField) -> bool:
        """Whether `check` would accept `name` without raising."""
        outcome = self.match(name, name_field)
        if outcome is Match.DEPRECATED:
            return not self.strict
        return outcome is Match.MATCH

    def check(self, name: str, name_field: NameField, location: Any = None) -> Match:
        """Match `name` and act on a deprecated outcome.

        Raises `DeprecatedNameError` for a deprecated match under STRICT
        handling; logs a single warning under LENIENT. The outcome is returned
        unchanged otherwise, including `Match.NO_MATCH`.
        """
        outcome = self.match(name, name_field)
        if outcome is not Match.DEPRECATED:
            return outcome
        message = name_field.deprecation_message(name)
        if self.handling is DeprecationHandling.STRICT:
            raise DeprecatedNameError(name, message, location)
        if self.handling is DeprecationHandling.LENIENT:
            (self.logger or _DEPRECATION_LOG).warning(message)
        return outcome


STRICT = NameMatchPolicy(DeprecationHandling.STRICT)
LENIENT = NameMatchPolicy(DeprecationHandling.LENIENT)
SILENT = NameMatchPolicy(DeprecationHandling.SILENT)
