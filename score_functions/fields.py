"""
Named fields with deprecated spellings.

A `NameField` is the canonical name of a score function plus the alternate
names it is still recognised by. Matching a candidate string against a field
is a pure function with three outcomes (see `Match`); what happens on a
deprecated match is decided by the caller's `NameMatchPolicy`.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Optional, Tuple


class Match(enum.Enum):
    NO_MATCH = "no_match"
    MATCH = "match"
    DEPRECATED = "deprecated"

    def __bool__(self) -> bool:
        return self is not Match.NO_MATCH


@dataclass(frozen=True)
class NameField:
    """Canonical name plus deprecated alternates.

    If `all_replaced_with` is set, the whole field is superseded: even the
    canonical name only matches as `Match.DEPRECATED`.
    """

    name: str
    deprecated_names: Tuple[str, ...] = ()
    all_replaced_with: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("NameField requires a non-empty name")
        names = self.deprecated_names
        if isinstance(names, str):
            names = (names,)
        names = tuple(names)
        if any(not n for n in names):
            raise ValueError(f"Empty deprecated name for field [{self.name}]")
        if self.all_replaced_with is not None and not self.all_replaced_with:
            raise ValueError(f"Field [{self.name}] cannot be replaced by an empty name")
        object.__setattr__(self, "deprecated_names", names)

    def with_deprecation(self, *names: str) -> NameField:
        return replace(self, deprecated_names=tuple(names))

    def with_all_deprecated(self, replacement: str) -> NameField:
        return replace(self, all_replaced_with=replacement)

    @property
    def all_names(self) -> Tuple[str, ...]:
        return (self.name,) + self.deprecated_names

    def match(self, candidate: str) -> Match:
        if candidate == self.name:
            return Match.MATCH if self.all_replaced_with is None else Match.DEPRECATED
        if candidate in self.deprecated_names:
            return Match.DEPRECATED
        return Match.NO_MATCH

    def deprecation_message(self, candidate: str) -> str:
        if self.all_replaced_with is not None:
            return f"Deprecated field [{candidate}] used, replaced by [{self.all_replaced_with}]"
        return f"Deprecated field [{candidate}] used, expected [{self.name}] instead"

    def __str__(self) -> str:
        return self.name
