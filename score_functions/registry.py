"""
Score function registry.

Exposes `ScoreFunctionsRegistry`: a sealed mapping from a lookup key to the
`NameField` and handler registered under it. A handler is any callable, for
example the parser for one kind of score function; the registry never calls
it.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, Iterator, Mapping, Tuple

from .errors import NameNotRegistered, RegistrationConsistencyFault
from .fields import Match, NameField
from .log import create_logger
from .matching import NameMatchPolicy
from .suggest import suggest

Handler = Callable[..., Any]
Entry = Tuple[NameField, Handler]

logger = create_logger(__name__, level=logging.NOTSET)


class ScoreFunctionsRegistry:
    """Immutable registry of score function handlers keyed by name.

    The input mapping is copied and wrapped read-only on construction, and
    every key is checked against its own NameField before the registry is
    handed out. After `__init__` returns nothing is ever written, so lookups
    need no locking.
    """

    def __init__(self, entries: Mapping[str, Entry]) -> None:
        snapshot: Dict[str, Entry] = {}
        for key, (name_field, handler) in entries.items():
            if name_field.match(key) is Match.NO_MATCH:
                raise RegistrationConsistencyFault(key, f"expected one of {list(name_field.all_names)}")
            snapshot[key] = (name_field, handler)
        self._entries: Mapping[str, Entry] = MappingProxyType(snapshot)
        logger.debug("Sealed score function registry with %d names", len(snapshot))

    @classmethod
    def from_entries(cls, entries: Iterable[Entry]) -> ScoreFunctionsRegistry:
        """Register each handler under its canonical and deprecated names."""
        mapping: Dict[str, Entry] = {}
        for name_field, handler in entries:
            for name in name_field.all_names:
                if name in mapping:
                    raise ValueError(f"Score function '{name}' is already registered")
                mapping[name] = (name_field, handler)
        return cls(mapping)

    def resolve(self, name: str, policy: NameMatchPolicy, location: Any = None) -> Handler:
        """Get the handler registered under `name`.

        Args:
            name: the function name as it appeared in the caller's input.
            policy: decides whether a deprecated spelling is accepted,
                reported or rejected.
            location: opaque position token, only used in error messages.

        Raises:
            NameNotRegistered: nothing is registered under `name`.
            DeprecatedNameError: `name` is deprecated and `policy` is strict.
            RegistrationConsistencyFault: `policy` rejects the key the entry
                was stored under.
        """
        entry = self._entries.get(name)
        if entry is None:
            allowed = [key for key, (key_field, _) in self._entries.items() if policy.allows(key, key_field)]
            raise NameNotRegistered(name, location, suggest(name, allowed))
        name_field, handler = entry
        if policy.check(name, name_field, location) is Match.NO_MATCH:
            raise RegistrationConsistencyFault(name, f"rejected by {policy!r}")
        return handler

    def field(self, name: str) -> NameField:
        return self._entries[name][0]

    def names(self) -> Tuple[str, ...]:
        return tuple(sorted(self._entries))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} names)"
