"""Errors raised while resolving score function names."""

from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Sequence


class ContentLocation(NamedTuple):
    line_number: int
    column_number: int

    def __str__(self) -> str:
        return f"{self.line_number}:{self.column_number}"


def _format_location(location: Any) -> str:
    if location is None:
        return ""
    line = getattr(location, "line_number", None)
    column = getattr(location, "column_number", None)
    if line is not None and column is not None:
        return f"[{line}:{column}] "
    return f"[{location}] "


class ParsingError(ValueError):
    """User-facing parse failure tied to a position in the caller's input."""

    def __init__(self, message: str, location: Any = None) -> None:
        super().__init__(_format_location(location) + message)
        self.location = location
        self.detail = message


class NameNotRegistered(ParsingError):
    def __init__(self, name: str, location: Any = None, suggestions: Optional[Sequence[str]] = None) -> None:
        self.name = name
        self.suggestions: List[str] = list(suggestions or ())
        message = f"No function with the name [{name}] is registered."
        if self.suggestions:
            message += " Did you mean [" + ", ".join(self.suggestions) + "]?"
        super().__init__(message, location)


class DeprecatedNameError(ParsingError):
    """A deprecated name was used under a policy that forbids it."""

    def __init__(self, name: str, message: str, location: Any = None) -> None:
        self.name = name
        super().__init__(message, location)


class RegistrationConsistencyFault(AssertionError):
    """A stored key disagrees with the NameField registered under it.

    This is a bug in how the registry was populated, never bad user input.
    """

    def __init__(self, name: str, reason: str = "") -> None:
        self.name = name
        message = f"registered NameField did not match the name it was registered for [{name}]"
        if reason:
            message += f": {reason}"
        super().__init__(message)
