"""
Score function registry package.

Exposes `ScoreFunctionsRegistry` and the pieces callers need to resolve a
score function name: `NameField`, `NameMatchPolicy` and the errors raised on
unknown or deprecated names.
"""

from .errors import (  # noqa: F401
    ContentLocation,
    DeprecatedNameError,
    NameNotRegistered,
    ParsingError,
    RegistrationConsistencyFault,
)
from .fields import Match, NameField  # noqa: F401
from .matching import LENIENT, SILENT, STRICT, DeprecationHandling, NameMatchPolicy  # noqa: F401
from .registry import ScoreFunctionsRegistry  # noqa: F401
from .settings import default_policy  # noqa: F401
