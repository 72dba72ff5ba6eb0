"""
Runtime settings read from the environment.

`SCORE_FUNCTIONS_DEPRECATION` selects the default deprecation handling:
``strict``, ``lenient`` (default) or ``silent``.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from .matching import NameMatchPolicy

DEPRECATION_ENV = "SCORE_FUNCTIONS_DEPRECATION"
DEFAULT_DEPRECATION = "lenient"


def default_policy(environ: Optional[Mapping[str, str]] = None) -> NameMatchPolicy:
    env = os.environ if environ is None else environ
    return NameMatchPolicy.from_setting(env.get(DEPRECATION_ENV, DEFAULT_DEPRECATION))
