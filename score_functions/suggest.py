"""
"Did you mean" candidates for unknown names (RapidFuzz).

Summary:
- Scores every registered name against the unknown one with
  `rapidfuzz.fuzz.ratio` (normalized Indel similarity, 0-100) and keeps the
  best few above a cutoff.

When to use:
- Decorating a `NameNotRegistered` message, e.g. ``fieldvaluefactor`` ->
  ``field_value_factor``. Purely lexical; never changes what resolves.
"""

from __future__ import annotations

from typing import Iterable, List


def suggest(
    name: str,
    candidates: Iterable[str],
    limit: int = 3,
    score_cutoff: float = 70.0,
) -> List[str]:
    from rapidfuzz import fuzz, process

    choices = list(candidates)
    if not name or not choices:
        return []
    found = process.extract(name, choices, scorer=fuzz.ratio, limit=limit, score_cutoff=score_cutoff)
    return [choice for choice, _score, _index in found]
