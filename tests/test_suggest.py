try:
    from rapidfuzz import fuzz  # noqa: F401
    RAPIDFUZZ_OK = True
except Exception:  # pragma: no cover - environment without rapidfuzz
    RAPIDFUZZ_OK = False

import pytest

from score_functions.suggest import suggest

NAMES = ["script_score", "field_value_factor", "random_score", "weight", "gauss", "exp", "linear"]


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_typo_suggests_registered_name():
    assert suggest("field_value_facter", NAMES)[0] == "field_value_factor"


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_unrelated_name_suggests_nothing():
    assert suggest("geo_distance_bucket", NAMES) == []


@pytest.mark.skipif(not RAPIDFUZZ_OK, reason="rapidfuzz not installed")
def test_limit_and_empty_inputs():
    assert len(suggest("score", ["score1", "score2", "score3", "score4"], limit=2)) == 2
    assert suggest("", NAMES) == []
    assert suggest("gauss", []) == []
