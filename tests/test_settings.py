from score_functions import default_policy
from score_functions.matching import DeprecationHandling
from score_functions.settings import DEPRECATION_ENV


def test_default_is_lenient(monkeypatch):
    monkeypatch.delenv(DEPRECATION_ENV, raising=False)
    assert default_policy().handling is DeprecationHandling.LENIENT


def test_env_selects_handling(monkeypatch):
    monkeypatch.setenv(DEPRECATION_ENV, "strict")
    assert default_policy().handling is DeprecationHandling.STRICT


def test_explicit_environ():
    assert default_policy({DEPRECATION_ENV: "SILENT"}).handling is DeprecationHandling.SILENT
