import pytest

from score_functions.fields import Match, NameField


def test_canonical_name_matches():
    f = NameField("match").with_deprecation("matches")
    assert f.match("match") is Match.MATCH


def test_deprecated_name_is_flagged():
    f = NameField("match").with_deprecation("matches")
    assert f.match("matches") is Match.DEPRECATED
    assert f.deprecation_message("matches") == "Deprecated field [matches] used, expected [match] instead"


def test_foreign_name_does_not_match():
    f = NameField("match").with_deprecation("matches")
    assert f.match("Match") is Match.NO_MATCH
    assert not f.match("term")


def test_all_deprecated_field_flags_canonical_name():
    f = NameField("boost_factor").with_all_deprecated("weight")
    assert f.match("boost_factor") is Match.DEPRECATED
    assert f.deprecation_message("boost_factor") == "Deprecated field [boost_factor] used, replaced by [weight]"


def test_with_deprecation_returns_new_field():
    base = NameField("gauss")
    aliased = base.with_deprecation("gaussian")
    assert base.deprecated_names == ()
    assert aliased.all_names == ("gauss", "gaussian")


def test_empty_names_rejected():
    with pytest.raises(ValueError):
        NameField("")
    with pytest.raises(ValueError):
        NameField("gauss", ("",))


def test_bare_string_alias_is_one_name():
    f = NameField("gauss", "gaussian")
    assert f.deprecated_names == ("gaussian",)
    assert f.match("gaussian") is Match.DEPRECATED
    assert f.match("g") is Match.NO_MATCH


def test_empty_replacement_rejected():
    with pytest.raises(ValueError):
        NameField("boost_factor").with_all_deprecated("")
