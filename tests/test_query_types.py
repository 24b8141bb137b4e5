import pytest

from dlsite.query_types import (
    AnaFlg,
    Language,
    OptionAndOr,
    Order,
    ReleaseTerm,
    SexCategory,
)


def test_language_display():
    language = Language("jp")
    assert language is Language.JP
    assert str(language) == "jp"


def test_order_display():
    assert Order("trend") is Order.TREND
    assert str(Order("price")) == "price"
    assert str(Order("release_d")) == "release_d"
    assert Order("release_d") is Order.RELEASE_D


def test_ana_flg_display():
    flag = AnaFlg("on")
    assert flag is AnaFlg.ON
    assert str(flag) == "on"


def test_release_term_keeps_variant_case():
    term = ReleaseTerm("Old")
    assert term is ReleaseTerm.OLD
    assert str(term) == "Old"
    assert str(ReleaseTerm("Week")) == "Week"


def test_snake_case_enums_from_text():
    assert SexCategory("male") is SexCategory.MALE
    assert SexCategory("female") is SexCategory.FEMALE
    assert AnaFlg("reserve") is AnaFlg.RESERVE
    assert OptionAndOr("and") is OptionAndOr.AND
    assert Order("dl_d") is Order.DL_D
    assert Order("review_d") is Order.REVIEW_D


def test_round_trip_and_format():
    pairs = [
        (Language("jp"), "jp"),
        (SexCategory("female"), "female"),
        (AnaFlg("all"), "all"),
        (Order("rate_d"), "rate_d"),
        (OptionAndOr("or"), "or"),
        (ReleaseTerm("None"), "None"),
    ]
    for member, text in pairs:
        assert str(member) == text
        assert f"{member}" == text


def test_unknown_value_rejected():
    with pytest.raises(ValueError):
        Order("cheapest")