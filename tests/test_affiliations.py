"""Tests for affiliation classification and company-name extraction."""

import pytest

from finder.affiliations import (
    UNKNOWN_COMPANY,
    Classification,
    KeywordConfig,
    classify_affiliation,
    company_patterns,
    extract_company_name,
    is_non_academic,
    normalize_affiliation,
)


def test_normalize_affiliation_forms():
    normalized = normalize_affiliation("  Acme Pharma INC \n")
    assert normalized.raw == "  Acme Pharma INC \n"
    assert normalized.text == "Acme Pharma INC"
    assert normalized.lowered == "acme pharma inc"


def test_normalize_affiliation_none():
    assert normalize_affiliation(None).lowered == ""


@pytest.mark.parametrize("affiliation", [
    "Oncology Institute, Houston, TX",
    "Department of Chemistry, Pfizer Inc",
    "Harvard University and Biogen Inc, Cambridge",
    "National Biotech Research Foundation",
])
def test_academic_keyword_takes_precedence(affiliation):
    assert classify_affiliation(affiliation) is Classification.ACADEMIC


@pytest.mark.parametrize("affiliation", [
    "Acme Pharmaceuticals Inc, Boston",
    "Novartis AG, Basel, Switzerland",
    "Regeneron Therapeutics, Tarrytown, NY",
    "BIOTECH SOLUTIONS LTD",
])
def test_commercial_affiliations(affiliation):
    assert classify_affiliation(affiliation) is Classification.COMMERCIAL


def test_unclassified_affiliation():
    assert classify_affiliation("Paris, France") is Classification.UNCLASSIFIED
    assert classify_affiliation("") is Classification.UNCLASSIFIED


def test_is_non_academic_needs_one_commercial_affiliation():
    assert is_non_academic(["Harvard University", "Genentech Inc, South San Francisco"])
    assert is_non_academic(["Paris, France", "Sanofi Pharma"])
    assert not is_non_academic(["Harvard University", "Paris, France"])
    assert not is_non_academic([])


def test_keyword_config_normalizes_keywords():
    config = KeywordConfig(academic_keywords=["  Lab ", ""], commercial_keywords="Widgets, GADGETS")
    assert config.academic_keywords == ("lab",)
    assert config.commercial_keywords == ("widgets", "gadgets")


def test_keyword_override_changes_classification():
    config = KeywordConfig(academic_keywords=["lab"], commercial_keywords=["widgets"])
    assert classify_affiliation("Widgets Lab", config) is Classification.ACADEMIC
    assert classify_affiliation("Widgets Unlimited", config) is Classification.COMMERCIAL
    # Built-in keywords no longer apply
    assert classify_affiliation("Harvard University", config) is Classification.UNCLASSIFIED


def test_keyword_config_from_settings():
    class FakeSettings:
        academic_keywords = ("campus",)
        commercial_keywords = ("Holdings",)

    config = KeywordConfig.from_settings(FakeSettings())
    assert config.academic_keywords == ("campus",)
    assert config.commercial_keywords == ("holdings",)


def test_extract_company_name_from_capitalized_phrase():
    company = extract_company_name(["Acme Pharmaceuticals Inc, Boston"])
    assert company == "Acme Pharmaceuticals"


def test_extract_company_name_skips_academic_affiliations():
    company = extract_company_name(["Harvard University", "Pfizer Inc, New York, NY"])
    assert company == "Pfizer Inc"


def test_extract_company_name_falls_back_to_text_before_comma():
    assert extract_company_name(["acme biotech, boston"]) == "acme biotech"


def test_extract_company_name_unknown_without_comma_or_match():
    assert extract_company_name(["acme biotech research"]) == UNKNOWN_COMPANY


def test_extract_company_name_empty_affiliations():
    assert extract_company_name([]) == ""


def test_extract_company_name_tries_next_affiliation():
    company = extract_company_name(["acme biotech research", "Medimmune LLC, Gaithersburg"])
    assert company == "Medimmune LLC"


def test_extract_company_name_only_academic_affiliations():
    assert extract_company_name(["Harvard University"]) == UNKNOWN_COMPANY


def test_extract_company_name_known_imprecise_span():
    # Known-imprecise: the capitalised words before the keyword are a place name
    company = extract_company_name(["Cambridge MA Biologics Inc"])
    assert company == "Cambridge MA"


def test_company_patterns_follow_keyword_order_and_are_cached():
    keywords = ("pharma", "co.")
    patterns = company_patterns(keywords)
    assert len(patterns) == 2
    assert patterns is company_patterns(keywords)
    assert "co\\." in patterns[1].pattern


def test_keyword_sets_get_a_stable_order():
    config = KeywordConfig(
        academic_keywords={"university", "college"},
        commercial_keywords=frozenset({"pharma", "ltd", "Corp"}),
    )
    assert config.academic_keywords == ("college", "university")
    assert config.commercial_keywords == ("corp", "ltd", "pharma")
    assert extract_company_name(["Acme Biotech Ltd Corp"], config) == "Acme Biotech"
