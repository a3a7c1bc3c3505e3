"""Tests for restaurant name matching."""

from fastfit.domain.places import NearbyPlace
from fastfit.services.matching import NameMatcher, matches, normalize


def test_normalize_collapses_punctuation_variants() -> None:
    assert normalize("McDonald's") == "mcdonalds"
    assert normalize("McDonald's") == normalize("Mcdonalds") == normalize("mc-donalds")
    assert normalize("Chick-fil-A") == normalize("Chick fil A")
    assert normalize("Wendy’s") == "wendys"


def test_is_supported_matches_both_directions() -> None:
    matcher = NameMatcher(frozenset({"mcdonalds", "tacobell"}))

    assert matcher.is_supported("McDonald's Restaurant")
    assert matcher.is_supported("Taco")
    assert not matcher.is_supported("Burger King")


def test_short_names_produce_accepted_false_positives() -> None:
    matcher = NameMatcher(frozenset({"subway"}))

    assert matcher.is_supported("Sub")


def test_empty_query_is_not_supported() -> None:
    matcher = NameMatcher(frozenset({"subway"}))

    assert not matcher.is_supported("")
    assert not matcher.is_supported(" - ")


def test_empty_brand_set_supports_nothing() -> None:
    assert not NameMatcher().is_supported("Subway")


def test_matches_against_candidate_list() -> None:
    assert matches("Mcdonalds", ["Burger King", "McDonald's #1234"])
    assert matches("Chick-fil-A", ["chickfila"])
    assert not matches("Subway", ["Wendy's", "Arby's"])
    assert not matches("Subway", [])


def test_match_places_flags_support_and_formats_distance() -> None:
    matcher = NameMatcher(frozenset({"mcdonalds"}))
    places = [
        NearbyPlace(id="a", name="McDonald's", distance_meters=1609.34),
        NearbyPlace(id="b", name="Local Diner", distance_meters=800),
    ]

    results = matcher.match_places(places)

    assert [result.supported for result in results] == [True, False]
    assert results[0].distance_label == "1.0 mi"
    assert results[1].distance_label == "0.5 mi"
    assert matcher.supported_places(places) == [places[0]]
