"""Tests for catalog selection and filtering."""
from types import MappingProxyType

import pytest

from workout_gateway.errors import InvalidCategory, MissingField
from workout_gateway.models.workout_library import DIFFICULTY_LABELS, WORKOUT_CATALOG
from workout_gateway.services.recommendation_selector import select_recommendations


SMALL_CATALOG = MappingProxyType({
    "strength": MappingProxyType({
        "upper": ({"nama": "a", "kesulitan": "Easy"}, {"nama": "b", "kesulitan": "Hard"}),
        "lower": ({"nama": "c", "kesulitan": "Medium"},),
    }),
    "endurance": MappingProxyType({
        "cardio": ({"nama": "d", "kesulitan": "Easy"},),
    }),
})


class TestCatalog:
    """Invariants of the shipped workout data."""

    def test_every_record_has_known_difficulty(self):
        for subcategories in WORKOUT_CATALOG.values():
            for records in subcategories.values():
                for record in records:
                    assert record["kesulitan"] in DIFFICULTY_LABELS

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            WORKOUT_CATALOG["yoga"] = {}
        with pytest.raises(TypeError):
            WORKOUT_CATALOG["strength"]["core"][0]["kesulitan"] = "Hard"


class TestSelectRecommendations:

    def test_all_categories_preserve_catalog_order(self):
        result = select_recommendations(SMALL_CATALOG, "semua")
        assert [r["nama"] for r in result] == ["a", "b", "c", "d"]

    def test_all_categories_count_matches_catalog(self):
        expected = sum(
            len(records)
            for subcategories in WORKOUT_CATALOG.values()
            for records in subcategories.values()
        )
        assert len(select_recommendations(WORKOUT_CATALOG, "semua")) == expected

    def test_single_category(self):
        result = select_recommendations(SMALL_CATALOG, "strength")
        assert [r["nama"] for r in result] == ["a", "b", "c"]

    def test_difficulty_alias_filters_exact_label(self):
        result = select_recommendations(SMALL_CATALOG, "semua", "beginner")
        assert [r["nama"] for r in result] == ["a", "d"]

    def test_raw_label_is_accepted(self):
        result = select_recommendations(SMALL_CATALOG, "strength", "Hard")
        assert [r["nama"] for r in result] == ["b"]

    @pytest.mark.parametrize("difficulty", [None, "", "all"])
    def test_no_filter_sentinels(self, difficulty):
        assert len(select_recommendations(SMALL_CATALOG, "strength", difficulty)) == 3

    def test_unmatched_difficulty_is_empty_success(self):
        assert select_recommendations(SMALL_CATALOG, "semua", "expert") == []

    def test_unknown_category(self):
        with pytest.raises(InvalidCategory):
            select_recommendations(SMALL_CATALOG, "yoga")

    @pytest.mark.parametrize("workout_type", [None, ""])
    def test_missing_category(self, workout_type):
        with pytest.raises(MissingField):
            select_recommendations(SMALL_CATALOG, workout_type)

    def test_results_are_copies(self):
        result = select_recommendations(WORKOUT_CATALOG, "strength")
        result[0]["kesulitan"] = "Changed"
        assert WORKOUT_CATALOG["strength"]["upper_body"][0]["kesulitan"] == "Easy"

    def test_non_string_difficulty_matches_nothing(self):
        assert select_recommendations(SMALL_CATALOG, "semua", 3) == []
        assert select_recommendations(SMALL_CATALOG, "semua", ["beginner"]) == []
