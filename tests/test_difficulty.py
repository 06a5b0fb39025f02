"""Tests for difficulty alias translation."""
import pytest

from workout_gateway.models.workout_library import DIFFICULTY_LABELS
from workout_gateway.services.difficulty import DIFFICULTY_ALIASES, map_difficulty_level


@pytest.mark.parametrize(
    ("alias", "label"),
    [("beginner", "Easy"), ("intermediate", "Medium"), ("advanced", "Hard")],
)
def test_known_aliases_map_to_catalog_labels(alias, label):
    assert map_difficulty_level(alias) == label


@pytest.mark.parametrize("alias", ["Easy", "expert", "BEGINNER", ""])
def test_unknown_aliases_pass_through(alias):
    assert map_difficulty_level(alias) == alias


def test_alias_targets_are_catalog_labels():
    assert set(DIFFICULTY_ALIASES.values()) <= DIFFICULTY_LABELS
