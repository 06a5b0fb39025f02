"""Catalog lookups backing the workout recommendation routes."""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from workout_gateway.errors import InvalidCategory, MissingField
from workout_gateway.models.workout_library import Catalog
from workout_gateway.services.difficulty import map_difficulty_level


logger = logging.getLogger(__name__)

ALL_CATEGORIES = "semua"
ALL_DIFFICULTIES = "all"


def _flatten(categories: Iterable[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    flattened: list[Mapping[str, Any]] = []
    for subcategories in categories:
        for records in subcategories.values():
            flattened.extend(records)
    return flattened


def select_recommendations(
    catalog: Catalog,
    workout_type: str | None,
    difficulty_level: Any = None,
) -> list[dict[str, Any]]:
    """
    Collect catalog exercises for a workout type, optionally filtered by difficulty.

    Args:
        catalog: Category -> subcategory -> exercises mapping
        workout_type: Category name, or ``"semua"`` for every category
        difficulty_level: Difficulty alias; ``None``, empty or ``"all"`` disables filtering

    Returns:
        list: Exercise records in catalog order (category, subcategory, record)

    Raises:
        MissingField: ``workout_type`` is absent or empty
        InvalidCategory: ``workout_type`` is not a catalog category
    """
    if not workout_type:
        raise MissingField("Workout type is required")

    if workout_type == ALL_CATEGORIES:
        selected = _flatten(catalog.values())
    elif workout_type in catalog:
        selected = _flatten([catalog[workout_type]])
    else:
        logger.warning("Unknown workout type requested: %s", workout_type)
        raise InvalidCategory("Invalid workout type")

    if difficulty_level and difficulty_level != ALL_DIFFICULTIES:
        label = (
            map_difficulty_level(difficulty_level)
            if isinstance(difficulty_level, str)
            else difficulty_level
        )
        selected = [record for record in selected if record.get("kesulitan") == label]

    return [dict(record) for record in selected]
