"""Translation of coarse difficulty aliases into catalog labels."""

DIFFICULTY_ALIASES: dict[str, str] = {
    "beginner": "Easy",
    "intermediate": "Medium",
    "advanced": "Hard",
}


def map_difficulty_level(difficulty_level: str) -> str:
    """Return the catalog label for an alias, or the alias itself if unknown."""

    return DIFFICULTY_ALIASES.get(difficulty_level, difficulty_level)
