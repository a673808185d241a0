"""Companion pet rewards tied to workout XP.

Every logged workout also earns essence (the pet currency), and a very happy
pet boosts the XP the player earns.
"""

ESSENCE_PER_XP = 10
HAPPY_PET_THRESHOLD = 90.0
HAPPY_PET_XP_MULTIPLIER = 1.10


def essence_for_workout(xp: int) -> int:
    """Essence earned for a workout worth ``xp`` (one per 10 XP, rounded down)."""
    return xp // ESSENCE_PER_XP


def has_xp_bonus(happiness: float) -> bool:
    return happiness >= HAPPY_PET_THRESHOLD


def happiness_xp_multiplier(happiness: float) -> float:
    return HAPPY_PET_XP_MULTIPLIER if has_xp_bonus(happiness) else 1.0

