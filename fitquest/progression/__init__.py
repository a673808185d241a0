"""Progression formulas - XP awards, player levels, ranks, streaks, pet rewards and daily quests."""

from fitquest.progression.levels import level_for, progress_for, xp_required_for, xp_to_next_level
from fitquest.progression.pets import essence_for_workout, happiness_xp_multiplier
from fitquest.progression.quests import QuestType, generate_daily_quests
from fitquest.progression.ranks import PlayerRank, rank_for
from fitquest.progression.streaks import calculate_streak
from fitquest.progression.xp import calculate_total_xp, streak_multiplier

__all__ = [
    "PlayerRank",
    "QuestType",
    "calculate_streak",
    "calculate_total_xp",
    "essence_for_workout",
    "generate_daily_quests",
    "happiness_xp_multiplier",
    "level_for",
    "progress_for",
    "rank_for",
    "streak_multiplier",
    "xp_required_for",
    "xp_to_next_level",
]
