"""Daily quest definitions and the daily quest picker.

Each day the player gets three quests, one per difficulty where possible.
Picks are drawn from an explicit SeededRNG so a day's quests are reproducible.
"""

from collections.abc import Collection
from dataclasses import dataclass
from datetime import date
from enum import IntEnum, StrEnum

from loguru import logger

from fitquest.core.rng import SeededRNG

QUESTS_PER_DAY = 3


class QuestDifficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3


class QuestRewardType(StrEnum):
    XP = "xp"
    ESSENCE = "essence"


@dataclass(frozen=True)
class QuestDefinition:
    """Static rules of a quest type.

    Attributes:
        display_name: Card title
        description: What the player has to do
        reward_type: XP (goes to the pet) or essence
        reward_amount: Reward granted when claimed
        difficulty: Used to mix difficulties in a day's set
        target: Progress needed to complete
    """

    display_name: str
    description: str
    reward_type: QuestRewardType
    reward_amount: int
    difficulty: QuestDifficulty
    target: int = 1


class QuestType(StrEnum):
    """Daily quest kinds; values are the stored raw strings."""

    EARLY_BIRD = "earlyBird"
    NIGHT_OWL = "nightOwl"
    DOUBLE_DOWN = "doubleDown"
    PET_CARE = "petCare"
    STRENGTH_FOCUS = "strengthFocus"
    CARDIO_FOCUS = "cardioFocus"
    STREAK_KEEPER = "streakKeeper"
    HAPPY_PET = "happyPet"
    PLAY_TIME = "playTime"

    @property
    def definition(self) -> QuestDefinition:
        return QUEST_DEFINITIONS[self]

    @property
    def display_name(self) -> str:
        return self.definition.display_name

    @property
    def difficulty(self) -> QuestDifficulty:
        return self.definition.difficulty


QUEST_DEFINITIONS: dict[QuestType, QuestDefinition] = {
    QuestType.EARLY_BIRD: QuestDefinition(
        "Early Bird", "Complete a workout before 9 AM", QuestRewardType.XP, 50, QuestDifficulty.MEDIUM
    ),
    QuestType.NIGHT_OWL: QuestDefinition(
        "Night Owl", "Complete a workout after 9 PM", QuestRewardType.XP, 50, QuestDifficulty.MEDIUM
    ),
    QuestType.DOUBLE_DOWN: QuestDefinition(
        "Double Down", "Complete 2 workouts today", QuestRewardType.ESSENCE, 30, QuestDifficulty.HARD, target=2
    ),
    QuestType.PET_CARE: QuestDefinition(
        "Pet Care", "Feed your pet a treat", QuestRewardType.ESSENCE, 20, QuestDifficulty.EASY
    ),
    QuestType.STRENGTH_FOCUS: QuestDefinition(
        "Strength Focus", "Complete a strength workout", QuestRewardType.XP, 40, QuestDifficulty.MEDIUM
    ),
    QuestType.CARDIO_FOCUS: QuestDefinition(
        "Cardio Focus", "Complete a cardio workout", QuestRewardType.XP, 40, QuestDifficulty.MEDIUM
    ),
    QuestType.STREAK_KEEPER: QuestDefinition(
        "Streak Keeper", "Complete any workout today", QuestRewardType.XP, 25, QuestDifficulty.EASY
    ),
    QuestType.HAPPY_PET: QuestDefinition(
        "Happy Pet", "Get pet happiness above 80%", QuestRewardType.ESSENCE, 25, QuestDifficulty.MEDIUM
    ),
    QuestType.PLAY_TIME: QuestDefinition(
        "Play Time", "Play with your pet", QuestRewardType.ESSENCE, 15, QuestDifficulty.EASY
    ),
}


def generate_daily_quests(rng: SeededRNG, excluding: Collection[QuestType] = ()) -> list[QuestType]:
    """Pick the day's quests.

    One quest of each difficulty (easy, medium, hard) when available, then
    random picks from what is left until ``QUESTS_PER_DAY`` are chosen.

    Args:
        rng: Generator for the day
        excluding: Quest types that must not be picked (e.g. yesterday's set)

    Returns:
        Up to ``QUESTS_PER_DAY`` distinct quest types
    """
    available = [quest for quest in QuestType if quest not in excluding]
    selected: list[QuestType] = []

    for difficulty in QuestDifficulty:
        if len(selected) >= QUESTS_PER_DAY:
            break
        matching = [quest for quest in available if quest.difficulty == difficulty]
        if matching:
            quest = matching[rng.randbelow(len(matching))]
            selected.append(quest)
            available.remove(quest)

    while len(selected) < QUESTS_PER_DAY and available:
        quest = available.pop(rng.randbelow(len(available)))
        selected.append(quest)

    if len(selected) < QUESTS_PER_DAY:
        logger.debug(f"Only {len(selected)} daily quests available after exclusions")
    return selected


def should_refresh_quests(last_refresh: date | None, today: date) -> bool:
    return last_refresh is None or last_refresh != today


def quest_progress(quest: QuestType, progress: int) -> float:
    """Completion fraction (0-1) for a quest card."""
    target = quest.definition.target
    if target <= 0:
        return 0.0
    return min(1.0, progress / target)
