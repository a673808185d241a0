"""Seeded pseudo-random generator for reproducible plans and daily quests.

A plan for a given week is derived from a single 64-bit seed, so the same
week and regeneration counter always produce the same plan, while bumping
the counter (or rolling over to a new week) produces a different one. Daily
quests are seeded the same way from their date.
"""

from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from typing import TypeVar

T = TypeVar("T")

MASK_64 = (1 << 64) - 1


class SeededRNG:
    """xorshift64 generator.

    State is local to one plan generation; pass the instance explicitly to each
    step that consumes randomness.
    """

    def __init__(self, seed: int):
        # An all-zero state only ever yields zeros
        self._state = (seed & MASK_64) or 1

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> int:
        state = self._state
        state ^= (state << 13) & MASK_64
        state ^= state >> 7
        state ^= (state << 17) & MASK_64
        self._state = state
        return state

    def randbelow(self, n: int) -> int:
        """Return a value in ``[0, n)``."""
        if n <= 0:
            raise ValueError(f"randbelow() needs a positive bound, got {n}")
        return self.next() % n

    def shuffle(self, items: Sequence[T]) -> list[T]:
        """Return a shuffled copy of ``items`` (Fisher-Yates, last index first)."""
        shuffled = list(items)
        for i in range(len(shuffled) - 1, 0, -1):
            j = self.randbelow(i + 1)
            shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
        return shuffled


def date_hash(day: date) -> int:
    """Stable hash of a calendar date: its Unix timestamp at UTC midnight."""
    return abs(hash(int(datetime.combine(day, time(), tzinfo=UTC).timestamp())))


def seed_for_week(week_start: date, regeneration_count: int = 0) -> int:
    """Seed for the plan of ``week_start`` after ``regeneration_count`` manual regenerations.

    Floored to 1 because a zero seed would stall the generator.
    """
    return max(1, (date_hash(week_start) + regeneration_count) & MASK_64)


def seed_for_day(day: date, offset: int = 0) -> int:
    """Seed for per-day draws such as the daily quest set."""
    return max(1, (date_hash(day) + offset) & MASK_64)
