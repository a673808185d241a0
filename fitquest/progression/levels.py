"""Player levels from total XP.

XP needed to reach level ``n`` is ``100 * n ** 1.8`` (level 1 starts at 0).
"""

from typing import NamedTuple

LEVEL_XP_BASE = 100
LEVEL_XP_EXPONENT = 1.8

MILESTONE_LEVELS: frozenset[int] = frozenset({5, 10, 15, 20, 25, 30, 40, 50, 75, 100})


class XPRange(NamedTuple):
    start: int
    end: int


def xp_required_for(level: int) -> int:
    """Total XP needed to reach ``level``."""
    if level <= 1:
        return 0
    return int(LEVEL_XP_BASE * level**LEVEL_XP_EXPONENT)


def level_for(xp: int) -> int:
    level = 1
    while xp_required_for(level + 1) <= xp:
        level += 1
    return level


def xp_range_for(level: int) -> XPRange:
    """XP at the start of ``level`` and at the start of the next one."""
    return XPRange(start=xp_required_for(level), end=xp_required_for(level + 1))


def progress_for(xp: int) -> float:
    """Fraction (0-1) of the way through the current level."""
    xp_range = xp_range_for(level_for(xp))
    needed = xp_range.end - xp_range.start
    if needed <= 0:
        return 0.0
    return (xp - xp_range.start) / needed


def xp_to_next_level(current_xp: int) -> int:
    return xp_required_for(level_for(current_xp) + 1) - current_xp


def is_milestone(level: int) -> bool:
    return level in MILESTONE_LEVELS
