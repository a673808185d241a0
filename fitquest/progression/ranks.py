"""Player ranks derived from level."""

from enum import StrEnum


class PlayerRank(StrEnum):
    """Rank badge shown next to the player level, lowest first."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    PLATINUM = "platinum"
    DIAMOND = "diamond"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def min_level(self) -> int:
        return RANK_MIN_LEVELS[self]

    @property
    def next_rank(self) -> "PlayerRank | None":
        ranks = list(PlayerRank)
        index = ranks.index(self)
        return ranks[index + 1] if index + 1 < len(ranks) else None

    @property
    def level_range(self) -> str:
        """Display text, e.g. "Levels 11-25"."""
        if self.next_rank is None:
            return f"Level {self.min_level - 1}+"
        return f"Levels {self.min_level}-{self.next_rank.min_level - 1}"

    @property
    def icon_name(self) -> str:
        return _RANK_ICONS.get(self, "shield.fill")


RANK_MIN_LEVELS: dict[PlayerRank, int] = {
    PlayerRank.BRONZE: 1,
    PlayerRank.SILVER: 11,
    PlayerRank.GOLD: 26,
    PlayerRank.PLATINUM: 51,
    PlayerRank.DIAMOND: 101,
}

_RANK_ICONS: dict[PlayerRank, str] = {
    PlayerRank.PLATINUM: "crown.fill",
    PlayerRank.DIAMOND: "diamond.fill",
}


def rank_for(level: int) -> PlayerRank:
    """Highest rank whose minimum level is reached; levels below 1 count as bronze."""
    rank = PlayerRank.BRONZE
    for candidate in PlayerRank:
        if level >= candidate.min_level:
            rank = candidate
    return rank


def levels_to_next_rank(level: int) -> int | None:
    """Levels left until the next rank, None at the top rank."""
    next_rank = rank_for(level).next_rank
    if next_rank is None:
        return None
    return next_rank.min_level - level
