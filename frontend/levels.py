"""
Level table and the XP -> level mapping.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Level:
    number: int
    name: str
    threshold: float
    badge: str = ""

    @property
    def title(self) -> str:
        return f"{self.name} {self.badge}".strip()


# Thresholds must stay strictly increasing and start at zero.
LEVELS: Tuple[Level, ...] = (
    Level(1, "Code Rookie", 0),
    Level(2, "Script Samurai", 50),
    Level(3, "Bug Basher", 200),
    Level(4, "Code Ninja", 600, "🥷"),
    Level(5, "Code Sensei", 1500, "🔥"),
)


def level_for(xp: float) -> Level:
    """Return the highest level whose threshold is <= xp."""
    for level in reversed(LEVELS):
        if xp >= level.threshold:
            return level
    return LEVELS[0]


def next_level(level: Level) -> Optional[Level]:
    index = LEVELS.index(level)
    if index + 1 < len(LEVELS):
        return LEVELS[index + 1]
    return None


def progress(xp: float) -> float:
    """
    Percentage of the way from the current level to the next one.

    Always 100 at the top level; otherwise clamped to [0, 100].
    """
    current = level_for(xp)
    upcoming = next_level(current)
    if upcoming is None:
        return 100.0

    span = upcoming.threshold - current.threshold
    percent = (xp - current.threshold) / span * 100
    return max(0.0, min(100.0, percent))


def next_level_label(xp: float) -> str:
    upcoming = next_level(level_for(xp))
    if upcoming is None:
        return "Max level"
    return f"Next: {upcoming.title} ({format_xp(upcoming.threshold)} XP)"


def format_xp(value: float) -> str:
    """Two decimals at most, trailing zeros dropped: 1.0 -> '1', 0.6 -> '0.6'."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return text or "0"
