from __future__ import annotations
from dataclasses import dataclass

from vpong.constants import COMPACT_MAX_WIDTH


@dataclass(frozen=True)
class SpeedProfile:
    name: str
    initial_speed: float   # opening serve, used for both vy and vx
    ai_speed: float


# Map profile-name → SpeedProfile
_PROFILES = {
    "normal": SpeedProfile("normal", initial_speed=1, ai_speed=3),
    "compact": SpeedProfile("compact", initial_speed=2, ai_speed=4),
}


def make(name: str) -> SpeedProfile:
    """
    Factory: returns the built-in speed profile called *name*.
    """
    try:
        return _PROFILES[name]
    except KeyError:
        raise ValueError(f"Unknown profile '{name}'") from None


def available() -> list[str]:
    return sorted(_PROFILES)


def classify_display(screen_width: float) -> str:
    """Small screens get the faster "compact" profile."""
    return "compact" if screen_width <= COMPACT_MAX_WIDTH else "normal"
