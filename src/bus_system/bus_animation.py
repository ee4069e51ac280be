"""
Bus animation identifiers

Multi-channel animations that need coordinated control across the channels
of a pixel bus. The set is closed: every member has an entry in the
capability table below.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple


class AnimationCategory(Enum):
    CARNIVAL_GAME = "Carnival/Game"
    MULTI_CHANNEL = "Multi-Channel Synchronized"


class BusAnimation(Enum):
    # Carnival/game effects
    HIGH_STRIKER_PHYSICS = "high_striker_physics"
    HIGH_STRIKER_SUCCESS = "high_striker_success"
    HIGH_STRIKER_FAIL = "high_striker_fail"

    # Multi-channel synchronized effects
    SYNCHRONIZED_RAINBOW = "synchronized_rainbow"
    CHANNEL_CHASE = "channel_chase"
    ALTERNATING_PULSE = "alternating_pulse"
    WAVE_ACROSS_CHANNELS = "wave_across_channels"
    MIRRORED_ANIMATION = "mirrored_animation"

    @property
    def display_name(self) -> str:
        """'high_striker_physics' -> 'High Striker Physics'"""
        return self.value.replace("_", " ").title()

    @property
    def category(self) -> AnimationCategory:
        return _CAPABILITIES[self][0]

    @property
    def required_bus(self) -> Optional[str]:
        """Name of the bus shape this animation was designed for, if any"""
        return _CAPABILITIES[self][1]

    @classmethod
    def by_category(cls, category: AnimationCategory) -> List['BusAnimation']:
        return [animation for animation in cls if animation.category is category]

    @classmethod
    def from_name(cls, name: str) -> Optional['BusAnimation']:
        """
        Lenient lookup used by the command line.

        Accepts the value or member name in any case, with dashes or spaces
        in place of underscores: 'high-striker-physics', 'HIGH_STRIKER_PHYSICS'
        and 'High Striker Physics' all resolve to HIGH_STRIKER_PHYSICS.
        """
        normalized = name.strip().lower().replace("-", "_").replace(" ", "_")
        for animation in cls:
            if animation.value == normalized:
                return animation
        return None


HIGH_STRIKER_BUS = "HighStriker"

_CAPABILITIES: Dict[BusAnimation, Tuple[AnimationCategory, Optional[str]]] = {
    BusAnimation.HIGH_STRIKER_PHYSICS: (AnimationCategory.CARNIVAL_GAME, HIGH_STRIKER_BUS),
    BusAnimation.HIGH_STRIKER_SUCCESS: (AnimationCategory.CARNIVAL_GAME, HIGH_STRIKER_BUS),
    BusAnimation.HIGH_STRIKER_FAIL: (AnimationCategory.CARNIVAL_GAME, HIGH_STRIKER_BUS),
    BusAnimation.SYNCHRONIZED_RAINBOW: (AnimationCategory.MULTI_CHANNEL, None),
    BusAnimation.CHANNEL_CHASE: (AnimationCategory.MULTI_CHANNEL, None),
    BusAnimation.ALTERNATING_PULSE: (AnimationCategory.MULTI_CHANNEL, None),
    BusAnimation.WAVE_ACROSS_CHANNELS: (AnimationCategory.MULTI_CHANNEL, None),
    BusAnimation.MIRRORED_ANIMATION: (AnimationCategory.MULTI_CHANNEL, None),
}

_missing = set(BusAnimation) - set(_CAPABILITIES)
if _missing:
    raise RuntimeError(f"Bus animations without capabilities: {sorted(a.name for a in _missing)}")
