from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any


class PositionKey(Enum):
    GOALKEEPER = "goalkeeper"
    DEFENDER = "defender"
    MIDFIELDER = "midfielder"
    FORWARD = "forward"


# CMS records use camelCase; dataclass fields are snake_case.
_CAMEL_ALIASES: dict[str, str] = {
    "yellowCards": "yellow_cards",
    "redCards": "red_cards",
    "cleanSheets": "clean_sheets",
    "minutesPlayed": "minutes_played",
    "shotsOnGoal": "shots_on_goal",
}


def coerce_count(value: object) -> int:
    """Coerce a raw counter to ``int``, treating ``None`` and blanks as zero."""
    if value is None or value == "":
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    number = value if isinstance(value, float) else float(str(value))
    if math.isnan(number):
        return 0
    if math.isinf(number):
        raise ValueError(f"Counter must be finite, got {value!r}")
    return int(number)


@dataclass(frozen=True)
class PlayerStats:
    """Season-aggregate counters for one player.

    Every field defaults to zero and ``None`` is coerced to zero, so partially
    populated records from the stats provider can be passed through unchanged.
    """

    appearances: int = 0
    goals: int = 0
    assists: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    clean_sheets: int = 0
    minutes_played: int = 0
    shots: int = 0
    shots_on_goal: int = 0
    passes: int = 0
    tackles: int = 0
    duels: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, coerce_count(getattr(self, f.name)))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> PlayerStats:
        """Build from a CMS-shaped (camelCase) or snake_case mapping.

        Unknown keys are ignored; missing or ``None`` counters become zero.
        """
        known = {f.name for f in fields(cls)}
        values: dict[str, int] = {}
        for key, value in raw.items():
            name = _CAMEL_ALIASES.get(key, key)
            if name in known:
                values[name] = coerce_count(value)
        return cls(**values)
