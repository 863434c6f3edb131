from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from player_analytics.domain.player_stats import PlayerStats, PositionKey

FULL_MARK = 100


class RadarAttribute(Enum):
    SHOOTING = "shooting"
    PASSING = "passing"
    DEFENSE = "defense"
    ATTACK = "attack"
    DUELS = "duels"


RADAR_ORDER: tuple[RadarAttribute, ...] = (
    RadarAttribute.SHOOTING,
    RadarAttribute.PASSING,
    RadarAttribute.DEFENSE,
    RadarAttribute.ATTACK,
    RadarAttribute.DUELS,
)

RADAR_LABELS: dict[RadarAttribute, tuple[str, str]] = {
    RadarAttribute.SHOOTING: ("Shooting", "Shot accuracy & goals"),
    RadarAttribute.PASSING: ("Passing", "Passes & assists"),
    RadarAttribute.DEFENSE: ("Defense", "Tackles & clean sheets"),
    RadarAttribute.ATTACK: ("Attack", "Goals & assists"),
    RadarAttribute.DUELS: ("Duels", "Duels per game"),
}


@dataclass(frozen=True)
class RadarData:
    key: str
    subject: str
    value: int
    description: str
    full_mark: int = FULL_MARK

    @classmethod
    def for_attribute(cls, attribute: RadarAttribute, value: int) -> RadarData:
        subject, description = RADAR_LABELS[attribute]
        return cls(key=attribute.value, subject=subject, value=value, description=description)


@dataclass(frozen=True)
class DerivedStats:
    goals_per_game: float = 0.0
    assists_per_game: float = 0.0
    minutes_per_game: int = 0
    clean_sheet_rate: int = 0
    discipline_score: int = 0


class Form(Enum):
    HOT = "hot"
    GOOD = "good"
    AVERAGE = "average"
    COLD = "cold"


class Trend(Enum):
    UP = "up"
    STABLE = "stable"
    DOWN = "down"


@dataclass(frozen=True)
class PlayerFormData:
    form: Form
    form_score: float
    trend: Trend


@dataclass(frozen=True)
class PlayerRecord:
    name: str
    position: str = ""
    position_key: PositionKey | None = None
    stats: PlayerStats = field(default_factory=PlayerStats)


@dataclass(frozen=True)
class PlayerProfile:
    name: str
    position_key: PositionKey
    radar: tuple[RadarData, ...]
    match_rating: float
    derived: DerivedStats
    form: PlayerFormData
