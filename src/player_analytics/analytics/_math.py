import math

from player_analytics.domain.player_stats import PlayerStats

NORMALIZED_MAX = 100.0


def clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def normalize(value: float, benchmark: float) -> float:
    """Scale *value* so that *benchmark* maps to 100, capped at 100."""
    return min(NORMALIZED_MAX, (value / benchmark) * 100)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with ties going up (2.5 -> 3, -2.5 -> -2)."""
    whole = math.floor(value)
    return whole + 1 if value - whole >= 0.5 else whole


def round_places(value: float, places: int) -> float:
    factor = 10**places
    return round_half_up(value * factor) / factor


def has_sample(stats: PlayerStats) -> bool:
    return stats.appearances > 0
