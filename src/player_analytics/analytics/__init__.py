from player_analytics.analytics.benchmarks import (
    DEFAULT_RADAR_BENCHMARKS,
    DEFAULT_RATING_WEIGHTS,
    RadarBenchmarks,
    RatingWeights,
)
from player_analytics.analytics.derived import calculate_derived_stats
from player_analytics.analytics.form import get_player_form
from player_analytics.analytics.position import parse_position_key, position_key_from_label
from player_analytics.analytics.radar import calculate_radar_stats
from player_analytics.analytics.rating import calculate_match_rating

__all__ = [
    "DEFAULT_RADAR_BENCHMARKS",
    "DEFAULT_RATING_WEIGHTS",
    "RadarBenchmarks",
    "RatingWeights",
    "calculate_derived_stats",
    "calculate_match_rating",
    "calculate_radar_stats",
    "get_player_form",
    "parse_position_key",
    "position_key_from_label",
]
