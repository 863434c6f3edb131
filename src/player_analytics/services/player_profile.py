import logging
from collections.abc import Iterable

from player_analytics.analytics.benchmarks import (
    DEFAULT_RADAR_BENCHMARKS,
    DEFAULT_RATING_WEIGHTS,
    RadarBenchmarks,
    RatingWeights,
)
from player_analytics.analytics.derived import calculate_derived_stats
from player_analytics.analytics.form import get_player_form
from player_analytics.analytics.position import position_key_from_label
from player_analytics.analytics.radar import calculate_radar_stats
from player_analytics.analytics.rating import calculate_match_rating
from player_analytics.domain.player_stats import PositionKey
from player_analytics.domain.profile import PlayerProfile, PlayerRecord

logger = logging.getLogger(__name__)


def resolve_position(player: PlayerRecord) -> PositionKey:
    """Explicit position key wins; otherwise resolve from the position label."""
    if player.position_key is not None:
        return player.position_key
    return position_key_from_label(player.position)


def build_player_profile(
    player: PlayerRecord,
    benchmarks: RadarBenchmarks = DEFAULT_RADAR_BENCHMARKS,
    weights: RatingWeights = DEFAULT_RATING_WEIGHTS,
) -> PlayerProfile:
    position = resolve_position(player)
    return PlayerProfile(
        name=player.name,
        position_key=position,
        radar=tuple(calculate_radar_stats(player.stats, benchmarks)),
        match_rating=calculate_match_rating(player.stats, position, weights),
        derived=calculate_derived_stats(player.stats),
        form=get_player_form(player.stats),
    )


def build_profiles(
    players: Iterable[PlayerRecord],
    benchmarks: RadarBenchmarks = DEFAULT_RADAR_BENCHMARKS,
    weights: RatingWeights = DEFAULT_RATING_WEIGHTS,
) -> list[PlayerProfile]:
    profiles = [build_player_profile(p, benchmarks, weights) for p in players]
    logger.debug("Built %d player profiles", len(profiles))
    return profiles


def rank_by_rating(profiles: Iterable[PlayerProfile]) -> list[PlayerProfile]:
    """Order by match rating, highest first; ties broken by name."""
    return sorted(profiles, key=lambda p: (-p.match_rating, p.name))
