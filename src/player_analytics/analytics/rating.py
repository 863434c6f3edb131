from player_analytics.analytics._math import clamp, has_sample, round_places
from player_analytics.analytics.benchmarks import DEFAULT_RATING_WEIGHTS, RatingWeights
from player_analytics.domain.player_stats import PlayerStats, PositionKey

NO_SAMPLE_RATING = 6.0


def _position_bonus(stats: PlayerStats, position: PositionKey, weights: RatingWeights) -> float:
    apps = stats.appearances
    bonus = weights.bonus_for(position)
    match position:
        case PositionKey.GOALKEEPER | PositionKey.DEFENDER:
            return (stats.clean_sheets / apps) * bonus
        case PositionKey.MIDFIELDER:
            return (stats.assists / apps) * bonus
        case PositionKey.FORWARD:
            return (stats.goals / apps) * bonus


def calculate_match_rating(
    stats: PlayerStats,
    position: PositionKey,
    weights: RatingWeights = DEFAULT_RATING_WEIGHTS,
) -> float:
    """Average match rating on the familiar 4.5-10.0 scale, one decimal."""
    if not has_sample(stats):
        return NO_SAMPLE_RATING

    apps = stats.appearances
    rating = (
        weights.base
        + (stats.goals / apps) * weights.goals
        + (stats.assists / apps) * weights.assists
        + (stats.clean_sheets / apps) * weights.clean_sheets
        - (stats.yellow_cards / apps) * weights.yellow_cards
        - (stats.red_cards / apps) * weights.red_cards
    )
    rating += _position_bonus(stats, position, weights)

    return round_places(clamp(rating, weights.floor, weights.ceiling), 1)
