from player_analytics.analytics._math import has_sample, round_half_up, round_places
from player_analytics.domain.player_stats import PlayerStats
from player_analytics.domain.profile import DerivedStats

MAX_MINUTES_PER_GAME = 90
RED_CARD_DISCIPLINE_COST = 3


def calculate_derived_stats(stats: PlayerStats) -> DerivedStats:
    if not has_sample(stats):
        return DerivedStats()

    apps = stats.appearances
    return DerivedStats(
        goals_per_game=round_places(stats.goals / apps, 2),
        assists_per_game=round_places(stats.assists / apps, 2),
        minutes_per_game=min(MAX_MINUTES_PER_GAME, round_half_up(stats.minutes_played / apps)),
        clean_sheet_rate=round_half_up((stats.clean_sheets / apps) * 100),
        discipline_score=stats.yellow_cards + stats.red_cards * RED_CARD_DISCIPLINE_COST,
    )
