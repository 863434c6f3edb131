from player_analytics.services.player_profile import (
    build_player_profile,
    build_profiles,
    rank_by_rating,
    resolve_position,
)

__all__ = [
    "build_player_profile",
    "build_profiles",
    "rank_by_rating",
    "resolve_position",
]
