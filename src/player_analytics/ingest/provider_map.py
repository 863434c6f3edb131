import logging
from collections.abc import Iterable, Mapping
from typing import Any

from player_analytics.domain.player_stats import PlayerStats, coerce_count

logger = logging.getLogger(__name__)

# Season-stat keys reported by the league data provider.
PROVIDER_STAT_KEYS: dict[str, str] = {
    "games_played": "appearances",
    "goal": "goals",
    "goal_pass": "assists",
    "yellow_cards": "yellow_cards",
    "red_cards": "red_cards",
    "clean_sheet": "clean_sheets",
    "time_on_field_total": "minutes_played",
    "shot": "shots",
    "shots_on_goal": "shots_on_goal",
    "pass": "passes",
    "duel": "duels",
    "tackle": "tackles",
}


def provider_stat_values(entries: Iterable[Mapping[str, Any]]) -> dict[str, int]:
    """Return the ``PlayerStats`` fields the provider actually reported.

    Unmapped keys and entries with a ``None`` value are left out. When a key
    repeats, the last entry wins.
    """
    values: dict[str, int] = {}
    for entry in entries:
        key = entry.get("key")
        field_name = PROVIDER_STAT_KEYS.get(str(key))
        if field_name is None:
            logger.debug("Ignoring unmapped provider stat %r", key)
            continue
        value = entry.get("value")
        if value is None:
            continue
        values[field_name] = coerce_count(value)
    return values


def player_stats_from_provider(entries: Iterable[Mapping[str, Any]]) -> PlayerStats:
    """Collapse a provider ``[{key, value}, ...]`` season-stat list into ``PlayerStats``."""
    return PlayerStats(**provider_stat_values(entries))
