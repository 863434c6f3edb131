from __future__ import annotations

from dataclasses import fields

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from player_analytics.analytics.benchmarks import RadarBenchmarks, RatingWeights
from player_analytics.domain.errors import AnalyticsConfigError
from player_analytics.domain.player_stats import PositionKey

_DEFAULT_RADAR = RadarBenchmarks()
_DEFAULT_RATING = RatingWeights()

_DEFAULTS: dict[str, object] = {
    "benchmarks": {f.name: getattr(_DEFAULT_RADAR, f.name) for f in fields(RadarBenchmarks)},
    "rating": {
        "base": _DEFAULT_RATING.base,
        "goals": _DEFAULT_RATING.goals,
        "assists": _DEFAULT_RATING.assists,
        "clean_sheets": _DEFAULT_RATING.clean_sheets,
        "yellow_cards": _DEFAULT_RATING.yellow_cards,
        "red_cards": _DEFAULT_RATING.red_cards,
        "floor": _DEFAULT_RATING.floor,
        "ceiling": _DEFAULT_RATING.ceiling,
        "position_bonus": {key.value: bonus for key, bonus in _DEFAULT_RATING.position_bonus},
    },
}


def create_config(
    yaml_path: str = "analytics.yaml",
    env_prefix: str = "PLAYER_ANALYTICS",
    defaults: dict[str, object] | None = None,
    *,
    overrides: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if overrides:
        layers.insert(0, config_from_dict(overrides))

    return ConfigurationSet(*layers)


def _as_float(cfg: ConfigurationSet, key: str) -> float:
    raw = cfg[key]
    try:
        return float(str(raw))
    except ValueError as e:
        raise AnalyticsConfigError(f"'{key}' must be numeric, got {raw!r}") from e


def _positive(cfg: ConfigurationSet, key: str) -> float:
    value = _as_float(cfg, key)
    if value <= 0:
        raise AnalyticsConfigError(f"'{key}' must be > 0, got {value}")
    return value


def load_radar_benchmarks(cfg: ConfigurationSet | None = None) -> RadarBenchmarks:
    if cfg is None:
        cfg = create_config()
    values = {f.name: _positive(cfg, f"benchmarks.{f.name}") for f in fields(RadarBenchmarks)}
    return RadarBenchmarks(**values)


def _position_bonus(cfg: ConfigurationSet) -> tuple[tuple[PositionKey, float], ...]:
    raw = cfg.get_dict("rating.position_bonus")
    unknown = sorted(set(raw) - {key.value for key in PositionKey})
    if unknown:
        raise AnalyticsConfigError(f"Unknown positions in rating.position_bonus: {', '.join(unknown)}")
    return tuple((key, _as_float(cfg, f"rating.position_bonus.{key.value}")) for key in PositionKey)


def load_rating_weights(cfg: ConfigurationSet | None = None) -> RatingWeights:
    if cfg is None:
        cfg = create_config()
    weights = RatingWeights(
        base=_as_float(cfg, "rating.base"),
        goals=_as_float(cfg, "rating.goals"),
        assists=_as_float(cfg, "rating.assists"),
        clean_sheets=_as_float(cfg, "rating.clean_sheets"),
        yellow_cards=_as_float(cfg, "rating.yellow_cards"),
        red_cards=_as_float(cfg, "rating.red_cards"),
        floor=_as_float(cfg, "rating.floor"),
        ceiling=_as_float(cfg, "rating.ceiling"),
        position_bonus=_position_bonus(cfg),
    )
    if weights.floor > weights.ceiling:
        raise AnalyticsConfigError(f"rating.floor ({weights.floor}) exceeds rating.ceiling ({weights.ceiling})")
    return weights
