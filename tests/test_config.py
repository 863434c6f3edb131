from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from player_analytics.analytics.benchmarks import DEFAULT_RADAR_BENCHMARKS, DEFAULT_RATING_WEIGHTS
from player_analytics.config import create_config, load_radar_benchmarks, load_rating_weights
from player_analytics.domain.errors import AnalyticsConfigError
from player_analytics.domain.player_stats import PositionKey

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all PLAYER_ANALYTICS__ env vars so tests are isolated."""
    for key in list(os.environ):
        if key.startswith("PLAYER_ANALYTICS__"):
            monkeypatch.delenv(key)


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/analytics.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert cfg["benchmarks.goals_per_game"] == 0.35
    assert cfg["benchmarks.duels_per_game"] == 14.0
    assert cfg["rating.base"] == 6.0


def test_defaults_match_builtin_calibration() -> None:
    cfg = create_config(yaml_path="/nonexistent/analytics.yaml")
    assert load_radar_benchmarks(cfg) == DEFAULT_RADAR_BENCHMARKS
    assert load_rating_weights(cfg) == DEFAULT_RATING_WEIGHTS


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "analytics.yaml"
    yaml_file.write_text("benchmarks:\n  passes_per_game: 40\nrating:\n  position_bonus:\n    forward: 2.5\n")
    cfg = create_config(yaml_path=str(yaml_file))
    benchmarks = load_radar_benchmarks(cfg)
    weights = load_rating_weights(cfg)
    assert benchmarks.passes_per_game == 40.0
    # Defaults still apply for unset keys
    assert benchmarks.goals_per_game == 0.35
    assert weights.bonus_for(PositionKey.FORWARD) == 2.5
    assert weights.bonus_for(PositionKey.GOALKEEPER) == 2.0


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "analytics.yaml"
    yaml_file.write_text("benchmarks:\n  duels_per_game: 12\n")
    monkeypatch.setenv("PLAYER_ANALYTICS__BENCHMARKS__DUELS_PER_GAME", "10")

    cfg = create_config(yaml_path=str(yaml_file))
    assert cfg["benchmarks.duels_per_game"] == "10"  # env vars are strings
    assert load_radar_benchmarks(cfg).duels_per_game == 10.0


def test_explicit_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PLAYER_ANALYTICS__RATING__BASE", "5.5")
    cfg = create_config(yaml_path="/nonexistent/analytics.yaml", overrides={"rating": {"base": 6.5}})
    assert load_rating_weights(cfg).base == 6.5


class TestValidation:
    def test_non_positive_benchmark(self) -> None:
        cfg = create_config(yaml_path="/nonexistent/analytics.yaml", overrides={"benchmarks": {"duels_per_game": 0}})
        with pytest.raises(AnalyticsConfigError, match="duels_per_game"):
            load_radar_benchmarks(cfg)

    def test_non_numeric_weight(self) -> None:
        cfg = create_config(yaml_path="/nonexistent/analytics.yaml", overrides={"rating": {"goals": "lots"}})
        with pytest.raises(AnalyticsConfigError, match="rating.goals"):
            load_rating_weights(cfg)

    def test_unknown_position_bonus(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "analytics.yaml"
        yaml_file.write_text("rating:\n  position_bonus:\n    winger: 1.0\n")
        with pytest.raises(AnalyticsConfigError, match="winger"):
            load_rating_weights(create_config(yaml_path=str(yaml_file)))

    def test_floor_above_ceiling(self) -> None:
        cfg = create_config(yaml_path="/nonexistent/analytics.yaml", overrides={"rating": {"floor": 9.0, "ceiling": 8.0}})
        with pytest.raises(AnalyticsConfigError, match="exceeds"):
            load_rating_weights(cfg)
