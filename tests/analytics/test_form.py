import pytest

from player_analytics.analytics.form import get_player_form
from player_analytics.domain.player_stats import PlayerStats
from player_analytics.domain.profile import Form, PlayerFormData, Trend


def test_no_appearances() -> None:
    assert get_player_form(PlayerStats(goals=4)) == PlayerFormData(form=Form.AVERAGE, form_score=0, trend=Trend.STABLE)


@pytest.mark.parametrize(
    ("stats", "form", "trend", "score"),
    [
        (PlayerStats(appearances=10, goals=8), Form.HOT, Trend.UP, 1.6),
        (PlayerStats(appearances=10, goals=4, assists=2), Form.GOOD, Trend.STABLE, 1.0),
        (PlayerStats(appearances=10, goals=2, assists=1), Form.AVERAGE, Trend.STABLE, 0.5),
        (PlayerStats(appearances=10, assists=1), Form.COLD, Trend.DOWN, 0.1),
    ],
)
def test_bands(stats: PlayerStats, form: Form, trend: Trend, score: float) -> None:
    result = get_player_form(stats)
    assert result.form is form
    assert result.trend is trend
    assert result.form_score == score


class TestThresholdsAreStrict:
    def test_exactly_one_and_a_half_is_good(self) -> None:
        assert get_player_form(PlayerStats(appearances=2, goals=1, assists=1)).form is Form.GOOD

    def test_exactly_point_eight_is_average(self) -> None:
        assert get_player_form(PlayerStats(appearances=5, goals=2)).form is Form.AVERAGE

    def test_exactly_point_three_is_cold(self) -> None:
        result = get_player_form(PlayerStats(appearances=10, assists=3))
        assert result.form is Form.COLD
        assert result.trend is Trend.DOWN


def test_score_rounded_to_two_decimals() -> None:
    assert get_player_form(PlayerStats(appearances=3, goals=1)).form_score == 0.67
