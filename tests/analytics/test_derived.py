from player_analytics.analytics.derived import calculate_derived_stats
from player_analytics.domain.player_stats import PlayerStats
from player_analytics.domain.profile import DerivedStats


def test_no_appearances_all_zero() -> None:
    result = calculate_derived_stats(PlayerStats(goals=3, minutes_played=270, yellow_cards=2))
    assert result == DerivedStats(
        goals_per_game=0,
        assists_per_game=0,
        minutes_per_game=0,
        clean_sheet_rate=0,
        discipline_score=0,
    )


def test_per_game_rates() -> None:
    stats = PlayerStats(appearances=10, goals=3, assists=1, minutes_played=800, clean_sheets=4, yellow_cards=2, red_cards=1)
    result = calculate_derived_stats(stats)
    assert result.goals_per_game == 0.3
    assert result.assists_per_game == 0.1
    assert result.minutes_per_game == 80
    assert result.clean_sheet_rate == 40
    assert result.discipline_score == 5


def test_two_decimal_rounding() -> None:
    result = calculate_derived_stats(PlayerStats(appearances=3, goals=1, assists=2))
    assert result.goals_per_game == 0.33
    assert result.assists_per_game == 0.67


def test_minutes_round_half_up() -> None:
    assert calculate_derived_stats(PlayerStats(appearances=10, minutes_played=855)).minutes_per_game == 86


def test_minutes_capped_at_ninety() -> None:
    # Extra time pushes the raw average over a regulation match.
    assert calculate_derived_stats(PlayerStats(appearances=4, minutes_played=480)).minutes_per_game == 90


def test_clean_sheet_rate_monotonic_and_bounded() -> None:
    rates = [
        calculate_derived_stats(PlayerStats(appearances=7, clean_sheets=cs)).clean_sheet_rate for cs in range(8)
    ]
    assert rates == sorted(rates)
    assert rates[0] == 0
    assert rates[-1] == 100
    assert all(0 <= r <= 100 for r in rates)


def test_discipline_uses_season_totals() -> None:
    result = calculate_derived_stats(PlayerStats(appearances=30, yellow_cards=7, red_cards=2))
    assert result.discipline_score == 13
