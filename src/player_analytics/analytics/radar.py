from player_analytics.analytics._math import clamp, has_sample, normalize, round_half_up
from player_analytics.analytics.benchmarks import DEFAULT_RADAR_BENCHMARKS, RadarBenchmarks
from player_analytics.domain.player_stats import PlayerStats
from player_analytics.domain.profile import RADAR_ORDER, RadarAttribute, RadarData

# Shown for every axis when there are no appearances: "no sample", not "average".
NEUTRAL_VALUE = 50

SCORE_FLOOR = 20.0
PASSING_FLOOR = 25.0
SCORE_CEILING = 95.0

# Accuracy assumed for a player with no recorded shots.
NO_SHOTS_ACCURACY = 50.0

SHOT_ACCURACY_WEIGHT = 0.4
GOALS_WEIGHT = 0.6
PASSES_WEIGHT = 0.7
ASSISTS_WEIGHT = 0.3
TACKLES_WEIGHT = 0.6
CLEAN_SHEETS_WEIGHT = 0.4


def _shooting(stats: PlayerStats, benchmarks: RadarBenchmarks) -> float:
    if stats.shots > 0:
        shot_accuracy = (stats.shots_on_goal / stats.shots) * 100
    else:
        shot_accuracy = NO_SHOTS_ACCURACY
    goals = normalize(stats.goals / stats.appearances, benchmarks.goals_per_game)
    return clamp(shot_accuracy * SHOT_ACCURACY_WEIGHT + goals * GOALS_WEIGHT, SCORE_FLOOR, SCORE_CEILING)


def _passing(stats: PlayerStats, benchmarks: RadarBenchmarks) -> float:
    passes = normalize(stats.passes / stats.appearances, benchmarks.passes_per_game)
    assists = normalize(stats.assists / stats.appearances, benchmarks.assists_per_game)
    return clamp(passes * PASSES_WEIGHT + assists * ASSISTS_WEIGHT, PASSING_FLOOR, SCORE_CEILING)


def _defense(stats: PlayerStats, benchmarks: RadarBenchmarks) -> float:
    tackles = normalize(stats.tackles / stats.appearances, benchmarks.tackles_per_game)
    clean_sheets = normalize(stats.clean_sheets / stats.appearances, benchmarks.clean_sheet_rate)
    return clamp(tackles * TACKLES_WEIGHT + clean_sheets * CLEAN_SHEETS_WEIGHT, SCORE_FLOOR, SCORE_CEILING)


def _attack(stats: PlayerStats, benchmarks: RadarBenchmarks) -> float:
    contributions = (stats.goals + stats.assists) / stats.appearances
    return clamp(normalize(contributions, benchmarks.contributions_per_game), SCORE_FLOOR, SCORE_CEILING)


def _duels(stats: PlayerStats, benchmarks: RadarBenchmarks) -> float:
    return clamp(normalize(stats.duels / stats.appearances, benchmarks.duels_per_game), SCORE_FLOOR, SCORE_CEILING)


_SCORERS = {
    RadarAttribute.SHOOTING: _shooting,
    RadarAttribute.PASSING: _passing,
    RadarAttribute.DEFENSE: _defense,
    RadarAttribute.ATTACK: _attack,
    RadarAttribute.DUELS: _duels,
}


def calculate_radar_stats(
    stats: PlayerStats,
    benchmarks: RadarBenchmarks = DEFAULT_RADAR_BENCHMARKS,
) -> list[RadarData]:
    """Score a player on the five radar axes, each an integer in [0, 100].

    Axis order is fixed: shooting, passing, defense, attack, duels.
    """
    if not has_sample(stats):
        return [RadarData.for_attribute(attr, NEUTRAL_VALUE) for attr in RADAR_ORDER]

    return [RadarData.for_attribute(attr, round_half_up(_SCORERS[attr](stats, benchmarks))) for attr in RADAR_ORDER]
