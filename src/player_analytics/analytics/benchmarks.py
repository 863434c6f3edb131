from dataclasses import dataclass

from player_analytics.domain.player_stats import PositionKey


@dataclass(frozen=True)
class RadarBenchmarks:
    """Per-game values that score 100 on the radar.

    Calibrated against the top performers of the domestic league; a player
    matching a benchmark is treated as top-of-league on that axis.
    """

    goals_per_game: float = 0.35
    passes_per_game: float = 35.0
    assists_per_game: float = 0.15
    tackles_per_game: float = 1.5
    clean_sheet_rate: float = 0.3
    contributions_per_game: float = 0.4
    duels_per_game: float = 14.0


DEFAULT_POSITION_BONUS: tuple[tuple[PositionKey, float], ...] = (
    (PositionKey.GOALKEEPER, 2.0),
    (PositionKey.DEFENDER, 1.5),
    (PositionKey.MIDFIELDER, 1.5),
    (PositionKey.FORWARD, 2.0),
)


@dataclass(frozen=True)
class RatingWeights:
    """Per-appearance weights for the match rating.

    ``position_bonus`` is applied to the stat each position is judged on:
    clean sheets for goalkeepers and defenders, assists for midfielders and
    goals for forwards.
    """

    base: float = 6.0
    goals: float = 1.5
    assists: float = 1.0
    clean_sheets: float = 0.5
    yellow_cards: float = 0.3
    red_cards: float = 1.0
    position_bonus: tuple[tuple[PositionKey, float], ...] = DEFAULT_POSITION_BONUS
    floor: float = 4.5
    ceiling: float = 10.0

    def bonus_for(self, position: PositionKey) -> float:
        return dict(self.position_bonus).get(position, 0.0)


DEFAULT_RADAR_BENCHMARKS = RadarBenchmarks()
DEFAULT_RATING_WEIGHTS = RatingWeights()
