from player_analytics.analytics._math import has_sample, round_places
from player_analytics.domain.player_stats import PlayerStats
from player_analytics.domain.profile import Form, PlayerFormData, Trend

GOAL_FORM_WEIGHT = 2

# Checked in order against the unrounded score; the first strict lower bound wins.
FORM_BANDS: tuple[tuple[float, Form, Trend], ...] = (
    (1.5, Form.HOT, Trend.UP),
    (0.8, Form.GOOD, Trend.STABLE),
    (0.3, Form.AVERAGE, Trend.STABLE),
)


def get_player_form(stats: PlayerStats) -> PlayerFormData:
    """Classify form from goal involvement per appearance, goals counted double."""
    if not has_sample(stats):
        return PlayerFormData(form=Form.AVERAGE, form_score=0.0, trend=Trend.STABLE)

    score = (stats.goals * GOAL_FORM_WEIGHT + stats.assists) / stats.appearances
    form, trend = Form.COLD, Trend.DOWN
    for threshold, band_form, band_trend in FORM_BANDS:
        if score > threshold:
            form, trend = band_form, band_trend
            break

    return PlayerFormData(form=form, form_score=round_places(score, 2), trend=trend)
