from player_analytics.domain.player_stats import PositionKey

# Checked in order. Labels arrive in Russian or English.
# "полузащитник" contains "защит" and so resolves to defender.
_LABEL_MARKERS: tuple[tuple[PositionKey, tuple[str, ...]], ...] = (
    (PositionKey.GOALKEEPER, ("вратар", "goalkeeper", "gk")),
    (PositionKey.DEFENDER, ("защит", "defender", "def")),
    (PositionKey.MIDFIELDER, ("полузащит", "midfielder", "mid")),
    (PositionKey.FORWARD, ("нападающ", "forward", "striker", "fwd")),
)

DEFAULT_POSITION = PositionKey.MIDFIELDER


def position_key_from_label(label: str) -> PositionKey:
    """Resolve a free-text position label to a position key.

    Unrecognised labels fall back to midfielder.
    """
    lowered = label.lower()
    for key, markers in _LABEL_MARKERS:
        if any(marker in lowered for marker in markers):
            return key
    return DEFAULT_POSITION


def parse_position_key(raw: str) -> PositionKey:
    """Parse an exact position key such as ``"forward"``; raises ``ValueError`` otherwise."""
    return PositionKey(raw.strip().lower())
