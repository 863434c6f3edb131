import json
import logging
from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from player_analytics.analytics.position import parse_position_key
from player_analytics.domain.errors import IngestError
from player_analytics.domain.player_stats import PlayerStats
from player_analytics.domain.profile import PlayerRecord
from player_analytics.domain.result import Err, Ok, Result
from player_analytics.ingest.provider_map import provider_stat_values

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


def _parse_document(path: Path, text: str) -> Any:
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def _stats_for(raw: Mapping[str, Any]) -> PlayerStats:
    stats = raw.get("stats") or {}
    if not isinstance(stats, Mapping):
        raise ValueError("stats must be a mapping of counters")
    cms_stats = PlayerStats.from_mapping(stats)

    season_stats = raw.get("seasonStats")
    if season_stats is None:
        return cms_stats
    if not isinstance(season_stats, list) or not all(isinstance(e, Mapping) for e in season_stats):
        raise ValueError("seasonStats must be a list of {key, value} entries")
    return replace(cms_stats, **provider_stat_values(season_stats))


def player_record_from_mapping(raw: Mapping[str, Any]) -> PlayerRecord:
    """Build a ``PlayerRecord`` from one roster entry.

    Counters reported in ``seasonStats`` (provider key/value list) override
    the same counters in ``stats`` (CMS-shaped); the rest come from ``stats``.
    An explicit ``positionKey`` overrides the label.
    Raises ``ValueError`` for an unknown ``positionKey``.
    """
    name = str(raw.get("name") or "").strip()
    position = str(raw.get("position") or "")
    raw_key = raw.get("positionKey")
    position_key = parse_position_key(str(raw_key)) if raw_key else None
    return PlayerRecord(name=name, position=position, position_key=position_key, stats=_stats_for(raw))


def load_roster(path: str | Path) -> Result[list[PlayerRecord], IngestError]:
    """Read a JSON or YAML roster file into player records."""
    source = Path(path)
    logger.debug("Reading roster %s", source)
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return Err(IngestError(message=f"Cannot read roster file {source}", source_path=str(source), detail=str(e)))

    try:
        document = _parse_document(source, text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        return Err(IngestError(message=f"Cannot parse roster file {source}", source_path=str(source), detail=str(e)))

    if isinstance(document, Mapping):
        document = document.get("players")
    if not isinstance(document, list):
        return Err(
            IngestError(
                message=f"Roster file {source} must contain a list of players",
                source_path=str(source),
            )
        )

    records: list[PlayerRecord] = []
    for index, entry in enumerate(document):
        if not isinstance(entry, Mapping):
            return Err(
                IngestError(
                    message=f"Roster entry {index} is not a mapping",
                    source_path=str(source),
                )
            )
        try:
            records.append(player_record_from_mapping(entry))
        except ValueError as e:
            return Err(
                IngestError(
                    message=f"Roster entry {index} is invalid",
                    source_path=str(source),
                    detail=str(e),
                )
            )

    logger.debug("Read %d players from %s", len(records), source)
    return Ok(records)
