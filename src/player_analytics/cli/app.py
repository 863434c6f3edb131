import logging
from pathlib import Path
from typing import Annotated

import typer

from player_analytics.analytics.benchmarks import RadarBenchmarks, RatingWeights
from player_analytics.analytics.position import position_key_from_label
from player_analytics.cli._logging import configure_logging
from player_analytics.cli._output import console, print_error, print_player_profile, print_rating_ranking
from player_analytics.config import create_config, load_radar_benchmarks, load_rating_weights
from player_analytics.domain.errors import AnalyticsConfigError
from player_analytics.domain.profile import PlayerRecord
from player_analytics.domain.result import Err, Ok
from player_analytics.ingest.roster_source import load_roster
from player_analytics.services.player_profile import build_profiles, rank_by_rating

logger = logging.getLogger(__name__)

app = typer.Typer(name="player-analytics", help="Player performance analytics: radar, rating, per-game stats and form")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Player performance analytics: radar, rating, per-game stats and form."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_RosterArg = Annotated[Path, typer.Argument(help="JSON or YAML roster file")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="Calibration YAML file")]


def _load_calibration(config_path: str) -> tuple[RadarBenchmarks, RatingWeights]:
    cfg = create_config(yaml_path=config_path)
    try:
        return load_radar_benchmarks(cfg), load_rating_weights(cfg)
    except AnalyticsConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def _load_players(roster: Path) -> list[PlayerRecord]:
    match load_roster(roster):
        case Ok(players):
            return players
        case Err(e):
            message = f"{e.message}: {e.detail}" if e.detail else e.message
            print_error(message)
            raise typer.Exit(code=1)


@app.command()
def profile(
    roster: _RosterArg,
    player: Annotated[str | None, typer.Option("--player", help="Only show this player (case-insensitive)")] = None,
    config_path: _ConfigOpt = "analytics.yaml",
) -> None:
    """Show radar, match rating, per-game stats and form for each player."""
    benchmarks, weights = _load_calibration(config_path)
    players = _load_players(roster)
    if player is not None:
        players = [p for p in players if p.name.lower() == player.lower()]
        if not players:
            print_error(f"No player named '{player}' in {roster}")
            raise typer.Exit(code=1)

    for index, prof in enumerate(build_profiles(players, benchmarks, weights)):
        if index:
            console.print()
        print_player_profile(prof)


@app.command()
def rank(
    roster: _RosterArg,
    top: Annotated[int | None, typer.Option("--top", help="Number of players to display")] = None,
    config_path: _ConfigOpt = "analytics.yaml",
) -> None:
    """Rank players by match rating."""
    benchmarks, weights = _load_calibration(config_path)
    ranked = rank_by_rating(build_profiles(_load_players(roster), benchmarks, weights))
    if top is not None:
        ranked = ranked[:top]
    logger.debug("Ranked %d players from %s", len(ranked), roster)
    print_rating_ranking(ranked)


@app.command()
def position(label: Annotated[str, typer.Argument(help="Free-text position label")]) -> None:
    """Resolve a position label to its position key."""
    console.print(position_key_from_label(label).value)
