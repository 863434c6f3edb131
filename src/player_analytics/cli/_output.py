from rich.console import Console
from rich.table import Table

from player_analytics.domain.profile import Form, PlayerProfile

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_FORM_STYLES: dict[Form, str] = {
    Form.HOT: "bold red",
    Form.GOOD: "green",
    Form.AVERAGE: "yellow",
    Form.COLD: "blue",
}


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def _form_label(profile: PlayerProfile) -> str:
    style = _FORM_STYLES[profile.form.form]
    return f"[{style}]{profile.form.form.value}[/{style}] ({profile.form.trend.value})"


def print_player_profile(profile: PlayerProfile) -> None:
    console.print(
        f"[bold]{profile.name}[/bold] ({profile.position_key.value})"
        f"  rating [bold]{profile.match_rating:.1f}[/bold]  form {_form_label(profile)}"
    )

    radar = Table(title="Radar")
    radar.add_column("Attribute")
    radar.add_column("Value", justify="right")
    radar.add_column("Description")
    for entry in profile.radar:
        radar.add_row(entry.subject, f"{entry.value}/{entry.full_mark}", entry.description)
    console.print(radar)

    derived = profile.derived
    per_game = Table(title="Per game")
    per_game.add_column("Goals", justify="right")
    per_game.add_column("Assists", justify="right")
    per_game.add_column("Minutes", justify="right")
    per_game.add_column("Clean sheets", justify="right")
    per_game.add_column("Discipline", justify="right")
    per_game.add_row(
        f"{derived.goals_per_game:.2f}",
        f"{derived.assists_per_game:.2f}",
        str(derived.minutes_per_game),
        f"{derived.clean_sheet_rate}%",
        str(derived.discipline_score),
    )
    console.print(per_game)


def print_rating_ranking(profiles: list[PlayerProfile]) -> None:
    if not profiles:
        console.print("No players found.")
        return
    table = Table(title=f"Match ratings ({len(profiles)} players)")
    table.add_column("#", justify="right")
    table.add_column("Player")
    table.add_column("Position")
    table.add_column("Rating", justify="right")
    table.add_column("Form")
    table.add_column("Score", justify="right")
    for rank, profile in enumerate(profiles, start=1):
        table.add_row(
            str(rank),
            profile.name,
            profile.position_key.value,
            f"{profile.match_rating:.1f}",
            _form_label(profile),
            f"{profile.form.form_score:.2f}",
        )
    console.print(table)
