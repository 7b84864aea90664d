"""Command line interface for parsing game logs and querying stored rankings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer
from sqlalchemy.orm import Session, sessionmaker

from db import create_db_engine, create_session_factory
from domain.errors import EntityAlreadyExistsError, EntityNotFoundError
from domain.log_parser import parse_match_logs
from repositories.match_repository import ensure_schema
from services import (
    delete_all_matches,
    get_global_ranking,
    get_match_ranking,
    list_matches,
    process_game_logs,
    validate_log_filename,
)
from settings import AppSettings, load_settings

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Parse game server logs into matches and show player rankings.",
)

DbUrlOption = Annotated[
    str | None,
    typer.Option(
        "--db-url",
        help="Database URL. Overrides the settings file.",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Optional settings TOML file (see configs/default.toml).",
    ),
]
LogFileArgument = Annotated[
    Path,
    typer.Argument(
        exists=True,
        dir_okay=False,
        readable=True,
        help="Game log file (.log or .txt).",
    ),
]


@app.callback()
def main(
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Python logging level (DEBUG, INFO, WARNING, ...)."),
    ] = "WARNING",
) -> None:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}", param_hint="--log-level")
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s")


def _load_settings(config: Path | None) -> AppSettings:
    try:
        return load_settings(config)
    except (FileNotFoundError, ValueError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _open_session_factory(settings: AppSettings, db_url: str | None) -> sessionmaker[Session]:
    engine = create_db_engine(db_url or settings.database_url, echo=settings.echo_sql)
    ensure_schema(engine)
    return create_session_factory(engine)


def _read_log_file(log_file: Path, settings: AppSettings) -> str:
    try:
        validate_log_filename(log_file.name, settings.allowed_extensions)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="LOG_FILE") from exc
    return log_file.read_text(encoding="utf-8")


@app.command()
def process(
    log_file: LogFileArgument,
    db_url: DbUrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Parse a log file and store every completed match."""
    settings = _load_settings(config)
    log_content = _read_log_file(log_file, settings)
    session_factory = _open_session_factory(settings, db_url)

    typer.echo(f"file={log_file.name}")
    try:
        result = process_game_logs(
            session_factory=session_factory,
            log_content=log_content,
            echo=typer.echo,
        )
    except EntityAlreadyExistsError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    for error in result.parse_errors:
        typer.echo(f"  {error}")


@app.command()
def parse(
    log_file: LogFileArgument,
    config: ConfigOption = None,
) -> None:
    """Parse a log file without storing anything."""
    settings = _load_settings(config)
    result = parse_match_logs(_read_log_file(log_file, settings))

    typer.echo(f"matches={len(result.matches)} parse_errors={len(result.parse_errors)}")
    for match in result.matches:
        typer.echo(
            f"match={match.id} start={match.start_time} end={match.end_time} "
            f"players={len(match.player_stats)}"
        )
        for stats in match.player_stats:
            snapshot = stats.as_dict()
            weapons = ",".join(
                f"{weapon}:{count}" for weapon, count in snapshot["weapons_used"].items()
            )
            typer.echo(
                f"  {snapshot['player_name']:<20} kills={snapshot['kills']:3d} "
                f"deaths={snapshot['deaths']:3d} best_streak={snapshot['best_streak']:3d} "
                f"kda={snapshot['kda']} weapons={weapons or '-'}"
            )
    for error in result.parse_errors:
        typer.echo(f"  {error}")


@app.command("list-matches")
def list_matches_command(
    db_url: DbUrlOption = None,
    config: ConfigOption = None,
) -> None:
    """List stored matches and their players."""
    session_factory = _open_session_factory(_load_settings(config), db_url)
    summaries = list_matches(session_factory)
    if not summaries:
        typer.echo("No matches stored.")
        return

    for summary in summaries:
        typer.echo(
            f"match={summary.id} start={summary.start_time} end={summary.end_time} "
            f"players={','.join(summary.players)}"
        )


@app.command("match-ranking")
def match_ranking_command(
    match_id: Annotated[str, typer.Argument(help="Match id as written in the log.")],
    db_url: DbUrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Show one match's players ranked by kills, then fewest deaths."""
    session_factory = _open_session_factory(_load_settings(config), db_url)
    try:
        ranking = get_match_ranking(session_factory, match_id)
    except EntityNotFoundError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    typer.echo(f"match={ranking.match_id} players={len(ranking.ranking)}")
    for row in ranking.ranking:
        typer.echo(
            f"{row.position:2d}. {row.player_name:<20} "
            f"kills={row.kills:3d} deaths={row.deaths:3d} kda={row.kda}"
        )


@app.command("global-ranking")
def global_ranking_command(
    db_url: DbUrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Show all players ranked by overall KDA, then total kills."""
    session_factory = _open_session_factory(_load_settings(config), db_url)
    ranking = get_global_ranking(session_factory)
    if not ranking:
        typer.echo("No player stats stored.")
        return

    for row in ranking:
        typer.echo(
            f"{row.position:2d}. {row.player_name:<20} "
            f"kda={row.overall_kda} kills={row.total_kills:4d} deaths={row.total_deaths:4d} "
            f"best_streak={row.best_streak:3d} matches={row.matches_played:3d}"
        )


@app.command("delete-all")
def delete_all_command(
    yes: Annotated[
        bool,
        typer.Option("--yes", help="Confirm deletion of every stored match."),
    ] = False,
    db_url: DbUrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Delete every stored match (useful when re-uploading the same log)."""
    if not yes:
        raise typer.BadParameter("pass --yes to delete all stored matches", param_hint="--yes")

    session_factory = _open_session_factory(_load_settings(config), db_url)
    delete_all_matches(session_factory)
    typer.echo("deleted all matches")


if __name__ == "__main__":
    app()
