"""Parse an uploaded game log and persist its completed matches."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import PurePath

from sqlalchemy.orm import Session, sessionmaker

from domain.log_parser import MatchLogParser
from repositories.match_repository import SqlAlchemyMatchRepository
from repositories.protocol import MatchRepository
from settings import DEFAULT_ALLOWED_EXTENSIONS

MatchRepositoryFactory = Callable[[Session], MatchRepository]


@dataclass(frozen=True)
class ProcessGameLogsResult:
    processed_matches: int
    parse_errors: list[str]


def validate_log_filename(
    filename: str,
    allowed_extensions: Sequence[str] = DEFAULT_ALLOWED_EXTENSIONS,
) -> None:
    """Reject file names whose extension is not in the allow-list (case-insensitive)."""
    extension = PurePath(filename).suffix.lower()
    if extension not in allowed_extensions:
        raise ValueError(
            f"Invalid file extension. Only {', '.join(allowed_extensions)} files are allowed"
        )


def process_game_logs(
    *,
    session_factory: sessionmaker[Session],
    log_content: str,
    echo: Callable[[str], None] | None = None,
    repository_factory: MatchRepositoryFactory = SqlAlchemyMatchRepository,
) -> ProcessGameLogsResult:
    """Parse ``log_content`` with a fresh parser and store all completed matches in one transaction."""
    output = MatchLogParser().execute(log_content)

    with session_factory() as session:
        try:
            repository_factory(session).create_batch(output.matches)
            session.commit()
        except Exception:
            session.rollback()
            raise

    if echo is not None:
        echo(
            "completed "
            f"processed_matches={len(output.matches)} "
            f"parse_errors={len(output.parse_errors)}"
        )

    return ProcessGameLogsResult(
        processed_matches=len(output.matches),
        parse_errors=output.parse_errors,
    )


__all__ = [
    "MatchRepositoryFactory",
    "ProcessGameLogsResult",
    "process_game_logs",
    "validate_log_filename",
]
