"""Load application settings from an optional TOML file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any
import tomllib

DEFAULT_DB_URL = "sqlite:///game_logs.db"
DEFAULT_ALLOWED_EXTENSIONS = (".log", ".txt")


@dataclass(frozen=True)
class AppSettings:
    """Database and upload settings shared by the CLI commands."""

    database_url: str = DEFAULT_DB_URL
    allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS
    echo_sql: bool = False


def load_settings(path: Path | None = None) -> AppSettings:
    """Read settings from ``path``; ``None`` returns the defaults."""
    if path is None:
        return AppSettings()
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    if not path.is_file():
        raise ValueError(f"Settings path is not a file: {path}")

    with path.open("rb") as file:
        raw = tomllib.load(file)
    return _parse_settings(raw, path)


def _parse_settings(raw: dict[str, Any], file_path: Path) -> AppSettings:
    database_raw = raw.get("database", {})
    upload_raw = raw.get("upload", {})

    database_url = str(database_raw.get("url", DEFAULT_DB_URL)).strip()
    if not database_url:
        raise ValueError(f"{file_path}: [database].url must not be empty")

    extensions_raw = upload_raw.get("allowed_extensions", list(DEFAULT_ALLOWED_EXTENSIONS))
    if not isinstance(extensions_raw, list):
        raise ValueError(f"{file_path}: [upload].allowed_extensions must be a list")
    allowed_extensions = tuple(_normalize_extension(str(value)) for value in extensions_raw)
    if not allowed_extensions:
        raise ValueError(f"{file_path}: [upload].allowed_extensions must not be empty")

    return AppSettings(
        database_url=database_url,
        allowed_extensions=allowed_extensions,
        echo_sql=bool(database_raw.get("echo", False)),
    )


def _normalize_extension(value: str) -> str:
    extension = value.strip().lower()
    if not extension.startswith("."):
        extension = f".{extension}"
    return extension


__all__ = ["AppSettings", "DEFAULT_DB_URL", "load_settings"]
