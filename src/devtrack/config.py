"""Application configuration via environment variables and a JSON settings file."""

import json
from pathlib import Path

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

from devtrack.errors.exceptions import ConfigurationError

# Key/value connection string keys (case-insensitive) -> URL.create() argument
_CONNECTION_KEYS = {
    "host": "host",
    "server": "host",
    "port": "port",
    "username": "username",
    "user id": "username",
    "user": "username",
    "password": "password",
    "database": "database",
}


class Settings(BaseSettings):
    # Database
    database_url: str | None = None
    settings_file: str = "appsettings.json"
    pool_size: int = 5
    max_overflow: int = 10

    # Logging
    log_level: str = "info"
    json_logs: bool = False
    echo_sql: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "DEVTRACK_",
    }


def _read_settings_file(path: Path) -> str | None:
    if not path.is_file():
        raise ConfigurationError(f"Settings file not found: {path}")
    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise ConfigurationError(f"Cannot read settings file {path}: {exc}") from exc
    try:
        return document["ConnectionStrings"]["DefaultConnection"]
    except (KeyError, TypeError) as exc:
        raise ConfigurationError(
            f"ConnectionStrings.DefaultConnection missing from {path}"
        ) from exc


def resolve_connection_string(settings: Settings) -> str:
    """Return the configured connection string.

    ``DEVTRACK_DATABASE_URL`` wins; otherwise the value is read from
    ``ConnectionStrings.DefaultConnection`` in the JSON settings file.

    Raises:
        ConfigurationError: if no non-blank value can be located.
    """
    value = settings.database_url
    if value is None:
        value = _read_settings_file(Path(settings.settings_file))
    if not isinstance(value, str) or not value.strip():
        raise ConfigurationError("Connection string is blank")
    return value.strip()


def to_database_url(connection_string: str) -> str:
    """Normalise a connection string into a SQLAlchemy async URL.

    Accepts a SQLAlchemy URL as-is, or a ``Host=..;Database=..`` style
    key/value string, which is translated to ``postgresql+asyncpg``.
    """
    if not connection_string or not connection_string.strip():
        raise ConfigurationError("Connection string is blank")
    if "://" in connection_string:
        return connection_string.strip()

    parts: dict = {}
    for chunk in connection_string.split(";"):
        if not chunk.strip():
            continue
        key, sep, value = chunk.partition("=")
        if not sep:
            raise ConfigurationError(f"Malformed connection string segment: {chunk!r}")
        name = _CONNECTION_KEYS.get(key.strip().lower())
        if name is None:
            raise ConfigurationError(f"Unsupported connection string key: {key.strip()!r}")
        parts[name] = value.strip()

    if not parts.get("host") or not parts.get("database"):
        raise ConfigurationError("Connection string needs at least Host and Database")
    if "port" in parts:
        try:
            parts["port"] = int(parts["port"])
        except ValueError as exc:
            raise ConfigurationError(f"Invalid port: {parts['port']!r}") from exc

    url = URL.create("postgresql+asyncpg", **parts)
    return url.render_as_string(hide_password=False)


settings = Settings()
