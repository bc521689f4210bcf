"""Configuration management for King."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

KING_HOME = Path(os.environ.get("KING_HOME", Path.home() / "king"))
CONFIG_FILE = KING_HOME / "config" / "king.conf"
DATA_DIR = KING_HOME / "data"

TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass
class Config:
    """King configuration."""

    data_file: str = str(DATA_DIR / "tasks.json")
    log_level: str = "WARNING"
    boxed_replies: bool = False
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from an unquoted value."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _parse_user_ids(value: str) -> list[int]:
    users = []
    for entry in value.split(","):
        entry = entry.strip()
        if not entry:
            continue
        try:
            users.append(int(entry))
        except ValueError:
            logger.warning(f"Ignoring invalid Telegram user id: {entry!r}")
    return users


def load_config(path: Path | None = None) -> Config:
    """Load configuration from king.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "log_level":
                config.log_level = value.upper()
            case "boxed_replies":
                config.boxed_replies = value.lower() in TRUE_VALUES
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                config.telegram_allowed_users = _parse_user_ids(value)

    return config
