"""Configuration management for GitPulse."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

GITPULSE_HOME = Path.home() / ".gitpulse"
CONFIG_FILE = GITPULSE_HOME / "config" / "gitpulse.conf"
DATA_DIR = GITPULSE_HOME / "data"

GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "github-widget"
KEYRING_SERVICE = "gitpulse"
KEYRING_USER = "github_token"
CACHE_TTL_SECONDS = 300


@dataclass
class Config:
    """GitPulse configuration."""

    data_dir: Path = field(default_factory=lambda: DATA_DIR)
    cache_ttl_seconds: int = CACHE_TTL_SECONDS
    graphql_url: str = GRAPHQL_URL
    user_agent: str = USER_AGENT
    keyring_service: str = KEYRING_SERVICE
    keyring_user: str = KEYRING_USER
    # None leaves the transport default in place
    request_timeout: float | None = None

    @property
    def cache_dir(self) -> Path:
        return Path(self.data_dir).expanduser() / "cache"


def load_config(path: Path | None = None) -> Config:
    """Load configuration from gitpulse.conf file."""
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
        value = value.strip()

        # Handle quoted values with inline comments: "value" # comment
        if value[:1] in ('"', "'"):
            quote = value[0]
            end_quote = value.find(quote, 1)
            value = value[1:end_quote] if end_quote != -1 else value[1:]
        elif "#" in value:
            value = value.split("#")[0].strip()

        match key:
            case "data_dir":
                config.data_dir = Path(value).expanduser()
            case "cache_ttl_seconds":
                try:
                    config.cache_ttl_seconds = int(value)
                except ValueError:
                    logger.warning(f"Invalid CACHE_TTL_SECONDS {value!r}, keeping {config.cache_ttl_seconds}")
            case "graphql_url":
                config.graphql_url = value
            case "user_agent":
                config.user_agent = value
            case "keyring_service":
                config.keyring_service = value
            case "keyring_user":
                config.keyring_user = value
            case "request_timeout":
                try:
                    config.request_timeout = float(value) if value else None
                except ValueError:
                    logger.warning(f"Invalid REQUEST_TIMEOUT {value!r}, using transport default")
            case _:
                logger.debug(f"Ignoring unknown config key {key!r}")

    return config
