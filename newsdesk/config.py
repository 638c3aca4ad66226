import json
import logging
from pathlib import Path

from pydantic_settings import BaseSettings
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_SETTINGS_FILE = Path("data/settings.json")
_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_LOG_LEVEL_KEYS = frozenset({
    "log_level",
    "log_level_store",
    "log_level_scripting",
})


class Settings(BaseSettings):
    """Application settings loaded from NEWSDESK_* environment variables."""

    app_title: str = "Newsdesk"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_store: str = "INFO"            # ArticleStore + repositories
    log_level_scripting: str = "WARNING"     # Script-facing news module
    log_colors: bool = True                  # ANSI colors in store operation logs

    model_config = {
        "env_prefix": "NEWSDESK_",
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def model_post_init(self, __context: object) -> None:
        """Merge runtime log-level overrides from data/settings.json into settings."""
        if _SETTINGS_FILE.exists():
            try:
                overrides = json.loads(_SETTINGS_FILE.read_text("utf-8"))
                for key in _LOG_LEVEL_KEYS:
                    if key in overrides and isinstance(overrides[key], str):
                        object.__setattr__(self, key, overrides[key])
            except Exception as exc:
                _config_logger.warning("Could not load settings overrides: %s", exc)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
