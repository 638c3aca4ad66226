"""Centralized logging configuration.

Applies per-category log levels from Settings so that the chatty store
operation log can be silenced without affecting the warnings the scripting
surface reports back to its embedder.

Usage:
    from newsdesk.infrastructure.logging.log_config import setup_logging
    setup_logging()   # Call once at startup (in create_news_module)
"""

import logging
import sys

from newsdesk.config import Settings, get_settings
from newsdesk.infrastructure.logging.colored_logger import set_colors_enabled


# ── Logger-name → Settings-field mapping ────────────────────────────
#
# Each entry maps one or more Python logger names to a Settings field.
# When setup_logging() runs, it sets the level of each listed logger
# to the value of the corresponding setting.

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_store": [
        "ArticleStore",
        "newsdesk.application",
        "newsdesk.infrastructure.memory",
    ],
    "log_level_scripting": [
        "newsdesk.presentation.scripting",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Configure Python logging levels from application settings.

    Call this once during startup, before the first store is built.
    """
    settings = settings or get_settings()
    root_level = _parse_level(settings.log_level)

    # ── Root logger ────────────────────────────────────────────────
    root = logging.getLogger()
    root.setLevel(root_level)

    # The embedding host usually installs its own handler; scripts and
    # tests may not.
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)-8s %(name)s — %(message)s",
            )
        )
        root.addHandler(handler)

    # ── Per-category loggers ───────────────────────────────────────
    for settings_field, logger_names in _CATEGORY_MAP.items():
        raw_level: str = getattr(settings, settings_field, "INFO")
        level = _parse_level(raw_level)

        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    set_colors_enabled(settings.log_colors)

    logging.getLogger(__name__).debug(
        "Logging configured — root=%s, store=%s, scripting=%s, colors=%s",
        settings.log_level,
        settings.log_level_store,
        settings.log_level_scripting,
        settings.log_colors,
    )


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
