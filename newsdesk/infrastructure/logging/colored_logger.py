"""Colored store logger — ANSI-colored console logging for article store operations.

Provides a StoreLogger with color-coded output per store operation,
making it easy to visually trace what a script session did to the news
store in the terminal.

Color scheme:
    🟢 Green   — Create
    🟡 Yellow  — Remove / Clear
    🔵 Blue    — Query / Resolve
    🔴 Red     — Errors
    ⚪ Gray    — Details
"""

import logging
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    GRAY = "\033[90m"


_colors_enabled = True


def set_colors_enabled(enabled: bool) -> None:
    """Switch ANSI colors on or off for every StoreLogger (e.g. for log files)."""
    global _colors_enabled
    _colors_enabled = enabled


def _paint(text: str, *codes: str) -> str:
    if not _colors_enabled or not codes:
        return text
    return f"{''.join(codes)}{text}{_Colors.RESET}"


def _format_details(details: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in details.items())


# ── Store Stage Definitions ──────────────────────────────────────────

class StoreStage:
    """Predefined store operations with colors and icons."""

    CREATE = ("CREATE", _Colors.GREEN, "📰")
    REMOVE = ("REMOVE", _Colors.YELLOW, "🗑️")
    CLEAR = ("CLEAR", _Colors.YELLOW, "🧹")
    QUERY = ("QUERY", _Colors.BLUE, "🔎")
    RESOLVE = ("RESOLVE", _Colors.BLUE, "🔗")


# ── StoreLogger ──────────────────────────────────────────────────────

class StoreLogger:
    """Color-coded logger for article store operations.

    Usage:
        log = StoreLogger("ArticleStore")
        log.step(StoreStage.CREATE, "Stored article 3", faction="Empire")
        log.step_error(StoreStage.REMOVE, "Article 9 not found")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log a completed store operation at INFO with its stage color."""
        label, color, icon = stage
        formatted = f"{_paint(f'{icon} [{label}]', color, _Colors.BOLD)} {_paint(message, color)}"
        if kwargs:
            formatted += " " + _paint(f"({_format_details(kwargs)})", _Colors.GRAY)
        self._logger.info(formatted)

    def trace(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Like step(), but at DEBUG for high-frequency read operations."""
        if not self._logger.isEnabledFor(logging.DEBUG):
            return
        label, color, icon = stage
        formatted = f"{_paint(f'{icon} [{label}]', color)} {message}"
        if kwargs:
            formatted += " " + _paint(f"({_format_details(kwargs)})", _Colors.GRAY)
        self._logger.debug(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a rejected store operation in red at WARNING."""
        label, _, icon = stage
        formatted = f"{_paint(f'{icon} [{label}]', _Colors.RED, _Colors.BOLD)} {_paint(message, _Colors.RED)}"
        if error:
            formatted += " " + _paint(f"→ {type(error).__name__}: {error}", _Colors.DIM)
        self._logger.warning(formatted)
