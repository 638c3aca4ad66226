"""Newsdesk entry point for embedding hosts."""

import logging

from newsdesk.application.services import ArticleStore
from newsdesk.config import get_settings
from newsdesk.infrastructure.dependencies import build_article_store, build_news_module
from newsdesk.infrastructure.logging.log_config import setup_logging
from newsdesk.presentation.scripting import ReadOnlyNewsModule

logger = logging.getLogger(__name__)


def create_news_module(
    store: ArticleStore | None = None,
    readonly: bool = False,
) -> ReadOnlyNewsModule:
    """Factory function that builds and configures a news module for a script runtime.

    Pass an existing ``store`` to bind a second module (typically a read-only
    one) to the same articles.
    """
    settings = get_settings()
    setup_logging(settings)

    if store is None:
        store = build_article_store()
        logger.info("%s %s: new article store (%s)", settings.app_title, settings.app_version, settings.app_env)

    return build_news_module(store, readonly=readonly)
