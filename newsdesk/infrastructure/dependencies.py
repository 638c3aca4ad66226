"""Dependency wiring — connects infrastructure to the application and scripting layers."""

from newsdesk.application.services import ArticleStore
from newsdesk.infrastructure.memory import InMemoryArticleRepository
from newsdesk.presentation.scripting import NewsModule, ReadOnlyNewsModule


def build_article_store() -> ArticleStore:
    """Provides an ArticleStore with a fresh in-memory repository wired up."""
    repository = InMemoryArticleRepository()
    return ArticleStore(repository)


def build_news_module(store: ArticleStore, readonly: bool = False) -> ReadOnlyNewsModule:
    """Provides the script-facing module bound to ``store``.

    Read-only modules share the store with the full module they sit beside;
    they only lack ``add`` and ``rm``.
    """
    if readonly:
        return ReadOnlyNewsModule(store)
    return NewsModule(store)
