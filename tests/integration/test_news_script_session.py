"""Integration test: a script session driving the news module end to end."""

import logging
from contextlib import contextmanager

import pytest

from newsdesk.infrastructure.logging import colored_logger
from newsdesk.main import create_news_module
from newsdesk.presentation.scripting import NewsModule, NewsScriptError, ReadOnlyNewsModule

_CONFIGURED_LOGGERS = [
    "ArticleStore",
    "newsdesk.application",
    "newsdesk.infrastructure.memory",
    "newsdesk.presentation.scripting",
]


@contextmanager
def _preserved_logging():
    """Undo the process-wide logging changes create_news_module() makes."""
    levels = {name: logging.getLogger(name).level for name in _CONFIGURED_LOGGERS}
    root = logging.getLogger()
    root_level = root.level
    root_handlers = list(root.handlers)
    try:
        yield
    finally:
        for name, level in levels.items():
            logging.getLogger(name).setLevel(level)
        root.setLevel(root_level)
        for handler in list(root.handlers):
            if handler not in root_handlers:
                root.removeHandler(handler)
        colored_logger.set_colors_enabled(True)


@pytest.fixture(autouse=True)
def _restore_logging():
    with _preserved_logging():
        yield


def test_session_logging_setup_is_undone_afterwards():
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    scripting_before = logging.getLogger("newsdesk.presentation.scripting").level

    with _preserved_logging():
        create_news_module()
        root.setLevel(logging.CRITICAL)
        root.addHandler(logging.NullHandler())

    assert root.handlers == handlers_before
    assert root.level == level_before
    assert logging.getLogger("newsdesk.presentation.scripting").level == scripting_before


def test_script_session_end_to_end():
    news = create_news_module()
    assert isinstance(news, NewsModule)

    x = news.add("Empire", "Hello", "Hello world!", 0)
    assert news.title(x) == "Hello"
    assert news.faction(x) == "Empire"
    assert news.date(x) == 0
    assert x not in news.get(0)
    assert news.get(True) == [x]

    news.rm(x)
    with pytest.raises(NewsScriptError) as info:
        news.title(x)
    assert info.value.kind == NewsScriptError.NOT_FOUND
    assert news.get(True) == []


def test_readonly_context_shares_articles_with_editor():
    news = create_news_module()
    readonly = create_news_module(store=news.store, readonly=True)
    assert isinstance(readonly, ReadOnlyNewsModule)

    dated = news.add("Dvaered", "Border skirmish", "Fighting near the border.", 603000000)
    news.add("Generic", "Market report", "Prices are stable.", 0)

    assert readonly.get(603000000) == [dated]
    assert [readonly.title(h) for h in readonly.get("Generic")] == ["Market report"]
    assert len(readonly.get(True)) == 2

    news.store.clear()
    assert readonly.get(True) == []
