"""Script-facing news module, bound by an embedding runtime as its ``news`` table.

Scripts never see Article records. They get ArticleHandle values carrying
only an ID, and every accessor resolves the handle against the store again.
Domain failures are re-raised as NewsScriptError so the host runtime has a
single exception type to turn into a script error.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from newsdesk.application.schemas import ArticleView
from newsdesk.application.services import ArticleStore
from newsdesk.domain.entities import NO_DATE, AllArticles, ArticleFilter, ByDate, ByText
from newsdesk.domain.exceptions import EntityNotFoundError, InvalidArgumentError

logger = logging.getLogger(__name__)


class NewsScriptError(Exception):
    """Raised back to the calling script when a news operation fails."""

    NOT_FOUND = "not_found"
    INVALID_ARGUMENT = "invalid_argument"
    TYPE_ERROR = "type_error"

    def __init__(self, kind: str, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class ArticleHandle:
    """Opaque reference to a stored article. Equal handles share an ID."""

    id: int


def filter_from_value(value: Any) -> ArticleFilter | None:
    """Map a script value onto a filter variant.

    Any boolean selects every article, a whole number (``5`` or ``5.0``)
    selects by date and a string selects by exact text. Anything else,
    including a fractional float, has no filter and therefore matches nothing.
    """
    # bool before int: True/False are ints too
    if isinstance(value, bool):
        return AllArticles()
    if isinstance(value, int):
        return ByDate(value)
    if isinstance(value, float):
        return ByDate(int(value)) if value.is_integer() else None
    if isinstance(value, str):
        return ByText(value)
    return None


@contextmanager
def _reported(operation: str) -> Iterator[None]:
    """Translate domain errors raised inside the block into NewsScriptError."""
    try:
        yield
    except EntityNotFoundError as exc:
        logger.warning("news.%s(): %s", operation, exc)
        raise NewsScriptError(NewsScriptError.NOT_FOUND, str(exc)) from exc
    except InvalidArgumentError as exc:
        logger.warning(
            "news.%s(): %s (use add(faction, title, desc, date))", operation, exc
        )
        raise NewsScriptError(NewsScriptError.INVALID_ARGUMENT, str(exc)) from exc


def _check_handle(operation: str, value: Any) -> ArticleHandle:
    if not isinstance(value, ArticleHandle):
        message = f"Bad argument to news.{operation}(), must be article (got {type(value).__name__})"
        logger.warning(message)
        raise NewsScriptError(NewsScriptError.TYPE_ERROR, message)
    return value


class ReadOnlyNewsModule:
    """Query and accessor functions only, for script contexts that must not edit news."""

    def __init__(self, store: ArticleStore):
        self._store = store

    @property
    def store(self) -> ArticleStore:
        """The backing store, for the host (not exposed to scripts)."""
        return self._store

    def get(self, value: Any) -> list[ArticleHandle]:
        """Return handles for every matching article, in insertion order."""
        article_filter = filter_from_value(value)
        if article_filter is None:
            logger.debug("news.get(%r): unsupported filter value, no articles", value)
            return []
        return [ArticleHandle(view.id) for view in self._store.query(article_filter)]

    def title(self, handle: ArticleHandle) -> str | None:
        return self._resolve("title", handle).title

    def desc(self, handle: ArticleHandle) -> str | None:
        return self._resolve("desc", handle).desc

    def faction(self, handle: ArticleHandle) -> str | None:
        return self._resolve("faction", handle).faction

    def date(self, handle: ArticleHandle) -> int:
        return self._resolve("date", handle).date

    def eq(self, first: ArticleHandle, second: ArticleHandle) -> bool:
        """True when both handles reference the same article."""
        first = _check_handle("eq", first)
        second = _check_handle("eq", second)
        with _reported("eq"):
            return self._store.equals(first.id, second.id)

    def _resolve(self, operation: str, handle: Any) -> ArticleView:
        handle = _check_handle(operation, handle)
        with _reported(operation):
            return self._store.resolve(handle.id)


class NewsModule(ReadOnlyNewsModule):
    """Full news module, including article creation and removal."""

    def add(self, faction: str, title: str, desc: str, date: int = NO_DATE) -> ArticleHandle:
        """Add an article. ``faction`` comes first; a date of 0 means undated.

        Example (script side):
            a = news.add("Empire", "Hello world!", "The Empire wishes to say hello!", 0)
        """
        with _reported("add"):
            return ArticleHandle(self._store.create(title, desc, faction, date))

    def rm(self, handle: ArticleHandle) -> None:
        """Free an article. The handle is invalid from then on."""
        handle = _check_handle("rm", handle)
        with _reported("rm"):
            self._store.remove(handle.id)
