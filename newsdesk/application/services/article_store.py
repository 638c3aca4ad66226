"""Application service (use case) owning the news article collection."""

import logging
import threading

from pydantic import ValidationError

from newsdesk.application.interfaces import ArticleRepository
from newsdesk.application.schemas import ArticleCreate, ArticleView
from newsdesk.domain.entities import NO_DATE, AllArticles, Article, ArticleFilter, ByDate, ByText
from newsdesk.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from newsdesk.infrastructure.logging.colored_logger import StoreLogger, StoreStage

logger = logging.getLogger(__name__)
slog = StoreLogger("ArticleStore")

_FILTER_TYPES = (AllArticles, ByDate, ByText)


class ArticleStore:
    """Orchestrates the article lifecycle. Depends on the repository port (DI).

    Callers only ever see IDs and read-only ArticleView projections; the
    store is the single owner of every record. A single re-entrant lock
    covers every operation so that a query always scans a consistent
    snapshot, even when the embedding host is multi-threaded.
    """

    def __init__(self, repository: ArticleRepository):
        self._repository = repository
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return self._repository.count()

    def create(self, title: str, desc: str, faction: str, date: int = NO_DATE) -> int:
        """Validate and store a new article, returning its ID.

        Raises InvalidArgumentError (and stores nothing) when a text field is
        missing or empty, or the date is not a representable integer.
        """
        try:
            data = ArticleCreate(title=title, desc=desc, faction=faction, date=date)
        except ValidationError as exc:
            error = _to_invalid_argument(exc)
            slog.step_error(StoreStage.CREATE, "Rejected new article", error=error)
            raise error from exc

        with self._lock:
            article = Article(
                title=data.title,
                desc=data.desc,
                faction=data.faction,
                date=data.date,
                id=self._repository.next_id(),
            )
            self._repository.add(article)

        slog.step(
            StoreStage.CREATE,
            f"Stored article {article.id}",
            faction=article.faction,
            date=article.date,
        )
        return article.id

    def remove(self, article_id: int) -> None:
        """Release an article. Its ID is never valid again."""
        with self._lock:
            removed = self._repository.delete(article_id)
        if not removed:
            error = EntityNotFoundError("Article", article_id)
            slog.step_error(StoreStage.REMOVE, f"Cannot release article {article_id}", error=error)
            raise error
        slog.step(StoreStage.REMOVE, f"Released article {article_id}")

    def query(self, article_filter: ArticleFilter) -> list[ArticleView]:
        """Return complete articles matching the filter, in insertion order.

        No match is an empty list. Anything that is not an AllArticles,
        ByDate or ByText filter matches nothing.
        """
        if not isinstance(article_filter, _FILTER_TYPES):
            logger.debug("Unrecognized filter %r, matching nothing", article_filter)
            return []

        with self._lock:
            views = [
                ArticleView.model_validate(article, from_attributes=True)
                for article in self._repository.list_all()
                if article.is_complete and article_filter.matches(article)
            ]

        slog.trace(StoreStage.QUERY, repr(article_filter), matches=len(views))
        return views

    def resolve(self, article_id: int) -> ArticleView:
        """Turn an ID into the current record state or raise EntityNotFoundError."""
        with self._lock:
            article = self._repository.get_by_id(article_id)
            if article is None:
                raise EntityNotFoundError("Article", article_id)
            view = ArticleView.model_validate(article, from_attributes=True)
        slog.trace(StoreStage.RESOLVE, f"Resolved article {article_id}")
        return view

    def equals(self, first_id: int, second_id: int) -> bool:
        """Identity comparison. Both IDs must still resolve."""
        with self._lock:
            first = self.resolve(first_id)
            second = self.resolve(second_id)
        return first.id == second.id

    def clear(self) -> int:
        """Release every remaining article. Issued IDs stay retired."""
        with self._lock:
            removed = self._repository.clear()
        slog.step(StoreStage.CLEAR, f"Released {removed} article(s)")
        return removed


def _to_invalid_argument(exc: ValidationError) -> InvalidArgumentError:
    """Collapse a pydantic ValidationError into the first offending field."""
    first = exc.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    return InvalidArgumentError(field, first.get("msg", "invalid value"))
