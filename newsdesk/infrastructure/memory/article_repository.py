"""Concrete repository implementation backed by process memory."""

import itertools
import logging

from newsdesk.application.interfaces import ArticleRepository
from newsdesk.domain.entities import Article

logger = logging.getLogger(__name__)


class InMemoryArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port with an insertion-ordered dict.

    The dict doubles as an arena keyed by ID: lookups are O(1) and iteration
    follows insertion order. IDs come from a counter that is never rewound,
    so a deleted ID is never handed out again.

    Not thread-safe on its own; ArticleStore serializes access.
    """

    def __init__(self):
        self._articles: dict[int, Article] = {}
        self._ids = itertools.count(1)

    def next_id(self) -> int:
        return next(self._ids)

    def add(self, article: Article) -> Article:
        if article.id is None:
            raise ValueError("Article must carry an ID before it is stored")
        if article.id in self._articles:
            raise ValueError(f"Article {article.id} is already stored")
        self._articles[article.id] = article
        return article

    def get_by_id(self, article_id: int) -> Article | None:
        return self._articles.get(article_id)

    def list_all(self) -> list[Article]:
        return list(self._articles.values())

    def delete(self, article_id: int) -> bool:
        if self._articles.pop(article_id, None) is None:
            return False
        return True

    def clear(self) -> int:
        removed = len(self._articles)
        self._articles.clear()
        if removed:
            logger.debug("Released %d article(s)", removed)
        return removed

    def count(self) -> int:
        return len(self._articles)
