"""Domain entities for article queries: one filter variant per query call."""

from dataclasses import dataclass

from newsdesk.domain.entities.article import Article


@dataclass(frozen=True)
class AllArticles:
    """Matches every complete article."""

    def matches(self, article: Article) -> bool:
        return True


@dataclass(frozen=True)
class ByDate:
    """Matches dated articles whose date equals ``timestamp`` exactly.

    Undated articles never match, not even ``ByDate(NO_DATE)``.
    """

    timestamp: int

    def matches(self, article: Article) -> bool:
        return article.is_dated and article.date == self.timestamp


@dataclass(frozen=True)
class ByText:
    """Matches articles whose title, desc or faction equals ``pattern``."""

    pattern: str

    def matches(self, article: Article) -> bool:
        return self.pattern in (article.title, article.desc, article.faction)


ArticleFilter = AllArticles | ByDate | ByText
