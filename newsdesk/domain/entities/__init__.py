from .article import Article, GENERIC_FACTION, MAX_DATE, MIN_DATE, NO_DATE
from .article_filter import AllArticles, ArticleFilter, ByDate, ByText

__all__ = [
    "Article",
    "GENERIC_FACTION",
    "MAX_DATE",
    "MIN_DATE",
    "NO_DATE",
    "AllArticles",
    "ArticleFilter",
    "ByDate",
    "ByText",
]
