from .article_store import ArticleStore

__all__ = [
    "ArticleStore",
]
