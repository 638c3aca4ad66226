from .article import ArticleCreate, ArticleView

__all__ = [
    "ArticleCreate",
    "ArticleView",
]
