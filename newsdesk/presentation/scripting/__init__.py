from .news_module import (
    ArticleHandle,
    NewsModule,
    NewsScriptError,
    ReadOnlyNewsModule,
    filter_from_value,
)

__all__ = [
    "ArticleHandle",
    "NewsModule",
    "NewsScriptError",
    "ReadOnlyNewsModule",
    "filter_from_value",
]
