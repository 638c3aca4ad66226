"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from newsdesk.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article storage — implemented in the infrastructure layer."""

    @abstractmethod
    def next_id(self) -> int:
        """Reserve and return an identifier that has never been issued."""
        ...

    @abstractmethod
    def add(self, article: Article) -> Article:
        """Store an article that already carries its ID."""
        ...

    @abstractmethod
    def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    def list_all(self) -> list[Article]:
        """Retrieve every stored article in insertion order."""
        ...

    @abstractmethod
    def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    def clear(self) -> int:
        """Delete every article and return how many were removed."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...
