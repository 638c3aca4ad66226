"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass

GENERIC_FACTION = "Generic"
NO_DATE = 0

# Dates are stored in a signed 64-bit time type
MIN_DATE = -(2**63)
MAX_DATE = 2**63 - 1


@dataclass
class Article:
    """Core domain entity representing a single news article.

    ``id`` is assigned by the repository. Text fields may be ``None`` only for
    records built outside the store's validated create path; such records are
    incomplete and never returned by a query.
    """

    title: str | None
    desc: str | None
    faction: str | None
    date: int = NO_DATE
    id: int | None = None

    @property
    def is_complete(self) -> bool:
        """True when title, desc and faction are all set."""
        return bool(self.title) and bool(self.desc) and bool(self.faction)

    @property
    def is_dated(self) -> bool:
        return self.date != NO_DATE
