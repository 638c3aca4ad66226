"""Unit tests for the Article entity and the filter variants."""

from newsdesk.domain.entities import (
    GENERIC_FACTION,
    AllArticles,
    Article,
    ByDate,
    ByText,
)


def _article(**fields) -> Article:
    values = {"title": "Hello", "desc": "Hello world!", "faction": "Empire", "date": 0, "id": 1}
    values.update(fields)
    return Article(**values)


def test_article_completeness():
    assert _article().is_complete
    assert not _article(title=None).is_complete
    assert not _article(desc="").is_complete
    assert not _article(faction=None).is_complete


def test_article_dated_flag():
    assert not _article(date=0).is_dated
    assert _article(date=-5).is_dated


def test_all_articles_matches_everything():
    assert AllArticles().matches(_article())
    assert AllArticles().matches(_article(date=123))


def test_by_date_requires_a_date():
    assert ByDate(123).matches(_article(date=123))
    assert not ByDate(124).matches(_article(date=123))
    assert not ByDate(0).matches(_article(date=0))


def test_by_text_uses_equality_per_field():
    article = _article(title="Hello", desc="Hello world!", faction="Empire")
    assert ByText("Hello").matches(article)
    assert ByText("Hello world!").matches(article)
    assert ByText("Empire").matches(article)
    assert not ByText("world").matches(article)
    assert not ByText("").matches(article)
    assert ByText(GENERIC_FACTION).matches(_article(faction=GENERIC_FACTION))


def test_filters_are_value_objects():
    assert ByDate(5) == ByDate(5)
    assert ByText("a") != ByText("b")
    assert AllArticles() == AllArticles()
