"""Use cases behind the help page category sidebar."""
from __future__ import annotations

from typing import Iterable

from domain.entities import CategorySummary, FaqCategory, ScoredEntry


def list_categories(corpus: Iterable[FaqCategory]) -> list[CategorySummary]:
    """Summaries of every category in display order."""

    return [
        CategorySummary(id=category.id, name=category.name, entry_count=len(category.entries))
        for category in corpus
    ]


def select_categories(corpus: Iterable[FaqCategory], category_id: str | None = None) -> list[FaqCategory]:
    """Return the categories to display for the current sidebar selection.

    ``None`` selects "All Categories". An unknown id selects nothing.
    """

    categories = list(corpus)
    if category_id is None:
        return categories
    return [category for category in categories if category.id == category_id]


def toggle_question(open_questions: Iterable[str], entry_id: str) -> set[str]:
    """Return a new set of expanded question ids with ``entry_id`` flipped."""

    toggled = set(open_questions)
    if entry_id in toggled:
        toggled.remove(entry_id)
    else:
        toggled.add(entry_id)
    return toggled


def find_entry(corpus: Iterable[FaqCategory], entry_id: str) -> ScoredEntry | None:
    """Locate an entry and its category, e.g. when a search result is opened."""

    for category in corpus:
        for entry in category.entries:
            if entry.id == entry_id:
                return ScoredEntry(entry=entry, score=0, category_id=category.id, category_name=category.name)
    return None


__all__ = ["list_categories", "select_categories", "toggle_question", "find_entry"]
