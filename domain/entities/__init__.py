"""Domain entities for the FAQ help center."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class FaqEntry:
    """A single question with its answer."""

    id: str
    question: str
    answer: str


@dataclass(frozen=True, slots=True)
class FaqCategory:
    """A named group of FAQ entries shown together on the help page."""

    id: str
    name: str
    entries: tuple[FaqEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ScoredEntry:
    """An entry returned by the search together with its relevance score."""

    entry: FaqEntry
    score: int
    category_id: str
    category_name: str

    @property
    def id(self) -> str:
        return self.entry.id

    @property
    def question(self) -> str:
        return self.entry.question

    @property
    def answer(self) -> str:
        return self.entry.answer


@dataclass(frozen=True, slots=True)
class CategorySummary:
    """Sidebar view of a category."""

    id: str
    name: str
    entry_count: int


__all__ = [
    "FaqEntry",
    "FaqCategory",
    "ScoredEntry",
    "CategorySummary",
]
