"""Abstract interfaces for the FAQ help center."""
from __future__ import annotations

from abc import ABC, abstractmethod

from domain.entities import FaqCategory


class CorpusProvider(ABC):
    """Supplies the fully materialized list of FAQ categories."""

    @abstractmethod
    def load(self) -> list[FaqCategory]:
        """Return all categories in display order."""


class CorpusRepository(CorpusProvider):
    """A corpus provider that can also persist categories."""

    @abstractmethod
    def add(self, category: FaqCategory) -> None:
        """Store a category, replacing any previous version with the same id."""

    @abstractmethod
    def get(self, category_id: str) -> FaqCategory | None:
        """Retrieve a category by id."""


__all__ = [
    "CorpusProvider",
    "CorpusRepository",
]
