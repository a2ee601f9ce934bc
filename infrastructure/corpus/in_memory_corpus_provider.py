"""Корпус FAQ в памяти для демо и тестов."""
from __future__ import annotations

from typing import Iterable

from domain.entities import FaqCategory
from domain.interfaces import CorpusProvider


class InMemoryCorpusProvider(CorpusProvider):
    """Отдаёт заранее переданные категории без обращения к диску."""

    def __init__(self, categories: Iterable[FaqCategory] = ()) -> None:
        self._categories = list(categories)

    def load(self) -> list[FaqCategory]:
        return list(self._categories)


__all__ = ["InMemoryCorpusProvider"]
