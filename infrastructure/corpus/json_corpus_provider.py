"""Loads the FAQ corpus from the help page's JSON asset."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from domain.entities import FaqCategory, FaqEntry
from domain.interfaces import CorpusProvider

logger = logging.getLogger(__name__)


class CorpusFormatError(ValueError):
    """Raised when FAQ data does not have the expected shape."""


class JsonCorpusProvider(CorpusProvider):
    """Read ``{"categories": [{"id", "name", "questions": [...]}]}`` files.

    The file is re-read on every ``load`` call so edits show up without a
    restart.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def load(self) -> list[FaqCategory]:
        with self._path.open("r", encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise CorpusFormatError(f"{self._path}: invalid JSON ({exc})") from exc
        categories = parse_corpus(payload)
        logger.info(
            "Loaded %d FAQ categories with %d entries from %s",
            len(categories),
            sum(len(category.entries) for category in categories),
            self._path,
        )
        return categories


def parse_corpus(payload: Any) -> list[FaqCategory]:
    """Convert decoded ``faqData`` JSON into domain categories."""

    if not isinstance(payload, dict) or not isinstance(payload.get("categories"), list):
        raise CorpusFormatError("expected an object with a 'categories' list")

    seen_ids: set[str] = set()
    categories: list[FaqCategory] = []
    for index, raw_category in enumerate(payload["categories"]):
        if not isinstance(raw_category, dict):
            raise CorpusFormatError(f"category #{index} is not an object")
        category_id = _require_id(raw_category, f"category #{index}")
        name = _require_text(raw_category, "name", f"category {category_id}")
        raw_entries = raw_category.get("questions", [])
        if not isinstance(raw_entries, list):
            raise CorpusFormatError(f"category {category_id}: 'questions' must be a list")

        entries: list[FaqEntry] = []
        for position, raw_entry in enumerate(raw_entries):
            where = f"category {category_id}, question #{position}"
            if not isinstance(raw_entry, dict):
                raise CorpusFormatError(f"{where} is not an object")
            entry_id = _require_id(raw_entry, where)
            if entry_id in seen_ids:
                raise CorpusFormatError(f"duplicate question id {entry_id!r}")
            seen_ids.add(entry_id)
            entries.append(
                FaqEntry(
                    id=entry_id,
                    question=_require_text(raw_entry, "question", where),
                    answer=_require_text(raw_entry, "answer", where),
                )
            )
        categories.append(FaqCategory(id=category_id, name=name, entries=tuple(entries)))
    return categories


def _require_id(raw: dict[str, Any], where: str) -> str:
    value = raw.get("id")
    # bool is an int subclass but never a meaningful id
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise CorpusFormatError(f"{where}: 'id' must be a string or integer")
    return str(value)


def _require_text(raw: dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise CorpusFormatError(f"{where}: '{key}' must be a string")
    return value


__all__ = ["CorpusFormatError", "JsonCorpusProvider", "parse_corpus"]
