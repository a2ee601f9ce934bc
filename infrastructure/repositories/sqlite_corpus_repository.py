"""SQLite-репозиторий для хранения категорий и вопросов FAQ."""
from __future__ import annotations

import sqlite3
from pathlib import Path

from domain.entities import FaqCategory, FaqEntry
from domain.interfaces import CorpusRepository


class SqliteCorpusRepository(CorpusRepository):
    """Хранит корпус FAQ в лёгкой SQLite-базе с сохранением порядка."""

    def __init__(self, db_path: str | Path = "faqsearch.db") -> None:
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS schema_version (
                    id INTEGER PRIMARY KEY CHECK (id = 1),
                    version INTEGER NOT NULL
                )
                """
            )
            conn.execute(
                """
                INSERT OR IGNORE INTO schema_version (id, version) VALUES (1, 1)
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS faq_categories (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    position INTEGER NOT NULL
                )
                """
            )
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS faq_entries (
                    id TEXT PRIMARY KEY,
                    category_id TEXT NOT NULL REFERENCES faq_categories(id) ON DELETE CASCADE,
                    question TEXT NOT NULL,
                    answer TEXT NOT NULL,
                    position INTEGER NOT NULL
                )
                """
            )

    def add(self, category: FaqCategory) -> None:
        entry_ids = [entry.id for entry in category.entries]
        if len(set(entry_ids)) != len(entry_ids):
            raise ValueError(f"Category '{category.id}' repeats a question id")
        with self._connect() as conn:
            if entry_ids:
                placeholders = ", ".join("?" for _ in entry_ids)
                taken = conn.execute(
                    f"""
                    SELECT id, category_id FROM faq_entries
                    WHERE id IN ({placeholders}) AND category_id != ?
                    """,
                    (*entry_ids, category.id),
                ).fetchone()
                if taken is not None:
                    raise ValueError(f"Question id '{taken[0]}' already belongs to category '{taken[1]}'")
            row = conn.execute(
                "SELECT position FROM faq_categories WHERE id = ?",
                (category.id,),
            ).fetchone()
            if row is None:
                (max_position,) = conn.execute("SELECT COALESCE(MAX(position), -1) FROM faq_categories").fetchone()
                position = max_position + 1
            else:
                position = row[0]
            conn.execute("DELETE FROM faq_entries WHERE category_id = ?", (category.id,))
            conn.execute(
                "REPLACE INTO faq_categories (id, name, position) VALUES (?, ?, ?)",
                (category.id, category.name, position),
            )
            conn.executemany(
                """
                INSERT INTO faq_entries (id, category_id, question, answer, position)
                VALUES (?, ?, ?, ?, ?)
                """,
                [
                    (entry.id, category.id, entry.question, entry.answer, index)
                    for index, entry in enumerate(category.entries)
                ],
            )

    def load(self) -> list[FaqCategory]:
        with self._connect() as conn:
            category_rows = conn.execute(
                "SELECT id, name FROM faq_categories ORDER BY position"
            ).fetchall()
            entry_rows = conn.execute(
                """
                SELECT category_id, id, question, answer
                FROM faq_entries ORDER BY category_id, position
                """
            ).fetchall()
        entries_by_category: dict[str, list[FaqEntry]] = {}
        for category_id, entry_id, question, answer in entry_rows:
            entries_by_category.setdefault(category_id, []).append(
                FaqEntry(id=entry_id, question=question, answer=answer)
            )
        return [
            FaqCategory(id=category_id, name=name, entries=tuple(entries_by_category.get(category_id, [])))
            for category_id, name in category_rows
        ]

    def get(self, category_id: str) -> FaqCategory | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT id, name FROM faq_categories WHERE id = ?",
                (category_id,),
            ).fetchone()
            if row is None:
                return None
            entry_rows = conn.execute(
                """
                SELECT id, question, answer FROM faq_entries
                WHERE category_id = ? ORDER BY position
                """,
                (category_id,),
            ).fetchall()
        return FaqCategory(
            id=row[0],
            name=row[1],
            entries=tuple(FaqEntry(id=entry_id, question=question, answer=answer) for entry_id, question, answer in entry_rows),
        )


__all__ = ["SqliteCorpusRepository"]
