from infrastructure.repositories.sqlite_corpus_repository import SqliteCorpusRepository

__all__ = [
    "SqliteCorpusRepository",
]
