"""Import an FAQ JSON file into the SQLite corpus store."""
from __future__ import annotations

import argparse
from pathlib import Path

from infrastructure.corpus.json_corpus_provider import JsonCorpusProvider
from infrastructure.repositories.sqlite_corpus_repository import SqliteCorpusRepository
from ui.logging_utils import setup_logging


def import_faq(json_path: Path, db_path: Path) -> int:
    """Copy every category from ``json_path`` into ``db_path``; return the category count."""
    categories = JsonCorpusProvider(json_path).load()
    repository = SqliteCorpusRepository(db_path)
    for category in categories:
        repository.add(category)
    return len(categories)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "json_path",
        nargs="?",
        default="data/faq.json",
        help="FAQ file in the help page format (default: data/faq.json)",
    )
    parser.add_argument(
        "--db-path",
        default="faqsearch.db",
        help="SQLite database to write to (default: faqsearch.db)",
    )
    return parser.parse_args()


def main() -> None:
    setup_logging()
    args = parse_args()
    json_path = Path(args.json_path).expanduser()
    db_path = Path(args.db_path).expanduser()
    count = import_faq(json_path, db_path)
    print(f"Imported {count} categories from {json_path} into {db_path}")


if __name__ == "__main__":
    main()
