import json
import tempfile
import unittest
from pathlib import Path

from application.use_cases.search import search
from infrastructure.repositories.sqlite_corpus_repository import SqliteCorpusRepository
from scripts.import_faq import import_faq


class TestImportFaq(unittest.TestCase):
    def test_imported_corpus_is_searchable(self):
        payload = {
            "categories": [
                {
                    "id": "billing",
                    "name": "Billing",
                    "questions": [
                        {"id": 1, "question": "How do I cancel my subscription?", "answer": "Click cancel."}
                    ],
                }
            ]
        }
        with tempfile.TemporaryDirectory() as tmp_dir:
            json_path = Path(tmp_dir) / "faq.json"
            json_path.write_text(json.dumps(payload), encoding="utf-8")
            db_path = Path(tmp_dir) / "faq.db"

            count = import_faq(json_path, db_path)
            corpus = SqliteCorpusRepository(db_path).load()

        self.assertEqual(count, 1)
        results = search(corpus, "cancel subscription")
        self.assertEqual([result.id for result in results], ["1"])
        self.assertEqual(results[0].category_name, "Billing")


if __name__ == "__main__":
    unittest.main()
