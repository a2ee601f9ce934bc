import unittest

from infrastructure.config import ContainerConfig, build_default_container
from infrastructure.corpus.in_memory_corpus_provider import InMemoryCorpusProvider
from infrastructure.corpus.json_corpus_provider import JsonCorpusProvider


class TestContainerConfig(unittest.TestCase):
    def test_defaults_when_environment_is_empty(self):
        cfg = ContainerConfig.from_env({})

        self.assertEqual(cfg, ContainerConfig())
        self.assertEqual(cfg.result_limit, 2)
        self.assertEqual(cfg.corpus_source, "json")

    def test_reads_environment(self):
        cfg = ContainerConfig.from_env(
            {
                "FAQSEARCH_CORPUS_SOURCE": "sqlite",
                "FAQSEARCH_CORPUS_PATH": "/tmp/faq.json",
                "FAQSEARCH_DB_PATH": "/tmp/faq.db",
                "FAQSEARCH_RESULT_LIMIT": "5",
            }
        )

        self.assertEqual(cfg.corpus_source, "sqlite")
        self.assertEqual(cfg.corpus_path, "/tmp/faq.json")
        self.assertEqual(cfg.db_path, "/tmp/faq.db")
        self.assertEqual(cfg.result_limit, 5)

    def test_rejects_non_integer_limit(self):
        with self.assertRaises(ValueError):
            ContainerConfig.from_env({"FAQSEARCH_RESULT_LIMIT": "two"})


class TestBuildContainer(unittest.TestCase):
    def test_json_source(self):
        container = build_default_container(ContainerConfig(corpus_path="data/faq.json", result_limit=3))

        self.assertIsInstance(container.corpus_provider, JsonCorpusProvider)
        self.assertEqual(container.result_limit, 3)

    def test_memory_source(self):
        container = build_default_container(ContainerConfig(corpus_source="memory"))

        self.assertIsInstance(container.corpus_provider, InMemoryCorpusProvider)
        self.assertEqual(container.corpus_provider.load(), [])

    def test_unknown_source(self):
        with self.assertRaises(ValueError):
            build_default_container(ContainerConfig(corpus_source="redis"))  # type: ignore[arg-type]


if __name__ == "__main__":
    unittest.main()
