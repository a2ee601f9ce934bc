from infrastructure.corpus.in_memory_corpus_provider import InMemoryCorpusProvider
from infrastructure.corpus.json_corpus_provider import CorpusFormatError, JsonCorpusProvider, parse_corpus

__all__ = [
    "CorpusFormatError",
    "InMemoryCorpusProvider",
    "JsonCorpusProvider",
    "parse_corpus",
]
